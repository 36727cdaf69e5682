"""
Unit tests for format, variant and special classification
"""
import pytest

from poker_planning.models import GameVariant, TournamentFormat
from poker_planning.utils.classification import (
    consistent_format,
    infer_format,
    infer_variant,
    is_special,
    keyword_format,
)


@pytest.mark.parametrize("name, expected", [
    ("Unibet Bounty Builder", TournamentFormat.KNOCKOUT),
    ("Sunday Storm", TournamentFormat.STANDARD),
    ("Hyper KO Blast", TournamentFormat.HYPER),
    ("Standard Turbo Bounty", TournamentFormat.TURBO),
    ("Daily Freeroll", TournamentFormat.FREEROLL),
    ("Mini Night Fight [Progressive KO]", TournamentFormat.KNOCKOUT),
    ("Sunday PKO", TournamentFormat.KNOCKOUT),
    ("Big Sat to the Main", TournamentFormat.SATELLITE),
    ("Step 2", TournamentFormat.SATELLITE),
    ("Qualifier Series", TournamentFormat.SATELLITE),
    ("Kosmos Deepstack", TournamentFormat.STANDARD),
    ("Saturday Night", TournamentFormat.STANDARD),
])
def test_keyword_format_priority(name, expected):
    """Rules apply in order freeroll > hyper > turbo > knockout > satellite > standard"""
    assert infer_format(name) is expected


def test_structure_code_preferred_over_keywords():
    """A speed code wins over name keywords"""
    assert infer_format("Sunday Storm", structure_code=2) is TournamentFormat.HYPER
    assert infer_format("Sunday Bounty", structure_code=1) is TournamentFormat.TURBO


def test_regular_or_unknown_structure_code_falls_back_to_keywords():
    assert infer_format("Sunday Bounty", structure_code=0) is TournamentFormat.KNOCKOUT
    assert infer_format("Sunday Bounty", structure_code=None) is TournamentFormat.KNOCKOUT
    assert infer_format("Sunday Bounty", structure_code=42) is TournamentFormat.KNOCKOUT


def test_free_entry_is_freeroll():
    assert infer_format("Sunday Storm", buyin=0) is TournamentFormat.FREEROLL
    assert infer_format("Hyper Freeroll", structure_code=2, buyin=0) is TournamentFormat.FREEROLL


def test_paid_entry_is_never_freeroll():
    assert infer_format("Freeroll Qualifier", buyin=2) is TournamentFormat.SATELLITE
    assert keyword_format("Turbo Freeroll", paid=True) is TournamentFormat.TURBO


def test_consistent_format():
    """Source formats are reconciled with the buy-in"""
    assert consistent_format(TournamentFormat.STANDARD, "Daily", 0) is TournamentFormat.FREEROLL
    assert consistent_format(TournamentFormat.FREEROLL, "Turbo Freeroll", 3) is TournamentFormat.TURBO
    assert consistent_format(TournamentFormat.KNOCKOUT, "Daily", 10) is TournamentFormat.KNOCKOUT


def test_variant_from_game_code():
    assert infer_variant("Anything", game_code=2) is GameVariant.NLHE
    assert infer_variant("Anything", game_code=4) is GameVariant.PLO
    assert infer_variant("Anything", game_code=107) is GameVariant.PLO
    assert infer_variant("Anything", game_code=17) is GameVariant.OTHER
    # the code wins over the name
    assert infer_variant("PLO Night", game_code=2) is GameVariant.NLHE


@pytest.mark.parametrize("name, expected", [
    ("PLO8 Sunday", GameVariant.PLO),
    ("Omaha Hi-Lo", GameVariant.PLO),
    ("Courchevel Deep", GameVariant.PLO),
    ("HORSE Series", GameVariant.OTHER),
    ("2-7 Triple Draw", GameVariant.OTHER),
    ("8-Game Mix", GameVariant.OTHER),
    ("Sunday Major", GameVariant.NLHE),
])
def test_variant_from_name(name, expected):
    assert infer_variant(name) is expected


def test_special_detection():
    """Marquee names, series keywords or a large guarantee"""
    assert is_special("ANDROMEDA Main Event", 200000) is True
    assert is_special("Daily 5K", 5000) is False
    assert is_special("Mini Weekly", 50000) is True
    assert is_special("Winamax Series #12") is True
    assert is_special("Sunday Million") is True
    assert is_special("Daily 10K", 10000) is True
    assert is_special("Daily 5K") is False


def test_special_threshold_is_adjustable():
    assert is_special("Mini Weekly", 50000, threshold=100000) is False


def test_short_capitals_are_not_marquee():
    assert is_special("PLO8 KO Night") is False
