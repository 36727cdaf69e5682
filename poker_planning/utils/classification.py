"""
Keyword and code based classification of tournaments.

Format, game variant and "special" status are derived here from whatever the
source exposes: a structure code, a game code, a guarantee, or only the name.
Format rules form a single ordered list; the first matching rule wins:

    freeroll > hyper > turbo > knockout > satellite > standard
"""

import re
from typing import List, Optional, Pattern, Tuple

from ..models.tournament import GameVariant, TournamentFormat


# Ordered format rules, matched against the lower-cased name
FORMAT_RULES: List[Tuple[TournamentFormat, Pattern]] = [
    (TournamentFormat.FREEROLL, re.compile(r"freeroll")),
    (TournamentFormat.HYPER, re.compile(r"hyper")),
    (TournamentFormat.TURBO, re.compile(r"turbo")),
    (
        TournamentFormat.KNOCKOUT,
        re.compile(r"\b(?:progressive ko|prog\. ko|pko|ko|knockout|bounty)\b|hit\s*&\s*run"),
    ),
    (
        TournamentFormat.SATELLITE,
        re.compile(r"\b(?:satellite|sat|qualif\w*|steps?)\b|seats?\s+gtd"),
    ),
]

# PokerStars structureInt: 0=regular, 1=turbo, 2=hyper-turbo
STRUCTURE_CODE_FORMATS = {
    1: TournamentFormat.TURBO,
    2: TournamentFormat.HYPER,
}

# PokerStars gameInt
GAME_CODE_VARIANTS = {
    2: GameVariant.NLHE,
    3: GameVariant.PLO,
    4: GameVariant.PLO,
    11: GameVariant.PLO,
    107: GameVariant.PLO,
}

PLO_PATTERN = re.compile(r"\bplo|omaha|courchevel", re.IGNORECASE)
OTHER_VARIANT_PATTERN = re.compile(
    r"stud|razz|horse|badugi|mixed|\bdraw\b|\bgames?\b",
    re.IGNORECASE,
)

# Fully uppercase word of 4+ letters = platform's named marquee event (ANDROMEDA, PEGASUS...)
MARQUEE_NAME_PATTERN = re.compile(r"\b[A-Z]{4,}\b")
SERIES_PATTERN = re.compile(r"\b(?:series|millions?|festival|open|championship)", re.IGNORECASE)

SPECIAL_GUARANTEE_THRESHOLD = 10_000


def keyword_format(name: str, *, paid: bool = False) -> TournamentFormat:
    """
    First matching rule of FORMAT_RULES, or STANDARD.

    A paid entry never matches the freeroll rule.
    """
    text = (name or "").lower()
    for fmt, pattern in FORMAT_RULES:
        if paid and fmt is TournamentFormat.FREEROLL:
            continue
        if pattern.search(text):
            return fmt
    return TournamentFormat.STANDARD


def infer_format(
    name: str,
    structure_code: Optional[int] = None,
    buyin: Optional[float] = None,
) -> TournamentFormat:
    """
    Classify a tournament's format.

    Args:
        name: Tournament name
        structure_code: Source speed code, if any (see STRUCTURE_CODE_FORMATS)
        buyin: Buy-in in euros, if known

    Returns:
        FREEROLL for a free entry. Otherwise a recognised structure code wins
        over the name keywords (except a freeroll keyword when the buy-in is
        unknown); an absent or regular code falls back to keyword matching.
    """
    if buyin is not None and buyin == 0:
        return TournamentFormat.FREEROLL

    by_keyword = keyword_format(name, paid=bool(buyin))
    coded = STRUCTURE_CODE_FORMATS.get(structure_code)
    if coded is None or by_keyword is TournamentFormat.FREEROLL:
        return by_keyword
    return coded


def consistent_format(fmt: TournamentFormat, name: str, buyin: float) -> TournamentFormat:
    """Reconcile a source-provided format with the buy-in."""
    if buyin == 0 and fmt is TournamentFormat.STANDARD:
        return TournamentFormat.FREEROLL
    if buyin > 0 and fmt is TournamentFormat.FREEROLL:
        return keyword_format(name, paid=True)
    return fmt


def variant_from_game_code(game_code: int) -> GameVariant:
    return GAME_CODE_VARIANTS.get(game_code, GameVariant.OTHER)


def variant_from_name(name: str) -> GameVariant:
    if PLO_PATTERN.search(name or ""):
        return GameVariant.PLO
    if OTHER_VARIANT_PATTERN.search(name or ""):
        return GameVariant.OTHER
    return GameVariant.NLHE


def infer_variant(name: str, game_code: Optional[int] = None) -> GameVariant:
    """Game code when the source provides one, name keywords otherwise."""
    if game_code is not None:
        return variant_from_game_code(game_code)
    return variant_from_name(name)


def is_special(
    name: str,
    guarantee: Optional[float] = None,
    threshold: float = SPECIAL_GUARANTEE_THRESHOLD,
) -> bool:
    """
    Check if a tournament is a featured event.

    Any one of: an ALL-CAPS word of 4+ letters in the name, a series or
    major-event keyword, or a known guarantee of at least `threshold` euros.
    """
    if MARQUEE_NAME_PATTERN.search(name or ""):
        return True
    if SERIES_PATTERN.search(name or ""):
        return True
    return guarantee is not None and guarantee >= threshold
