"""Shared fixtures: sample platform snapshots and a tournament factory."""

import itertools
from datetime import datetime

import pytest

from poker_planning.models import GameVariant, Platform, TournamentFormat, UnifiedTournament
from poker_planning.utils.date_utils import PARIS_TZ
from poker_planning.utils.money import format_buyin

_ids = itertools.count(1)


def make_tournament(**overrides) -> UnifiedTournament:
    """Build a UnifiedTournament with sensible defaults."""
    buyin = overrides.pop("buyin", 10.0)
    fields = {
        "id": f"test-{next(_ids)}",
        "platform": Platform.WINAMAX,
        "name": "Daily Test",
        "date": "2025-06-01",
        "time": "20:00",
        "buyin": buyin,
        "buyin_raw": format_buyin(buyin),
        "guarantee": None,
        "format": TournamentFormat.STANDARD,
        "special": False,
        "game_variant": GameVariant.NLHE,
        "url": "https://example.test/t",
    }
    fields.update(overrides)
    return UnifiedTournament(**fields)


@pytest.fixture
def paris_noon():
    """Sunday 1 June 2025, 12:00 Paris (CEST)."""
    return datetime(2025, 6, 1, 12, 0, tzinfo=PARIS_TZ)


@pytest.fixture
def winamax_snapshot():
    return {
        "updatedAt": "2025-06-01T04:00:00Z",
        "platform": "winamax",
        "tournaments": [
            {
                "id": "1001",
                "name": "ANDROMEDA Main Event",
                "date": "2025-06-01",
                "time": "21:00",
                "buyinRaw": "50€",
                "buyin": 50,
                "format": "standard",
                "special": True,
                "url": "https://www.winamax.fr/poker/tournament.php?ID=1001",
            },
            {
                "id": "1002",
                "name": "Freeroll Daily",
                "date": "2025-06-01",
                "time": "18:00",
                "buyinRaw": "0€",
                "buyin": 0,
                "format": "freeroll",
                "special": False,
            },
            {
                "id": "1003",
                "name": "PLO8 Sunday",
                "date": "2025-06-02",
                "time": "9:30",
                "buyinRaw": "2,50€",
                "buyin": 2.5,
            },
            {
                # no start time: dropped
                "id": "1004",
                "name": "Ghost",
                "date": "2025-06-02",
                "buyinRaw": "5€",
            },
        ],
    }


@pytest.fixture
def pokerstars_graphql():
    return {
        "data": {
            "tournaments": [
                {
                    "name": '<font color="#fff">$5.50 Mini Night Fight [Progressive KO],</font> '
                            '<font color="#ff0">$2.5K Gtd</font>',
                    "buyIn": 500,
                    "fee": 50,
                    "prizePool": 250000,
                    "gameInt": 2,
                    "structureInt": 0,
                    "whenStart": "2025-06-01T18:00:00Z",
                    "currency": "EUR",
                },
                {
                    "name": '<font class="-x-tourn-championship">Sunday Million, $1M Gtd</font>',
                    "buyIn": 10000,
                    "fee": 900,
                    "gameInt": 2,
                    "structureInt": 0,
                    "whenStart": "2025-06-01T17:00:00Z",
                    "currency": "EUR",
                },
                {
                    "name": "Play Money Bonanza",
                    "buyIn": 5000000,
                    "fee": 0,
                    "gameInt": 2,
                    "whenStart": "2025-06-01T19:00:00Z",
                    "currency": "PLAY",
                },
                {
                    "name": "Omaha Warm-Up",
                    "buyIn": 1000,
                    "fee": 100,
                    "gameInt": 4,
                    "structureInt": 2,
                    "whenStart": "2025-06-02T08:00:00Z",
                    "currency": "EUR",
                },
                {
                    # no start: dropped
                    "name": "Unscheduled",
                    "buyIn": 100,
                    "fee": 10,
                    "currency": "EUR",
                },
            ]
        }
    }
