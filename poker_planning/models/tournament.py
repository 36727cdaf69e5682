#!/usr/bin/env python3
"""
Unified data model for online poker tournaments across all French platforms.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Platform(str, Enum):
    """Platforms whose schedules are aggregated."""
    WINAMAX = "winamax"
    POKERSTARS = "pokerstars"
    UNIBET = "unibet"


# Display order used wherever platforms are listed
PLATFORM_ORDER = (Platform.WINAMAX, Platform.POKERSTARS, Platform.UNIBET)

PLATFORM_LABELS = {
    Platform.WINAMAX: "Winamax",
    Platform.POKERSTARS: "PokerStars",
    Platform.UNIBET: "Unibet",
}


class TournamentFormat(str, Enum):
    """Tournament structure classification."""
    FREEROLL = "freeroll"
    KNOCKOUT = "knockout"
    SATELLITE = "satellite"
    TURBO = "turbo"
    HYPER = "hyper"
    STANDARD = "standard"


class GameVariant(str, Enum):
    """Game family."""
    NLHE = "nlhe"
    PLO = "plo"
    OTHER = "other"


class UnifiedTournament(BaseModel):
    """
    One scheduled tournament, platform-agnostic.

    Built fresh from the raw snapshots on every read and never mutated
    afterwards. `date` and `time` are Europe/Paris local and zero-padded,
    so (date, time) string pairs sort chronologically.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Core identification
    id: str = Field(..., min_length=1, description="Deterministic id (platform prefix + source id or hash)")
    platform: Platform = Field(..., description="Origin platform")
    name: str = Field(..., description="Tournament title without markup")

    # Temporal data (Paris local)
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="HH:mm, 24h")

    # Money
    buyin: float = Field(..., ge=0, description="Buy-in + fee in euros, 0 = free entry")
    buyin_raw: str = Field(..., alias="buyinRaw", description="Display buy-in, e.g. '5€' or '0,50€'")
    guarantee: Optional[float] = Field(None, ge=0, description="Guaranteed prize pool in euros, None if unknown")

    # Derived classification
    format: TournamentFormat = Field(..., description="Derived format")
    special: bool = Field(False, description="Featured / marquee event")
    game_variant: GameVariant = Field(GameVariant.NLHE, alias="gameVariant", description="Game family")

    url: str = Field(..., description="Deep link to the tournament or platform lobby")

    @property
    def starts_at(self) -> str:
        """Sortable 'YYYY-MM-DD HH:mm' key."""
        return f"{self.date} {self.time}"

    @property
    def is_free(self) -> bool:
        return self.buyin == 0

    def to_dict(self) -> Dict[str, Any]:
        """Dump with the camelCase keys the presentation layer expects."""
        return self.model_dump(mode="json", by_alias=True)
