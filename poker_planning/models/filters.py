"""Filter state and query results for the tournament dashboard."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .tournament import GameVariant, Platform, TournamentFormat, UnifiedTournament


class BuyinRange(str, Enum):
    """
    Buy-in buckets. Lower bound exclusive, upper bound inclusive,
    except FREEROLL which matches exactly 0.
    """
    ALL = "all"
    FREEROLL = "freeroll"
    UP_TO_5 = "0-5"
    FROM_5_TO_15 = "5-15"
    FROM_15_TO_50 = "15-50"
    OVER_50 = "50+"


class TournamentFilters(BaseModel):
    """Client-held filter selections. None means "all" for enum filters."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Selected day (YYYY-MM-DD)")
    special_only: bool = False
    buyin_range: BuyinRange = BuyinRange.ALL
    platform: Optional[Platform] = None
    format: Optional[TournamentFormat] = None
    game_variant: Optional[GameVariant] = None
    hide_past: bool = False

    @field_validator("platform", "format", "game_variant", mode="before")
    @classmethod
    def _all_means_none(cls, value):
        if isinstance(value, str) and value.lower() == "all":
            return None
        return value


class DayStats(BaseModel):
    """Badge counts for one day, independent of the active filters."""
    total: int = 0
    specials: int = 0
    freerolls: int = 0


class FilterStatus(str, Enum):
    OK = "ok"
    NO_MATCH = "no_match"
    UNAVAILABLE = "unavailable"


class FilterResult(BaseModel):
    """Filtered day view plus the pre-filter denominator."""
    tournaments: List[UnifiedTournament] = Field(default_factory=list)
    total_for_date: int = 0
    status: FilterStatus = FilterStatus.OK

    @property
    def is_empty(self) -> bool:
        return not self.tournaments
