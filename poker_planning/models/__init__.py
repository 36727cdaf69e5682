"""Data models."""

from .tournament import (
    GameVariant,
    Platform,
    PLATFORM_LABELS,
    PLATFORM_ORDER,
    TournamentFormat,
    UnifiedTournament,
)
from .filters import BuyinRange, DayStats, FilterResult, FilterStatus, TournamentFilters
from .schedule import NormalizationResult, Schedule, SourceStatus

__all__ = [
    "GameVariant",
    "Platform",
    "PLATFORM_LABELS",
    "PLATFORM_ORDER",
    "TournamentFormat",
    "UnifiedTournament",
    "BuyinRange",
    "DayStats",
    "FilterResult",
    "FilterStatus",
    "TournamentFilters",
    "NormalizationResult",
    "Schedule",
    "SourceStatus",
]
