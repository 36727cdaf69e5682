"""Normalization, unification and query services."""

from .normalizers import (
    normalize_pokerstars,
    normalize_snapshot,
    normalize_unibet,
    normalize_winamax,
)
from .schedule_service import (
    JsonSnapshotLoader,
    MemorySnapshotLoader,
    build_schedule,
    get_available_dates,
    quality_snapshot,
    unify_tournaments,
)
from .tournament_filters import (
    available_platforms,
    day_stats,
    featured_tournaments,
    filter_tournaments,
    query_day,
)
from .weekly_digest import select_top_tournaments

__all__ = [
    "normalize_pokerstars",
    "normalize_snapshot",
    "normalize_unibet",
    "normalize_winamax",
    "JsonSnapshotLoader",
    "MemorySnapshotLoader",
    "build_schedule",
    "get_available_dates",
    "quality_snapshot",
    "unify_tournaments",
    "available_platforms",
    "day_stats",
    "featured_tournaments",
    "filter_tournaments",
    "query_day",
    "select_top_tournaments",
]
