"""
Filtering and day-view queries over the unified tournament collection.

All predicates combine with AND and keep the collection's chronological order.
Invalid filter keys raise (they are caller bugs); an empty match is a normal result.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .. import config
from ..models.filters import BuyinRange, DayStats, FilterResult, FilterStatus, TournamentFilters
from ..models.schedule import Schedule
from ..models.tournament import PLATFORM_ORDER, Platform, TournamentFormat, UnifiedTournament
from ..utils.date_utils import paris_current_time, paris_datetime, paris_now, paris_today


# (exclusive lower, inclusive upper) in euros
BUYIN_BUCKET_BOUNDS: Dict[BuyinRange, Tuple[float, float]] = {
    BuyinRange.UP_TO_5: (0, 5),
    BuyinRange.FROM_5_TO_15: (5, 15),
    BuyinRange.FROM_15_TO_50: (15, 50),
    BuyinRange.OVER_50: (50, math.inf),
}

FEATURED_MIN_BUYIN = 5.0


def in_buyin_range(buyin: float, buyin_range: Union[BuyinRange, str]) -> bool:
    """
    Check if a buy-in falls in a bucket.

    Raises:
        ValueError: for an unknown bucket key
    """
    buyin_range = BuyinRange(buyin_range)
    if buyin_range is BuyinRange.ALL:
        return True
    if buyin_range is BuyinRange.FREEROLL:
        return buyin == 0
    lower, upper = BUYIN_BUCKET_BOUNDS[buyin_range]
    return lower < buyin <= upper


def buyin_bucket(buyin: float) -> BuyinRange:
    """The single bucket (other than ALL) containing `buyin`."""
    if buyin < 0:
        raise ValueError(f"Negative buy-in: {buyin}")
    if buyin == 0:
        return BuyinRange.FREEROLL
    for bucket, (lower, upper) in BUYIN_BUCKET_BOUNDS.items():
        if lower < buyin <= upper:
            return bucket
    raise ValueError(f"No bucket for buy-in: {buyin}")


def is_past(tournament: UnifiedTournament, today: str, current_time: str) -> bool:
    """
    Already started: today's entries whose HH:mm is before the current Paris HH:mm.

    Plain string comparison; late registration is not taken into account.
    """
    return tournament.date == today and tournament.time < current_time


def past_count(tournaments: Iterable[UnifiedTournament], today: str, current_time: str) -> int:
    return sum(1 for t in tournaments if is_past(t, today, current_time))


def matches_filters(
    tournament: UnifiedTournament,
    filters: TournamentFilters,
    today: Optional[str] = None,
    current_time: Optional[str] = None,
) -> bool:
    if tournament.date != filters.date:
        return False
    if filters.hide_past and today and current_time and is_past(tournament, today, current_time):
        return False
    if filters.special_only and not tournament.special:
        return False
    if filters.platform is not None and tournament.platform is not filters.platform:
        return False
    if filters.format is not None and tournament.format is not filters.format:
        return False
    if filters.game_variant is not None and tournament.game_variant is not filters.game_variant:
        return False
    return in_buyin_range(tournament.buyin, filters.buyin_range)


def filter_tournaments(
    tournaments: Iterable[UnifiedTournament],
    filters: TournamentFilters,
    now: Optional[datetime] = None,
) -> FilterResult:
    """
    Apply the filter state to a collection.

    Args:
        tournaments: Unified, chronologically sorted collection
        filters: Active selections
        now: Reference instant for hide_past (defaults to the current time)

    Returns:
        FilterResult with the matching subsequence and the number of
        tournaments on the selected date before any other filter
    """
    if not isinstance(filters, TournamentFilters):
        raise TypeError(f"Expected TournamentFilters, got {type(filters).__name__}")

    today = paris_today(now)
    current_time = paris_current_time(now)

    day = [t for t in tournaments if t.date == filters.date]
    matched = [t for t in day if matches_filters(t, filters, today, current_time)]

    return FilterResult(
        tournaments=matched,
        total_for_date=len(day),
        status=FilterStatus.OK if matched else FilterStatus.NO_MATCH,
    )


def query_day(
    schedule: Schedule,
    filters: TournamentFilters,
    now: Optional[datetime] = None,
) -> FilterResult:
    """filter_tournaments over a built schedule, flagging an unavailable schedule."""
    if not schedule.is_available:
        return FilterResult(status=FilterStatus.UNAVAILABLE)
    return filter_tournaments(schedule.tournaments, filters, now)


def day_stats(
    tournaments: Iterable[UnifiedTournament],
    date: str,
    hide_past: bool = False,
    now: Optional[datetime] = None,
) -> DayStats:
    """
    Badge counts for one day: total, specials, freerolls.

    Independent of the active filters; optionally excludes already-started
    tournaments like the day view does.
    """
    today = paris_today(now)
    current_time = paris_current_time(now)
    visible = [
        t for t in tournaments
        if t.date == date and not (hide_past and is_past(t, today, current_time))
    ]
    return DayStats(
        total=len(visible),
        specials=sum(1 for t in visible if t.special),
        freerolls=sum(1 for t in visible if t.format is TournamentFormat.FREEROLL),
    )


def available_platforms(tournaments: Iterable[UnifiedTournament]) -> List[Platform]:
    """Platforms present in the collection, in display order."""
    present = {t.platform for t in tournaments}
    return [p for p in PLATFORM_ORDER if p in present]


def show_platform_filter(tournaments: Iterable[UnifiedTournament]) -> bool:
    return len(available_platforms(tournaments)) > 1


def featured_tournaments(
    tournaments: Iterable[UnifiedTournament],
    now: Optional[datetime] = None,
    window_hours: Optional[int] = None,
    limit: Optional[int] = None,
    min_buyin: float = FEATURED_MIN_BUYIN,
    platform: Optional[Platform] = None,
) -> List[UnifiedTournament]:
    """
    Upcoming special tournaments for the "à la une" panel.

    Keeps specials with buy-in >= `min_buyin` starting within
    [now, now + window_hours], in collection order, at most `limit` entries.
    The window is measured in real elapsed time across DST changes.
    """
    window_hours = config.FEATURED_WINDOW_HOURS if window_hours is None else window_hours
    limit = config.FEATURED_LIMIT if limit is None else limit

    start = paris_now(now).astimezone(timezone.utc)
    end = start + timedelta(hours=window_hours)

    featured: List[UnifiedTournament] = []
    for t in tournaments:
        if len(featured) >= limit:
            break
        if not t.special or t.buyin < min_buyin:
            continue
        if platform is not None and t.platform is not Platform(platform):
            continue
        if start <= paris_datetime(t.date, t.time) <= end:
            featured.append(t)
    return featured


def active_filter_count(filters: TournamentFilters) -> int:
    """Number of non-default selections (mobile filter badge). Date and hide_past are not counted."""
    return sum([
        filters.special_only,
        filters.buyin_range is not BuyinRange.ALL,
        filters.platform is not None,
        filters.format is not None,
        filters.game_variant is not None,
    ])
