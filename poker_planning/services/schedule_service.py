"""
Snapshot loading, unification and sorting of the per-platform tournament lists.

Raw snapshots are handed in through a loader so the pipeline can run without
a filesystem. A missing, empty or corrupt snapshot means "no tournaments for
this platform", never a failure of the whole schedule.
"""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple, Union

from .. import config
from ..models.schedule import NormalizationResult, Schedule, SourceStatus
from ..models.tournament import Platform, TournamentFormat, UnifiedTournament
from ..utils.date_utils import paris_today
from .normalizers import normalize_snapshot, normalize_unibet


# Platforms backed by a scraped snapshot file; Unibet is generated
SNAPSHOT_PLATFORMS = (Platform.WINAMAX, Platform.POKERSTARS)


class SnapshotLoader(Protocol):
    def load(self, platform: Platform) -> Optional[Any]:
        """Return the parsed snapshot for `platform`, or None if unavailable."""
        ...


class JsonSnapshotLoader:
    """Reads <data_dir>/<platform>.json as written by the fetch jobs."""

    def __init__(self, data_dir: Optional[Union[str, Path]] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR

    def path_for(self, platform: Platform) -> Path:
        return self.data_dir / f"{Platform(platform).value}.json"

    def load(self, platform: Platform) -> Optional[Any]:
        path = self.path_for(platform)
        if not path.exists():
            return None

        # A fetch job may be rewriting the file right now
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"[{platform.value}] ✗ Could not read {path}: {e}")
            return None

        if not text.strip():
            return None

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            print(f"[{platform.value}] ✗ Malformed snapshot {path}: {e}")
            return None

        if not isinstance(data, (dict, list)) or not data:
            return None
        return data


class MemorySnapshotLoader:
    """Serves already-loaded snapshots (tests, callers that fetched elsewhere)."""

    def __init__(self, snapshots: Optional[Dict[Union[Platform, str], Any]] = None):
        self.snapshots = {Platform(key): value for key, value in (snapshots or {}).items()}

    def load(self, platform: Platform) -> Optional[Any]:
        return self.snapshots.get(Platform(platform)) or None


def sort_key(tournament: UnifiedTournament) -> str:
    return tournament.starts_at


def deduplicate_by_id(tournaments: Iterable[UnifiedTournament]) -> Tuple[List[UnifiedTournament], int]:
    """Keep the first tournament for each id. Returns (kept, removed count)."""
    seen = set()
    kept: List[UnifiedTournament] = []
    removed = 0
    for tournament in tournaments:
        if tournament.id in seen:
            removed += 1
            continue
        seen.add(tournament.id)
        kept.append(tournament)
    return kept, removed


def unify_tournaments(*collections: Iterable[UnifiedTournament]) -> List[UnifiedTournament]:
    """
    Merge per-platform lists into one list sorted by date then time.

    Ids are unique in the output (first occurrence wins); the sort is stable so
    identical input always gives identical output.
    """
    merged = [t for collection in collections for t in (collection or [])]
    unique, _ = deduplicate_by_id(merged)
    unique.sort(key=sort_key)
    return unique


def get_available_dates(tournaments: Iterable[UnifiedTournament]) -> List[str]:
    """All distinct dates across the collection, sorted ascending."""
    return sorted({t.date for t in tournaments})


def _source_status(result: NormalizationResult) -> SourceStatus:
    return SourceStatus(
        platform=result.platform,
        ok=True,
        count=len(result.tournaments),
        dropped=result.dropped,
    )


def build_schedule(
    loader: SnapshotLoader,
    today: Optional[str] = None,
    unibet_days: Optional[int] = None,
) -> Schedule:
    """
    Run every platform normalizer and merge the results.

    Args:
        loader: Source of raw snapshots
        today: Paris date the Unibet schedule starts from (defaults to today)
        unibet_days: Days of Unibet schedule to generate (defaults to config)

    Returns:
        Schedule with the sorted tournaments, available dates and per-platform status
    """
    today = today or paris_today()
    unibet_days = config.UNIBET_SCHEDULE_DAYS if unibet_days is None else unibet_days

    sources: Dict[Platform, SourceStatus] = {}
    collections: List[List[UnifiedTournament]] = []

    for platform in SNAPSHOT_PLATFORMS:
        data = loader.load(platform)
        if data is None:
            sources[platform] = SourceStatus(platform=platform, ok=False, error="snapshot unavailable")
            continue
        try:
            result = normalize_snapshot(platform, data)
        except Exception as e:
            sources[platform] = SourceStatus(platform=platform, ok=False, error=str(e))
            continue
        sources[platform] = _source_status(result)
        collections.append(result.tournaments)

    if unibet_days > 0:
        result = normalize_unibet(today, unibet_days)
        sources[Platform.UNIBET] = _source_status(result)
        collections.append(result.tournaments)
    else:
        sources[Platform.UNIBET] = SourceStatus(platform=Platform.UNIBET, ok=False, error="disabled")

    merged = [t for collection in collections for t in collection]
    tournaments = unify_tournaments(merged)

    return Schedule(
        tournaments=tournaments,
        dates=get_available_dates(tournaments),
        sources=sources,
        duplicates_removed=len(merged) - len(tournaments),
    )


def quality_snapshot(schedule: Schedule, today: Optional[str] = None) -> Dict[str, Any]:
    """Diagnostic counts for a built schedule."""
    today = today or paris_today()
    tournaments = schedule.tournaments
    return {
        "total": len(tournaments),
        "today": sum(1 for t in tournaments if t.date == today),
        "freerolls": sum(1 for t in tournaments if t.format is TournamentFormat.FREEROLL),
        "specials": sum(1 for t in tournaments if t.special),
        "dates": len(schedule.dates),
        "dateRange": {
            "from": schedule.dates[0] if schedule.dates else None,
            "to": schedule.dates[-1] if schedule.dates else None,
        },
        "platforms": dict(Counter(t.platform.value for t in tournaments)),
        "formats": dict(Counter(t.format.value for t in tournaments)),
        "variants": dict(Counter(t.game_variant.value for t in tournaments)),
        "duplicatesRemoved": schedule.duplicates_removed,
        "sources": {
            platform.value: {
                "ok": status.ok,
                "count": status.count,
                "dropped": status.dropped,
                "error": status.error,
            }
            for platform, status in schedule.sources.items()
        },
    }
