#!/usr/bin/env python3
"""
Normalization adapters to convert each platform's snapshot format into UnifiedTournament models.

Every normalizer is a pure function of its input. Records without a resolvable
start, play-money records and malformed records are dropped and counted in the
returned NormalizationResult; they never raise.
"""

from __future__ import annotations

import hashlib
import re
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple, Type

from pydantic import ValidationError

from ..models.schedule import NormalizationResult
from ..models.tournament import GameVariant, Platform, TournamentFormat, UnifiedTournament
from ..utils.classification import (
    consistent_format,
    infer_format,
    infer_variant,
    is_special,
    variant_from_name,
)
from ..utils.date_utils import iter_dates, normalize_date, normalize_time, utc_to_paris
from ..utils.money import display_buyin, parse_buyin, parse_guarantee_text
from ..utils.text import split_guarantee, strip_html
from .unibet_schedule import UNIBET_LOBBY_URL, UNIBET_SCHEDULE


WINAMAX_TOURNAMENT_URL = "https://www.winamax.fr/poker/tournament.php?ID={id}"
WINAMAX_PLANNING_URL = "https://www.winamax.fr/les-tournois_planning"
POKERSTARS_LOBBY_URL = "https://www.pokerstars.fr/poker/play-poker/tournaments/"

ID_PREFIXES = {
    Platform.WINAMAX: "wmx",
    Platform.POKERSTARS: "ps",
    Platform.UNIBET: "unibet",
}

# Winamax planning page keys: "YYYY-MM-DD-HH"
WINAMAX_SLOT_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2})-\d{2}$")

# PokerStars markup classes flagging featured events
POKERSTARS_SPECIAL_MARKUP = ("-x-tourn-championship", "-x-tourn-special")

# Above this many cents with no currency field, a PokerStars buy-in is play money
PLAY_MONEY_CENTS = 1_000_000

DROP_MISSING_START = "missing_start"
DROP_PLAY_MONEY = "play_money"
DROP_INVALID = "invalid_record"


class DroppedRecord(Exception):
    """Raised inside a normalizer when a record must be excluded."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


# Helpers

def make_tournament_id(
    platform: Platform,
    source_id: Any,
    name: str,
    date: str,
    time: str,
) -> str:
    """
    Deterministic id: platform prefix + source id, or a hash of name, date and time.
    """
    prefix = ID_PREFIXES[platform]
    if source_id is not None and str(source_id).strip():
        return f"{prefix}-{str(source_id).strip()}"
    content = f"{name.lower().strip()}|{date}|{time}"
    return f"{prefix}-{hashlib.md5(content.encode('utf-8')).hexdigest()[:12]}"


def _to_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _enum_or_none(enum_cls: Type[Enum], value: Any) -> Optional[Enum]:
    if value is None:
        return None
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        return None


def _build(**fields: Any) -> UnifiedTournament:
    try:
        return UnifiedTournament(**fields)
    except ValidationError as exc:
        raise DroppedRecord(DROP_INVALID) from exc


def _collect(
    platform: Platform,
    records: Iterator[Tuple[Any, ...]],
    convert,
) -> NormalizationResult:
    result = NormalizationResult(platform=platform)
    for args in records:
        try:
            result.tournaments.append(convert(*args))
        except DroppedRecord as drop:
            result.drop(drop.reason)
    return result


def _optional(convert, *args) -> Optional[UnifiedTournament]:
    try:
        return convert(*args)
    except DroppedRecord:
        return None


# Winamax

def _winamax_tournament(raw: Any, date_hint: Optional[str] = None) -> UnifiedTournament:
    if not isinstance(raw, dict):
        raise DroppedRecord(DROP_INVALID)

    name = strip_html(raw.get("name"))
    if not name:
        raise DroppedRecord(DROP_INVALID)

    # Winamax publishes Paris-local times
    date = normalize_date(raw.get("date") or date_hint)
    time = normalize_time(raw.get("time"))
    if not date or not time:
        raise DroppedRecord(DROP_MISSING_START)

    raw_buyin = raw.get("buyin")
    if raw_buyin is None:
        raw_buyin = raw.get("buyinRaw")
    buyin = parse_buyin(raw_buyin)
    source_raw = raw.get("buyinRaw") or (raw_buyin if isinstance(raw_buyin, str) else None)

    explicit_format = _enum_or_none(TournamentFormat, raw.get("format"))
    if explicit_format is not None:
        fmt = consistent_format(explicit_format, name, buyin)
    else:
        fmt = infer_format(name, buyin=buyin)

    source_id = raw.get("id")
    url = raw.get("url")
    if not url:
        url = WINAMAX_TOURNAMENT_URL.format(id=source_id) if source_id else WINAMAX_PLANNING_URL

    return _build(
        id=make_tournament_id(Platform.WINAMAX, source_id, name, date, time),
        platform=Platform.WINAMAX,
        name=name,
        date=date,
        time=time,
        buyin=buyin,
        buyin_raw=display_buyin(source_raw, buyin),
        guarantee=None,  # not available in the Winamax planning page
        format=fmt,
        special=bool(raw.get("special")) or is_special(name),
        game_variant=_enum_or_none(GameVariant, raw.get("gameVariant")) or variant_from_name(name),
        url=url,
    )


def _iter_winamax_records(data: Any) -> Iterator[Tuple[Any, Optional[str]]]:
    """
    Yield (record, date_hint) from either the saved snapshot
    ({"tournaments": [...]}) or the raw planning object keyed by date-hour slot.
    """
    if isinstance(data, list):
        for item in data:
            yield item, None
        return
    if not isinstance(data, dict):
        return
    if "tournaments" in data:
        for item in data.get("tournaments") or []:
            yield item, None
        return

    for slot_key, items in data.items():
        match = WINAMAX_SLOT_PATTERN.match(str(slot_key))
        if not match or not isinstance(items, list):
            continue
        for item in items:
            yield item, match.group(1)


def normalize_winamax_tournament(raw: Dict[str, Any], date_hint: Optional[str] = None) -> Optional[UnifiedTournament]:
    """Normalize one Winamax record, or None if it must be excluded."""
    return _optional(_winamax_tournament, raw, date_hint)


def normalize_winamax(data: Any) -> NormalizationResult:
    """
    Normalize a Winamax snapshot.
    Expected input: Dict with "tournaments" list, or the planning page's slot dict.
    """
    return _collect(Platform.WINAMAX, _iter_winamax_records(data), _winamax_tournament)


# PokerStars

def is_real_money(raw: Dict[str, Any]) -> bool:
    """
    Is this a real-money tournament (not play money)?
    currency is "EUR", "USD" or "PLAY"; without it, fall back to the buy-in size.
    """
    currency = str(raw.get("currency") or "").upper()
    if currency == "PLAY":
        return False
    if currency in ("EUR", "USD"):
        return True
    buyin_cents = _to_int(raw.get("buyIn"))
    if buyin_cents is not None:
        return buyin_cents < PLAY_MONEY_CENTS
    return True


def _pokerstars_start(raw: Dict[str, Any]) -> Optional[Tuple[str, str]]:
    # whenStart is ISO 8601 UTC; pre-processed snapshots carry Paris date/time
    if raw.get("whenStart"):
        return utc_to_paris(raw.get("whenStart"))
    date = normalize_date(raw.get("date"))
    time = normalize_time(raw.get("time"))
    if date and time:
        return date, time
    return None


def _pokerstars_buyin(raw: Dict[str, Any]) -> float:
    if "buyIn" in raw or "fee" in raw:
        cents = (_to_int(raw.get("buyIn")) or 0) + (_to_int(raw.get("fee")) or 0)
        return parse_buyin(cents / 100)
    if raw.get("buyinCents") is not None:
        return parse_buyin((_to_int(raw.get("buyinCents")) or 0) / 100)
    value = raw.get("buyin")
    return parse_buyin(value if value is not None else raw.get("buyinRaw"))


def _pokerstars_guarantee(raw: Dict[str, Any], guarantee_text: Optional[str]) -> Optional[float]:
    prize_pool = _to_float(raw.get("prizePool"))
    if prize_pool:
        return prize_pool / 100
    guarantee = _to_float(raw.get("guarantee"))
    if guarantee is not None:
        return max(guarantee, 0.0)
    if guarantee_text and not re.search(r"seats?|chips?", guarantee_text, re.IGNORECASE):
        return parse_guarantee_text(guarantee_text)
    return None


def _pokerstars_tournament(raw: Any) -> UnifiedTournament:
    if not isinstance(raw, dict):
        raise DroppedRecord(DROP_INVALID)
    if not is_real_money(raw):
        raise DroppedRecord(DROP_PLAY_MONEY)

    markup = str(raw.get("name") or "")
    full_name = strip_html(markup)
    name, guarantee_text = split_guarantee(full_name)
    if not guarantee_text and isinstance(raw.get("guaranteeText"), str):
        guarantee_text = raw.get("guaranteeText")
    if not name:
        raise DroppedRecord(DROP_INVALID)

    start = _pokerstars_start(raw)
    if start is None:
        raise DroppedRecord(DROP_MISSING_START)
    date, time = start

    buyin = _pokerstars_buyin(raw)
    guarantee = _pokerstars_guarantee(raw, guarantee_text)

    structure_code = _to_int(raw.get("structureInt"))
    explicit_format = _enum_or_none(TournamentFormat, raw.get("format"))
    if explicit_format is not None and structure_code is None:
        fmt = consistent_format(explicit_format, name, buyin)
    else:
        # Guarantee text keeps "Seats Gtd" visible to the satellite rule
        fmt = infer_format(full_name, structure_code, buyin)

    special = (
        any(flag in markup.lower() for flag in POKERSTARS_SPECIAL_MARKUP)
        or bool(raw.get("special"))
        or is_special(name, guarantee)
    )

    return _build(
        id=make_tournament_id(Platform.POKERSTARS, raw.get("id"), name, date, time),
        platform=Platform.POKERSTARS,
        name=name,
        date=date,
        time=time,
        buyin=buyin,
        buyin_raw=display_buyin(raw.get("buyinRaw"), buyin),
        guarantee=guarantee,
        format=fmt,
        special=special,
        game_variant=infer_variant(name, _to_int(raw.get("gameInt"))),
        url=raw.get("url") or POKERSTARS_LOBBY_URL,
    )


def _iter_pokerstars_records(data: Any) -> Iterator[Tuple[Any]]:
    records = data
    if isinstance(data, dict):
        # Raw GraphQL response or saved snapshot
        payload = data.get("data") if "data" in data else data
        records = payload.get("tournaments") if isinstance(payload, dict) else None
    if not isinstance(records, list):
        return
    for item in records:
        yield (item,)


def normalize_pokerstars_tournament(raw: Dict[str, Any]) -> Optional[UnifiedTournament]:
    """Normalize one PokerStars record, or None if it must be excluded."""
    return _optional(_pokerstars_tournament, raw)


def normalize_pokerstars(data: Any) -> NormalizationResult:
    """
    Normalize PokerStars GraphQL output.
    Expected input: {"data": {"tournaments": [...]}}, a saved snapshot with a
    "tournaments" list, or the bare list.
    """
    return _collect(Platform.POKERSTARS, _iter_pokerstars_records(data), _pokerstars_tournament)


# Unibet (synthetic schedule)

def _unibet_tournament(entry: Any, date: str) -> UnifiedTournament:
    if not isinstance(entry, dict) or not entry.get("slug"):
        raise DroppedRecord(DROP_INVALID)

    name = strip_html(entry.get("name"))
    time = normalize_time(entry.get("time"))
    if not name:
        raise DroppedRecord(DROP_INVALID)
    if not time:
        raise DroppedRecord(DROP_MISSING_START)

    buyin = parse_buyin(entry.get("buyin"))
    guarantee = _to_float(entry.get("guarantee"))

    explicit_format = _enum_or_none(TournamentFormat, entry.get("format"))
    if explicit_format is not None:
        fmt = consistent_format(explicit_format, name, buyin)
    else:
        fmt = infer_format(name, buyin=buyin)

    return _build(
        id=f"unibet-{entry['slug']}-{date}",
        platform=Platform.UNIBET,
        name=name,
        date=date,
        time=time,
        buyin=buyin,
        buyin_raw=display_buyin(entry.get("buyinRaw"), buyin),
        guarantee=guarantee,
        format=fmt,
        special=bool(entry.get("special")) or is_special(name, guarantee),
        game_variant=_enum_or_none(GameVariant, entry.get("gameVariant")) or variant_from_name(name),
        url=entry.get("url") or UNIBET_LOBBY_URL,
    )


def _iter_unibet_entries(schedule: Dict[str, List[Dict[str, Any]]], today: str, days: int):
    for date, weekday in iter_dates(today, days):
        for entry in schedule.get("daily", []):
            yield entry, date
        for entry in schedule.get("weekly", []):
            if isinstance(entry, dict) and _to_int(entry.get("weekday")) == weekday:
                yield entry, date


def normalize_unibet(
    today: str,
    days: int = 7,
    schedule: Optional[Dict[str, List[Dict[str, Any]]]] = None,
) -> NormalizationResult:
    """
    Project the recurring Unibet schedule onto `days` dates starting at `today`.

    Args:
        today: Paris date (YYYY-MM-DD)
        days: Number of days to generate
        schedule: Dict with "daily" and "weekly" entry lists (defaults to UNIBET_SCHEDULE)
    """
    if normalize_date(today) is None:
        raise ValueError(f"Invalid start date: {today!r}")
    schedule = UNIBET_SCHEDULE if schedule is None else schedule
    return _collect(Platform.UNIBET, _iter_unibet_entries(schedule, today, days), _unibet_tournament)


# Routing

def normalize_snapshot(platform: Platform, data: Any) -> NormalizationResult:
    """
    Route a loaded snapshot to the appropriate normalizer.

    Unibet has no snapshot; use normalize_unibet.
    """
    platform = Platform(platform)
    if platform is Platform.WINAMAX:
        return normalize_winamax(data)
    elif platform is Platform.POKERSTARS:
        return normalize_pokerstars(data)
    else:
        raise ValueError(f"No snapshot normalizer for platform: {platform.value}")
