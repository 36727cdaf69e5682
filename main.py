#!/usr/bin/env python3
"""
Main entry point for the poker tournament schedule.

Reads the platform snapshots (data/winamax.json, data/pokerstars.json), adds
the recurring Unibet schedule, and prints the filtered day view.

Usage:
    python main.py                                  # Today's tournaments
    python main.py --date 2025-06-01 --buyin 0-5    # Micro buy-ins on a given day
    python main.py --special-only --platform winamax
    python main.py --featured                       # Specials in the next 48h
    python main.py --top                            # Weekly top 10
    python main.py --json > today.json
"""

import argparse
import json
import sys
from typing import List, Optional

from dotenv import load_dotenv

from poker_planning.models import (
    BuyinRange,
    GameVariant,
    Platform,
    PLATFORM_LABELS,
    TournamentFilters,
    TournamentFormat,
    UnifiedTournament,
)
from poker_planning.models.filters import FilterStatus
from poker_planning.services import (
    JsonSnapshotLoader,
    build_schedule,
    day_stats,
    featured_tournaments,
    query_day,
    select_top_tournaments,
)
from poker_planning.services.tournament_filters import (
    active_filter_count,
    available_platforms,
    past_count,
    show_platform_filter,
)
from poker_planning.utils import display_dates, format_guarantee, paris_current_time, paris_today
from poker_planning.utils.date_utils import normalize_date


def format_line(t: UnifiedTournament) -> str:
    buyin = "Gratuit" if t.is_free else t.buyin_raw
    tag = " ★" if t.special else ""
    gtd = f" ({format_guarantee(t.guarantee)} GTD)" if t.guarantee else ""
    return (
        f"  {t.time}  {PLATFORM_LABELS[t.platform]:<10}  {buyin:>8}  "
        f"[{t.format.value:<9}]  {t.name}{gtd}{tag}"
    )


def print_sources(schedule) -> None:
    for platform, status in schedule.sources.items():
        if status.ok:
            dropped = f", {status.dropped} dropped" if status.dropped else ""
            print(f"[{platform.value}] ✓ {status.count} tournaments{dropped}")
        else:
            print(f"[{platform.value}] ✗ {status.error}")


def print_day_view(schedule, filters: TournamentFilters) -> int:
    result = query_day(schedule, filters)
    stats = day_stats(schedule.tournaments, filters.date, hide_past=filters.hide_past)

    print(f"\n{'=' * 70}")
    print(f"TOURNOIS DU {filters.date}")
    print(f"{'=' * 70}")
    print(f"{stats.total} tournois · {stats.specials} spéciaux · {stats.freerolls} freerolls")

    tabs = display_dates(schedule.dates, paris_today())
    if tabs:
        print("Dates: " + "  ".join(f"[{d}]" if d == filters.date else d for d in tabs))
    if show_platform_filter(schedule.tournaments):
        labels = [PLATFORM_LABELS[p] for p in available_platforms(schedule.tournaments)]
        print("Plateformes: " + ", ".join(labels))
    active = active_filter_count(filters)
    if active:
        print(f"{active} filtre(s) actif(s)")

    if filters.hide_past and filters.date == paris_today():
        hidden = past_count(schedule.tournaments, filters.date, paris_current_time())
        if hidden:
            print(f"({hidden} déjà commencés, masqués)")
    print()

    if result.status is FilterStatus.NO_MATCH:
        print(f"Aucun tournoi ne correspond aux filtres (0 / {result.total_for_date}).")
    for t in result.tournaments:
        print(format_line(t))
    print()
    return 0


def print_featured(schedule, platform: Optional[Platform]) -> int:
    featured = featured_tournaments(schedule.tournaments, platform=platform)
    print(f"\n{'=' * 70}")
    print("TOURNOIS À LA UNE")
    print(f"{'=' * 70}")
    if not featured:
        print("Aucun événement spécial dans les prochaines heures.")
    for t in featured:
        print(f"  {t.date}" + format_line(t))
    print()
    return 0


def print_top(schedule) -> int:
    top = select_top_tournaments(schedule.tournaments)
    print(f"\n{'=' * 70}")
    print("TOP TOURNOIS DE LA SEMAINE")
    print(f"{'=' * 70}")
    for rank, t in enumerate(top, start=1):
        print(f"{rank:>2}. {t.date}" + format_line(t))
    print()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Online poker tournament schedule (Winamax, PokerStars, Unibet)"
    )
    parser.add_argument("--date", default=None, help="Day to show, YYYY-MM-DD (default: today in Paris)")
    parser.add_argument("--special-only", action="store_true", help="Only special / featured events")
    parser.add_argument(
        "--buyin",
        default=BuyinRange.ALL.value,
        choices=[r.value for r in BuyinRange],
        help="Buy-in bucket",
    )
    parser.add_argument("--platform", default="all", choices=["all"] + [p.value for p in Platform])
    parser.add_argument("--format", default="all", choices=["all"] + [f.value for f in TournamentFormat])
    parser.add_argument("--variant", default="all", choices=["all"] + [v.value for v in GameVariant])
    parser.add_argument("--show-past", action="store_true", help="Keep tournaments that already started today")
    parser.add_argument("--featured", action="store_true", help="Show upcoming specials instead of the day view")
    parser.add_argument("--top", action="store_true", help="Show the weekly top 10")
    parser.add_argument("--data-dir", default=None, help="Directory holding the platform snapshots")
    parser.add_argument("--json", action="store_true", help="Print the filtered tournaments as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    today = paris_today()
    if args.date is not None and normalize_date(args.date) != args.date:
        parser.error(f"argument --date: expected YYYY-MM-DD, got {args.date!r}")
    filters = TournamentFilters(
        date=args.date or today,
        special_only=args.special_only,
        buyin_range=args.buyin,
        platform=args.platform,
        format=args.format,
        game_variant=args.variant,
        hide_past=not args.show_past,
    )

    schedule = build_schedule(JsonSnapshotLoader(args.data_dir), today=today)

    if args.json:
        result = query_day(schedule, filters)
        print(json.dumps([t.to_dict() for t in result.tournaments], indent=2, ensure_ascii=False))
        return 0 if schedule.is_available else 1

    print_sources(schedule)
    if not schedule.is_available:
        print("\nERROR: No tournament data available.")
        print("Run the fetch jobs to write data/winamax.json and data/pokerstars.json.")
        return 1

    if args.featured:
        return print_featured(schedule, filters.platform)
    if args.top:
        return print_top(schedule)
    return print_day_view(schedule, filters)


if __name__ == "__main__":
    sys.exit(main())
