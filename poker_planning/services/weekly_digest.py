"""Selection of the week's top tournaments for the Sunday digest."""

import re
from typing import Iterable, List, Optional

from ..models.tournament import TournamentFormat, UnifiedTournament
from ..utils.date_utils import paris_today

SPECIAL_SCORE = 1_000_000
DIGEST_MIN_BUYIN = 5.0


def digest_score(tournament: UnifiedTournament) -> float:
    """Specials first, then guarantee, then buy-in."""
    return (
        (SPECIAL_SCORE if tournament.special else 0)
        + (tournament.guarantee or 0)
        + tournament.buyin * 10
    )


def select_top_tournaments(
    tournaments: Iterable[UnifiedTournament],
    today: Optional[str] = None,
    limit: int = 10,
    min_buyin: float = DIGEST_MIN_BUYIN,
) -> List[UnifiedTournament]:
    """
    Pick the top upcoming tournaments.

    Upcoming (date >= today), paid (not freeroll, buy-in >= min_buyin), ranked
    by digest_score then start. One entry per name, compared case- and
    whitespace-insensitively.
    """
    today = today or paris_today()
    upcoming = [
        t for t in tournaments
        if t.date >= today
        and t.format is not TournamentFormat.FREEROLL
        and t.buyin >= min_buyin
    ]
    upcoming.sort(key=lambda t: (-digest_score(t), t.date, t.time))

    seen = set()
    top: List[UnifiedTournament] = []
    for t in upcoming:
        key = re.sub(r"\s+", "", t.name.lower())
        if key in seen:
            continue
        seen.add(key)
        top.append(t)
        if len(top) >= limit:
            break
    return top
