"""Results produced by the normalization and unification stages."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .tournament import Platform, UnifiedTournament


@dataclass
class NormalizationResult:
    """Tournaments kept from one snapshot plus what was dropped and why."""
    platform: Platform
    tournaments: List[UnifiedTournament] = field(default_factory=list)
    drop_reasons: Counter = field(default_factory=Counter)

    @property
    def dropped(self) -> int:
        return sum(self.drop_reasons.values())

    def drop(self, reason: str) -> None:
        self.drop_reasons[reason] += 1


@dataclass
class SourceStatus:
    """Per-platform outcome of one pipeline run."""
    platform: Platform
    ok: bool
    count: int = 0
    dropped: int = 0
    error: Optional[str] = None


@dataclass
class Schedule:
    """Unified, chronologically sorted collection and its available dates."""
    tournaments: List[UnifiedTournament] = field(default_factory=list)
    dates: List[str] = field(default_factory=list)
    sources: Dict[Platform, SourceStatus] = field(default_factory=dict)
    duplicates_removed: int = 0

    @property
    def is_available(self) -> bool:
        """False when no platform produced a usable snapshot."""
        return any(status.ok for status in self.sources.values())
