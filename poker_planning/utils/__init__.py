"""Utilities."""

from .classification import (
    SPECIAL_GUARANTEE_THRESHOLD,
    infer_format,
    infer_variant,
    is_special,
)
from .date_utils import (
    PARIS_TZ,
    display_dates,
    paris_current_time,
    paris_today,
    utc_to_paris,
)
from .money import display_buyin, format_buyin, format_guarantee, parse_buyin

__all__ = [
    "SPECIAL_GUARANTEE_THRESHOLD",
    "infer_format",
    "infer_variant",
    "is_special",
    "PARIS_TZ",
    "display_dates",
    "paris_current_time",
    "paris_today",
    "utc_to_paris",
    "display_buyin",
    "format_buyin",
    "format_guarantee",
    "parse_buyin",
]
