"""Buy-in and guarantee parsing / display helpers (euros)."""

from __future__ import annotations

import math
import re
from typing import Optional, Union


NUMBER_PATTERN = re.compile(r"\d+(?:[.,]\d+)?")
BUYIN_RAW_PATTERN = re.compile(r"^\d+(?:,\d{2})?€$")
GUARANTEE_TEXT_PATTERN = re.compile(r"(\d[\d.,]*)\s*([KMB]\b)?", re.IGNORECASE)

MULTIPLIERS = {"K": 1_000, "M": 1_000_000, "B": 1_000_000_000}


def parse_buyin(value: Union[str, float, int, None]) -> float:
    """
    Parse a buy-in like "50€", "0,50€", "0.25 €" or 5.5 into euros.

    Unparsable or negative input gives 0.0 rather than raising.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = re.sub(r"\s+", "", str(value))
        match = NUMBER_PATTERN.search(text)
        if not match:
            return 0.0
        number = float(match.group(0).replace(",", "."))

    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0.0
    return round(number, 2)


def format_buyin(value: float) -> str:
    """
    Display form of a buy-in: "0€", "5€", "0,50€", "5,50€".
    """
    cents = int(round(value * 100))
    if cents % 100 == 0:
        return f"{cents // 100}€"
    return f"{cents // 100},{cents % 100:02d}€"


def display_buyin(raw: Optional[str], value: float) -> str:
    """Keep the source string when it is well-formed and agrees with `value`."""
    if isinstance(raw, str) and BUYIN_RAW_PATTERN.match(raw.strip()):
        if abs(parse_buyin(raw) - value) < 0.005:
            return raw.strip()
    return format_buyin(value)


def parse_guarantee_text(text: Optional[str]) -> Optional[float]:
    """
    Parse guarantee text such as "$2.5K Gtd", "10,000 Gtd" or "1M Garantis".

    Returns:
        Amount in currency units, or None if nothing numeric is found
    """
    if not text or not isinstance(text, str):
        return None
    match = GUARANTEE_TEXT_PATTERN.search(text)
    if not match:
        return None

    digits, suffix = match.group(1).rstrip(".,"), match.group(2)
    try:
        if suffix:
            # "2.5K" / "2,5K": the separator is a decimal point
            return float(digits.replace(",", ".")) * MULTIPLIERS[suffix.upper()]
        # "10,000" / "10.000": the separator groups thousands
        return float(re.sub(r"[.,]", "", digits))
    except ValueError:
        return None


def format_guarantee(value: Optional[float]) -> str:
    if not value:
        return "—"
    if value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M€"
    if value >= 1000:
        return f"{round(value / 1000)}K€"
    return f"{value:g}€"
