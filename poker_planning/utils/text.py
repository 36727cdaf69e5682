"""Text cleanup helpers for scraped tournament names."""

import html
import re
from typing import Optional, Tuple


# "<name>, $2.5K Gtd" / "<name> 10 Seats Gtd" / "<name>, 1M Garantis"
GUARANTEE_SUFFIX_PATTERN = re.compile(
    r"^(.*?)[,\s]*([$€£]?\s*\d[\d.,]*\s*[KMB]?\s*(?:Gtd|Garantis?|Seats?\s+Gtd|Chips?\s+Gtd)\b.*)$",
    re.IGNORECASE,
)


def clean_text(value: Optional[str]) -> str:
    if not value:
        return ""
    return re.sub(r"\s+", " ", str(value)).strip()


def strip_html(text: Optional[str]) -> str:
    if not text:
        return ""
    return clean_text(html.unescape(re.sub(r"<[^>]+>", " ", str(text))))


def split_guarantee(name: str) -> Tuple[str, Optional[str]]:
    """
    Split trailing guarantee text off a tournament name.

    "Mini Night Fight [Progressive KO], $2.5K Gtd"
        -> ("Mini Night Fight [Progressive KO]", "$2.5K Gtd")
    """
    match = GUARANTEE_SUFFIX_PATTERN.match(name)
    if not match or not match.group(1).strip():
        return name, None
    return match.group(1).strip().rstrip(",").strip(), match.group(2).strip()
