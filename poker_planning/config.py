"""Environment configuration (.env supported)."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Directory holding winamax.json / pokerstars.json written by the fetch jobs
DATA_DIR = Path(os.getenv("POKER_DATA_DIR", str(PROJECT_ROOT / "data")))

# Days of the recurring Unibet schedule to project (0 disables Unibet)
UNIBET_SCHEDULE_DAYS = int(os.getenv("UNIBET_SCHEDULE_DAYS", "7"))

# "À la une" panel
FEATURED_WINDOW_HOURS = int(os.getenv("FEATURED_WINDOW_HOURS", "48"))
FEATURED_LIMIT = int(os.getenv("FEATURED_LIMIT", "6"))
