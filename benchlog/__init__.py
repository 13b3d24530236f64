"""Shared constants for the workout log modules."""

from __future__ import annotations

import os
from pathlib import Path

# Directory holding the database, settings and import backups
DATA_DIR = Path(os.environ.get("BENCHLOG_DATA_DIR", "~/.benchlog")).expanduser()

# Path to the SQLite database backing the key-value store
DEFAULT_DB_PATH = DATA_DIR / "workouts.db"

# Storage key holding the serialized workout records
WORKOUTS_KEY = "workouts"

# Default window, in days, for the "recent workouts" summary
DEFAULT_RECENT_DAYS = 7

__all__ = ["DATA_DIR", "DEFAULT_DB_PATH", "WORKOUTS_KEY", "DEFAULT_RECENT_DAYS"]
