"""Utility functions for loading and saving user settings.

The settings are stored as a list of dictionaries to preserve order.
Each dictionary contains ``key``, ``value`` and ``type`` entries.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from benchlog import DATA_DIR, DEFAULT_RECENT_DAYS

# Path to the JSON file where settings are persisted.
SETTINGS_PATH = DATA_DIR / "settings.json"

# Default settings to initialize the file on first run.
DEFAULT_SETTINGS: List[Dict[str, Any]] = [
    {"key": "recent_days", "value": DEFAULT_RECENT_DAYS, "type": "int"},
    {"key": "weight_unit", "value": "kg", "type": "str"},
    {"key": "skip_corrupt_records", "value": False, "type": "bool"},
    {"key": "log_level", "value": "INFO", "type": "str"},
]

# Internal cache so settings are only read from disk once.
_settings_cache: List[Dict[str, Any]] | None = None


def _defaults() -> List[Dict[str, Any]]:
    return [dict(item) for item in DEFAULT_SETTINGS]


def load_settings(path: Path | None = None) -> List[Dict[str, Any]]:
    """Load settings from ``path`` or create defaults.

    A missing or unreadable file is replaced with :data:`DEFAULT_SETTINGS`.
    """
    path = Path(path or SETTINGS_PATH)
    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
            if isinstance(data, list):
                return data
            logging.warning("Settings file %s is not a list, resetting", path)
        except (OSError, ValueError):
            logging.exception("Unable to read settings from %s, resetting", path)
    settings = _defaults()
    save_settings(settings, path)
    return settings


def save_settings(settings: List[Dict[str, Any]], path: Path | None = None) -> None:
    """Persist ``settings`` to ``path``."""
    path = Path(path or SETTINGS_PATH)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(settings, fh)


def get_settings(path: Path | None = None) -> List[Dict[str, Any]]:
    """Return the cached settings list, loading from disk if needed.

    Passing an explicit ``path`` bypasses the cache.
    """
    global _settings_cache
    if path is not None:
        return load_settings(path)
    if _settings_cache is None:
        _settings_cache = load_settings()
    return _settings_cache


def get_value(key: str, path: Path | None = None) -> Any:
    """Fetch the value associated with ``key``.

    Keys missing from the file fall back to their default.
    """
    for item in get_settings(path):
        if item.get("key") == key:
            return item.get("value")
    for item in DEFAULT_SETTINGS:
        if item["key"] == key:
            return item["value"]
    return None


def set_value(key: str, value: Any, path: Path | None = None) -> None:
    """Update ``key`` with ``value`` and persist the change."""
    settings = get_settings(path)
    for item in settings:
        if item.get("key") == key:
            item["value"] = value
            break
    else:
        settings.append({"key": key, "value": value, "type": type(value).__name__})
    save_settings(settings, path)


def reset_cache() -> None:
    """Forget cached settings so the next read goes to disk."""
    global _settings_cache
    _settings_cache = None
