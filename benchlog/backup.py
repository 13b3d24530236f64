"""Export and import of the workout log as JSON backup files."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from benchlog import DATA_DIR
from benchlog.repository import WorkoutRepository

# Directory where automatic pre-import backups are stored.
BACKUP_DIR = DATA_DIR / "backups"


def make_export_name() -> str:
    """Return an auto-generated export filename.

    The name follows the format ``workouts_YYYY_MM_DD_HH__MM__SS.json`` using
    the current local time.
    """
    return datetime.now().strftime("workouts_%Y_%m_%d_%H__%M__%S.json")


def _write_text(dest: Path, text: str) -> None:
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(text, encoding="utf-8")
    except FileNotFoundError:
        logging.exception("Destination not found for JSON export: %s", dest)
        raise
    except PermissionError:
        logging.exception("Permission denied writing JSON export to %s", dest)
        raise
    except OSError:
        logging.exception("OS error exporting workouts to %s", dest)
        raise


async def export_workouts(repository: WorkoutRepository, dest_dir: Path) -> Path:
    """Write every stored workout to a new JSON file in ``dest_dir``.

    Returns the absolute path of the written file. File-system errors are
    logged and re-raised so the caller can tell the user what failed.
    """

    data = await repository.export_all()
    dest = (Path(dest_dir) / make_export_name()).resolve()
    _write_text(dest, data)
    logging.info("Exported workouts to %s", dest)
    return dest


async def import_workouts(
    repository: WorkoutRepository,
    src_path: Path,
    backup_dir: Path = BACKUP_DIR,
) -> Path:
    """Replace the stored workouts with the contents of ``src_path``.

    The current workouts are first exported to ``backup_dir``. The path of
    that backup is returned. A malformed source file raises
    :class:`~benchlog.errors.WorkoutFormatError` and leaves the stored
    workouts as they were.
    """

    src_path = Path(src_path)
    try:
        text = src_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logging.exception("Import failed, file not found: %s", src_path)
        raise
    except PermissionError:
        logging.exception("Import failed, permission denied: %s", src_path)
        raise
    except (OSError, UnicodeDecodeError):
        logging.exception("Import failed reading %s", src_path)
        raise

    backup_path = await export_workouts(repository, backup_dir)
    try:
        await repository.import_all(text)
    except ValueError:
        logging.exception("Import failed validation: %s", src_path)
        raise
    logging.info("Replaced workouts with %s (backup: %s)", src_path, backup_path)
    return backup_path
