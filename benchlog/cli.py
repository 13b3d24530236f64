"""Command-line access to the workout log.

Usage::

    python -m benchlog list
    python -m benchlog stats --days 30
    python -m benchlog export ~/Downloads
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

# Kivy parses sys.argv, takes over the root logger and writes log files
# under ~/.kivy on import unless told not to
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_LOG_MODE", "PYTHON")
os.environ.setdefault("KIVY_NO_FILELOG", "1")

from benchlog import DEFAULT_DB_PATH, WORKOUTS_KEY
from benchlog import settings
from benchlog.backup import BACKUP_DIR, export_workouts, import_workouts
from benchlog.errors import BenchlogError
from benchlog.kv_store import KeyValueStore
from benchlog.provider import WorkoutProvider
from benchlog.repository import WorkoutRepository
from benchlog.workout import Workout


def format_workout(workout: Workout, unit: str = "kg") -> str:
    names = ", ".join(e.label for e in workout.exercises) or "no exercises"
    return (
        f"{workout.id}  {workout.date:%Y-%m-%d %H:%M}  "
        f"{workout.set_count} sets  {workout.volume:g}{unit}  ({names})"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="benchlog", description="Inspect and maintain the workout log"
    )
    parser.add_argument("--db", default=str(DEFAULT_DB_PATH), help="database path")
    parser.add_argument("--settings", default=None, help="settings file path")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="list workouts, newest first")

    stats = sub.add_parser("stats", help="show totals")
    stats.add_argument("--days", type=int, default=None, help="recent window")

    show = sub.add_parser("show", help="print one workout")
    show.add_argument("workout_id")

    delete = sub.add_parser("delete", help="delete one workout")
    delete.add_argument("workout_id")

    export = sub.add_parser("export", help="write a JSON backup")
    export.add_argument("dest_dir")

    imp = sub.add_parser("import", help="replace workouts from a JSON backup")
    imp.add_argument("src")
    imp.add_argument("--backup-dir", default=str(BACKUP_DIR))

    sub.add_parser("validate", help="check stored records")
    return parser


async def run(args: argparse.Namespace) -> int:
    settings_path = Path(args.settings) if args.settings else None
    unit = settings.get_value("weight_unit", settings_path)
    repository = WorkoutRepository(
        KeyValueStore(Path(args.db)),
        WORKOUTS_KEY,
        skip_corrupt_records=bool(
            settings.get_value("skip_corrupt_records", settings_path)
        ),
    )
    provider = WorkoutProvider(repository)

    if args.command == "list":
        await provider.load()
        for workout in provider.workouts:
            print(format_workout(workout, unit))
    elif args.command == "stats":
        await provider.load()
        days = args.days
        if days is None:
            days = settings.get_value("recent_days", settings_path)
        print(f"Workouts: {len(provider.workouts)}")
        print(f"Total sets: {provider.total_sets}")
        print(f"Total volume: {provider.total_volume:g}{unit}")
        print(f"Last {days} days: {len(provider.recent_workouts(days))}")
        for exercise, volume in provider.volume_by_exercise().items():
            print(f"  {exercise.label}: {volume:g}{unit}")
    elif args.command == "show":
        await provider.load()
        workout = provider.get_by_id(args.workout_id)
        if workout is None:
            print(f"No workout with ID {args.workout_id}", file=sys.stderr)
            return 1
        print(format_workout(workout, unit))
        for number, s in enumerate(workout.sets, 1):
            print(f"  Set {number}: {s.exercise.label} {s.weight:g}{unit} x {s.repetitions}")
    elif args.command == "delete":
        await provider.delete(args.workout_id)
    elif args.command == "export":
        print(await export_workouts(repository, Path(args.dest_dir)))
    elif args.command == "import":
        backup = await import_workouts(
            repository, Path(args.src), Path(args.backup_dir)
        )
        print(f"Imported {await repository.count()} workouts (backup: {backup})")
    elif args.command == "validate":
        if not await repository.validate_stored_data():
            print("Stored workout data is corrupt", file=sys.stderr)
            return 1
        print("All stored workout data is valid")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings_path = Path(args.settings) if args.settings else None
    level = str(settings.get_value("log_level", settings_path)).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))
    try:
        return asyncio.run(run(args))
    except (BenchlogError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
