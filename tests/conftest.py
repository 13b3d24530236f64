import os
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Keep Kivy away from pytest's command line and from the root logger
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_LOG_MODE", "PYTHON")
os.environ.setdefault("KIVY_NO_FILELOG", "1")

sys.path.append(str(Path(__file__).resolve().parents[1]))

from benchlog.kv_store import KeyValueStore  # noqa: E402
from benchlog.provider import WorkoutProvider  # noqa: E402
from benchlog.repository import WorkoutRepository  # noqa: E402
from benchlog.exercise import Exercise  # noqa: E402
from benchlog.workout import Workout  # noqa: E402
from utils import make_set  # noqa: E402


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path of a fresh, empty database for each test."""
    return tmp_path / "workouts.db"


@pytest.fixture
def store(db_path: Path) -> KeyValueStore:
    return KeyValueStore(db_path)


@pytest.fixture
def repository(store: KeyValueStore) -> WorkoutRepository:
    return WorkoutRepository(store)


@pytest.fixture
def provider(repository: WorkoutRepository) -> WorkoutProvider:
    return WorkoutProvider(repository)


@pytest.fixture
def sample_workouts() -> list[Workout]:
    """Two workouts on consecutive days, mirroring a typical week."""
    return [
        Workout(
            id="workout-1",
            date=datetime(2024, 3, 15, 10, 0, tzinfo=timezone.utc),
            sets=(make_set("set-1", Exercise.BENCH_PRESS, 50.0, 10),),
        ),
        Workout(
            id="workout-2",
            date=datetime(2024, 3, 16, 11, 0, tzinfo=timezone.utc),
            sets=(
                make_set("set-2", Exercise.SQUAT, 100.0, 8),
                make_set("set-3", Exercise.DEADLIFT, 120.0, 5),
            ),
        ),
    ]
