from __future__ import annotations

from datetime import datetime, timezone

from benchlog.exercise import Exercise
from benchlog.workout import Workout
from benchlog.workout_set import WorkoutSet


def make_set(
    set_id: str = "test-set",
    exercise: Exercise = Exercise.BENCH_PRESS,
    weight: float = 50.0,
    repetitions: int = 10,
) -> WorkoutSet:
    """Return a set with sensible defaults for tests."""
    return WorkoutSet(set_id, exercise, weight, repetitions)


def make_workout(
    workout_id: str = "test-workout",
    date: datetime | None = None,
    sets=None,
) -> Workout:
    """Return a one-set workout dated now unless told otherwise."""
    return Workout(
        id=workout_id,
        date=date or datetime.now(timezone.utc),
        sets=tuple(sets) if sets is not None else (make_set("set1"),),
    )
