"""The fixed set of exercises a workout set can record."""

from __future__ import annotations

from enum import Enum

from benchlog.errors import WorkoutFormatError


class Exercise(Enum):
    """Barbell lifts supported by the log.

    The value of each member is the canonical token written to storage.
    """

    BARBELL_ROW = "barbellRow"
    BENCH_PRESS = "benchPress"
    SHOULDER_PRESS = "shoulderPress"
    DEADLIFT = "deadlift"
    SQUAT = "squat"

    @property
    def token(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return EXERCISE_LABELS[self]

    @property
    def description(self) -> str:
        return EXERCISE_DESCRIPTIONS[self]

    @property
    def icon(self) -> str:
        return EXERCISE_ICONS[self]

    @classmethod
    def from_token(cls, token: str) -> "Exercise":
        """Return the member stored as ``token``.

        Matching is case-sensitive. Unknown tokens raise
        :class:`WorkoutFormatError`.
        """

        for exercise in cls:
            if exercise.value == token:
                return exercise
        raise WorkoutFormatError(f"Unknown exercise: {token!r}")


EXERCISE_LABELS = {
    Exercise.BARBELL_ROW: "Barbell row",
    Exercise.BENCH_PRESS: "Bench press",
    Exercise.SHOULDER_PRESS: "Shoulder press",
    Exercise.DEADLIFT: "Deadlift",
    Exercise.SQUAT: "Squat",
}

EXERCISE_DESCRIPTIONS = {
    Exercise.BARBELL_ROW: "Upper body pulling exercise targeting back muscles",
    Exercise.BENCH_PRESS: "Upper body pushing exercise targeting chest muscles",
    Exercise.SHOULDER_PRESS: "Overhead pressing exercise targeting shoulder muscles",
    Exercise.DEADLIFT: "Full body compound exercise targeting posterior chain",
    Exercise.SQUAT: "Lower body compound exercise targeting leg muscles",
}

# Material Design icon names used by list rows and pickers
EXERCISE_ICONS = {
    Exercise.BARBELL_ROW: "drag-horizontal",
    Exercise.BENCH_PRESS: "seat-flat",
    Exercise.SHOULDER_PRESS: "human-handsup",
    Exercise.DEADLIFT: "dumbbell",
    Exercise.SQUAT: "chair-rolling",
}
