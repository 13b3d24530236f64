"""A single performed set of an exercise."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from benchlog.errors import WorkoutFormatError
from benchlog.exercise import Exercise


@dataclass(frozen=True)
class WorkoutSet:
    """Exercise, weight and repetitions recorded for one set.

    Values are stored as given. Range checks belong to the input layer, see
    :mod:`benchlog.validation`.
    """

    id: str
    exercise: Exercise
    weight: float
    repetitions: int

    @property
    def volume(self) -> float:
        """Return ``weight * repetitions`` for this set."""

        return self.weight * self.repetitions

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "exercise": self.exercise.token,
            "weight": self.weight,
            "repetitions": self.repetitions,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "WorkoutSet":
        """Build a set from its decoded JSON object."""

        if not isinstance(data, dict):
            raise WorkoutFormatError(f"Workout set must be an object, got {data!r}")
        try:
            set_id = data["id"]
            token = data["exercise"]
            weight = data["weight"]
            repetitions = data["repetitions"]
        except KeyError as exc:
            raise WorkoutFormatError(f"Workout set missing field {exc}") from exc

        if not isinstance(set_id, str):
            raise WorkoutFormatError(f"Workout set id must be a string, got {set_id!r}")
        if not isinstance(token, str):
            raise WorkoutFormatError(f"Unknown exercise: {token!r}")
        # bool is an int subclass but never a valid weight or rep count
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise WorkoutFormatError(f"Invalid weight: {weight!r}")
        if isinstance(repetitions, bool) or not isinstance(repetitions, int):
            raise WorkoutFormatError(f"Invalid repetitions: {repetitions!r}")
        try:
            weight = float(weight)
        except OverflowError as exc:
            raise WorkoutFormatError(f"Invalid weight: {weight!r}") from exc

        return cls(
            id=set_id,
            exercise=Exercise.from_token(token),
            weight=weight,
            repetitions=repetitions,
        )
