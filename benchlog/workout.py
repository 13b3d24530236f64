"""Dated workout sessions and their JSON representation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Iterable

from benchlog.errors import WorkoutFormatError
from benchlog.exercise import Exercise
from benchlog.workout_set import WorkoutSet


def _to_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    Naive values are taken to already be in UTC.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_date(value: Any) -> datetime:
    if not isinstance(value, str):
        raise WorkoutFormatError(f"Workout date must be a string, got {value!r}")
    text = value.strip()
    # fromisoformat only learned the "Z" suffix in Python 3.11
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return _to_utc(datetime.fromisoformat(text))
    except (ValueError, OverflowError) as exc:
        raise WorkoutFormatError(f"Invalid workout date: {value!r}") from exc


@dataclass(frozen=True)
class Workout:
    """A dated collection of sets.

    ``sets`` keeps display order ("set 1, set 2, ..."). Workouts are
    immutable: editing a set produces a new :class:`Workout` and the new
    value replaces the old one in storage by ``id``.
    """

    id: str
    date: datetime
    sets: tuple[WorkoutSet, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", _to_utc(self.date))
        object.__setattr__(self, "sets", tuple(self.sets))

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def set_count(self) -> int:
        return len(self.sets)

    @property
    def volume(self) -> float:
        """Return the summed ``weight * repetitions`` of every set."""

        return sum((s.volume for s in self.sets), 0.0)

    @property
    def exercises(self) -> list[Exercise]:
        """Return the distinct exercises in the order they were performed."""

        seen: list[Exercise] = []
        for s in self.sets:
            if s.exercise not in seen:
                seen.append(s.exercise)
        return seen

    # ------------------------------------------------------------------
    # Replacement helpers
    # ------------------------------------------------------------------
    def with_sets(self, sets: Iterable[WorkoutSet]) -> "Workout":
        return replace(self, sets=tuple(sets))

    def with_set_replaced(self, index: int, new_set: WorkoutSet) -> "Workout":
        """Return a copy with the set at ``index`` swapped for ``new_set``."""

        if not 0 <= index < len(self.sets):
            raise IndexError(f"Invalid set index {index}")
        sets = list(self.sets)
        sets[index] = new_set
        return self.with_sets(sets)

    def without_set(self, index: int) -> "Workout":
        """Return a copy without the set at ``index``."""

        if not 0 <= index < len(self.sets):
            raise IndexError(f"Invalid set index {index}")
        return self.with_sets(self.sets[:index] + self.sets[index + 1:])

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "sets": [s.to_dict() for s in self.sets],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> "Workout":
        """Build a workout from its decoded JSON object.

        Any shape problem, including an unknown exercise token in one of the
        sets, raises :class:`WorkoutFormatError`.
        """

        if not isinstance(data, dict):
            raise WorkoutFormatError(f"Workout must be an object, got {data!r}")
        try:
            workout_id = data["id"]
            date = data["date"]
            sets = data["sets"]
        except KeyError as exc:
            raise WorkoutFormatError(f"Workout missing field {exc}") from exc

        if not isinstance(workout_id, str):
            raise WorkoutFormatError(f"Workout id must be a string, got {workout_id!r}")
        if not isinstance(sets, list):
            raise WorkoutFormatError(f"Workout sets must be a list, got {sets!r}")

        return cls(
            id=workout_id,
            date=_parse_date(date),
            sets=tuple(WorkoutSet.from_dict(s) for s in sets),
        )

    @classmethod
    def from_json(cls, text: str) -> "Workout":
        try:
            data = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise WorkoutFormatError(f"Invalid workout JSON: {exc}") from exc
        return cls.from_dict(data)
