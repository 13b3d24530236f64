"""Commands for composing a workout before it is saved.

A :class:`WorkoutDraft` owns the list of sets being edited. Screens call the
draft's commands instead of mutating lists from dialog callbacks, then hand
the result of :meth:`WorkoutDraft.build` to the provider.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from benchlog.exercise import Exercise
from benchlog.workout import Workout
from benchlog.workout_set import WorkoutSet


def new_id() -> str:
    return str(uuid.uuid4())


class WorkoutDraft:
    """Editable list of sets for a new or existing workout.

    Parameters
    ----------
    workout_id:
        Id of the workout being edited, or ``None`` when creating one.
    date:
        Original date of the edited workout. Kept unchanged by
        :meth:`build`.
    sets:
        Initial sets in display order.
    """

    def __init__(
        self,
        workout_id: str | None = None,
        date: datetime | None = None,
        sets: list[WorkoutSet] | None = None,
    ) -> None:
        self.workout_id = workout_id
        self.date = date
        self.sets: list[WorkoutSet] = list(sets or [])

    @classmethod
    def new(cls) -> "WorkoutDraft":
        return cls()

    @classmethod
    def from_workout(cls, workout: Workout) -> "WorkoutDraft":
        return cls(workout.id, workout.date, list(workout.sets))

    @property
    def is_editing(self) -> bool:
        return self.workout_id is not None

    def __len__(self) -> int:
        return len(self.sets)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.sets):
            raise IndexError(f"Invalid set index {index}")

    def add_set(
        self, exercise: Exercise, weight: float, repetitions: int
    ) -> WorkoutSet:
        """Append a new set and return it."""

        workout_set = WorkoutSet(new_id(), exercise, float(weight), int(repetitions))
        self.sets.append(workout_set)
        logging.debug(
            "Added set: %s - %skg x %s", exercise.label, weight, repetitions
        )
        return workout_set

    def replace_set_at(self, index: int, new_set: WorkoutSet) -> None:
        """Swap the set at ``index`` for ``new_set``."""

        self._check_index(index)
        self.sets[index] = new_set
        logging.debug("Updated set %d", index + 1)

    def update_set_at(
        self, index: int, exercise: Exercise, weight: float, repetitions: int
    ) -> WorkoutSet:
        """Replace the set at ``index`` with new values, keeping its id."""

        self._check_index(index)
        updated = WorkoutSet(
            self.sets[index].id, exercise, float(weight), int(repetitions)
        )
        self.replace_set_at(index, updated)
        return updated

    def remove_set_at(self, index: int) -> WorkoutSet:
        """Remove and return the set at ``index``."""

        self._check_index(index)
        removed = self.sets.pop(index)
        logging.debug("Removed set %d", index + 1)
        return removed

    def build(self, now: datetime | None = None) -> Workout:
        """Return the workout described by this draft.

        New workouts receive a fresh id and ``now`` as their date. Edited
        workouts keep their id and original date. Drafts without sets
        cannot be built.
        """

        if not self.sets:
            raise ValueError("Please add at least one set")
        now = now or datetime.now(timezone.utc)
        return Workout(
            id=self.workout_id or new_id(),
            date=self.date if self.date is not None else now,
            sets=tuple(self.sets),
        )
