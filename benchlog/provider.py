"""Observable in-memory view of the stored workouts.

Screens bind to :attr:`WorkoutProvider.workouts` and
:attr:`WorkoutProvider.is_loading` the same way they bind to any other Kivy
property::

    provider = WorkoutProvider(repository)
    provider.bind(workouts=lambda inst, value: refresh_list(value))
    await provider.load()

The cache is rebuilt from the repository after every change and is never
written back on its own.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from kivy.event import EventDispatcher
from kivy.properties import BooleanProperty, ObjectProperty

from benchlog.exercise import Exercise
from benchlog.repository import WorkoutRepository
from benchlog.workout import Workout


class WorkoutProvider(EventDispatcher):
    """Sorted cache of workouts plus summary statistics.

    Events
    ------
    ``on_loaded(workouts)``
        Fired after every successful :meth:`load`.
    ``on_load_error(exc)``
        Fired when :meth:`load` fails. The cached workouts are kept.
    """

    __events__ = ("on_loaded", "on_load_error")

    # Tuple of workouts, newest first
    workouts = ObjectProperty(())
    is_loading = BooleanProperty(False)

    def __init__(self, repository: WorkoutRepository, **kwargs) -> None:
        super().__init__(**kwargs)
        self.repository = repository

    def on_loaded(self, workouts) -> None:
        pass

    def on_load_error(self, exc) -> None:
        pass

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    async def load(self) -> None:
        """Reload the cache from the repository, newest workout first.

        A failed load is logged and leaves the previous cache in place.
        """

        self.is_loading = True
        try:
            workouts = await self.repository.get_all()
        except Exception as exc:
            logging.exception("Error loading workouts")
            self.is_loading = False
            self.dispatch("on_load_error", exc)
            return

        # sorted() is stable so workouts sharing a date keep storage order
        self.workouts = tuple(sorted(workouts, key=lambda w: w.date, reverse=True))
        self.is_loading = False
        self.dispatch("on_loaded", self.workouts)

    async def save(self, workout: Workout) -> None:
        """Persist ``workout`` and refresh the cache."""

        await self.repository.save(workout)
        await self.load()

    async def delete(self, workout_id: str) -> None:
        """Delete ``workout_id`` and refresh the cache."""

        await self.repository.delete(workout_id)
        await self.load()

    # ------------------------------------------------------------------
    # Queries over the cache
    # ------------------------------------------------------------------
    def get_by_id(self, workout_id: str) -> Workout | None:
        for workout in self.workouts:
            if workout.id == workout_id:
                return workout
        logging.debug("Workout with ID %s not found", workout_id)
        return None

    @property
    def total_sets(self) -> int:
        return sum(w.set_count for w in self.workouts)

    @property
    def total_volume(self) -> float:
        """Sum of ``weight * repetitions`` across every cached set."""

        return sum((w.volume for w in self.workouts), 0.0)

    def recent_workouts(
        self, days: int, now: datetime | None = None
    ) -> list[Workout]:
        """Return workouts dated strictly after ``now`` minus ``days``."""

        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        cutoff = now - timedelta(days=days)
        return [w for w in self.workouts if w.date > cutoff]

    def volume_by_exercise(self) -> dict[Exercise, float]:
        totals: dict[Exercise, float] = {}
        for workout in self.workouts:
            for s in workout.sets:
                totals[s.exercise] = totals.get(s.exercise, 0.0) + s.volume
        return totals
