"""Persistence of the workout collection in the key-value store.

Each workout is stored as its own JSON document inside the string list held
under :data:`benchlog.WORKOUTS_KEY`. The repository always reads the full
list, changes it in memory and writes the full list back.

Concurrent writers are not coordinated. Two overlapping :meth:`save` or
:meth:`delete` calls can lose one of the updates; the log assumes a single
writer.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable

from benchlog import WORKOUTS_KEY
from benchlog.errors import WorkoutFormatError
from benchlog.kv_store import KeyValueStore
from benchlog.workout import Workout


class WorkoutRepository:
    """Read and write :class:`Workout` records through ``store``.

    With ``skip_corrupt_records`` left at ``False`` a single malformed record
    makes :meth:`get_all` return an empty list. Setting it to ``True`` drops
    only the records that fail to decode.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = WORKOUTS_KEY,
        *,
        skip_corrupt_records: bool = False,
    ) -> None:
        self.store = store
        self.key = key
        self.skip_corrupt_records = skip_corrupt_records

    async def get_all(self) -> list[Workout]:
        """Return every stored workout in storage order.

        Storage failures propagate as :class:`~benchlog.errors.StorageError`.
        """

        records = await self.store.get_string_list(self.key) or []
        workouts: list[Workout] = []
        for record in records:
            try:
                workouts.append(Workout.from_json(record))
            except WorkoutFormatError as exc:
                if not self.skip_corrupt_records:
                    logging.error("Error parsing workout JSON: %s", exc)
                    return []
                logging.warning("Skipping corrupt workout record: %s", exc)
        return workouts

    async def save(self, workout: Workout) -> None:
        """Insert ``workout`` or replace the stored workout with its id."""

        workouts = await self.get_all()
        for index, existing in enumerate(workouts):
            if existing.id == workout.id:
                workouts[index] = workout
                logging.info("Updated existing workout with ID: %s", workout.id)
                break
        else:
            workouts.append(workout)
            logging.info("Added new workout with ID: %s", workout.id)
        await self._write(workouts)

    async def delete(self, workout_id: str) -> None:
        """Remove the workout with ``workout_id``. Unknown ids are ignored."""

        workouts = await self.get_all()
        remaining = [w for w in workouts if w.id != workout_id]
        if len(remaining) < len(workouts):
            logging.info("Deleted workout with ID: %s", workout_id)
        else:
            logging.info("No workout found with ID: %s", workout_id)
        await self._write(remaining)

    async def exists(self, workout_id: str) -> bool:
        """Return ``True`` if a workout with ``workout_id`` is stored.

        Storage failures propagate instead of reading as ``False``.
        """

        return any(w.id == workout_id for w in await self.get_all())

    async def count(self) -> int:
        """Return the number of stored workouts. Storage failures propagate."""

        return len(await self.get_all())

    async def clear(self) -> None:
        """Remove every stored workout. This cannot be undone."""

        await self.store.remove(self.key)
        logging.info("Cleared all workout data")

    async def validate_stored_data(self) -> bool:
        """Return ``True`` if every stored record decodes to a workout.

        Storage failures propagate instead of reading as ``False``.
        """

        records = await self.store.get_string_list(self.key) or []
        for record in records:
            try:
                Workout.from_json(record)
            except WorkoutFormatError:
                logging.warning("Invalid workout JSON detected: %s", record)
                return False
        return True

    async def export_all(self) -> str:
        """Return all workouts as one JSON array."""

        workouts = await self.get_all()
        return json.dumps([w.to_dict() for w in workouts])

    async def import_all(self, data: str) -> None:
        """Replace the stored collection with the workouts in ``data``.

        ``data`` must be a JSON array of workout objects. The whole document
        is decoded before anything is written, so a format error leaves the
        store untouched.
        """

        try:
            decoded = json.loads(data)
        except (TypeError, ValueError) as exc:
            logging.error("Invalid JSON format during import: %s", exc)
            raise WorkoutFormatError(f"Invalid JSON: {exc}") from exc
        if not isinstance(decoded, list):
            logging.error("Import data is not a JSON array")
            raise WorkoutFormatError("Import data must be a JSON array")

        workouts = [Workout.from_dict(item) for item in decoded]
        await self._write(workouts)
        logging.info("Successfully imported %d workouts", len(workouts))

    async def _write(self, workouts: Iterable[Workout]) -> None:
        records = [w.to_json() for w in workouts]
        await self.store.set_string_list(self.key, records)
        logging.debug("Saved %d workouts to storage", len(records))
