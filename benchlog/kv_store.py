"""SQLite-backed key-value store holding ordered lists of strings.

Every key maps to a list of text values kept in a single table::

    kv_store(key TEXT, position INTEGER, value TEXT)

Writes replace the full list for a key inside one transaction, so readers
never observe a partially written list.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Iterable

import aiosqlite

from benchlog import DEFAULT_DB_PATH
from benchlog.errors import StorageError

CREATE_KV_STORE = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT NOT NULL,
    position INTEGER NOT NULL,
    value TEXT NOT NULL,
    PRIMARY KEY (key, position)
);
"""

# Marker row written for keys that hold an empty list
_EMPTY_POSITION = -1


class KeyValueStore:
    """Asynchronous string-list store on top of ``db_path``."""

    def __init__(self, db_path: Path | str = DEFAULT_DB_PATH) -> None:
        self.db_path = Path(db_path)
        self._initialized = False

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[aiosqlite.Connection]:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = await aiosqlite.connect(str(self.db_path))
        except (sqlite3.Error, OSError) as exc:
            logging.exception("Unable to open key-value store at %s", self.db_path)
            raise StorageError(str(exc)) from exc
        try:
            if not self._initialized:
                await conn.execute(CREATE_KV_STORE)
                await conn.commit()
                self._initialized = True
            yield conn
        except (sqlite3.Error, OSError) as exc:
            logging.exception("Key-value store error on %s", self.db_path)
            raise StorageError(str(exc)) from exc
        finally:
            await conn.close()

    async def get_string_list(self, key: str) -> list[str] | None:
        """Return the list stored under ``key`` or ``None`` if unset."""

        async with self._connection() as conn:
            cursor = await conn.execute(
                "SELECT position, value FROM kv_store WHERE key = ? ORDER BY position",
                (key,),
            )
            rows = await cursor.fetchall()
        if not rows:
            return None
        return [value for position, value in rows if position != _EMPTY_POSITION]

    async def set_string_list(self, key: str, values: Iterable[str]) -> None:
        """Replace the list stored under ``key`` with ``values``."""

        values = list(values)
        async with self._connection() as conn:
            try:
                await conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                if values:
                    await conn.executemany(
                        "INSERT INTO kv_store (key, position, value) VALUES (?, ?, ?)",
                        [(key, pos, value) for pos, value in enumerate(values)],
                    )
                else:
                    await conn.execute(
                        "INSERT INTO kv_store (key, position, value) VALUES (?, ?, '')",
                        (key, _EMPTY_POSITION),
                    )
                await conn.commit()
            except sqlite3.Error:
                await conn.rollback()
                raise

    async def remove(self, key: str) -> None:
        """Delete ``key`` and its list. Missing keys are ignored."""

        async with self._connection() as conn:
            await conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            await conn.commit()

