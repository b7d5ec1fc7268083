from __future__ import annotations

import logging
import os
import sqlite3
import threading
from datetime import datetime, timezone
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SqliteKeyValueStore:
    """String key-value store backed by a local SQLite file."""

    def __init__(self, db_path: str):
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    def _get_connection(self) -> sqlite3.Connection:
        if self._conn is not None:
            return self._conn

        directory = os.path.dirname(self._db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        conn = sqlite3.connect(
            self._db_path,
            check_same_thread=False,
            timeout=5,
            isolation_level=None,
        )
        conn.execute("PRAGMA journal_mode=WAL;")
        conn.execute("PRAGMA synchronous=NORMAL;")
        conn.execute("PRAGMA busy_timeout=5000;")
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TEXT NOT NULL
            );
            """
        )
        self._conn = conn
        return conn

    def get(self, key: str) -> str | None:
        with self._lock:
            cur = self._get_connection().execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = cur.fetchone()
        return row[0] if row else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._get_connection().execute(
                """
                INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                """,
                (key, value, _utc_now().isoformat()),
            )

    def delete(self, key: str) -> None:
        with self._lock:
            self._get_connection().execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class DraftStore:
    """Keeps one serialized draft snapshot under a fixed key."""

    def __init__(self, backend: KeyValueStore, key: str):
        self._backend = backend
        self.key = key

    def load(self) -> str | None:
        return self._backend.get(self.key)

    def save(self, snapshot: str) -> None:
        self._backend.set(self.key, snapshot)
        logger.info("draft_saved key=%s bytes=%s", self.key, len(snapshot))

    def clear(self) -> None:
        self._backend.delete(self.key)
        logger.info("draft_cleared key=%s", self.key)
