"""Key-value stores backing persisted dashboard state."""

import sqlite3
from typing import Protocol

from weatherdash.errors import StorageError
from weatherdash.storage import kv_repo


class KeyValueStore(Protocol):
    """Implementations raise StorageError when the backend fails."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class SqliteKeyValueStore:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get(self, key: str) -> str | None:
        try:
            return kv_repo.get_value(self.conn, key)
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read {key!r}: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            kv_repo.set_value(self.conn, key, value)
        except sqlite3.Error as e:
            raise StorageError(f"Failed to write {key!r}: {e}") from e


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
