# Overview: Key-value text substrates that hold serialized record collections.

"""
Persistence substrate for the record store.

A substrate only knows keys and text. It has no idea what a record, an id or
an entity is; RecordStore layers that on top. Two adapters exist:

- SqlKeyValueStore: one StorageEntry row per key, committed on every write.
- MemoryKeyValueStore: a plain dict, scoped to the process.

run(op) executes a read-modify-write callable. The SQL adapter retries it
when the optimistic version check on storage_entries fails.
"""

from __future__ import annotations

from typing import Callable, TypeVar

from ..extensions import db
from ..models import StorageEntry
from .concurrency import run_with_retry

T = TypeVar("T")


class KeyValueStore:
    """Interface shared by all substrates."""

    def get(self, key: str) -> str | None:
        raise NotImplementedError

    def set(self, key: str, text: str) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> list[str]:
        raise NotImplementedError

    def run(self, op: Callable[[], T]) -> T:
        return op()


class MemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, text: str) -> None:
        self._data[key] = text

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class SqlKeyValueStore(KeyValueStore):
    """
    Substrate backed by the storage_entries table.

    Uses the Flask-SQLAlchemy scoped session, so it must be called inside an
    application context.
    """

    def get(self, key: str) -> str | None:
        entry = db.session.get(StorageEntry, key)
        return entry.value if entry is not None else None

    def set(self, key: str, text: str) -> None:
        entry = db.session.get(StorageEntry, key)
        if entry is None:
            db.session.add(StorageEntry(key=key, value=text))
        else:
            entry.value = text
        db.session.commit()

    def delete(self, key: str) -> None:
        entry = db.session.get(StorageEntry, key)
        if entry is not None:
            db.session.delete(entry)
            db.session.commit()

    def keys(self) -> list[str]:
        rows = db.session.query(StorageEntry.key).order_by(StorageEntry.key.asc()).all()
        return [row.key for row in rows]

    def entries(self) -> list[StorageEntry]:
        return db.session.query(StorageEntry).order_by(StorageEntry.key.asc()).all()

    def run(self, op: Callable[[], T]) -> T:
        return run_with_retry(op)
