# Overview: Generic record collections persisted as JSON text per entity key.

"""
Local Record Store

Each entity name maps to an ordered list of flat records (dicts), each keyed
by an integer `id`. The whole list is serialized as JSON and written back to
the substrate on every mutation; there is no per-record storage and no
index, so every lookup is a linear scan.

Ids are assigned as max(existing ids) + 1, or 1 for an empty collection.
Nothing here validates entity names, record shapes or references; callers
are trusted.
"""

from __future__ import annotations

import json
from typing import Any

from flask import current_app

from .kv_store import KeyValueStore

Record = dict[str, Any]


class RecordStore:
    def __init__(self, backend: KeyValueStore):
        self.backend = backend

    def _load(self, entity: str) -> list[Record]:
        text = self.backend.get(entity)
        if not text:
            return []
        return json.loads(text) or []

    def _save(self, entity: str, records: list[Record]) -> None:
        self.backend.set(entity, json.dumps(records))

    # -- reads --

    def get_all(self, entity: str) -> list[Record]:
        """Full collection in insertion order; [] if never initialized."""
        return self._load(entity)

    def get_by_id(self, entity: str, record_id: Any) -> Record | None:
        for record in self.get_all(entity):
            if record.get("id") == record_id:
                return record
        return None

    def get_by_code(self, entity: str, code: Any) -> Record | None:
        for record in self.get_all(entity):
            if record.get("code") == code:
                return record
        return None

    # -- writes --

    def create(self, entity: str, data: Record) -> Record:
        """
        Append a record with a freshly assigned id.

        An `id` already present in data is overwritten by the assigned one.
        """
        def _op():
            records = self._load(entity)
            new_id = max(record["id"] for record in records) + 1 if records else 1
            new_record = {**data, "id": new_id}
            self._save(entity, records + [new_record])
            return new_record

        return self.backend.run(_op)

    def update(self, entity: str, record_id: Any, patch: Record) -> Record | None:
        """
        Shallow-merge patch over the matching record (patch fields win).

        Returns the stored record, or None when no record has that id.
        """
        def _op():
            records = self._load(entity)
            updated = [
                {**record, **patch} if record.get("id") == record_id else record
                for record in records
            ]
            self._save(entity, updated)
            return self.get_by_id(entity, record_id)

        return self.backend.run(_op)

    def remove(self, entity: str, record_id: Any) -> bool:
        """Drop the matching record. Reports success even if none matched."""
        def _op():
            records = self._load(entity)
            remaining = [record for record in records if record.get("id") != record_id]
            self._save(entity, remaining)
            return True

        return self.backend.run(_op)

    # -- lifecycle --

    def initialize(self, entity: str, records: list[Record]) -> bool:
        """Write records only if the entity key is absent. Returns True if written."""
        if self.backend.get(entity) is not None:
            return False
        self._save(entity, list(records))
        return True

    def clear(self, entity: str) -> None:
        self.backend.delete(entity)

    def entities(self) -> list[str]:
        return self.backend.keys()


def get_record_store() -> RecordStore:
    """The RecordStore registered on the current application by create_app()."""
    return current_app.extensions["record_store"]
