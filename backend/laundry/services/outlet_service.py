# Overview: Service-layer operations for outlets (branch locations).

from __future__ import annotations

from ..constants import Entity
from .record_store import Record, RecordStore

OUTLET_FIELDS = ("name", "address", "phone")


class OutletError(Exception):
    """Raised when outlet operations fail."""
    pass


def _clean(data: dict, *, partial: bool) -> dict:
    patch = {}
    for field in OUTLET_FIELDS:
        if field not in data and partial:
            continue
        value = str(data.get(field) or "").strip()
        if not value:
            raise OutletError(f"Outlet {field} is required")
        patch[field] = value
    return patch


def list_outlets(store: RecordStore, search: str | None = None) -> list[Record]:
    outlets = store.get_all(Entity.OUTLETS)
    if not search:
        return outlets
    term = search.lower()
    return [
        o for o in outlets
        if term in (o.get("name") or "").lower() or term in (o.get("address") or "").lower()
    ]


def get_outlet(store: RecordStore, outlet_id: int) -> Record | None:
    return store.get_by_id(Entity.OUTLETS, outlet_id)


def create_outlet(store: RecordStore, data: dict) -> Record:
    return store.create(Entity.OUTLETS, _clean(data, partial=False))


def update_outlet(store: RecordStore, outlet_id: int, data: dict) -> Record:
    if get_outlet(store, outlet_id) is None:
        raise OutletError("Outlet not found")
    return store.update(Entity.OUTLETS, outlet_id, _clean(data, partial=True))


def delete_outlet(store: RecordStore, outlet_id: int) -> bool:
    return store.remove(Entity.OUTLETS, outlet_id)
