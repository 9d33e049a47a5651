# Overview: Service-layer operations for registered customers.

from __future__ import annotations

from ..constants import Entity
from .record_store import Record, RecordStore

CUSTOMER_REQUIRED_FIELDS = ("name", "phone")


class CustomerError(Exception):
    """Raised when customer operations fail."""
    pass


def _clean(data: dict, *, partial: bool) -> dict:
    patch = {}
    for field in ("name", "address", "phone"):
        if field not in data:
            if not partial and field in CUSTOMER_REQUIRED_FIELDS:
                raise CustomerError(f"Customer {field} is required")
            continue
        value = str(data.get(field) or "").strip()
        if not value and field in CUSTOMER_REQUIRED_FIELDS:
            raise CustomerError(f"Customer {field} is required")
        patch[field] = value
    if not partial:
        patch.setdefault("address", "")
    return patch


def list_customers(store: RecordStore, search: str | None = None) -> list[Record]:
    customers = store.get_all(Entity.CUSTOMERS)
    if not search:
        return customers
    term = search.lower()
    return [
        c for c in customers
        if term in (c.get("name") or "").lower() or term in (c.get("phone") or "").lower()
    ]


def get_customer(store: RecordStore, customer_id: int) -> Record | None:
    return store.get_by_id(Entity.CUSTOMERS, customer_id)


def create_customer(store: RecordStore, data: dict) -> Record:
    return store.create(Entity.CUSTOMERS, _clean(data, partial=False))


def update_customer(store: RecordStore, customer_id: int, data: dict) -> Record:
    if get_customer(store, customer_id) is None:
        raise CustomerError("Customer not found")
    return store.update(Entity.CUSTOMERS, customer_id, _clean(data, partial=True))


def delete_customer(store: RecordStore, customer_id: int) -> bool:
    return store.remove(Entity.CUSTOMERS, customer_id)
