# Overview: Default records written once when a collection key is absent.

from __future__ import annotations

from flask import current_app

from ..constants import Entity, ProductType
from .record_store import RecordStore


DEFAULT_USERS = [
    {"id": 1, "name": "Admin User", "username": "admin", "password": "admin123", "role": "admin"},
    {"id": 2, "name": "Kasir User", "username": "kasir", "password": "kasir123", "role": "kasir"},
    {"id": 3, "name": "Owner User", "username": "owner", "password": "owner123", "role": "owner"},
]

DEFAULT_CUSTOMERS = [
    {"id": 1, "name": "John Doe", "address": "Jl. Merdeka No. 123", "phone": "08123456789"},
    {"id": 2, "name": "Jane Smith", "address": "Jl. Pahlawan No. 456", "phone": "08987654321"},
]

DEFAULT_OUTLETS = [
    {"id": 1, "name": "Laundry Central", "address": "Jl. Sudirman No. 789", "phone": "02112345678"},
    {"id": 2, "name": "Laundry Express", "address": "Jl. Gatot Subroto No. 101", "phone": "02187654321"},
]

DEFAULT_PRODUCTS = [
    {"id": 1, "name": "Cuci Kering", "price": 7000, "outletId": 1, "type": ProductType.KILOAN},
    {"id": 2, "name": "Cuci Setrika", "price": 10000, "outletId": 1, "type": ProductType.KILOAN},
    {"id": 3, "name": "Setrika Saja", "price": 5000, "outletId": 1, "type": ProductType.SATUAN},
    {"id": 4, "name": "Cuci Express", "price": 15000, "outletId": 2, "type": ProductType.KILOAN},
]

DEFAULT_DATA = {
    Entity.USERS: DEFAULT_USERS,
    Entity.CUSTOMERS: DEFAULT_CUSTOMERS,
    Entity.OUTLETS: DEFAULT_OUTLETS,
    Entity.PRODUCTS: DEFAULT_PRODUCTS,
}


def initialize_data(store: RecordStore) -> list[str]:
    """
    Seed default collections whose keys are absent.

    Existing collections (even empty ones) are left alone. Returns the
    entity names that were written.
    """
    seeded = []
    for entity, records in DEFAULT_DATA.items():
        if store.initialize(entity, [dict(r) for r in records]):
            seeded.append(entity)
    if seeded:
        current_app.logger.info("Seeded default records: %s", ", ".join(seeded))
    return seeded
