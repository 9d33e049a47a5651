# Overview: Service-layer operations for products (laundry services offered per outlet).

"""
Products / Services

A product is a priced laundry service offered by one outlet. `price` is in
whole currency units; `type` says whether quantity is counted by weight
(kiloan) or by piece (satuan).
"""

from __future__ import annotations

from ..constants import Entity, ProductType
from .record_store import Record, RecordStore


class ProductError(Exception):
    """Raised when product operations fail."""
    pass


def _clean(data: dict, *, partial: bool) -> dict:
    patch = {}

    if "name" in data or not partial:
        name = str(data.get("name") or "").strip()
        if not name:
            raise ProductError("Product name is required")
        patch["name"] = name

    if "price" in data or not partial:
        try:
            price = int(data.get("price"))
        except (TypeError, ValueError):
            raise ProductError("Product price must be an integer")
        if price < 0:
            raise ProductError("Product price cannot be negative")
        patch["price"] = price

    if "outletId" in data or not partial:
        try:
            patch["outletId"] = int(data.get("outletId"))
        except (TypeError, ValueError):
            raise ProductError("Product outletId must be an integer")

    if "type" in data or not partial:
        product_type = data.get("type") or ProductType.KILOAN
        if product_type not in ProductType.ALL:
            raise ProductError(f"Product type must be one of: {', '.join(ProductType.ALL)}")
        patch["type"] = product_type

    return patch


def list_products(
    store: RecordStore,
    search: str | None = None,
    outlet_id: int | None = None,
) -> list[Record]:
    products = store.get_all(Entity.PRODUCTS)
    if outlet_id is not None:
        products = [p for p in products if p.get("outletId") == outlet_id]
    if search:
        term = search.lower()
        products = [p for p in products if term in (p.get("name") or "").lower()]
    return products


def get_product(store: RecordStore, product_id: int) -> Record | None:
    return store.get_by_id(Entity.PRODUCTS, product_id)


def create_product(store: RecordStore, data: dict) -> Record:
    return store.create(Entity.PRODUCTS, _clean(data, partial=False))


def update_product(store: RecordStore, product_id: int, data: dict) -> Record:
    if get_product(store, product_id) is None:
        raise ProductError("Product not found")
    return store.update(Entity.PRODUCTS, product_id, _clean(data, partial=True))


def delete_product(store: RecordStore, product_id: int) -> bool:
    return store.remove(Entity.PRODUCTS, product_id)
