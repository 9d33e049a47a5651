# Overview: Service-layer operations for laundry items; intake, edits, status changes and tracking.

"""
Laundry Items

A laundry item is a customer's intake order for one service, tracked by a
human-readable code such as "LD-003-2024". Codes are assigned once at
creation and never change.

Status lives on two independent axes:

    processStatus:  proses -> selesai | batal
    paymentStatus:  belum bayar -> sudah bayar | refund   (sudah bayar is final)

Reaching (selesai, sudah bayar) through update_laundry_status() derives the
item's single transaction record.
"""

from __future__ import annotations

import math
from datetime import date

from flask import current_app

from ..constants import Entity, PaymentStatus, ProcessStatus
from ..time_utils import today as current_day
from .record_store import Record, RecordStore
from .transaction_service import derive_transaction


LAUNDRY_EDITABLE_FIELDS = {
    "customerName",
    "customerPhone",
    "serviceId",
    "quantity",
    "outletId",
    "notes",
    "createdAt",
}

LAUNDRY_REQUIRED_FIELDS = ("customerName", "customerPhone", "serviceId", "quantity", "outletId")

PAYMENT_LOCKED_MESSAGE = "Status pembayaran tidak dapat diubah setelah dibayar!"


class LaundryItemError(Exception):
    """Raised when laundry item operations fail."""
    pass


class LaundryItemNotFoundError(LaundryItemError):
    pass


class PaymentStatusLockedError(LaundryItemError):
    """Raised when a paid item's payment status would move away from 'sudah bayar'."""

    def __init__(self, payment_status: str = PaymentStatus.SUDAH_BAYAR):
        super().__init__(PAYMENT_LOCKED_MESSAGE)
        self.payment_status = payment_status


def _to_int(value, field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise LaundryItemError(f"{field} must be an integer")


def _to_quantity(value) -> int | float:
    try:
        quantity = float(value)
    except (TypeError, ValueError):
        raise LaundryItemError("quantity must be a number")
    if not math.isfinite(quantity) or quantity <= 0:
        raise LaundryItemError("quantity must be a finite number greater than zero")
    return int(quantity) if quantity.is_integer() else quantity


def _normalize(patch: dict) -> dict:
    clean = {k: v for k, v in patch.items() if k in LAUNDRY_EDITABLE_FIELDS}
    for field in ("serviceId", "outletId"):
        if field in clean:
            clean[field] = _to_int(clean[field], field)
    if "quantity" in clean:
        clean["quantity"] = _to_quantity(clean["quantity"])
    for field in ("customerName", "customerPhone"):
        if field in clean:
            clean[field] = str(clean[field] or "").strip()
            if not clean[field]:
                raise LaundryItemError(f"{field} is required")
    return clean


def generate_laundry_code(
    store: RecordStore,
    outlet_id: int | None = None,
    *,
    today: date | None = None,
) -> str:
    """
    Next human-readable code for the current year.

    The sequence is one more than the number of existing codes that contain
    the year; outlet_id does not take part. If that code is already in use
    (after deletions) the sequence moves forward until it is free.
    """
    year = str((today or current_day()).year)
    prefix = current_app.config.get("LAUNDRY_CODE_PREFIX", "LD")

    codes = {item.get("code") for item in store.get_all(Entity.LAUNDRY_ITEMS) if item.get("code")}
    sequence = sum(1 for code in codes if year in code) + 1

    code = f"{prefix}-{sequence:03d}-{year}"
    while code in codes:
        sequence += 1
        code = f"{prefix}-{sequence:03d}-{year}"
    return code


def list_laundry_items(store: RecordStore, search: str | None = None) -> list[Record]:
    items = store.get_all(Entity.LAUNDRY_ITEMS)
    if not search:
        return items
    term = search.lower()
    return [
        item for item in items
        if term in (item.get("code") or "").lower()
        or term in (item.get("customerName") or "").lower()
        or term in (item.get("customerPhone") or "").lower()
    ]


def get_laundry_item(store: RecordStore, item_id: int) -> Record | None:
    return store.get_by_id(Entity.LAUNDRY_ITEMS, item_id)


def create_laundry_item(store: RecordStore, data: dict, *, today: date | None = None) -> Record:
    """
    Register a new intake order and assign its code.

    New items always start as (proses, belum bayar); any id, code or status
    fields in data are ignored.
    """
    missing = [field for field in LAUNDRY_REQUIRED_FIELDS if data.get(field) in (None, "")]
    if missing:
        raise LaundryItemError(f"Missing required fields: {', '.join(missing)}")

    fields = _normalize(data)
    day = today or current_day()
    record = {
        "customerName": fields["customerName"],
        "customerPhone": fields["customerPhone"],
        "serviceId": fields["serviceId"],
        "quantity": fields["quantity"],
        "outletId": fields["outletId"],
        "processStatus": ProcessStatus.PROSES,
        "paymentStatus": PaymentStatus.BELUM_BAYAR,
        "notes": fields.get("notes") or "",
        "createdAt": fields.get("createdAt") or day.isoformat(),
        "code": generate_laundry_code(store, fields["outletId"], today=day),
    }
    return store.create(Entity.LAUNDRY_ITEMS, record)


def update_laundry_item(store: RecordStore, item_id: int, data: dict) -> Record:
    """Edit intake details. Code, id and status fields are not editable here."""
    if store.get_by_id(Entity.LAUNDRY_ITEMS, item_id) is None:
        raise LaundryItemNotFoundError("Laundry item not found")
    return store.update(Entity.LAUNDRY_ITEMS, item_id, _normalize(data))


def update_laundry_status(
    store: RecordStore,
    item_id: int,
    *,
    process_status: str | None = None,
    payment_status: str | None = None,
) -> tuple[Record, Record | None]:
    """
    Commit a status edit and apply the derived-transaction rule.

    Returns (updated item, transaction created by this call or None).

    Raises PaymentStatusLockedError without writing anything when the stored
    payment status is 'sudah bayar' and a different value is requested.
    """
    current = store.get_by_id(Entity.LAUNDRY_ITEMS, item_id)
    if current is None:
        raise LaundryItemNotFoundError("Laundry item not found")

    new_process = process_status if process_status is not None else current.get("processStatus")
    new_payment = payment_status if payment_status is not None else current.get("paymentStatus")

    if new_process not in ProcessStatus.ALL:
        raise LaundryItemError(f"processStatus must be one of: {', '.join(ProcessStatus.ALL)}")
    if new_payment not in PaymentStatus.ALL:
        raise LaundryItemError(f"paymentStatus must be one of: {', '.join(PaymentStatus.ALL)}")

    if current.get("paymentStatus") == PaymentStatus.SUDAH_BAYAR and new_payment != PaymentStatus.SUDAH_BAYAR:
        current_app.logger.warning(
            "Blocked payment status change on %s: %r -> %r",
            current.get("code"),
            current.get("paymentStatus"),
            new_payment,
        )
        raise PaymentStatusLockedError(PaymentStatus.SUDAH_BAYAR)

    updated = store.update(Entity.LAUNDRY_ITEMS, item_id, {
        "processStatus": new_process,
        "paymentStatus": new_payment,
    })
    transaction = derive_transaction(store, updated)
    return updated, transaction


def delete_laundry_item(store: RecordStore, item_id: int) -> bool:
    return store.remove(Entity.LAUNDRY_ITEMS, item_id)


def track_laundry_item(store: RecordStore, code: str) -> dict | None:
    """
    Public lookup by laundry code.

    Missing product or outlet references fall back to "Unknown" and a zero price.
    """
    code = (code or "").strip()
    if not code:
        raise LaundryItemError("Please enter a laundry code")

    item = store.get_by_code(Entity.LAUNDRY_ITEMS, code)
    if item is None:
        return None

    product = store.get_by_id(Entity.PRODUCTS, item.get("serviceId"))
    outlet = store.get_by_id(Entity.OUTLETS, item.get("outletId"))
    unit_price = product.get("price", 0) if product else 0

    return {
        "item": item,
        "service": {
            "name": product.get("name") if product else "Unknown",
            "type": product.get("type") if product else "Unknown",
            "price": unit_price,
        },
        "outletName": outlet.get("name") if outlet else "Unknown",
        "totalPrice": unit_price * item.get("quantity", 0),
    }
