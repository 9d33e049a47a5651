# Overview: Service-layer operations for transactions; derivation rule and listing.

"""
Transactions

Two shapes of transaction record live in the same collection:

- derived: {laundryCode, serviceId, unitPrice, quantity, amount, date}, written
  by derive_transaction() when a laundry item is both finished and paid.
- legacy sale: {customerId, outletId, items[], total, status, date}, a
  multi-item sale to a registered customer.

Transactions are append-only. Nothing in this module updates or deletes one.
"""

from __future__ import annotations

import math
from datetime import date

from flask import current_app

from ..constants import Entity, PaymentStatus, ProcessStatus
from ..time_utils import parse_iso_date, today as current_day
from .record_store import Record, RecordStore


PERIODS = ("all", "daily", "monthly", "yearly", "custom")
PAGE_SIZES = ("all", "10", "50", "100")


class TransactionError(Exception):
    """Raised when a transaction query is malformed."""
    pass


def transaction_amount(transaction: Record) -> int | float:
    """Revenue carried by a transaction of either shape."""
    amount = transaction.get("amount")
    if amount is None:
        amount = transaction.get("total")
    return amount or 0


def transaction_date(transaction: Record) -> date | None:
    try:
        return parse_iso_date(transaction.get("date"))
    except ValueError:
        return None


def get_transaction_by_laundry_code(store: RecordStore, code: str | None) -> Record | None:
    if not code:
        return None
    for transaction in store.get_all(Entity.TRANSACTIONS):
        if transaction.get("laundryCode") == code:
            return transaction
    return None


def derive_transaction(store: RecordStore, item: Record, *, on: date | None = None) -> Record | None:
    """
    Materialize the billing record for a finished, paid laundry item.

    Creates at most one transaction per laundry code. Returns the new record,
    or None when the guard is false or the referenced product no longer exists.
    """
    if item.get("processStatus") != ProcessStatus.SELESAI:
        return None
    if item.get("paymentStatus") != PaymentStatus.SUDAH_BAYAR:
        return None
    if get_transaction_by_laundry_code(store, item.get("code")):
        return None

    product = store.get_by_id(Entity.PRODUCTS, item.get("serviceId"))
    if product is None:
        current_app.logger.warning(
            "Skipping transaction for %s: service %s not found",
            item.get("code"),
            item.get("serviceId"),
        )
        return None

    unit_price = product.get("price", 0)
    quantity = item.get("quantity", 0)
    transaction = store.create(Entity.TRANSACTIONS, {
        "laundryCode": item.get("code"),
        "serviceId": item.get("serviceId"),
        "unitPrice": unit_price,
        "quantity": quantity,
        "amount": unit_price * quantity,
        "date": (on or current_day()).isoformat(),
    })
    current_app.logger.info(
        "Created transaction %s for %s (amount=%s)",
        transaction["id"],
        transaction["laundryCode"],
        transaction["amount"],
    )
    return transaction


def _name_of(records: list[Record], record_id, default: str = "Unknown") -> str:
    for record in records:
        if record.get("id") == record_id:
            return record.get("name", default)
    return default


def enrich_transaction(
    transaction: Record,
    *,
    laundry_items: list[Record],
    products: list[Record],
    outlets: list[Record],
    customers: list[Record],
) -> dict:
    """Resolve display names for a transaction by linear scan."""
    item = None
    code = transaction.get("laundryCode")
    if code:
        item = next((i for i in laundry_items if i.get("code") == code), None)

    if item is not None:
        customer_name = item.get("customerName") or "Unknown"
        outlet_id = item.get("outletId")
    else:
        customer_name = _name_of(customers, transaction.get("customerId"))
        outlet_id = transaction.get("outletId")

    return {
        **transaction,
        "amount": transaction_amount(transaction),
        "customerName": customer_name,
        "outletId": outlet_id,
        "outletName": _name_of(outlets, outlet_id),
        "productName": _name_of(products, transaction.get("serviceId")),
    }


def in_period(
    tx_date: date | None,
    period: str,
    *,
    start: date | None = None,
    end: date | None = None,
    today: date | None = None,
) -> bool:
    if period == "all":
        return True
    if period == "custom" and (start is None or end is None):
        return True
    if tx_date is None:
        return False

    today = today or current_day()
    if period == "daily":
        return tx_date == today
    if period == "monthly":
        return tx_date >= today.replace(day=1)
    if period == "yearly":
        return tx_date >= today.replace(month=1, day=1)
    if period == "custom":
        return start <= tx_date <= end
    raise TransactionError(f"period must be one of: {', '.join(PERIODS)}")


def list_transactions(
    store: RecordStore,
    *,
    search: str | None = None,
    period: str = "all",
    start: str | None = None,
    end: str | None = None,
    page: int | None = None,
    page_size: str = "all",
    today: date | None = None,
) -> dict:
    """
    Enriched, filtered, paginated transaction listing.

    Search matches laundry code, product name or customer name
    (case-insensitive). Custom periods are inclusive on both ends.
    """
    if period not in PERIODS:
        raise TransactionError(f"period must be one of: {', '.join(PERIODS)}")
    page_size = str(page_size or "all")
    if page_size not in PAGE_SIZES:
        raise TransactionError(f"page_size must be one of: {', '.join(PAGE_SIZES)}")
    try:
        start_date = parse_iso_date(start)
        end_date = parse_iso_date(end)
    except ValueError:
        raise TransactionError("start and end must be ISO dates (YYYY-MM-DD)")

    laundry_items = store.get_all(Entity.LAUNDRY_ITEMS)
    products = store.get_all(Entity.PRODUCTS)
    outlets = store.get_all(Entity.OUTLETS)
    customers = store.get_all(Entity.CUSTOMERS)

    rows = [
        enrich_transaction(
            t,
            laundry_items=laundry_items,
            products=products,
            outlets=outlets,
            customers=customers,
        )
        for t in store.get_all(Entity.TRANSACTIONS)
    ]

    if search:
        term = search.lower()
        rows = [
            row for row in rows
            if term in (row.get("laundryCode") or "").lower()
            or term in row["productName"].lower()
            or term in row["customerName"].lower()
        ]

    rows = [
        row for row in rows
        if in_period(transaction_date(row), period, start=start_date, end=end_date, today=today)
    ]

    total = len(rows)
    total_amount = sum(row["amount"] for row in rows)

    if page_size == "all":
        page = 1
        total_pages = 1
        page_rows = rows
    else:
        size = int(page_size)
        total_pages = max(math.ceil(total / size), 1)
        page = max(page or 1, 1)
        page_rows = rows[(page - 1) * size:page * size]

    return {
        "items": page_rows,
        "count": total,
        "total_amount": total_amount,
        "page": page,
        "page_size": page_size,
        "total_pages": total_pages,
    }
