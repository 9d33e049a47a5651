# Overview: Service-layer operations for revenue reports over the transactions collection.

from __future__ import annotations

import calendar
from datetime import date

from ..constants import Entity, LegacyTransactionStatus
from ..time_utils import parse_iso_date, today as current_day
from .record_store import RecordStore
from .transaction_service import enrich_transaction, transaction_date


class ReportError(Exception):
    """Raised when report generation fails."""
    pass


def current_month_range(today: date | None = None) -> tuple[date, date]:
    today = today or current_day()
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


def _parse_range(start: str | None, end: str | None, today: date | None) -> tuple[date, date]:
    try:
        start_date = parse_iso_date(start)
        end_date = parse_iso_date(end)
    except ValueError:
        raise ReportError("start and end must be ISO dates (YYYY-MM-DD)")

    default_start, default_end = current_month_range(today)
    start_date = start_date or default_start
    end_date = end_date or default_end
    if start_date > end_date:
        raise ReportError("start must not be after end")
    return start_date, end_date


def summary_report(
    store: RecordStore,
    *,
    start: str | None = None,
    end: str | None = None,
    outlet_id: int | None = None,
    status: str | None = None,
    today: date | None = None,
) -> dict:
    """
    Revenue summary for a date range (inclusive; defaults to the current month).

    Outlet is resolved through the laundry item for derived transactions and
    read directly from legacy sale transactions.
    """
    start_date, end_date = _parse_range(start, end, today)
    if status and status not in LegacyTransactionStatus.ALL:
        raise ReportError(f"status must be one of: {', '.join(LegacyTransactionStatus.ALL)}")

    laundry_items = store.get_all(Entity.LAUNDRY_ITEMS)
    products = store.get_all(Entity.PRODUCTS)
    outlets = store.get_all(Entity.OUTLETS)
    customers = store.get_all(Entity.CUSTOMERS)

    rows = []
    for transaction in store.get_all(Entity.TRANSACTIONS):
        tx_date = transaction_date(transaction)
        if tx_date is None or not (start_date <= tx_date <= end_date):
            continue
        row = enrich_transaction(
            transaction,
            laundry_items=laundry_items,
            products=products,
            outlets=outlets,
            customers=customers,
        )
        if outlet_id is not None and row["outletId"] != outlet_id:
            continue
        if status and row.get("status") != status:
            continue
        rows.append(row)

    total_revenue = sum(row["amount"] for row in rows)

    by_outlet: dict = {}
    for row in rows:
        bucket = by_outlet.setdefault(row["outletId"], {
            "outletId": row["outletId"],
            "outletName": row["outletName"],
            "transactions": 0,
            "revenue": 0,
        })
        bucket["transactions"] += 1
        bucket["revenue"] += row["amount"]

    return {
        "start": start_date.isoformat(),
        "end": end_date.isoformat(),
        "outlet_id": outlet_id,
        "status": status or None,
        "summary": {
            "totalTransactions": len(rows),
            "totalRevenue": total_revenue,
            "averageTransaction": total_revenue / len(rows) if rows else 0,
            "completedTransactions": sum(1 for r in rows if r.get("status") == LegacyTransactionStatus.COMPLETED),
            "processingTransactions": sum(1 for r in rows if r.get("status") == LegacyTransactionStatus.PROCESSING),
            "cancelledTransactions": sum(1 for r in rows if r.get("status") == LegacyTransactionStatus.CANCELLED),
        },
        "by_outlet": sorted(by_outlet.values(), key=lambda b: b["revenue"], reverse=True),
        "rows": rows,
    }
