# Overview: Service-layer aggregation for the console dashboard.

from __future__ import annotations

from collections import Counter
from datetime import date

from ..constants import Entity, PaymentStatus, ProcessStatus
from ..time_utils import today as current_day
from .record_store import RecordStore
from .transaction_service import transaction_amount, transaction_date

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
TOP_SERVICES = 5


def revenue_by_month(transactions: list[dict], year: int) -> list[dict]:
    monthly = [{"name": month, "revenue": 0} for month in MONTHS]
    for transaction in transactions:
        tx_date = transaction_date(transaction)
        if tx_date is not None and tx_date.year == year:
            monthly[tx_date.month - 1]["revenue"] += transaction_amount(transaction)
    return monthly


def service_distribution(laundry_items: list[dict], products: list[dict]) -> list[dict]:
    counts = Counter(item.get("serviceId") for item in laundry_items)
    names = {p.get("id"): p.get("name") for p in products}
    rows = [
        {"name": names.get(service_id) or f"Service {service_id}", "value": count}
        for service_id, count in counts.items()
    ]
    rows.sort(key=lambda row: row["value"], reverse=True)
    return rows[:TOP_SERVICES]


def dashboard_stats(store: RecordStore, *, today: date | None = None) -> dict:
    laundry_items = store.get_all(Entity.LAUNDRY_ITEMS)
    outlets = store.get_all(Entity.OUTLETS)
    products = store.get_all(Entity.PRODUCTS)
    transactions = store.get_all(Entity.TRANSACTIONS)
    year = (today or current_day()).year

    return {
        "stats": {
            "laundryItems": len(laundry_items),
            "outlets": len(outlets),
            "products": len(products),
            "transactions": len(transactions),
            "revenue": sum(transaction_amount(t) for t in transactions),
            "pendingLaundry": sum(1 for i in laundry_items if i.get("processStatus") == ProcessStatus.PROSES),
            "unpaidLaundry": sum(1 for i in laundry_items if i.get("paymentStatus") == PaymentStatus.BELUM_BAYAR),
        },
        "charts": {
            "revenueByMonth": revenue_by_month(transactions, year),
            "laundryByStatus": [
                {"name": status.capitalize(), "value": sum(1 for i in laundry_items if i.get("processStatus") == status)}
                for status in ProcessStatus.ALL
            ],
            "serviceDistribution": service_distribution(laundry_items, products),
        },
    }
