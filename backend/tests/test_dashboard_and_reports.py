"""
Dashboard aggregation and revenue report tests.
"""

from datetime import date

import pytest

from laundry.constants import Entity, PaymentStatus, ProcessStatus
from laundry.services import dashboard_service, reporting_service
from laundry.services.reporting_service import ReportError


@pytest.fixture
def shop(seeded_store):
    """Three laundry items, one derived and two legacy transactions."""
    for code, service_id, outlet_id, process, payment in [
        ("LD-001-2024", 1, 1, ProcessStatus.SELESAI, PaymentStatus.SUDAH_BAYAR),
        ("LD-002-2024", 1, 1, ProcessStatus.PROSES, PaymentStatus.BELUM_BAYAR),
        ("LD-003-2024", 4, 2, ProcessStatus.PROSES, PaymentStatus.SUDAH_BAYAR),
    ]:
        seeded_store.create(Entity.LAUNDRY_ITEMS, {
            "code": code, "customerName": "Rina", "customerPhone": "0812",
            "serviceId": service_id, "quantity": 2, "outletId": outlet_id,
            "processStatus": process, "paymentStatus": payment,
        })
    seeded_store.create(Entity.TRANSACTIONS, {
        "laundryCode": "LD-001-2024", "serviceId": 1, "unitPrice": 7000,
        "quantity": 2, "amount": 14000, "date": "2024-03-04",
    })
    seeded_store.create(Entity.TRANSACTIONS, {
        "customerId": 1, "outletId": 2, "items": [], "total": 30000,
        "status": "completed", "date": "2024-03-20",
    })
    seeded_store.create(Entity.TRANSACTIONS, {
        "customerId": 2, "outletId": 1, "items": [], "total": 8000,
        "status": "cancelled", "date": "2023-11-02",
    })
    return seeded_store


class TestDashboard:
    def test_stats(self, shop):
        stats = dashboard_service.dashboard_stats(shop, today=date(2024, 3, 25))["stats"]
        assert stats == {
            "laundryItems": 3,
            "outlets": 2,
            "products": 4,
            "transactions": 3,
            "revenue": 52000,
            "pendingLaundry": 2,
            "unpaidLaundry": 1,
        }

    def test_revenue_by_month_only_counts_current_year(self, shop):
        charts = dashboard_service.dashboard_stats(shop, today=date(2024, 3, 25))["charts"]
        revenue = charts["revenueByMonth"]
        assert len(revenue) == 12
        assert revenue[2] == {"name": "Mar", "revenue": 44000}
        assert sum(month["revenue"] for month in revenue) == 44000

    def test_status_and_service_charts(self, shop):
        charts = dashboard_service.dashboard_stats(shop, today=date(2024, 3, 25))["charts"]
        assert charts["laundryByStatus"] == [
            {"name": "Proses", "value": 2},
            {"name": "Selesai", "value": 1},
            {"name": "Batal", "value": 0},
        ]
        assert charts["serviceDistribution"] == [
            {"name": "Cuci Kering", "value": 2},
            {"name": "Cuci Express", "value": 1},
        ]

    def test_service_distribution_keeps_top_five(self):
        items = [{"serviceId": n} for n in range(1, 8) for _ in range(n)]
        rows = dashboard_service.service_distribution(items, [])
        assert [row["value"] for row in rows] == [7, 6, 5, 4, 3]
        assert rows[0]["name"] == "Service 7"


class TestSummaryReport:
    def test_defaults_to_current_month(self, shop):
        report = reporting_service.summary_report(shop, today=date(2024, 3, 25))
        assert report["start"] == "2024-03-01"
        assert report["end"] == "2024-03-31"
        summary = report["summary"]
        assert summary["totalTransactions"] == 2
        assert summary["totalRevenue"] == 44000
        assert summary["averageTransaction"] == 22000
        assert summary["completedTransactions"] == 1
        assert summary["cancelledTransactions"] == 0

    def test_by_outlet(self, shop):
        report = reporting_service.summary_report(shop, today=date(2024, 3, 25))
        assert report["by_outlet"] == [
            {"outletId": 2, "outletName": "Laundry Express", "transactions": 1, "revenue": 30000},
            {"outletId": 1, "outletName": "Laundry Central", "transactions": 1, "revenue": 14000},
        ]

    def test_outlet_filter_resolves_through_laundry_item(self, shop):
        report = reporting_service.summary_report(
            shop, start="2024-01-01", end="2024-12-31", outlet_id=1
        )
        assert [row.get("laundryCode") for row in report["rows"]] == ["LD-001-2024"]

    def test_status_filter(self, shop):
        report = reporting_service.summary_report(
            shop, start="2023-01-01", end="2024-12-31", status="cancelled"
        )
        assert report["summary"]["totalTransactions"] == 1
        assert report["summary"]["totalRevenue"] == 8000
        assert report["rows"][0]["customerName"] == "Jane Smith"

    def test_empty_range(self, shop):
        report = reporting_service.summary_report(shop, start="2022-01-01", end="2022-01-31")
        assert report["summary"]["totalTransactions"] == 0
        assert report["summary"]["averageTransaction"] == 0
        assert report["by_outlet"] == []

    @pytest.mark.parametrize("kwargs", [
        {"start": "2024-04-01", "end": "2024-03-01"},
        {"start": "not-a-date"},
        {"status": "refunded"},
    ])
    def test_invalid_parameters(self, shop, kwargs):
        with pytest.raises(ReportError):
            reporting_service.summary_report(shop, today=date(2024, 3, 25), **kwargs)


class TestRoutes:
    def test_dashboard_open_to_every_role(self, client, admin_headers, kasir_headers, owner_headers):
        for headers in (admin_headers, kasir_headers, owner_headers):
            response = client.get('/api/dashboard', headers=headers)
            assert response.status_code == 200
            assert "stats" in response.json

    def test_report_summary(self, client, shop, owner_headers):
        response = client.get(
            '/api/reports/summary?start=2024-03-01&end=2024-03-31&outlet_id=2',
            headers=owner_headers,
        )
        assert response.status_code == 200
        assert response.json["summary"]["totalRevenue"] == 30000

    def test_report_bad_range(self, client, owner_headers):
        response = client.get('/api/reports/summary?start=2024-04-01&end=2024-03-01', headers=owner_headers)
        assert response.status_code == 400
        assert "error" in response.json
