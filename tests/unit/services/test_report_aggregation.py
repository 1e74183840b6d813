from datetime import datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace

from src.app.services import report_aggregation as agg
from src.domain.entities import LeaseStatus, PaymentStatus, UnitStatus

NOW = datetime(2024, 6, 15, 12, 0)


def payment(amount, status=PaymentStatus.completed, when=NOW):
    return SimpleNamespace(amount=Decimal(amount), payment_status=status, payment_date=when)


def lease(status=LeaseStatus.active, end_date=NOW + timedelta(days=365), payments=()):
    return SimpleNamespace(status=status, end_date=end_date, payments=list(payments))


def unit(area, status, created_at=None):
    return SimpleNamespace(unit_area=area, status=status, created_at=created_at)


def test_occupancy_rate_is_area_based():
    units = [
        unit(40, UnitStatus.occupied),
        unit(35, UnitStatus.occupied),
        unit(25, UnitStatus.vacant),
    ]

    assert agg.occupied_area(units) == 75
    assert agg.occupancy_rate(agg.occupied_area(units), 200) == 37.5


def test_occupancy_rate_without_leasable_area():
    assert agg.occupancy_rate(50, 0) == 0.0


def test_occupancy_rate_rounds_to_one_decimal():
    assert agg.occupancy_rate(1, 3) == 33.3


def test_completed_total_ignores_unsettled_payments():
    payments = [
        payment("1000"),
        payment("250", PaymentStatus.pending),
        payment("75", PaymentStatus.failed),
        payment("500"),
    ]

    assert agg.completed_total(payments) == Decimal("1500")


def test_revenue_by_lease_status():
    properties = [
        SimpleNamespace(
            units=[
                SimpleNamespace(
                    leases=[
                        lease(LeaseStatus.active, payments=[payment("1000")]),
                        lease(LeaseStatus.expired, payments=[payment("300")]),
                    ]
                )
            ]
        )
    ]

    total, by_type = agg.revenue_by_lease_status(properties)

    assert total == Decimal("1300")
    assert by_type == {"active": Decimal("1000"), "expired": Decimal("300")}


def test_month_bounds_wraps_year():
    start, end = agg.month_bounds(datetime(2024, 1, 10), months_back=1)

    assert start == datetime(2023, 12, 1)
    assert end == datetime(2024, 1, 1)


def test_overdue_and_outstanding_payments():
    payments = [
        payment("100", PaymentStatus.pending, NOW - timedelta(days=3)),
        payment("200", PaymentStatus.pending, NOW + timedelta(days=3)),
        payment("400", PaymentStatus.completed, NOW - timedelta(days=3)),
    ]

    assert len(agg.overdue_payments(payments, NOW)) == 1
    assert agg.outstanding_total(payments) == Decimal("300")


def test_upcoming_renewals_only_active_leases_in_window():
    soon = lease(end_date=NOW + timedelta(days=20))
    sooner = lease(end_date=NOW + timedelta(days=5))
    later = lease(end_date=NOW + timedelta(days=45))
    ended = lease(end_date=NOW - timedelta(days=1))
    pending = lease(LeaseStatus.pending, end_date=NOW + timedelta(days=10))

    renewals = agg.upcoming_renewals([soon, later, ended, pending, sooner], NOW, 30)

    assert renewals == [sooner, soon]


def test_percent_change():
    assert agg.percent_change(Decimal("150"), Decimal("100")) == 50.0
    assert agg.percent_change(Decimal("50"), Decimal("200")) == -75.0
    assert agg.percent_change(Decimal("10"), Decimal("0")) == 100.0
    assert agg.percent_change(Decimal("0"), Decimal("0")) == 0.0


def test_occupancy_trend_covers_twelve_months():
    units = [
        unit(10, UnitStatus.occupied, created_at=datetime(2023, 1, 1)),
        unit(10, UnitStatus.vacant, created_at=datetime(2024, 5, 20)),
    ]

    trend = agg.occupancy_trend(units, NOW)

    assert len(trend) == 12
    assert trend[0]["month"] == "Jul"
    assert trend[-1] == {"month": "Jun", "occupied": 1, "vacant": 1, "total": 2}
    # The vacant unit did not exist before May
    assert trend[-3] == {"month": "Apr", "occupied": 1, "vacant": 0, "total": 1}
