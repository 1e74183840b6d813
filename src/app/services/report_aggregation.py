"""
Report Aggregation

Pure folds over already-fetched object graphs. Nothing here touches the
database; callers load the subtree first and pass the entities in.

Monetary sums stay Decimal. Revenue only counts COMPLETED payments.
"""

from calendar import monthrange
from collections import defaultdict
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from src.domain.entities import (
    Lease,
    LeaseStatus,
    MaintenanceStatus,
    Payment,
    PaymentStatus,
    Property,
    Unit,
    UnitStatus,
)

ZERO = Decimal("0")

OPEN_MAINTENANCE_STATUSES = (
    MaintenanceStatus.pending,
    MaintenanceStatus.assigned,
    MaintenanceStatus.in_progress,
)


def completed_total(payments: Iterable[Payment]) -> Decimal:
    return sum(
        (p.amount for p in payments if p.payment_status == PaymentStatus.completed),
        ZERO,
    )


def lease_revenue(leases: Iterable[Lease]) -> Decimal:
    return sum((completed_total(lease.payments) for lease in leases), ZERO)


def bill_total(accounts: Iterable) -> Decimal:
    """Sum of the bills of property utilities or unit utility accounts"""
    return sum((bill.amount for account in accounts for bill in account.bills), ZERO)


def revenue_by_lease_status(properties: Iterable[Property]) -> Tuple[Decimal, Dict[str, Decimal]]:
    """Total revenue and its split by lease status, summed across every unit"""
    total = ZERO
    by_type: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for property in properties:
        for unit in property.units:
            for lease in unit.leases:
                amount = completed_total(lease.payments)
                total += amount
                by_type[lease.status.value] += amount
    return total, dict(by_type)


def tax_total(properties: Iterable[Property]) -> Decimal:
    """Property taxes plus the unit taxes of every unit"""
    total = ZERO
    for property in properties:
        total += sum((tax.tax_amount for tax in property.property_taxes), ZERO)
        for unit in property.units:
            total += sum((tax.tax_amount for tax in unit.unit_taxes), ZERO)
    return total


def utility_total(properties: Iterable[Property]) -> Decimal:
    """Property utility bills plus the bills of every unit utility account"""
    total = ZERO
    for property in properties:
        total += bill_total(property.utilities)
        for unit in property.units:
            total += bill_total(unit.utility_accounts)
    return total


def occupancy_rate(occupied_area: float, leasable_area: float) -> float:
    """
    Occupied unit area over leasable area, as a percentage with one decimal.

    The single occupancy definition used by every report.
    """
    if not leasable_area:
        return 0.0
    return round(occupied_area / leasable_area * 100, 1)


def occupied_area(units: Iterable[Unit]) -> float:
    return sum(unit.unit_area or 0 for unit in units if unit.status == UnitStatus.occupied)


def month_bounds(moment: datetime, months_back: int = 0) -> Tuple[datetime, datetime]:
    """[start, end) of the calendar month `months_back` months before `moment`"""
    year, month = moment.year, moment.month - months_back
    while month < 1:
        month += 12
        year -= 1
    start = datetime(year, month, 1)
    end = start + timedelta(days=monthrange(year, month)[1])
    return start, end


def revenue_between(payments: Iterable[Payment], start: datetime, end: datetime) -> Decimal:
    return completed_total(p for p in payments if start <= p.payment_date < end)


def occupancy_trend(units: List[Unit], now: datetime, months: int = 12) -> List[Dict]:
    """
    Occupied/vacant unit counts for each of the last `months` months, oldest first.

    A unit counts towards a month when it existed by the month's end; its
    current status is used since status history is not kept.
    """
    trend = []
    for months_back in reversed(range(months)):
        start, end = month_bounds(now, months_back)
        existing = [u for u in units if u.created_at is None or u.created_at < end]
        occupied = sum(1 for u in existing if u.status == UnitStatus.occupied)
        vacant = sum(1 for u in existing if u.status == UnitStatus.vacant)
        trend.append(
            {
                "month": start.strftime("%b"),
                "occupied": occupied,
                "vacant": vacant,
                "total": occupied + vacant,
            }
        )
    return trend


def pending_payments(payments: Iterable[Payment]) -> List[Payment]:
    return [p for p in payments if p.payment_status == PaymentStatus.pending]


def overdue_payments(payments: Iterable[Payment], now: datetime) -> List[Payment]:
    """PENDING payments whose payment date has already passed"""
    return [p for p in pending_payments(payments) if p.payment_date < now]


def outstanding_total(payments: Iterable[Payment]) -> Decimal:
    return sum((p.amount for p in pending_payments(payments)), ZERO)


def upcoming_renewals(leases: Iterable[Lease], now: datetime, days: int) -> List[Lease]:
    """ACTIVE leases ending within the next `days` days, soonest first"""
    horizon = now + timedelta(days=days)
    due = [
        lease
        for lease in leases
        if lease.status == LeaseStatus.active and now <= lease.end_date <= horizon
    ]
    return sorted(due, key=lambda lease: lease.end_date)


def percent_change(current: Decimal, previous: Decimal) -> float:
    if not previous:
        return 100.0 if current else 0.0
    return round(float((current - previous) / previous * 100), 1)
