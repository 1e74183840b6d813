from datetime import datetime, timedelta
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from src.app.use_cases.reports import GetDashboardOverviewUseCase, GetFinancialReportUseCase
from src.domain.base import utc_now
from src.domain.entities import (
    LeaseStatus,
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceStatus,
    PaymentStatus,
    UnitStatus,
)


def payment(amount, status=PaymentStatus.completed, when=None):
    return SimpleNamespace(
        amount=Decimal(amount), payment_status=status, payment_date=when or utc_now()
    )


def bill(amount):
    return SimpleNamespace(amount=Decimal(amount))


@pytest.fixture
def report_uow(mock_uow):
    mock_uow.reports = MagicMock()
    mock_uow.reports.property_graph = AsyncMock(return_value=[])
    mock_uow.reports.maintenance_requests = AsyncMock(return_value=[])
    mock_uow.properties = MagicMock()
    mock_uow.properties.count = AsyncMock(return_value=0)
    mock_uow.units = MagicMock()
    mock_uow.units.count = AsyncMock(return_value=0)
    mock_uow.tenants = MagicMock()
    mock_uow.tenants.count = AsyncMock(return_value=0)
    return mock_uow


def portfolio():
    """One property: 1500 collected, 150 in taxes, 50 in utility bills"""
    active_lease = SimpleNamespace(
        id=uuid4(),
        unit_id=None,
        status=LeaseStatus.active,
        end_date=utc_now() + timedelta(days=365),
        payments=[
            payment("1000"),
            payment("500"),
            payment("300", PaymentStatus.pending, utc_now() + timedelta(days=5)),
        ],
    )
    unit = SimpleNamespace(
        id=uuid4(),
        unit_number="101",
        unit_area=60,
        status=UnitStatus.occupied,
        created_at=datetime(2020, 1, 1),
        leases=[active_lease],
        unit_taxes=[SimpleNamespace(tax_amount=Decimal("50"))],
        utility_accounts=[SimpleNamespace(bills=[bill("20")])],
    )
    active_lease.unit_id = unit.id
    return SimpleNamespace(
        id=uuid4(),
        property_name="Harbor Point",
        leasable_area=120,
        units=[unit],
        property_taxes=[SimpleNamespace(tax_amount=Decimal("100"))],
        utilities=[SimpleNamespace(bills=[bill("30")])],
    )


@pytest.mark.asyncio
async def test_financial_report(report_uow, ctx):
    """Net income is completed revenue minus taxes and utility bills"""
    # Arrange
    report_uow.reports.property_graph.return_value = [portfolio()]

    # Act
    result = await GetFinancialReportUseCase(report_uow).execute(ctx)

    # Assert
    assert result.is_ok()
    report = result.value
    assert report.revenue.total == Decimal("1500")
    assert report.revenue.by_type == {"active": Decimal("1500")}
    assert report.expenses.taxes == Decimal("150")
    assert report.expenses.utilities == Decimal("50")
    assert report.net_income == Decimal("1300")


@pytest.mark.asyncio
async def test_financial_report_empty_portfolio(report_uow, ctx):
    # Act
    result = await GetFinancialReportUseCase(report_uow).execute(ctx)

    # Assert
    assert result.is_ok()
    assert result.value.revenue.total == Decimal("0")
    assert result.value.revenue.by_type == {}
    assert result.value.net_income == Decimal("0")


@pytest.mark.asyncio
async def test_financial_report_unauthorized(report_uow, anonymous_ctx):
    # Act
    result = await GetFinancialReportUseCase(report_uow).execute(anonymous_ctx)

    # Assert
    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"
    report_uow.reports.property_graph.assert_not_called()


@pytest.mark.asyncio
async def test_financial_report_database_failure(report_uow, ctx):
    # Arrange
    report_uow.reports.property_graph.side_effect = OperationalError(
        "SELECT", {}, Exception("db down")
    )

    # Act
    result = await GetFinancialReportUseCase(report_uow).execute(ctx)

    # Assert
    assert result.is_err()
    assert result.error.code == "REPORT_FETCH_ERROR"
    assert result.error.message == "Failed to generate financial report"


@pytest.mark.asyncio
async def test_dashboard_overview(report_uow, ctx):
    """Headline counts, area occupancy, renewals and maintenance backlog"""
    # Arrange
    property = portfolio()
    unit = property.units[0]
    renewing = SimpleNamespace(
        id=uuid4(),
        unit_id=unit.id,
        status=LeaseStatus.active,
        end_date=utc_now() + timedelta(days=10),
        rent_amount=Decimal("800"),
        tenant=SimpleNamespace(full_name="Ana Reyes"),
        payments=[payment("250", PaymentStatus.pending, utc_now() - timedelta(days=2))],
    )
    unit.leases.append(renewing)
    report_uow.reports.property_graph.return_value = [property]
    report_uow.properties.count.return_value = 1
    report_uow.units.count.return_value = 1
    report_uow.tenants.count.return_value = 1

    report_uow.reports.maintenance_requests.return_value = [
        SimpleNamespace(
            id=uuid4(),
            description="Leaking pipe",
            category=MaintenanceCategory.plumbing,
            priority=MaintenancePriority.high,
            status=status,
            unit=SimpleNamespace(
                unit_number="101", property=SimpleNamespace(property_name="Harbor Point")
            ),
            tenant=None,
            created_at=utc_now(),
        )
        for status in (MaintenanceStatus.pending, MaintenanceStatus.completed)
    ]

    # Act
    result = await GetDashboardOverviewUseCase(report_uow, renewal_days=30).execute(ctx)

    # Assert
    assert result.is_ok()
    overview = result.value
    assert overview.total_properties == 1
    assert overview.occupied_units == 1
    assert overview.vacant_units == 0
    assert overview.occupancy_rate == 50.0
    assert overview.open_maintenance == 1
    assert overview.overdue_payments == 1
    assert overview.outstanding_amount == Decimal("550")
    assert [r.lease_id for r in overview.upcoming_renewals] == [renewing.id]
    assert overview.upcoming_renewals[0].tenant_name == "Ana Reyes"
    assert overview.upcoming_renewals[0].property_name == "Harbor Point"
    assert overview.upcoming_renewals[0].unit_number == "101"
    assert len(overview.recent_maintenance) == 2
    assert len(overview.occupancy_trend) == 12
