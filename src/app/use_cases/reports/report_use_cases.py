"""
Report Use Cases

Financial, per-property, per-tenant and per-unit reports. Each call fetches
the full graph it needs and folds it in memory; nothing is cached.
"""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services import report_aggregation as agg
from src.app.services.mutation_envelope import UNAUTHORIZED
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import LeaseStatus

from ..shared_dtos import DocumentSummary
from .builders import lease_fields, maintenance_fields, unit_report
from .dtos import (
    ExpenseBreakdown,
    FinancialReport,
    PropertyReport,
    ReportTax,
    ReportUtility,
    RevenueBreakdown,
    TenantLeaseLine,
    TenantMaintenanceLine,
    TenantReport,
    UnitReport,
)

logger = logging.getLogger(__name__)


def report_error(name: str) -> Error:
    return Error("REPORT_FETCH_ERROR", f"Failed to generate {name} report")


class GetFinancialReportUseCase:
    """
    Revenue, expenses and net income across the whole portfolio.

    Business Rules:
    - Revenue is the sum of COMPLETED payments, split by lease status
    - Expenses are property taxes + unit taxes, and utility bills
    - Net income = revenue - (taxes + utilities)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[FinancialReport]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                properties = await self.uow.reports.property_graph()
            except SQLAlchemyError:
                logger.exception("Financial report fetch failed")
                return Return.err(report_error("financial"))

            total, by_type = agg.revenue_by_lease_status(properties)
            taxes = agg.tax_total(properties)
            utilities = agg.utility_total(properties)

            return Return.ok(
                FinancialReport(
                    revenue=RevenueBreakdown(total=total, by_type=by_type),
                    expenses=ExpenseBreakdown(taxes=taxes, utilities=utilities),
                    net_income=total - (taxes + utilities),
                )
            )


class GetPropertyReportsUseCase:
    """Every property with its units, taxes, utilities and area-based occupancy"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[List[PropertyReport]]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                properties = await self.uow.reports.property_graph()
            except SQLAlchemyError:
                logger.exception("Property report fetch failed")
                return Return.err(report_error("property"))

            reports = []
            for p in properties:
                units = [unit_report(unit, p.property_name) for unit in p.units]
                reports.append(
                    PropertyReport(
                        id=p.id,
                        property_code=p.property_code,
                        property_name=p.property_name,
                        title_no=p.title_no,
                        lot_no=p.lot_no,
                        registered_owner=p.registered_owner,
                        address=p.address,
                        property_type=p.property_type,
                        leasable_area=p.leasable_area,
                        total_units=p.total_units,
                        created_by=p.created_by.full_name if p.created_by else None,
                        created_at=p.created_at,
                        occupancy_rate=agg.occupancy_rate(
                            agg.occupied_area(p.units), p.leasable_area
                        ),
                        total_revenue=sum((u.total_revenue for u in units), agg.ZERO),
                        total_property_taxes=sum(
                            (t.tax_amount for t in p.property_taxes), agg.ZERO
                        ),
                        total_utility_bills=agg.bill_total(p.utilities),
                        units=units,
                        documents=[DocumentSummary.model_validate(d) for d in p.documents],
                        property_taxes=[ReportTax.model_validate(t) for t in p.property_taxes],
                        utilities=[ReportUtility.model_validate(u) for u in p.utilities],
                    )
                )

            return Return.ok(reports)


class GetTenantReportsUseCase:
    """Every tenant with lease history, rent paid and maintenance requests"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[List[TenantReport]]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                tenants = await self.uow.reports.tenant_graph()
            except SQLAlchemyError:
                logger.exception("Tenant report fetch failed")
                return Return.err(report_error("tenant"))

            reports = []
            for tenant in tenants:
                leases = [
                    TenantLeaseLine(
                        **lease_fields(lease),
                        property_name=lease.unit.property.property_name
                        if lease.unit and lease.unit.property
                        else None,
                        unit_number=lease.unit.unit_number if lease.unit else None,
                    )
                    for lease in tenant.leases
                ]
                requests = [
                    TenantMaintenanceLine(
                        **maintenance_fields(r, with_tenant=False),
                        property_name=r.unit.property.property_name
                        if r.unit and r.unit.property
                        else None,
                        unit_number=r.unit.unit_number if r.unit else None,
                    )
                    for r in tenant.maintenance_requests
                ]
                reports.append(
                    TenantReport(
                        id=tenant.id,
                        bp_code=tenant.bp_code,
                        name=tenant.full_name,
                        email=tenant.email,
                        phone=tenant.phone,
                        company=tenant.company,
                        status=tenant.status,
                        emergency_contact_name=tenant.emergency_contact_name,
                        emergency_contact_phone=tenant.emergency_contact_phone,
                        created_at=tenant.created_at,
                        leases=leases,
                        maintenance_requests=requests,
                        documents=[DocumentSummary.model_validate(d) for d in tenant.documents],
                        total_rent_paid=agg.lease_revenue(tenant.leases),
                        active_leases=sum(
                            1 for lease in tenant.leases if lease.status == LeaseStatus.active
                        ),
                        total_leases=len(tenant.leases),
                        total_maintenance_requests=len(requests),
                    )
                )

            return Return.ok(reports)


class GetUnitReportsUseCase:
    """Every unit with revenue from COMPLETED payments, taxes and utility bills"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[List[UnitReport]]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                units = await self.uow.reports.unit_graph()
            except SQLAlchemyError:
                logger.exception("Unit report fetch failed")
                return Return.err(report_error("unit"))

            return Return.ok(
                [
                    unit_report(unit, unit.property.property_name if unit.property else None)
                    for unit in units
                ]
            )
