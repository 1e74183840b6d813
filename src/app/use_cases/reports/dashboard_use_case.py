"""
Dashboard Overview Use Case

Portfolio headline numbers for the landing page.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Result, Return
from src.app.services import report_aggregation as agg
from src.app.services.mutation_envelope import UNAUTHORIZED
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import UnitStatus

from .dtos import DashboardOverview, OccupancyPoint, RecentMaintenance, RenewalLine
from .report_use_cases import report_error

logger = logging.getLogger(__name__)

RECENT_MAINTENANCE_LIMIT = 5


class GetDashboardOverviewUseCase:
    """
    Use case for the dashboard overview.

    Business Rules:
    - Open maintenance means PENDING, ASSIGNED or IN_PROGRESS
    - Overdue payments are PENDING payments dated before now
    - Renewals are ACTIVE leases ending within `renewal_days`
    - Revenue counts COMPLETED payments by calendar month
    - Occupancy is occupied unit area over total leasable area, the same
      definition the property report uses
    """

    def __init__(self, uow: UnitOfWork, renewal_days: int = 30):
        self.uow = uow
        self.renewal_days = renewal_days

    async def execute(self, ctx: RequestContext) -> Result[DashboardOverview]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                total_properties = await self.uow.properties.count()
                total_units = await self.uow.units.count()
                total_tenants = await self.uow.tenants.count()
                properties = await self.uow.reports.property_graph()
                requests = await self.uow.reports.maintenance_requests()
            except SQLAlchemyError:
                logger.exception("Dashboard fetch failed")
                return Return.err(report_error("dashboard"))

            now = utc_now()
            units = [unit for p in properties for unit in p.units]
            leases = [lease for unit in units for lease in unit.leases]
            payments = [payment for lease in leases for payment in lease.payments]

            # Lease -> unit -> property without touching unloaded back references
            unit_owner = {unit.id: p for p in properties for unit in p.units}
            units_by_id = {unit.id: unit for unit in units}

            renewals = []
            for lease in agg.upcoming_renewals(leases, now, self.renewal_days):
                unit = units_by_id.get(lease.unit_id)
                owner = unit_owner.get(lease.unit_id)
                renewals.append(
                    RenewalLine(
                        lease_id=lease.id,
                        tenant_name=lease.tenant.full_name if lease.tenant else None,
                        property_name=owner.property_name if owner else None,
                        unit_number=unit.unit_number if unit else None,
                        end_date=lease.end_date,
                        rent_amount=lease.rent_amount,
                    )
                )

            recent = [
                RecentMaintenance(
                    id=r.id,
                    description=r.description,
                    category=r.category,
                    priority=r.priority,
                    status=r.status,
                    property_name=r.unit.property.property_name
                    if r.unit and r.unit.property
                    else None,
                    unit_number=r.unit.unit_number if r.unit else None,
                    tenant_name=r.tenant.full_name if r.tenant else None,
                    created_at=r.created_at,
                )
                for r in requests[:RECENT_MAINTENANCE_LIMIT]
            ]

            current_month = agg.revenue_between(payments, *agg.month_bounds(now))
            last_month = agg.revenue_between(payments, *agg.month_bounds(now, months_back=1))
            occupied = sum(1 for u in units if u.status == UnitStatus.occupied)

            return Return.ok(
                DashboardOverview(
                    total_properties=total_properties,
                    total_units=total_units,
                    total_tenants=total_tenants,
                    occupied_units=occupied,
                    vacant_units=sum(1 for u in units if u.status == UnitStatus.vacant),
                    occupancy_rate=agg.occupancy_rate(
                        agg.occupied_area(units), sum(p.leasable_area or 0 for p in properties)
                    ),
                    open_maintenance=sum(
                        1 for r in requests if r.status in agg.OPEN_MAINTENANCE_STATUSES
                    ),
                    overdue_payments=len(agg.overdue_payments(payments, now)),
                    upcoming_renewals=renewals,
                    recent_maintenance=recent,
                    current_month_revenue=current_month,
                    last_month_revenue=last_month,
                    revenue_change=agg.percent_change(current_month, last_month),
                    outstanding_amount=agg.outstanding_total(payments),
                    occupancy_trend=[
                        OccupancyPoint(**point) for point in agg.occupancy_trend(units, now)
                    ],
                )
            )
