from typing import List

from sqlalchemy.orm import selectinload
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.report_repository import IReportRepository
from src.domain.entities import (
    Lease,
    MaintenanceRequest,
    Property,
    PropertyUtility,
    Tenant,
    Unit,
    UnitUtilityAccount,
)


class ReportRepository(IReportRepository):
    """Graph fetches for reporting, using SQLModel with eager loading"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def property_graph(self) -> List[Property]:
        units = selectinload(Property.units)
        leases = units.selectinload(Unit.leases)
        stmt = (
            select(Property)
            .options(
                leases.selectinload(Lease.tenant),
                leases.selectinload(Lease.payments),
                units.selectinload(Unit.maintenance_requests).selectinload(
                    MaintenanceRequest.tenant
                ),
                units.selectinload(Unit.maintenance_requests).selectinload(
                    MaintenanceRequest.assigned_to
                ),
                units.selectinload(Unit.documents),
                units.selectinload(Unit.unit_taxes),
                units.selectinload(Unit.utility_accounts).selectinload(UnitUtilityAccount.bills),
                selectinload(Property.documents),
                selectinload(Property.property_taxes),
                selectinload(Property.utilities).selectinload(PropertyUtility.bills),
                selectinload(Property.created_by),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def tenant_graph(self) -> List[Tenant]:
        leases = selectinload(Tenant.leases)
        requests = selectinload(Tenant.maintenance_requests)
        stmt = (
            select(Tenant)
            .options(
                leases.selectinload(Lease.unit).selectinload(Unit.property),
                leases.selectinload(Lease.payments),
                requests.selectinload(MaintenanceRequest.unit).selectinload(Unit.property),
                requests.selectinload(MaintenanceRequest.assigned_to),
                selectinload(Tenant.documents),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def unit_graph(self) -> List[Unit]:
        leases = selectinload(Unit.leases)
        requests = selectinload(Unit.maintenance_requests)
        stmt = (
            select(Unit)
            .options(
                selectinload(Unit.property),
                leases.selectinload(Lease.tenant),
                leases.selectinload(Lease.payments),
                requests.selectinload(MaintenanceRequest.tenant),
                requests.selectinload(MaintenanceRequest.assigned_to),
                selectinload(Unit.documents),
                selectinload(Unit.unit_taxes),
                selectinload(Unit.utility_accounts).selectinload(UnitUtilityAccount.bills),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def maintenance_requests(self) -> List[MaintenanceRequest]:
        stmt = (
            select(MaintenanceRequest)
            .options(
                selectinload(MaintenanceRequest.unit).selectinload(Unit.property),
                selectinload(MaintenanceRequest.tenant),
            )
            .order_by(col(MaintenanceRequest.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())
