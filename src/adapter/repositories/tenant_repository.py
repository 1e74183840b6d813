from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import selectinload
from sqlmodel import col, delete, func, or_, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.lease_repository import delete_leases_where
from src.app.repositories.tenant_repository import ITenantRepository
from src.domain.entities import (
    Document,
    Lease,
    LeaseStatus,
    MaintenanceRequest,
    Tenant,
    Unit,
    UnitStatus,
)

DETAIL_OPTIONS = (
    selectinload(Tenant.leases).selectinload(Lease.unit).selectinload(Unit.property),
    selectinload(Tenant.leases).selectinload(Lease.payments),
    selectinload(Tenant.maintenance_requests)
    .selectinload(MaintenanceRequest.unit)
    .selectinload(Unit.property),
    selectinload(Tenant.documents),
)


async def delete_tenants_where(session: AsyncSession, *criteria) -> None:
    """
    Delete the tenants matching `criteria` along with their leases and payments.

    Spaces held by their active leases become vacant. Maintenance requests
    and documents outlive the tenant and are unlinked.
    """
    tenant_ids = select(Tenant.id).where(*criteria)
    occupied = select(Lease.unit_id).where(
        col(Lease.tenant_id).in_(tenant_ids), Lease.status == LeaseStatus.active
    )
    await session.exec(
        update(Unit).where(col(Unit.id).in_(occupied)).values(status=UnitStatus.vacant)
    )
    await delete_leases_where(session, col(Lease.tenant_id).in_(tenant_ids))
    for child in (MaintenanceRequest, Document):
        await session.exec(
            update(child).where(col(child.tenant_id).in_(tenant_ids)).values(tenant_id=None)
        )
    await session.exec(delete(Tenant).where(*criteria))


class TenantRepository(ITenantRepository):
    """Tenant repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant"""
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def create_many(self, tenants: List[Tenant]) -> List[Tenant]:
        self.session.add_all(tenants)
        await self.session.flush()
        return tenants

    async def update(self, tenant: Tenant) -> Tenant:
        """Update existing tenant"""
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID"""
        stmt = select(Tenant).where(Tenant.id == tenant_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_with_details(self, tenant_id: UUID) -> Optional[Tenant]:
        stmt = (
            select(Tenant)
            .where(Tenant.id == tenant_id)
            .options(*DETAIL_OPTIONS)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_with_details(self) -> List[Tenant]:
        stmt = (
            select(Tenant)
            .options(*DETAIL_OPTIONS)
            .order_by(col(Tenant.created_at).desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_many(self, tenant_ids: List[UUID]) -> List[Tenant]:
        stmt = select(Tenant).where(col(Tenant.id).in_(tenant_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete(self, tenant_id: UUID) -> None:
        await delete_tenants_where(self.session, Tenant.id == tenant_id)

    async def delete_many(self, tenant_ids: List[UUID]) -> None:
        await delete_tenants_where(self.session, col(Tenant.id).in_(tenant_ids))

    async def search(self, term: str, limit: int = 5) -> List[Tenant]:
        pattern = f"%{term.lower()}%"
        stmt = (
            select(Tenant)
            .where(
                or_(
                    func.lower(Tenant.first_name).like(pattern),
                    func.lower(Tenant.last_name).like(pattern),
                    func.lower(Tenant.company).like(pattern),
                )
            )
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self) -> int:
        result = await self.session.exec(select(func.count()).select_from(Tenant))
        return result.one()
