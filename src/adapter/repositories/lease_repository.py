from typing import Optional
from uuid import UUID

from sqlalchemy.orm import selectinload
from sqlmodel import col, delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.lease_repository import ILeaseRepository
from src.domain.entities import Lease, Payment


async def delete_leases_where(session: AsyncSession, *criteria) -> None:
    """Delete the leases matching `criteria` along with their payments"""
    lease_ids = select(Lease.id).where(*criteria)
    await session.exec(delete(Payment).where(col(Payment.lease_id).in_(lease_ids)))
    await session.exec(delete(Lease).where(*criteria))


class LeaseRepository(ILeaseRepository):
    """Lease repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, lease: Lease) -> Lease:
        """Create a new lease"""
        self.session.add(lease)
        await self.session.flush()
        await self.session.refresh(lease)
        return lease

    async def update(self, lease: Lease) -> Lease:
        """Update existing lease"""
        self.session.add(lease)
        await self.session.flush()
        await self.session.refresh(lease)
        return lease

    async def get_by_id(self, lease_id: UUID) -> Optional[Lease]:
        stmt = (
            select(Lease)
            .where(Lease.id == lease_id)
            .options(selectinload(Lease.tenant), selectinload(Lease.unit))
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def delete(self, lease_id: UUID) -> None:
        await delete_leases_where(self.session, Lease.id == lease_id)

    async def create_payment(self, payment: Payment) -> Payment:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment
