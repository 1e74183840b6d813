from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import selectinload
from sqlmodel import col, delete, func, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.lease_repository import delete_leases_where
from src.app.repositories.unit_repository import IUnitRepository
from src.domain.entities import (
    Document,
    Lease,
    MaintenanceRequest,
    Unit,
    UnitStatus,
    UnitTax,
    UnitUtilityAccount,
    UtilityBill,
)


async def delete_units_where(session: AsyncSession, *criteria) -> None:
    """
    Delete the units matching `criteria` and everything that hangs off them.

    Leases (with payments), unit taxes, utility accounts (with bills) and
    maintenance requests go with the unit; linked documents are kept and
    unlinked.
    """
    unit_ids = select(Unit.id).where(*criteria)
    account_ids = select(UnitUtilityAccount.id).where(
        col(UnitUtilityAccount.unit_id).in_(unit_ids)
    )
    await delete_leases_where(session, col(Lease.unit_id).in_(unit_ids))
    await session.exec(
        delete(UtilityBill).where(col(UtilityBill.unit_utility_account_id).in_(account_ids))
    )
    for child in (UnitUtilityAccount, UnitTax, MaintenanceRequest):
        await session.exec(delete(child).where(col(child.unit_id).in_(unit_ids)))
    await session.exec(
        update(Document).where(col(Document.unit_id).in_(unit_ids)).values(unit_id=None)
    )
    await session.exec(delete(Unit).where(*criteria))


class UnitRepository(IUnitRepository):
    """Unit repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, unit: Unit) -> Unit:
        """Create a new unit"""
        self.session.add(unit)
        await self.session.flush()
        await self.session.refresh(unit)
        return unit

    async def update(self, unit: Unit) -> Unit:
        """Update existing unit"""
        self.session.add(unit)
        await self.session.flush()
        await self.session.refresh(unit)
        return unit

    async def get_by_id(self, unit_id: UUID) -> Optional[Unit]:
        stmt = select(Unit).where(Unit.id == unit_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_many(self, unit_ids: List[UUID]) -> List[Unit]:
        stmt = select(Unit).where(col(Unit.id).in_(unit_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete(self, unit_id: UUID) -> None:
        await delete_units_where(self.session, Unit.id == unit_id)

    async def delete_many(self, unit_ids: List[UUID]) -> None:
        await delete_units_where(self.session, col(Unit.id).in_(unit_ids))

    async def list_available(self) -> List[Unit]:
        stmt = (
            select(Unit)
            .where(col(Unit.status).in_([UnitStatus.vacant, UnitStatus.reserved]))
            .options(selectinload(Unit.property))
            .order_by(Unit.unit_number)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def search(self, term: str, limit: int = 5) -> List[Unit]:
        stmt = (
            select(Unit)
            .where(func.lower(Unit.unit_number).like(f"%{term.lower()}%"))
            .options(selectinload(Unit.property))
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self) -> int:
        result = await self.session.exec(select(func.count()).select_from(Unit))
        return result.one()
