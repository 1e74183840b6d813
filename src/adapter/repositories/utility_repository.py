from typing import Optional
from uuid import UUID

from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.utility_repository import IUtilityRepository
from src.domain.entities import PropertyUtility, UtilityBill


class UtilityRepository(IUtilityRepository):
    """Property utility repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, utility: PropertyUtility) -> PropertyUtility:
        self.session.add(utility)
        await self.session.flush()
        await self.session.refresh(utility)
        return utility

    async def get_by_id(self, utility_id: UUID) -> Optional[PropertyUtility]:
        stmt = select(PropertyUtility).where(PropertyUtility.id == utility_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, utility: PropertyUtility) -> PropertyUtility:
        self.session.add(utility)
        await self.session.flush()
        await self.session.refresh(utility)
        return utility

    async def delete(self, utility_id: UUID) -> None:
        await self.session.exec(
            delete(UtilityBill).where(UtilityBill.property_utility_id == utility_id)
        )
        await self.session.exec(delete(PropertyUtility).where(PropertyUtility.id == utility_id))
