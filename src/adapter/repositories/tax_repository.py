from typing import Optional
from uuid import UUID

from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.tax_repository import ITaxRepository
from src.domain.entities import PropertyTax, UnitTax


class TaxRepository(ITaxRepository):
    """Property and unit tax repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _save(self, tax):
        self.session.add(tax)
        await self.session.flush()
        await self.session.refresh(tax)
        return tax

    async def create_property_tax(self, tax: PropertyTax) -> PropertyTax:
        return await self._save(tax)

    async def get_property_tax(self, tax_id: UUID) -> Optional[PropertyTax]:
        result = await self.session.exec(select(PropertyTax).where(PropertyTax.id == tax_id))
        return result.one_or_none()

    async def update_property_tax(self, tax: PropertyTax) -> PropertyTax:
        return await self._save(tax)

    async def delete_property_tax(self, tax_id: UUID) -> None:
        await self.session.exec(delete(PropertyTax).where(PropertyTax.id == tax_id))

    async def create_unit_tax(self, tax: UnitTax) -> UnitTax:
        return await self._save(tax)

    async def get_unit_tax(self, tax_id: UUID) -> Optional[UnitTax]:
        result = await self.session.exec(select(UnitTax).where(UnitTax.id == tax_id))
        return result.one_or_none()

    async def update_unit_tax(self, tax: UnitTax) -> UnitTax:
        return await self._save(tax)

    async def delete_unit_tax(self, tax_id: UUID) -> None:
        await self.session.exec(delete(UnitTax).where(UnitTax.id == tax_id))
