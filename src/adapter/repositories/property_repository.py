from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import selectinload
from sqlmodel import col, delete, func, or_, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.unit_repository import delete_units_where
from src.app.repositories.property_repository import (
    IPropertyRepository,
    ITitleMovementRepository,
)
from src.domain.entities import (
    Document,
    Property,
    PropertyTax,
    PropertyTitleMovement,
    PropertyUtility,
    Unit,
    UtilityBill,
)

DETAIL_OPTIONS = (
    selectinload(Property.units),
    selectinload(Property.documents),
    selectinload(Property.utilities).selectinload(PropertyUtility.bills),
    selectinload(Property.property_taxes),
    selectinload(Property.title_movements),
)


async def delete_properties_where(session: AsyncSession, *criteria) -> None:
    """Delete the properties matching `criteria` with their units, taxes, utilities and title movements"""
    property_ids = select(Property.id).where(*criteria)
    utility_ids = select(PropertyUtility.id).where(
        col(PropertyUtility.property_id).in_(property_ids)
    )
    await delete_units_where(session, col(Unit.property_id).in_(property_ids))
    await session.exec(
        delete(UtilityBill).where(col(UtilityBill.property_utility_id).in_(utility_ids))
    )
    for child in (PropertyUtility, PropertyTax, PropertyTitleMovement):
        await session.exec(delete(child).where(col(child.property_id).in_(property_ids)))
    await session.exec(
        update(Document)
        .where(col(Document.property_id).in_(property_ids))
        .values(property_id=None)
    )
    await session.exec(delete(Property).where(*criteria))


class PropertyRepository(IPropertyRepository):
    """Property repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, property: Property) -> Property:
        """Create a new property"""
        self.session.add(property)
        await self.session.flush()
        await self.session.refresh(property)
        return property

    async def create_many(self, properties: List[Property]) -> List[Property]:
        self.session.add_all(properties)
        await self.session.flush()
        return properties

    async def update(self, property: Property) -> Property:
        """Update existing property"""
        self.session.add(property)
        await self.session.flush()
        await self.session.refresh(property)
        return property

    async def get_by_id(self, property_id: UUID) -> Optional[Property]:
        stmt = select(Property).where(Property.id == property_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_with_details(self, property_id: UUID) -> Optional[Property]:
        stmt = (
            select(Property)
            .where(Property.id == property_id)
            .options(*DETAIL_OPTIONS)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_with_details(self) -> List[Property]:
        stmt = (
            select(Property)
            .options(*DETAIL_OPTIONS)
            .order_by(col(Property.created_at).desc())
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_for_export(self) -> List[Property]:
        stmt = select(Property).options(
            selectinload(Property.units),
            selectinload(Property.documents),
            selectinload(Property.utilities),
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_many(self, property_ids: List[UUID]) -> List[Property]:
        stmt = select(Property).where(col(Property.id).in_(property_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete(self, property_id: UUID) -> None:
        await delete_properties_where(self.session, Property.id == property_id)

    async def delete_many(self, property_ids: List[UUID]) -> None:
        await delete_properties_where(self.session, col(Property.id).in_(property_ids))

    async def search(self, term: str, limit: int = 5) -> List[Property]:
        pattern = f"%{term.lower()}%"
        stmt = (
            select(Property)
            .where(
                or_(
                    func.lower(Property.property_name).like(pattern),
                    func.lower(Property.property_code).like(pattern),
                )
            )
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count(self) -> int:
        result = await self.session.exec(select(func.count()).select_from(Property))
        return result.one()


class TitleMovementRepository(ITitleMovementRepository):
    """Property title movement repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, movement: PropertyTitleMovement) -> PropertyTitleMovement:
        self.session.add(movement)
        await self.session.flush()
        await self.session.refresh(movement)
        return movement

    async def get_by_id(self, movement_id: UUID) -> Optional[PropertyTitleMovement]:
        stmt = select(PropertyTitleMovement).where(PropertyTitleMovement.id == movement_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, movement: PropertyTitleMovement) -> PropertyTitleMovement:
        self.session.add(movement)
        await self.session.flush()
        await self.session.refresh(movement)
        return movement

    async def delete(self, movement_id: UUID) -> None:
        await self.session.exec(
            delete(PropertyTitleMovement).where(PropertyTitleMovement.id == movement_id)
        )

    async def list_for_property(self, property_id: UUID) -> List[PropertyTitleMovement]:
        stmt = (
            select(PropertyTitleMovement)
            .where(PropertyTitleMovement.property_id == property_id)
            .order_by(col(PropertyTitleMovement.request_date).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())
