from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import PropertyTax, UnitTax


class ITaxRepository(ABC):
    """Property and unit tax repository interface - application layer"""

    @abstractmethod
    async def create_property_tax(self, tax: PropertyTax) -> PropertyTax:
        pass

    @abstractmethod
    async def get_property_tax(self, tax_id: UUID) -> Optional[PropertyTax]:
        pass

    @abstractmethod
    async def update_property_tax(self, tax: PropertyTax) -> PropertyTax:
        pass

    @abstractmethod
    async def delete_property_tax(self, tax_id: UUID) -> None:
        pass

    @abstractmethod
    async def create_unit_tax(self, tax: UnitTax) -> UnitTax:
        pass

    @abstractmethod
    async def get_unit_tax(self, tax_id: UUID) -> Optional[UnitTax]:
        pass

    @abstractmethod
    async def update_unit_tax(self, tax: UnitTax) -> UnitTax:
        pass

    @abstractmethod
    async def delete_unit_tax(self, tax_id: UUID) -> None:
        pass
