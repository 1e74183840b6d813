from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Property, PropertyTitleMovement


class IPropertyRepository(ABC):
    """Property repository interface - application layer"""

    @abstractmethod
    async def create(self, property: Property) -> Property:
        """Create a new property"""
        pass

    @abstractmethod
    async def create_many(self, properties: List[Property]) -> List[Property]:
        """Create several properties in the current transaction"""
        pass

    @abstractmethod
    async def update(self, property: Property) -> Property:
        """Update existing property"""
        pass

    @abstractmethod
    async def get_by_id(self, property_id: UUID) -> Optional[Property]:
        """Get property by ID without relations"""
        pass

    @abstractmethod
    async def get_with_details(self, property_id: UUID) -> Optional[Property]:
        """Get property with units, documents, utilities, taxes and title movements"""
        pass

    @abstractmethod
    async def list_with_details(self) -> List[Property]:
        """List properties (newest first) with the same relations as get_with_details"""
        pass

    @abstractmethod
    async def list_for_export(self) -> List[Property]:
        """List properties with units, documents and utilities"""
        pass

    @abstractmethod
    async def get_many(self, property_ids: List[UUID]) -> List[Property]:
        """Get the properties whose IDs are listed"""
        pass

    @abstractmethod
    async def delete(self, property_id: UUID) -> None:
        """Physically delete a property"""
        pass

    @abstractmethod
    async def delete_many(self, property_ids: List[UUID]) -> None:
        """Physically delete every listed property"""
        pass

    @abstractmethod
    async def search(self, term: str, limit: int = 5) -> List[Property]:
        """Case-insensitive match on property name or code"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass


class ITitleMovementRepository(ABC):
    """Property title movement repository interface - application layer"""

    @abstractmethod
    async def create(self, movement: PropertyTitleMovement) -> PropertyTitleMovement:
        pass

    @abstractmethod
    async def get_by_id(self, movement_id: UUID) -> Optional[PropertyTitleMovement]:
        pass

    @abstractmethod
    async def update(self, movement: PropertyTitleMovement) -> PropertyTitleMovement:
        pass

    @abstractmethod
    async def delete(self, movement_id: UUID) -> None:
        pass

    @abstractmethod
    async def list_for_property(self, property_id: UUID) -> List[PropertyTitleMovement]:
        """Movements of a property, newest request first"""
        pass
