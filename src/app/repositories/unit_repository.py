from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Unit


class IUnitRepository(ABC):
    """Unit repository interface - application layer"""

    @abstractmethod
    async def create(self, unit: Unit) -> Unit:
        """Create a new unit"""
        pass

    @abstractmethod
    async def update(self, unit: Unit) -> Unit:
        """Update existing unit"""
        pass

    @abstractmethod
    async def get_by_id(self, unit_id: UUID) -> Optional[Unit]:
        """Get unit by ID"""
        pass

    @abstractmethod
    async def get_many(self, unit_ids: List[UUID]) -> List[Unit]:
        """Get the units whose IDs are listed"""
        pass

    @abstractmethod
    async def delete(self, unit_id: UUID) -> None:
        """Physically delete a unit"""
        pass

    @abstractmethod
    async def delete_many(self, unit_ids: List[UUID]) -> None:
        """Physically delete every listed unit"""
        pass

    @abstractmethod
    async def list_available(self) -> List[Unit]:
        """Units that are VACANT or RESERVED, with their property"""
        pass

    @abstractmethod
    async def search(self, term: str, limit: int = 5) -> List[Unit]:
        """Case-insensitive match on unit number, with property loaded"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
