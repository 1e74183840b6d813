from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import PropertyUtility


class IUtilityRepository(ABC):
    """Property utility repository interface - application layer"""

    @abstractmethod
    async def create(self, utility: PropertyUtility) -> PropertyUtility:
        pass

    @abstractmethod
    async def get_by_id(self, utility_id: UUID) -> Optional[PropertyUtility]:
        pass

    @abstractmethod
    async def update(self, utility: PropertyUtility) -> PropertyUtility:
        pass

    @abstractmethod
    async def delete(self, utility_id: UUID) -> None:
        """Delete a utility together with its bills"""
        pass
