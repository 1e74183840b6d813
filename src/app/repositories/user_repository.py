from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[User]:
        """List every user ordered by first name"""
        pass

    @abstractmethod
    async def list_ids(self) -> List[UUID]:
        """IDs of every user, used for "all users" notification fan-out"""
        pass
