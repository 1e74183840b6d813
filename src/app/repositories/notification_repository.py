from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Notification


class INotificationRepository(ABC):
    """Notification repository interface - application layer"""

    @abstractmethod
    async def create_many(self, notifications: List[Notification]) -> None:
        """Insert a fan-out batch with a single flush"""
        pass

    @abstractmethod
    async def list_for_user(
        self, user_id: UUID, now: datetime, limit: int = 50
    ) -> List[Notification]:
        """Unexpired notifications: unread first, then priority desc, newest first"""
        pass

    @abstractmethod
    async def count_unread(self, user_id: UUID) -> int:
        pass

    @abstractmethod
    async def get_by_id(self, notification_id: UUID) -> Optional[Notification]:
        pass

    @abstractmethod
    async def update(self, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UUID, read_at: datetime) -> int:
        """Flag every unread notification of the user, returns the row count"""
        pass

    @abstractmethod
    async def delete(self, notification_id: UUID) -> None:
        pass

    @abstractmethod
    async def delete_all_for_user(self, user_id: UUID) -> int:
        pass
