from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import case
from sqlmodel import col, delete, func, or_, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.notification_repository import INotificationRepository
from src.domain.entities import Notification, NotificationPriority

PRIORITY_RANK = case(
    (Notification.priority == NotificationPriority.urgent, 3),
    (Notification.priority == NotificationPriority.high, 2),
    (Notification.priority == NotificationPriority.medium, 1),
    else_=0,
)


class NotificationRepository(INotificationRepository):
    """Notification repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_many(self, notifications: List[Notification]) -> None:
        # A single AsyncSession cannot flush concurrently; one batched flush
        self.session.add_all(notifications)
        await self.session.flush()

    async def list_for_user(
        self, user_id: UUID, now: datetime, limit: int = 50
    ) -> List[Notification]:
        stmt = (
            select(Notification)
            .where(
                Notification.user_id == user_id,
                or_(
                    col(Notification.expires_at).is_(None),
                    col(Notification.expires_at) > now,
                ),
            )
            .order_by(
                col(Notification.is_read).asc(),
                PRIORITY_RANK.desc(),
                col(Notification.created_at).desc(),
            )
            .limit(limit)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_unread(self, user_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(Notification)
            .where(Notification.user_id == user_id, col(Notification.is_read).is_(False))
        )
        result = await self.session.exec(stmt)
        return result.one()

    async def get_by_id(self, notification_id: UUID) -> Optional[Notification]:
        stmt = select(Notification).where(Notification.id == notification_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, notification: Notification) -> Notification:
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def mark_all_read(self, user_id: UUID, read_at: datetime) -> int:
        stmt = (
            update(Notification)
            .where(Notification.user_id == user_id, col(Notification.is_read).is_(False))
            .values(is_read=True, read_at=read_at)
        )
        result = await self.session.exec(stmt)
        return result.rowcount

    async def delete(self, notification_id: UUID) -> None:
        await self.session.exec(delete(Notification).where(Notification.id == notification_id))

    async def delete_all_for_user(self, user_id: UUID) -> int:
        result = await self.session.exec(
            delete(Notification).where(Notification.user_id == user_id)
        )
        return result.rowcount
