"""
Notification Use Cases

The actor's own inbox. Reading and deleting notifications is not audited.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.mutation_envelope import UNAUTHORIZED
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now

from .dtos import (
    AffectedCountResponse,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)

logger = logging.getLogger(__name__)

NOTIFICATION_NOT_FOUND = Error("NOTIFICATION_NOT_FOUND", "Notification not found")


class GetNotificationsUseCase:
    """
    Unexpired notifications of the actor.

    Ordering: unread first, then priority (urgent → low), then newest first.
    """

    def __init__(self, uow: UnitOfWork, page_limit: int = 50):
        self.uow = uow
        self.page_limit = page_limit

    async def execute(self, ctx: RequestContext) -> Result[NotificationListResponse]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                notifications = await self.uow.notifications.list_for_user(
                    ctx.actor_id, utc_now(), self.page_limit
                )
                unread = await self.uow.notifications.count_unread(ctx.actor_id)
            except SQLAlchemyError:
                logger.exception("Notification listing failed")
                return Return.err(
                    Error("NOTIFICATION_FETCH_ERROR", "Failed to fetch notifications")
                )

            return Return.ok(
                NotificationListResponse(
                    notifications=[NotificationResponse.model_validate(n) for n in notifications],
                    unread_count=unread,
                )
            )


class GetUnreadCountUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[UnreadCountResponse]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                unread = await self.uow.notifications.count_unread(ctx.actor_id)
            except SQLAlchemyError:
                logger.exception("Unread count failed")
                return Return.err(
                    Error("NOTIFICATION_FETCH_ERROR", "Failed to fetch notifications")
                )

            return Return.ok(UnreadCountResponse(unread_count=unread))


class MarkNotificationReadUseCase:
    """Mark one of the actor's notifications read, stamping read_at"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, notification_id: UUID
    ) -> Result[NotificationResponse]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                notification = await self.uow.notifications.get_by_id(notification_id)
                # Another user's notification is reported as missing
                if notification is None or notification.user_id != ctx.actor_id:
                    return Return.err(NOTIFICATION_NOT_FOUND)

                if not notification.is_read:
                    notification.is_read = True
                    notification.read_at = utc_now()
                    notification = await self.uow.notifications.update(notification)
                    await self.uow.commit()
            except SQLAlchemyError:
                logger.exception("Mark notification read failed")
                return Return.err(
                    Error(
                        "NOTIFICATION_UPDATE_ERROR",
                        "Failed to update notification. Please try again.",
                    )
                )

            return Return.ok(NotificationResponse.model_validate(notification))


class MarkAllNotificationsReadUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[AffectedCountResponse]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                count = await self.uow.notifications.mark_all_read(ctx.actor_id, utc_now())
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception("Mark all notifications read failed")
                return Return.err(
                    Error(
                        "NOTIFICATION_UPDATE_ERROR",
                        "Failed to update notifications. Please try again.",
                    )
                )

            return Return.ok(AffectedCountResponse(count=count))


class DeleteNotificationUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, notification_id: UUID
    ) -> Result[NotificationResponse]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                notification = await self.uow.notifications.get_by_id(notification_id)
                if notification is None or notification.user_id != ctx.actor_id:
                    return Return.err(NOTIFICATION_NOT_FOUND)

                response = NotificationResponse.model_validate(notification)
                await self.uow.notifications.delete(notification_id)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception("Notification deletion failed")
                return Return.err(
                    Error(
                        "NOTIFICATION_DELETE_ERROR",
                        "Failed to delete notification. Please try again.",
                    )
                )

            return Return.ok(response)


class DeleteAllNotificationsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[AffectedCountResponse]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                count = await self.uow.notifications.delete_all_for_user(ctx.actor_id)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception("Notification deletion failed")
                return Return.err(
                    Error(
                        "NOTIFICATION_DELETE_ERROR",
                        "Failed to delete notifications. Please try again.",
                    )
                )

            return Return.ok(AffectedCountResponse(count=count))
