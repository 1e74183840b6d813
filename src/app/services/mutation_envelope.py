"""
Mutation Envelope

Every state-changing use case runs the same sequence:

    authenticate -> persist (commit) -> audit -> notify -> invalidate

The use case owns the first two steps. `MutationEnvelope.finalize` runs the
rest: audit rows and the notification batch are committed together in a
second transaction, then every affected path is marked stale. A failure in
finalize leaves the primary write committed; the caller reports the generic
action error.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error
from src.app.services.path_invalidator import InvalidationError, PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    AuditAction,
    AuditLog,
    EntityType,
    Notification,
    NotificationPriority,
    NotificationType,
)

logger = logging.getLogger(__name__)

UNAUTHORIZED = Error("UNAUTHORIZED", "Unauthorized")

# Failures converted into the generic, action-specific error
ENVELOPE_ERRORS = (SQLAlchemyError, InvalidationError)


@dataclass
class AuditEntry:
    """One AuditLog row to be written for the acting user"""

    entity_id: str
    entity_type: EntityType
    action: AuditAction
    changes: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None


@dataclass
class NotificationDraft:
    """A notification message not yet addressed to anyone"""

    title: str
    message: str
    type: NotificationType
    entity_id: Optional[str] = None
    entity_type: Optional[EntityType] = None
    action_url: Optional[str] = None
    priority: NotificationPriority = NotificationPriority.medium

    def fan_out(self, recipient_ids: Iterable[UUID]) -> List[Notification]:
        """One Notification per distinct recipient"""
        return [
            Notification(
                user_id=user_id,
                title=self.title,
                message=self.message,
                type=self.type,
                priority=self.priority,
                action_url=self.action_url,
                entity_id=self.entity_id,
                entity_type=self.entity_type,
            )
            for user_id in dict.fromkeys(recipient_ids)
        ]


class MutationEnvelope:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.invalidator = invalidator

    @staticmethod
    def require_actor(ctx: RequestContext) -> Optional[Error]:
        """UNAUTHORIZED when the request carries no actor, else None"""
        if not ctx.is_authenticated:
            return UNAUTHORIZED
        return None

    async def all_user_ids(self) -> List[UUID]:
        return await self.uow.users.list_ids()

    async def actor_name(self, ctx: RequestContext) -> str:
        user = await self.uow.users.get_by_id(ctx.actor_id)
        return user.full_name if user else "Unknown user"

    async def finalize(
        self,
        ctx: RequestContext,
        audit: Union[AuditEntry, Sequence[AuditEntry]],
        notifications: Sequence[Notification] = (),
        paths: Sequence[str] = (),
    ) -> None:
        """
        Write audit rows and notifications, commit, then invalidate paths.

        Must be called after the primary write has been committed.

        Raises:
            SQLAlchemyError: audit/notification insert or commit failed
            InvalidationError: the cache backend rejected a stale mark
        """
        entries = [audit] if isinstance(audit, AuditEntry) else list(audit)

        audit_logs = [
            AuditLog(
                entity_id=entry.entity_id,
                entity_type=entry.entity_type,
                action=entry.action,
                user_id=ctx.actor_id,
                changes=entry.changes,
                event_metadata=entry.metadata,
                ip_address=ctx.ip_address,
                user_agent=ctx.user_agent,
            )
            for entry in entries
        ]
        await self.uow.audit_logs.create_many(audit_logs)

        if notifications:
            await self.uow.notifications.create_many(list(notifications))

        await self.uow.commit()

        for path in paths:
            await self.invalidator.revalidate_path(path)

        logger.debug(
            "Mutation finalized: %d audit row(s), %d notification(s), %d path(s)",
            len(audit_logs),
            len(notifications),
            len(paths),
        )
