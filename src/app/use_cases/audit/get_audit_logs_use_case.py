"""
Get Audit Logs Use Case

Retrieves audit log rows with optional entity filters and pagination.
"""

from typing import Any, Dict, Optional

from libs.result import Result, Return
from src.app.services.mutation_envelope import UNAUTHORIZED
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import EntityType


class GetAuditLogsUseCase:
    """
    Use case for retrieving audit logs.

    Business Rules:
    - Caller must be authenticated
    - Optional filters: entity type and entity id
    - Results ordered by newest first
    - Supports cursor-based pagination
    - Each log includes the acting user's email when the user still exists
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        ctx: RequestContext,
        entity_type: Optional[EntityType] = None,
        entity_id: Optional[str] = None,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Result[Dict[str, Any]]:
        """
        Execute get audit logs use case.

        Args:
            ctx: Request context of the caller
            entity_type: Only logs about this kind of entity (optional)
            entity_id: Only logs about this entity (optional)
            limit: Maximum number of logs to return
            cursor: Pagination cursor (optional)

        Returns:
            Result with logs list and next_cursor, or Error
        """
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            logs, next_cursor = await self.uow.audit_logs.list_paginated(
                entity_type=entity_type, entity_id=entity_id, limit=limit, cursor=cursor
            )

            # Resolve each distinct actor once
            emails = {}
            for log in logs:
                if log.user_id and log.user_id not in emails:
                    user = await self.uow.users.get_by_id(log.user_id)
                    emails[log.user_id] = user.email if user else None

            logs_list = [
                {
                    "id": str(log.id),
                    "entity_id": log.entity_id,
                    "entity_type": log.entity_type.value,
                    "action": log.action.value,
                    "user_email": emails.get(log.user_id),
                    "changes": log.changes or {},
                    "metadata": log.event_metadata or {},
                    "ip_address": log.ip_address,
                    "user_agent": log.user_agent,
                    "timestamp": log.created_at.isoformat() + "Z",
                }
                for log in logs
            ]

            return Return.ok({"logs": logs_list, "next_cursor": next_cursor})
