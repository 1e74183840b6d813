import base64
from datetime import datetime
from typing import List, Optional, Tuple

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.audit_log_repository import IAuditLogRepository
from src.domain.entities import AuditLog, EntityType


class AuditLogRepository(IAuditLogRepository):
    """AuditLog repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_many(self, audit_logs: List[AuditLog]) -> List[AuditLog]:
        """Append audit rows (immutable)"""
        self.session.add_all(audit_logs)
        await self.session.flush()
        return audit_logs

    async def list_paginated(
        self,
        entity_type: Optional[EntityType] = None,
        entity_id: Optional[str] = None,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Tuple[List[AuditLog], Optional[str]]:
        """
        Get audit rows with cursor-based pagination.

        Cursor format: base64-encoded ISO timestamp of created_at
        """
        stmt = select(AuditLog)
        if entity_type is not None:
            stmt = stmt.where(AuditLog.entity_type == entity_type)
        if entity_id is not None:
            stmt = stmt.where(AuditLog.entity_id == entity_id)

        # Apply cursor if provided
        if cursor:
            try:
                cursor_timestamp_str = base64.b64decode(cursor).decode("utf-8")
                cursor_timestamp = datetime.fromisoformat(cursor_timestamp_str)
                stmt = stmt.where(AuditLog.created_at < cursor_timestamp)
            except (ValueError, TypeError):
                # Invalid cursor, ignore and return from beginning
                pass

        # Newest first, one extra row to detect another page
        stmt = stmt.order_by(col(AuditLog.created_at).desc()).limit(limit + 1)

        result = await self.session.exec(stmt)
        logs = list(result.all())

        has_more = len(logs) > limit
        if has_more:
            logs = logs[:limit]

        next_cursor = None
        if has_more and logs:
            cursor_timestamp_str = logs[-1].created_at.isoformat()
            next_cursor = base64.b64encode(cursor_timestamp_str.encode("utf-8")).decode("utf-8")

        return logs, next_cursor
