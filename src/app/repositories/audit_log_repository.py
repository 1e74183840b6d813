from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.domain.entities import AuditLog, EntityType


class IAuditLogRepository(ABC):
    """AuditLog repository interface - append-only"""

    @abstractmethod
    async def create_many(self, audit_logs: List[AuditLog]) -> List[AuditLog]:
        """Append audit rows (immutable)"""
        pass

    @abstractmethod
    async def list_paginated(
        self,
        entity_type: Optional[EntityType] = None,
        entity_id: Optional[str] = None,
        limit: int = 50,
        cursor: Optional[str] = None,
    ) -> Tuple[List[AuditLog], Optional[str]]:
        """Audit rows newest first with cursor-based pagination"""
        pass
