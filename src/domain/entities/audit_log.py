"""
AuditLog Entity

Immutable record of a mutation for compliance and history views.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utc_now
from .enums import AuditAction, EntityType


class AuditLog(SQLModel, table=True):
    """
    AuditLog entity - append-only.

    Business Rules:
    - Written only after the primary write committed
    - Never updated or deleted by application code
    - changes holds the JSON-safe input of the mutation
    """

    __tablename__ = "audit_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    entity_id: str = Field(max_length=100, index=True)
    entity_type: EntityType = Field(nullable=False)
    action: AuditAction = Field(nullable=False)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    changes: Optional[dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    event_metadata: Optional[dict[str, Any]] = Field(default=None, sa_column=Column(JSON))

    ip_address: Optional[str] = Field(default=None, max_length=100)
    user_agent: Optional[str] = Field(default=None, max_length=500)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_audit_entity", "entity_type", "entity_id"),
        Index("idx_audit_created_at", "created_at"),
    )
