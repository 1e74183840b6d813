"""
Notification Entity

In-app message delivered to a single user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utc_now
from .enums import EntityType, NotificationPriority, NotificationType


class Notification(SQLModel, table=True):
    """
    Notification entity.

    Business Rules:
    - Owned by exactly one user; only the owner may read or delete it
    - Marking read stamps read_at
    """

    __tablename__ = "notifications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    title: str = Field(max_length=255)
    message: str = Field(max_length=2000)
    type: NotificationType = Field(default=NotificationType.system)
    priority: NotificationPriority = Field(default=NotificationPriority.medium)
    action_url: Optional[str] = Field(default=None, max_length=500)
    entity_id: Optional[str] = Field(default=None, max_length=100)
    entity_type: Optional[EntityType] = Field(default=None)

    is_read: bool = Field(default=False)
    read_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_notification_user_read", "user_id", "is_read"),)
