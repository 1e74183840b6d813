"""
User Entity

Back-office staff account. Users act on records and receive notifications.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from ..base import utc_now
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - a staff member of the back office.

    Business Rules:
    - Email must be unique across all users
    - Every user is a potential notification recipient ("all users" fan-out)
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    role: UserRole = Field(default=UserRole.user)
    image: Optional[str] = Field(default=None, max_length=500)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
