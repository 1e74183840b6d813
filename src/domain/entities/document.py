"""
Document Entity

Stored file reference attached to a property, unit or tenant.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from ..base import utc_now
from .enums import DocumentType
from .user import User

if TYPE_CHECKING:
    from .property import Property
    from .tenant import Tenant
    from .unit import Unit


class Document(SQLModel, table=True):
    """
    Document entity.

    Business Rules:
    - Blob storage is external; only file_url is kept here
    """

    __tablename__ = "documents"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    document_type: DocumentType = Field(default=DocumentType.other)
    file_url: str = Field(max_length=1000)

    uploaded_by_id: UUID = Field(foreign_key="users.id", nullable=False)
    property_id: Optional[UUID] = Field(default=None, foreign_key="properties.id", index=True)
    unit_id: Optional[UUID] = Field(default=None, foreign_key="units.id", index=True)
    tenant_id: Optional[UUID] = Field(default=None, foreign_key="tenants.id", index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    # Relationships
    uploaded_by: Optional[User] = Relationship()
    property: Optional["Property"] = Relationship(back_populates="documents")
    unit: Optional["Unit"] = Relationship(back_populates="documents")
    tenant: Optional["Tenant"] = Relationship(back_populates="documents")
