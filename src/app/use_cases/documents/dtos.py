from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import DocumentType


class DocumentCommand(BaseModel):
    """Document record for a file already stored at file_url"""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    document_type: DocumentType = DocumentType.other
    file_url: str = Field(..., min_length=1, max_length=1000)
    property_id: Optional[UUID] = None
    unit_id: Optional[UUID] = None
    tenant_id: Optional[UUID] = None


class DocumentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: Optional[str] = None
    document_type: DocumentType
    file_url: str
    uploaded_by_id: UUID
    property_id: Optional[UUID] = None
    unit_id: Optional[UUID] = None
    tenant_id: Optional[UUID] = None
    created_at: datetime
