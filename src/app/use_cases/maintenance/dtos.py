"""
Maintenance Request DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import MaintenanceCategory, MaintenancePriority, MaintenanceStatus


class MaintenanceRequestCommand(BaseModel):
    """Create maintenance request payload"""

    unit_id: UUID
    tenant_id: Optional[UUID] = None
    category: MaintenanceCategory = MaintenanceCategory.other
    priority: MaintenancePriority = MaintenancePriority.medium
    description: str = Field(..., min_length=1, max_length=2000)
    assigned_to_id: Optional[UUID] = None


class MaintenanceRequestUpdateCommand(BaseModel):
    """Partial update; omitted fields are left unchanged"""

    status: Optional[MaintenanceStatus] = None
    priority: Optional[MaintenancePriority] = None
    category: Optional[MaintenanceCategory] = None
    description: Optional[str] = Field(None, min_length=1, max_length=2000)
    assigned_to_id: Optional[UUID] = None


class MaintenanceRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    unit_id: UUID
    tenant_id: Optional[UUID] = None
    category: MaintenanceCategory
    priority: MaintenancePriority
    description: str
    status: MaintenanceStatus
    assigned_to_id: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime
    completed_at: Optional[datetime] = None
