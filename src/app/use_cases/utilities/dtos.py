from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import UtilityType

from ..shared_dtos import UtilitySummary


class UtilityCommand(BaseModel):
    """Create property utility payload"""

    property_id: UUID
    utility_type: UtilityType
    provider: str = Field(..., min_length=1, max_length=255)
    account_number: str = Field(..., min_length=1, max_length=100)
    meter_number: Optional[str] = Field(None, max_length=100)
    is_active: bool = True


class UtilityStatusCommand(BaseModel):
    is_active: bool


class UtilityResponse(UtilitySummary):
    pass
