"""
Unit Use Case DTOs (Data Transfer Objects)

Command and Response classes for units (spaces).
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import UnitStatus

from ..shared_dtos import PropertyRef


# ============================================================================
# Command DTOs
# ============================================================================


class UnitUpdateCommand(BaseModel):
    """Update unit payload"""

    unit_number: str = Field(..., min_length=1, max_length=50)
    unit_area: float = Field(0, ge=0)
    unit_rate: Decimal = Field(Decimal("0"), ge=0)
    rent_amount: Decimal = Field(Decimal("0"), ge=0)
    status: UnitStatus = UnitStatus.vacant
    is_first_floor: bool = False
    is_second_floor: bool = False
    is_third_floor: bool = False
    is_roof_top: bool = False
    is_mezzanine: bool = False


class UnitCommand(UnitUpdateCommand):
    """Create unit payload"""

    property_id: UUID


# ============================================================================
# Response DTOs
# ============================================================================


class UnitResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    property_id: UUID
    unit_number: str
    unit_area: float
    unit_rate: Decimal
    rent_amount: Decimal
    status: UnitStatus
    is_first_floor: bool
    is_second_floor: bool
    is_third_floor: bool
    is_roof_top: bool
    is_mezzanine: bool
    created_at: datetime


class AvailableUnitResponse(UnitResponse):
    """A vacant or reserved unit with its property"""

    property: Optional[PropertyRef] = None
