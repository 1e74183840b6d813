"""
Lease Use Case DTOs (Data Transfer Objects)

All Command and Response classes for leases and payments.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, model_validator

from src.domain.entities import LeaseStatus, PaymentMethod, PaymentStatus, PaymentType

from ..shared_dtos import LeaseSummary, PaymentSummary


# ============================================================================
# Command DTOs
# ============================================================================


class LeaseTermsCommand(BaseModel):
    """Lease dates, amounts and status"""

    start_date: datetime
    end_date: datetime
    rent_amount: Decimal = Field(..., ge=0)
    security_deposit: Decimal = Field(Decimal("0"), ge=0)
    status: LeaseStatus = LeaseStatus.pending

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class LeaseCommand(LeaseTermsCommand):
    """Create lease payload"""

    tenant_id: UUID
    unit_id: UUID


class TerminateLeaseCommand(BaseModel):
    termination_date: Optional[datetime] = None
    termination_reason: str = Field(..., min_length=1, max_length=1000)


class PaymentCommand(BaseModel):
    """Record payment payload"""

    amount: Decimal = Field(..., gt=0)
    payment_type: PaymentType = PaymentType.rent
    payment_method: PaymentMethod = PaymentMethod.cash
    payment_status: PaymentStatus = PaymentStatus.completed
    payment_date: Optional[datetime] = None


# ============================================================================
# Response DTOs
# ============================================================================


class LeaseResponse(LeaseSummary):
    created_at: datetime


class PaymentResponse(PaymentSummary):
    pass
