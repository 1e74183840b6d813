"""
Lease Use Cases

Lease lifecycle and payments. Lease actions drive unit occupancy.
"""

from .create_lease_use_case import CreateLeaseUseCase
from .update_lease_use_case import UpdateLeaseUseCase
from .terminate_lease_use_case import TerminateLeaseUseCase
from .delete_lease_use_case import DeleteLeaseUseCase
from .record_payment_use_case import RecordPaymentUseCase
from .dtos import (
    LeaseCommand,
    LeaseTermsCommand,
    TerminateLeaseCommand,
    PaymentCommand,
    LeaseResponse,
    PaymentResponse,
)

__all__ = [
    "CreateLeaseUseCase",
    "UpdateLeaseUseCase",
    "TerminateLeaseUseCase",
    "DeleteLeaseUseCase",
    "RecordPaymentUseCase",
    "LeaseCommand",
    "LeaseTermsCommand",
    "TerminateLeaseCommand",
    "PaymentCommand",
    "LeaseResponse",
    "PaymentResponse",
]
