"""
Lease API Routes

Lease lifecycle and rent payments. Every lease change also moves the unit
between OCCUPIED and VACANT.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.leases import (
    CreateLeaseUseCase,
    DeleteLeaseUseCase,
    LeaseCommand,
    LeaseResponse,
    LeaseTermsCommand,
    PaymentCommand,
    PaymentResponse,
    RecordPaymentUseCase,
    TerminateLeaseCommand,
    TerminateLeaseUseCase,
    UpdateLeaseUseCase,
)
from src.depends import get_path_invalidator, get_request_context, get_unit_of_work

router = APIRouter(prefix="/leases", tags=["Lease"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=LeaseResponse)
async def create_lease(
    request: LeaseCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Create Lease

    An ACTIVE lease marks its unit OCCUPIED in the same transaction.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: TENANT_NOT_FOUND or UNIT_NOT_FOUND
        - 422 Unprocessable Entity: end_date not after start_date
        - 500 Internal Server Error: LEASE_CREATE_ERROR
    """
    use_case = CreateLeaseUseCase(uow, invalidator)
    result = await use_case.execute(ctx, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{lease_id}", status_code=status.HTTP_200_OK, response_model=LeaseResponse)
async def update_lease(
    lease_id: UUID,
    request: LeaseTermsCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await UpdateLeaseUseCase(uow, invalidator).execute(ctx, lease_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/{lease_id}/terminate", status_code=status.HTTP_200_OK, response_model=LeaseResponse)
async def terminate_lease(
    lease_id: UUID,
    request: TerminateLeaseCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """Terminate a lease early and free its unit"""
    result = await TerminateLeaseUseCase(uow, invalidator).execute(ctx, lease_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{lease_id}", status_code=status.HTTP_200_OK, response_model=LeaseResponse)
async def delete_lease(
    lease_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeleteLeaseUseCase(uow, invalidator).execute(ctx, lease_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{lease_id}/payments", status_code=status.HTTP_201_CREATED, response_model=PaymentResponse
)
async def record_payment(
    lease_id: UUID,
    request: PaymentCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await RecordPaymentUseCase(uow, invalidator).execute(ctx, lease_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
