"""
Maintenance Request API Routes
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.maintenance import (
    CreateMaintenanceRequestUseCase,
    DeleteMaintenanceRequestUseCase,
    MaintenanceRequestCommand,
    MaintenanceRequestResponse,
    MaintenanceRequestUpdateCommand,
    UpdateMaintenanceRequestUseCase,
)
from src.depends import get_path_invalidator, get_request_context, get_unit_of_work

router = APIRouter(prefix="/maintenance-requests", tags=["Maintenance"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MaintenanceRequestResponse)
async def create_maintenance_request(
    request: MaintenanceRequestCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Create Maintenance Request

    Emergency requests notify every user with URGENT priority.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: UNIT_NOT_FOUND
        - 500 Internal Server Error: MAINTENANCE_REQUEST_CREATE_ERROR
    """
    use_case = CreateMaintenanceRequestUseCase(uow, invalidator)
    result = await use_case.execute(ctx, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.patch(
    "/{request_id}", status_code=status.HTTP_200_OK, response_model=MaintenanceRequestResponse
)
async def update_maintenance_request(
    request_id: UUID,
    request: MaintenanceRequestUpdateCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    use_case = UpdateMaintenanceRequestUseCase(uow, invalidator)
    result = await use_case.execute(ctx, request_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{request_id}", status_code=status.HTTP_200_OK, response_model=MaintenanceRequestResponse
)
async def delete_maintenance_request(
    request_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeleteMaintenanceRequestUseCase(uow, invalidator).execute(ctx, request_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
