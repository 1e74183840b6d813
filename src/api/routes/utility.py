"""
Utility API Routes
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.utilities import (
    CreateUtilityUseCase,
    DeleteUtilityUseCase,
    UpdateUtilityStatusUseCase,
    UtilityCommand,
    UtilityResponse,
    UtilityStatusCommand,
)
from src.depends import get_path_invalidator, get_request_context, get_unit_of_work

router = APIRouter(prefix="/utilities", tags=["Utility"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UtilityResponse)
async def create_utility(
    request: UtilityCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await CreateUtilityUseCase(uow, invalidator).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch("/{utility_id}/status", status_code=status.HTTP_200_OK, response_model=UtilityResponse)
async def update_utility_status(
    utility_id: UUID,
    request: UtilityStatusCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await UpdateUtilityStatusUseCase(uow, invalidator).execute(ctx, utility_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{utility_id}", status_code=status.HTTP_200_OK, response_model=UtilityResponse)
async def delete_utility(
    utility_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """Deleting a utility also deletes its bills"""
    result = await DeleteUtilityUseCase(uow, invalidator).execute(ctx, utility_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
