"""
Unit (Space) API Routes
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared_dtos import BulkDeleteCommand, BulkDeleteResponse
from src.app.use_cases.units import (
    BulkDeleteUnitsUseCase,
    CreateUnitUseCase,
    DeleteUnitUseCase,
    GetAvailableUnitsUseCase,
    UpdateUnitUseCase,
)
from src.app.use_cases.units.dtos import (
    AvailableUnitResponse,
    UnitCommand,
    UnitResponse,
    UnitUpdateCommand,
)
from src.depends import get_path_invalidator, get_request_context, get_unit_of_work

router = APIRouter(prefix="/units", tags=["Unit"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UnitResponse)
async def create_unit(
    request: UnitCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Create Unit

    Adds a space to a property and increments the property's unit count.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: PROPERTY_NOT_FOUND
        - 500 Internal Server Error: UNIT_CREATE_ERROR
    """
    use_case = CreateUnitUseCase(uow, invalidator)
    result = await use_case.execute(ctx, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/available", status_code=status.HTTP_200_OK, response_model=List[AvailableUnitResponse])
async def list_available_units(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Spaces that are VACANT or RESERVED, for the lease form"""
    result = await GetAvailableUnitsUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/bulk-delete", status_code=status.HTTP_200_OK, response_model=BulkDeleteResponse)
async def bulk_delete_units(
    request: BulkDeleteCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await BulkDeleteUnitsUseCase(uow, invalidator).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{unit_id}", status_code=status.HTTP_200_OK, response_model=UnitResponse)
async def update_unit(
    unit_id: UUID,
    request: UnitUpdateCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await UpdateUnitUseCase(uow, invalidator).execute(ctx, unit_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{unit_id}", status_code=status.HTTP_200_OK, response_model=UnitResponse)
async def delete_unit(
    unit_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeleteUnitUseCase(uow, invalidator).execute(ctx, unit_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
