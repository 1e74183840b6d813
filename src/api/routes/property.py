"""
Property API Routes

Properties, CSV import/export and title document movements.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from src.api.error import raise_for_error
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.properties import (
    BulkDeletePropertiesUseCase,
    CreatePropertyUseCase,
    CreateTitleMovementUseCase,
    DeletePropertyUseCase,
    DeleteTitleMovementUseCase,
    ExportPropertiesUseCase,
    GetPropertiesUseCase,
    GetPropertyByIdUseCase,
    GetTitleMovementsUseCase,
    ImportPropertiesUseCase,
    UpdatePropertyUseCase,
    UpdateTitleMovementStatusUseCase,
)
from src.app.use_cases.properties.dtos import (
    PropertyCommand,
    PropertyDetailResponse,
    PropertyExportResponse,
    PropertyResponse,
    TitleMovementCommand,
    TitleMovementResponse,
    TitleMovementStatusCommand,
)
from src.app.use_cases.shared_dtos import BulkDeleteCommand, BulkDeleteResponse
from src.depends import get_path_invalidator, get_request_context, get_unit_of_work

router = APIRouter(prefix="/properties", tags=["Property"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[PropertyDetailResponse])
async def list_properties(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Every property with units, documents, utilities, taxes and title movements"""
    result = await GetPropertiesUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PropertyResponse)
async def create_property(
    request: PropertyCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Create Property

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 422 Unprocessable Entity: Malformed payload
        - 500 Internal Server Error: PROPERTY_CREATE_ERROR
    """
    use_case = CreatePropertyUseCase(uow, invalidator)
    result = await use_case.execute(ctx, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/export", status_code=status.HTTP_200_OK, response_model=List[PropertyExportResponse]
)
async def export_properties(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ExportPropertiesUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/import", status_code=status.HTTP_201_CREATED, response_model=List[PropertyResponse]
)
async def import_properties(
    request: Request,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Import Properties from CSV

    The request body is the raw CSV text with a header row. All rows are
    written in one transaction; any invalid row rejects the whole file.

    Raises:
        - 400 Bad Request: INVALID_CSV_ROW, INVALID_PROPERTY_TYPE
        - 401 Unauthorized: Missing or invalid token
        - 500 Internal Server Error: PROPERTY_IMPORT_ERROR
    """
    text = (await request.body()).decode("utf-8-sig")

    use_case = ImportPropertiesUseCase(uow, invalidator)
    result = await use_case.execute(ctx, text)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/bulk-delete", status_code=status.HTTP_200_OK, response_model=BulkDeleteResponse)
async def bulk_delete_properties(
    request: BulkDeleteCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await BulkDeletePropertiesUseCase(uow, invalidator).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{property_id}", status_code=status.HTTP_200_OK, response_model=PropertyDetailResponse)
async def get_property(
    property_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetPropertyByIdUseCase(uow).execute(ctx, property_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{property_id}", status_code=status.HTTP_200_OK, response_model=PropertyResponse)
async def update_property(
    property_id: UUID,
    request: PropertyCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await UpdatePropertyUseCase(uow, invalidator).execute(ctx, property_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{property_id}", status_code=status.HTTP_200_OK, response_model=PropertyResponse)
async def delete_property(
    property_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeletePropertyUseCase(uow, invalidator).execute(ctx, property_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get(
    "/{property_id}/title-movements",
    status_code=status.HTTP_200_OK,
    response_model=List[TitleMovementResponse],
)
async def list_title_movements(
    property_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTitleMovementsUseCase(uow).execute(ctx, property_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{property_id}/title-movements",
    status_code=status.HTTP_201_CREATED,
    response_model=TitleMovementResponse,
)
async def create_title_movement(
    property_id: UUID,
    request: TitleMovementCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await CreateTitleMovementUseCase(uow, invalidator).execute(ctx, property_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/title-movements/{movement_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=TitleMovementResponse,
)
async def update_title_movement_status(
    movement_id: UUID,
    request: TitleMovementStatusCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """Marking a movement RETURNED stamps its return date"""
    use_case = UpdateTitleMovementStatusUseCase(uow, invalidator)
    result = await use_case.execute(ctx, movement_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/title-movements/{movement_id}",
    status_code=status.HTTP_200_OK,
    response_model=TitleMovementResponse,
)
async def delete_title_movement(
    movement_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeleteTitleMovementUseCase(uow, invalidator).execute(ctx, movement_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
