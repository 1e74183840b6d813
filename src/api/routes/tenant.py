"""
Tenant API Routes

Tenant records, their CSV import and bulk deletion.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from src.api.error import raise_for_error
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared_dtos import BulkDeleteCommand, BulkDeleteResponse
from src.app.use_cases.tenants import (
    BulkDeleteTenantsUseCase,
    CreateTenantUseCase,
    DeleteTenantUseCase,
    GetTenantByIdUseCase,
    GetTenantsUseCase,
    ImportTenantsUseCase,
    UpdateTenantUseCase,
)
from src.app.use_cases.tenants.dtos import TenantCommand, TenantDetailResponse, TenantResponse
from src.depends import get_path_invalidator, get_request_context, get_unit_of_work

router = APIRouter(prefix="/tenants", tags=["Tenant"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[TenantDetailResponse])
async def list_tenants(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTenantsUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TenantResponse)
async def create_tenant(
    request: TenantCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Create Tenant

    Every user is notified of the new tenant.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 422 Unprocessable Entity: Invalid email or status
        - 500 Internal Server Error: TENANT_CREATE_ERROR
    """
    use_case = CreateTenantUseCase(uow, invalidator)
    result = await use_case.execute(ctx, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/import", status_code=status.HTTP_201_CREATED, response_model=List[TenantResponse])
async def import_tenants(
    request: Request,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Import Tenants from CSV

    The request body is the raw CSV text with a header row. A row with an
    unknown status rejects the whole file and nothing is persisted.

    Raises:
        - 400 Bad Request: INVALID_CSV_ROW, INVALID_TENANT_STATUS
        - 401 Unauthorized: Missing or invalid token
        - 500 Internal Server Error: TENANT_IMPORT_ERROR
    """
    text = (await request.body()).decode("utf-8-sig")

    use_case = ImportTenantsUseCase(uow, invalidator)
    result = await use_case.execute(ctx, text)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/bulk-delete", status_code=status.HTTP_200_OK, response_model=BulkDeleteResponse)
async def bulk_delete_tenants(
    request: BulkDeleteCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await BulkDeleteTenantsUseCase(uow, invalidator).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/{tenant_id}", status_code=status.HTTP_200_OK, response_model=TenantDetailResponse)
async def get_tenant(
    tenant_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTenantByIdUseCase(uow).execute(ctx, tenant_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/{tenant_id}", status_code=status.HTTP_200_OK, response_model=TenantResponse)
async def update_tenant(
    tenant_id: UUID,
    request: TenantCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await UpdateTenantUseCase(uow, invalidator).execute(ctx, tenant_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{tenant_id}", status_code=status.HTTP_200_OK, response_model=TenantResponse)
async def delete_tenant(
    tenant_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeleteTenantUseCase(uow, invalidator).execute(ctx, tenant_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
