"""
Tax API Routes

Real property taxes and unit taxes.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.taxes import (
    CreatePropertyTaxUseCase,
    CreateUnitTaxUseCase,
    DeletePropertyTaxUseCase,
    DeleteUnitTaxUseCase,
    UpdatePropertyTaxStatusUseCase,
    UpdatePropertyTaxUseCase,
    UpdateUnitTaxUseCase,
)
from src.app.use_cases.taxes.dtos import (
    PropertyTaxCommand,
    PropertyTaxResponse,
    TaxCommand,
    TaxStatusCommand,
    UnitTaxCommand,
    UnitTaxResponse,
    UnitTaxUpdateCommand,
)
from src.depends import get_path_invalidator, get_request_context, get_unit_of_work

router = APIRouter(prefix="/taxes", tags=["Tax"])


@router.post("/property", status_code=status.HTTP_201_CREATED, response_model=PropertyTaxResponse)
async def create_property_tax(
    request: PropertyTaxCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await CreatePropertyTaxUseCase(uow, invalidator).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/property/{tax_id}", status_code=status.HTTP_200_OK, response_model=PropertyTaxResponse)
async def update_property_tax(
    tax_id: UUID,
    request: TaxCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await UpdatePropertyTaxUseCase(uow, invalidator).execute(ctx, tax_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/property/{tax_id}/status", status_code=status.HTTP_200_OK, response_model=PropertyTaxResponse
)
async def update_property_tax_status(
    tax_id: UUID,
    request: TaxStatusCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Flip the paid flag of a property tax

    Marking paid stamps paid_date once; marking unpaid clears it. Repeating
    the same call leaves the record unchanged.
    """
    use_case = UpdatePropertyTaxStatusUseCase(uow, invalidator)
    result = await use_case.execute(ctx, tax_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/property/{tax_id}", status_code=status.HTTP_200_OK, response_model=PropertyTaxResponse
)
async def delete_property_tax(
    tax_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeletePropertyTaxUseCase(uow, invalidator).execute(ctx, tax_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/unit", status_code=status.HTTP_201_CREATED, response_model=UnitTaxResponse)
async def create_unit_tax(
    request: UnitTaxCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await CreateUnitTaxUseCase(uow, invalidator).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/unit/{tax_id}", status_code=status.HTTP_200_OK, response_model=UnitTaxResponse)
async def update_unit_tax(
    tax_id: UUID,
    request: UnitTaxUpdateCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await UpdateUnitTaxUseCase(uow, invalidator).execute(ctx, tax_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/unit/{tax_id}", status_code=status.HTTP_200_OK, response_model=UnitTaxResponse)
async def delete_unit_tax(
    tax_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeleteUnitTaxUseCase(uow, invalidator).execute(ctx, tax_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
