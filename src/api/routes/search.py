from fastapi import APIRouter, Depends, Query, status

from src.api.error import raise_for_error
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.search import GlobalSearchUseCase
from src.app.use_cases.search.dtos import SearchResponse
from src.depends import get_request_context, get_unit_of_work

router = APIRouter(tags=["Search"])


@router.get("/search", status_code=status.HTTP_200_OK, response_model=SearchResponse)
async def search(
    q: str = Query("", description="Case-insensitive search term"),
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Top five matching properties, spaces and tenants"""
    result = await GlobalSearchUseCase(uow).execute(ctx, q)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
