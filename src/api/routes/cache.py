"""
Cache API Routes

Lets page renderers poll and clear the stale marks left by mutations.
"""

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from libs.result import Error
from src.api.error import ClientError, ServerError
from src.app.services.mutation_envelope import UNAUTHORIZED
from src.app.services.path_invalidator import InvalidationError, PathInvalidator
from src.app.services.request_context import RequestContext
from src.depends import get_path_invalidator, get_request_context

router = APIRouter(prefix="/cache", tags=["Cache"])


class StaleStatusResponse(BaseModel):
    path: str
    stale: bool


def _require_actor(ctx: RequestContext):
    if not ctx.is_authenticated:
        raise ClientError(UNAUTHORIZED, status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/stale", status_code=status.HTTP_200_OK, response_model=StaleStatusResponse)
async def get_stale_status(
    path: str = Query(..., min_length=1),
    ctx: RequestContext = Depends(get_request_context),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    _require_actor(ctx)
    try:
        stale = await invalidator.is_stale(path)
    except InvalidationError:
        raise ServerError(Error("CACHE_READ_ERROR", "Failed to read cache state"))
    return StaleStatusResponse(path=path, stale=stale)


@router.delete("/stale", status_code=status.HTTP_200_OK, response_model=StaleStatusResponse)
async def clear_stale_status(
    path: str = Query(..., min_length=1),
    ctx: RequestContext = Depends(get_request_context),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """Called by a renderer once it has re-rendered `path`"""
    _require_actor(ctx)
    try:
        await invalidator.clear(path)
    except InvalidationError:
        raise ServerError(Error("CACHE_CLEAR_ERROR", "Failed to clear cache state"))
    return StaleStatusResponse(path=path, stale=False)
