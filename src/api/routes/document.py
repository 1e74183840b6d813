"""
Document API Routes

File storage is handled elsewhere; these routes record documents that
point at an already stored file URL.
"""

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.documents import CreateDocumentUseCase, DocumentCommand, DocumentResponse
from src.depends import get_path_invalidator, get_request_context, get_unit_of_work

router = APIRouter(prefix="/documents", tags=["Document"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=DocumentResponse)
async def create_document(
    request: DocumentCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await CreateDocumentUseCase(uow, invalidator).execute(ctx, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
