from typing import List

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared_dtos import UserSummary
from src.app.use_cases.users import GetUsersUseCase
from src.depends import get_request_context, get_unit_of_work

router = APIRouter(tags=["User"])


@router.get("/users", status_code=status.HTTP_200_OK, response_model=List[UserSummary])
async def list_users(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Users

    Every user ordered by first name, for the assignee and member pickers.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 500 Internal Server Error: Server error
    """
    result = await GetUsersUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
