"""
Project API Routes

Kanban projects with their boards, columns and members.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.projects import (
    AddMemberUseCase,
    CreateBoardUseCase,
    CreateColumnUseCase,
    CreateProjectUseCase,
    DeleteBoardUseCase,
    DeleteColumnUseCase,
    DeleteProjectUseCase,
    GetProjectBoardUseCase,
    GetProjectsUseCase,
    RemoveMemberUseCase,
    ReorderColumnsUseCase,
    UpdateBoardUseCase,
    UpdateColumnUseCase,
    UpdateMemberRoleUseCase,
    UpdateProjectUseCase,
)
from src.app.use_cases.projects.dtos import (
    AddMemberCommand,
    BoardCommand,
    BoardResponse,
    ColumnCommand,
    ColumnResponse,
    MemberResponse,
    MemberRoleCommand,
    ProjectBoardResponse,
    ProjectCommand,
    ProjectResponse,
    ReorderColumnsCommand,
)
from src.depends import get_path_invalidator, get_request_context, get_unit_of_work

router = APIRouter(tags=["Project"])


# ============================================================================
# Projects
# ============================================================================


@router.get("/projects", status_code=status.HTTP_200_OK, response_model=List[ProjectResponse])
async def list_projects(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Projects the caller owns or is a member of"""
    result = await GetProjectsUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/projects", status_code=status.HTTP_201_CREATED, response_model=ProjectResponse)
async def create_project(
    request: ProjectCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Create Project

    The caller becomes the OWNER member, and a "Main Board" with the
    To Do / In Progress / Review / Done columns is created with it.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 500 Internal Server Error: PROJECT_CREATE_ERROR
    """
    use_case = CreateProjectUseCase(uow, invalidator)
    result = await use_case.execute(ctx, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/projects/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectBoardResponse
)
async def get_project(
    project_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """A project with members and boards -> columns -> tasks, each ordered by `order`"""
    result = await GetProjectBoardUseCase(uow).execute(ctx, project_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/projects/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    request: ProjectCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await UpdateProjectUseCase(uow, invalidator).execute(ctx, project_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/projects/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectResponse
)
async def delete_project(
    project_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeleteProjectUseCase(uow, invalidator).execute(ctx, project_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


# ============================================================================
# Members
# ============================================================================


@router.post(
    "/projects/{project_id}/members",
    status_code=status.HTTP_201_CREATED,
    response_model=MemberResponse,
)
async def add_member(
    project_id: UUID,
    request: AddMemberCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Add Project Member

    Raises:
        - 400 Bad Request: INVALID_MEMBER (user is already a member)
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: PROJECT_NOT_FOUND or USER_NOT_FOUND
        - 500 Internal Server Error: MEMBER_CREATE_ERROR
    """
    result = await AddMemberUseCase(uow, invalidator).execute(ctx, project_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.patch(
    "/projects/{project_id}/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=MemberResponse,
)
async def update_member_role(
    project_id: UUID,
    user_id: UUID,
    request: MemberRoleCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    use_case = UpdateMemberRoleUseCase(uow, invalidator)
    result = await use_case.execute(ctx, project_id, user_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/projects/{project_id}/members/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=MemberResponse,
)
async def remove_member(
    project_id: UUID,
    user_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await RemoveMemberUseCase(uow, invalidator).execute(ctx, project_id, user_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


# ============================================================================
# Boards and columns
# ============================================================================


@router.post(
    "/projects/{project_id}/boards",
    status_code=status.HTTP_201_CREATED,
    response_model=BoardResponse,
)
async def create_board(
    project_id: UUID,
    request: BoardCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await CreateBoardUseCase(uow, invalidator).execute(ctx, project_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/boards/{board_id}", status_code=status.HTTP_200_OK, response_model=BoardResponse)
async def update_board(
    board_id: UUID,
    request: BoardCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await UpdateBoardUseCase(uow, invalidator).execute(ctx, board_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/boards/{board_id}", status_code=status.HTTP_200_OK, response_model=BoardResponse)
async def delete_board(
    board_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeleteBoardUseCase(uow, invalidator).execute(ctx, board_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/boards/{board_id}/columns",
    status_code=status.HTTP_201_CREATED,
    response_model=ColumnResponse,
)
async def create_column(
    board_id: UUID,
    request: ColumnCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await CreateColumnUseCase(uow, invalidator).execute(ctx, board_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put(
    "/boards/{board_id}/columns/order",
    status_code=status.HTTP_200_OK,
    response_model=List[ColumnResponse],
)
async def reorder_columns(
    board_id: UUID,
    request: ReorderColumnsCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """Each column's order becomes its index in `column_ids`, in one transaction"""
    result = await ReorderColumnsUseCase(uow, invalidator).execute(ctx, board_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.put("/columns/{column_id}", status_code=status.HTTP_200_OK, response_model=ColumnResponse)
async def update_column(
    column_id: UUID,
    request: ColumnCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await UpdateColumnUseCase(uow, invalidator).execute(ctx, column_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/columns/{column_id}", status_code=status.HTTP_200_OK, response_model=ColumnResponse
)
async def delete_column(
    column_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeleteColumnUseCase(uow, invalidator).execute(ctx, column_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
