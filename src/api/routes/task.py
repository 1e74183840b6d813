"""
Task API Routes

Kanban tasks, drag-and-drop reordering and task details (comments,
attachments and labels).
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import raise_for_error
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tasks import (
    AddAttachmentUseCase,
    AddCommentUseCase,
    AddLabelUseCase,
    CreateTaskUseCase,
    DeleteTaskUseCase,
    RemoveLabelUseCase,
    UpdateTaskOrderUseCase,
    UpdateTaskUseCase,
)
from src.app.use_cases.tasks.dtos import (
    AttachmentCommand,
    AttachmentResponse,
    CommentCommand,
    CommentResponse,
    LabelCommand,
    LabelResponse,
    TaskCommand,
    TaskDetailResponse,
    TaskResponse,
    TaskUpdateCommand,
    UpdateTaskOrderCommand,
)
from src.depends import get_path_invalidator, get_request_context, get_unit_of_work

router = APIRouter(tags=["Task"])


@router.post(
    "/projects/{project_id}/tasks",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskDetailResponse,
)
async def create_task(
    project_id: UUID,
    request: TaskCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Create Task

    The task is appended to its column. Every project member is notified,
    and the assignee gets a separate notice when it is not the creator.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: PROJECT_NOT_FOUND or COLUMN_NOT_FOUND
        - 500 Internal Server Error: TASK_CREATE_ERROR
    """
    use_case = CreateTaskUseCase(uow, invalidator)
    result = await use_case.execute(ctx, project_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/tasks/order", status_code=status.HTTP_200_OK, response_model=List[TaskResponse])
async def update_task_order(
    request: UpdateTaskOrderCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    """
    Update Task Order

    Applies every (id, column_id, order) triple in one transaction. If any
    task is missing no task changes.

    Raises:
        - 401 Unauthorized: Missing or invalid token
        - 404 Not Found: TASK_NOT_FOUND
        - 500 Internal Server Error: TASK_REORDER_ERROR
    """
    use_case = UpdateTaskOrderUseCase(uow, invalidator)
    result = await use_case.execute(ctx, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/tasks/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskDetailResponse)
async def update_task(
    task_id: UUID,
    request: TaskUpdateCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await UpdateTaskUseCase(uow, invalidator).execute(ctx, task_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/tasks/{task_id}", status_code=status.HTTP_200_OK, response_model=TaskResponse)
async def delete_task(
    task_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await DeleteTaskUseCase(uow, invalidator).execute(ctx, task_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/tasks/{task_id}/comments",
    status_code=status.HTTP_201_CREATED,
    response_model=CommentResponse,
)
async def add_comment(
    task_id: UUID,
    request: CommentCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await AddCommentUseCase(uow, invalidator).execute(ctx, task_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/tasks/{task_id}/attachments",
    status_code=status.HTTP_201_CREATED,
    response_model=AttachmentResponse,
)
async def add_attachment(
    task_id: UUID,
    request: AttachmentCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await AddAttachmentUseCase(uow, invalidator).execute(ctx, task_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/tasks/{task_id}/labels", status_code=status.HTTP_201_CREATED, response_model=LabelResponse
)
async def add_label(
    task_id: UUID,
    request: LabelCommand,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await AddLabelUseCase(uow, invalidator).execute(ctx, task_id, request)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/tasks/{task_id}/labels/{label_id}",
    status_code=status.HTTP_200_OK,
    response_model=LabelResponse,
)
async def remove_label(
    task_id: UUID,
    label_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
    invalidator: PathInvalidator = Depends(get_path_invalidator),
):
    result = await RemoveLabelUseCase(uow, invalidator).execute(ctx, task_id, label_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
