"""
Notification API Routes

The caller's own notification inbox.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.notifications import (
    DeleteAllNotificationsUseCase,
    DeleteNotificationUseCase,
    GetNotificationsUseCase,
    GetUnreadCountUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from src.app.use_cases.notifications.dtos import (
    AffectedCountResponse,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)
from src.depends import get_request_context, get_unit_of_work

router = APIRouter(prefix="/notifications", tags=["Notification"])


@router.get("", status_code=status.HTTP_200_OK, response_model=NotificationListResponse)
async def list_notifications(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Notifications

    Unexpired notifications for the caller: unread first, then by priority,
    then newest first, capped at NOTIFICATION_PAGE_LIMIT.
    """
    use_case = GetNotificationsUseCase(uow, page_limit=ApplicationConfig.NOTIFICATION_PAGE_LIMIT)
    result = await use_case.execute(ctx)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/unread-count", status_code=status.HTTP_200_OK, response_model=UnreadCountResponse)
async def get_unread_count(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUnreadCountUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/read-all", status_code=status.HTTP_200_OK, response_model=AffectedCountResponse)
async def mark_all_read(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkAllNotificationsReadUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/{notification_id}/read", status_code=status.HTTP_200_OK, response_model=NotificationResponse
)
async def mark_read(
    notification_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await MarkNotificationReadUseCase(uow).execute(ctx, notification_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("", status_code=status.HTTP_200_OK, response_model=AffectedCountResponse)
async def delete_all_notifications(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteAllNotificationsUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete(
    "/{notification_id}", status_code=status.HTTP_200_OK, response_model=NotificationResponse
)
async def delete_notification(
    notification_id: UUID,
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await DeleteNotificationUseCase(uow).execute(ctx, notification_id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value
