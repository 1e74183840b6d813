"""
Notification Use Cases
"""

from .notification_use_cases import (
    GetNotificationsUseCase,
    GetUnreadCountUseCase,
    MarkNotificationReadUseCase,
    MarkAllNotificationsReadUseCase,
    DeleteNotificationUseCase,
    DeleteAllNotificationsUseCase,
)

__all__ = [
    "GetNotificationsUseCase",
    "GetUnreadCountUseCase",
    "MarkNotificationReadUseCase",
    "MarkAllNotificationsReadUseCase",
    "DeleteNotificationUseCase",
    "DeleteAllNotificationsUseCase",
]
