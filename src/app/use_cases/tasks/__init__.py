"""
Task Use Cases

Kanban cards: lifecycle, drag and drop ordering, comments, attachments
and labels.
"""

from .create_task_use_case import CreateTaskUseCase
from .update_task_use_case import UpdateTaskUseCase, DeleteTaskUseCase
from .update_task_order_use_case import UpdateTaskOrderUseCase
from .task_detail_use_cases import (
    AddCommentUseCase,
    AddAttachmentUseCase,
    AddLabelUseCase,
    RemoveLabelUseCase,
)

__all__ = [
    "CreateTaskUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "UpdateTaskOrderUseCase",
    "AddCommentUseCase",
    "AddAttachmentUseCase",
    "AddLabelUseCase",
    "RemoveLabelUseCase",
]
