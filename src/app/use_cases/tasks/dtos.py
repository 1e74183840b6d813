"""
Task Use Case DTOs (Data Transfer Objects)

All Command and Response classes for kanban tasks.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import Task, TaskPriority, TaskStatus

from ..shared_dtos import UserSummary


# ============================================================================
# Command DTOs
# ============================================================================


class TaskCommand(BaseModel):
    """Create task payload"""

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    priority: TaskPriority = TaskPriority.medium
    status: TaskStatus = TaskStatus.todo
    due_date: Optional[datetime] = None
    column_id: UUID
    assigned_to_id: Optional[UUID] = None


class TaskUpdateCommand(BaseModel):
    """Partial update; omitted fields are left unchanged"""

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None
    assigned_to_id: Optional[UUID] = None
    column_id: Optional[UUID] = None
    order: Optional[int] = Field(None, ge=0)


class TaskPosition(BaseModel):
    id: UUID
    column_id: UUID
    order: int = Field(..., ge=0)


class UpdateTaskOrderCommand(BaseModel):
    """New column and position of every task moved by a drag and drop"""

    tasks: List[TaskPosition] = Field(..., min_length=1)


class CommentCommand(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)


class AttachmentCommand(BaseModel):
    """Attachment record for a file already stored at file_url"""

    name: str = Field(..., min_length=1, max_length=255)
    file_url: str = Field(..., min_length=1, max_length=1000)
    file_type: Optional[str] = Field(None, max_length=100)
    file_size: Optional[int] = Field(None, ge=0)


class LabelCommand(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field(..., min_length=1, max_length=20)


# ============================================================================
# Response DTOs
# ============================================================================


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: Optional[str] = None
    priority: TaskPriority
    status: TaskStatus
    due_date: Optional[datetime] = None
    order: int
    project_id: UUID
    column_id: UUID
    created_by_id: UUID
    assigned_to_id: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    task_id: UUID
    user_id: UUID
    content: str
    created_at: datetime


class AttachmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    task_id: UUID
    user_id: UUID
    name: str
    file_url: str
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    created_at: datetime


class LabelResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    task_id: UUID
    name: str
    color: str



class TaskDetailResponse(TaskResponse):
    """A task with its assignee, labels and comment/attachment counts"""

    assigned_to: Optional[UserSummary] = None
    labels: List[LabelResponse] = []
    comment_count: int = 0
    attachment_count: int = 0

    @classmethod
    def from_task(cls, task: Task) -> "TaskDetailResponse":
        """Build from a task loaded with assigned_to, labels, comments and attachments"""
        return cls.model_validate(task).model_copy(
            update={
                "comment_count": len(task.comments),
                "attachment_count": len(task.attachments),
            }
        )
