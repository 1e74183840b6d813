"""
Task Entities

Kanban cards and everything hanging off them: labels, comments,
attachments and the activity trail.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from ..base import utc_now
from .enums import TaskActivityType, TaskPriority, TaskStatus
from .user import User

if TYPE_CHECKING:
    from .project import BoardColumn, Project


class Task(SQLModel, table=True):
    """
    Task entity - a card in a board column.

    Business Rules:
    - New tasks are appended: order = max(order in column) + 1
    - Reorder rewrites column_id and order for every listed task atomically
    """

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=5000)
    priority: TaskPriority = Field(default=TaskPriority.medium)
    status: TaskStatus = Field(default=TaskStatus.todo)
    due_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    order: int = Field(default=0)

    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    column_id: UUID = Field(foreign_key="columns.id", nullable=False, index=True)
    created_by_id: UUID = Field(foreign_key="users.id", nullable=False)
    assigned_to_id: Optional[UUID] = Field(default=None, foreign_key="users.id", index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    # Relationships
    project: Optional["Project"] = Relationship(back_populates="tasks")
    column: Optional["BoardColumn"] = Relationship(back_populates="tasks")
    assigned_to: Optional[User] = Relationship(
        sa_relationship_kwargs={"foreign_keys": "Task.assigned_to_id"}
    )
    labels: list["TaskLabel"] = Relationship(back_populates="task")
    comments: list["TaskComment"] = Relationship(back_populates="task")
    attachments: list["TaskAttachment"] = Relationship(back_populates="task")
    activities: list["TaskActivity"] = Relationship(back_populates="task")

    __table_args__ = (Index("idx_task_column_order", "column_id", "order"),)


class TaskLabel(SQLModel, table=True):
    __tablename__ = "task_labels"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    task_id: UUID = Field(foreign_key="tasks.id", nullable=False, index=True)
    name: str = Field(max_length=100)
    color: str = Field(max_length=20)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    task: Optional[Task] = Relationship(back_populates="labels")


class TaskComment(SQLModel, table=True):
    __tablename__ = "task_comments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    task_id: UUID = Field(foreign_key="tasks.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False)
    content: str = Field(max_length=5000)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    task: Optional[Task] = Relationship(back_populates="comments")
    user: Optional[User] = Relationship()


class TaskAttachment(SQLModel, table=True):
    __tablename__ = "task_attachments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    task_id: UUID = Field(foreign_key="tasks.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False)
    name: str = Field(max_length=255)
    file_url: str = Field(max_length=1000)
    file_type: Optional[str] = Field(default=None, max_length=100)
    file_size: Optional[int] = Field(default=None)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    task: Optional[Task] = Relationship(back_populates="attachments")


class TaskActivity(SQLModel, table=True):
    """
    TaskActivity entity - human-readable trail shown on the task card.

    Distinct from AuditLog: activities are per-task and written in the same
    transaction as the task change.
    """

    __tablename__ = "task_activities"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    task_id: UUID = Field(foreign_key="tasks.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False)
    type: TaskActivityType = Field(nullable=False)
    content: str = Field(max_length=1000)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    task: Optional[Task] = Relationship(back_populates="activities")
