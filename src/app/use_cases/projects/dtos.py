"""
Project Use Case DTOs (Data Transfer Objects)

All Command and Response classes for projects, boards, columns and members.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import ProjectMemberRole, ProjectStatus, TaskPriority, TaskStatus

from ..shared_dtos import UserSummary


# ============================================================================
# Command DTOs
# ============================================================================


class ProjectCommand(BaseModel):
    """Create/update project payload"""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    status: ProjectStatus = ProjectStatus.active
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


class BoardCommand(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class ColumnCommand(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class ReorderColumnsCommand(BaseModel):
    """Column ids of one board in their new left-to-right order"""

    column_ids: List[UUID] = Field(..., min_length=1)


class AddMemberCommand(BaseModel):
    user_id: UUID
    role: ProjectMemberRole = ProjectMemberRole.member


class MemberRoleCommand(BaseModel):
    role: ProjectMemberRole


# ============================================================================
# Response DTOs
# ============================================================================


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: Optional[str] = None
    status: ProjectStatus
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    owner_id: UUID
    created_at: datetime
    updated_at: datetime


class MemberResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    project_id: UUID
    user_id: UUID
    role: ProjectMemberRole
    created_at: datetime


class ProjectMemberView(MemberResponse):
    user: Optional[UserSummary] = None


class LabelView(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    color: str


class TaskCard(BaseModel):
    """A task as shown on the board"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: Optional[str] = None
    priority: TaskPriority
    status: TaskStatus
    due_date: Optional[datetime] = None
    order: int
    assigned_to: Optional[UserSummary] = None
    labels: List[LabelView]


class ColumnResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    board_id: UUID
    name: str
    order: int


class ColumnView(ColumnResponse):
    tasks: List[TaskCard]


class BoardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    project_id: UUID
    name: str
    order: int


class BoardView(BoardResponse):
    columns: List[ColumnView]


class ProjectBoardResponse(ProjectResponse):
    """A project with boards, columns and tasks, each level sorted by order"""

    members: List[ProjectMemberView]
    boards: List[BoardView]
