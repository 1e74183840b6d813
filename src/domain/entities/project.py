"""
Project Entities

Kanban projects, their membership and their board/column structure.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from ..base import utc_now
from .enums import ProjectMemberRole, ProjectStatus
from .user import User

if TYPE_CHECKING:
    from .task import Task

DEFAULT_COLUMNS = ("To Do", "In Progress", "Review", "Done")


class Project(SQLModel, table=True):
    """
    Project entity - container of boards and tasks.

    Business Rules:
    - A new project gets one board with DEFAULT_COLUMNS
    - The owner is added as an OWNER member
    - Deleting a project removes its boards, columns, tasks and members
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=2000)
    status: ProjectStatus = Field(default=ProjectStatus.active)
    start_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    end_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    owner_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    # Relationships
    owner: Optional[User] = Relationship()
    members: list["ProjectMember"] = Relationship(back_populates="project")
    boards: list["Board"] = Relationship(back_populates="project")
    tasks: list["Task"] = Relationship(back_populates="project")


class ProjectMember(SQLModel, table=True):
    """
    ProjectMember entity - user membership in a project.

    Business Rules:
    - A user is a member of a project at most once
    """

    __tablename__ = "project_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    role: ProjectMemberRole = Field(default=ProjectMemberRole.member)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    project: Optional[Project] = Relationship(back_populates="members")
    user: Optional[User] = Relationship()

    __table_args__ = (
        Index("idx_project_member_unique", "project_id", "user_id", unique=True),
    )


class Board(SQLModel, table=True):
    """Board entity - ordered set of columns within a project."""

    __tablename__ = "boards"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    name: str = Field(max_length=255)
    order: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    project: Optional[Project] = Relationship(back_populates="boards")
    columns: list["BoardColumn"] = Relationship(back_populates="board")


class BoardColumn(SQLModel, table=True):
    """
    BoardColumn entity - a kanban lane.

    Business Rules:
    - order is a dense 0..n-1 index after any reorder
    """

    __tablename__ = "columns"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    board_id: UUID = Field(foreign_key="boards.id", nullable=False, index=True)
    name: str = Field(max_length=255)
    order: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    board: Optional[Board] = Relationship(back_populates="columns")
    tasks: list["Task"] = Relationship(back_populates="column")
