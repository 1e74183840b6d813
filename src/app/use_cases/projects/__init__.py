"""
Project Use Cases

Kanban projects with their members, boards and columns.
"""

from .project_use_cases import (
    CreateProjectUseCase,
    GetProjectsUseCase,
    GetProjectBoardUseCase,
    UpdateProjectUseCase,
    DeleteProjectUseCase,
)
from .board_use_cases import (
    CreateBoardUseCase,
    UpdateBoardUseCase,
    DeleteBoardUseCase,
    CreateColumnUseCase,
    UpdateColumnUseCase,
    DeleteColumnUseCase,
    ReorderColumnsUseCase,
)
from .member_use_cases import AddMemberUseCase, UpdateMemberRoleUseCase, RemoveMemberUseCase

__all__ = [
    "CreateProjectUseCase",
    "GetProjectsUseCase",
    "GetProjectBoardUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "CreateBoardUseCase",
    "UpdateBoardUseCase",
    "DeleteBoardUseCase",
    "CreateColumnUseCase",
    "UpdateColumnUseCase",
    "DeleteColumnUseCase",
    "ReorderColumnsUseCase",
    "AddMemberUseCase",
    "UpdateMemberRoleUseCase",
    "RemoveMemberUseCase",
]
