from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Board, BoardColumn, Project, ProjectMember


class IProjectRepository(ABC):
    """Kanban project repository interface - projects, members, boards, columns"""

    # Projects

    @abstractmethod
    async def create(self, project: Project) -> Project:
        pass

    @abstractmethod
    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project without relations"""
        pass

    @abstractmethod
    async def get_with_board(self, project_id: UUID) -> Optional[Project]:
        """Get project with members, boards -> columns -> tasks ordered by `order`"""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> List[Project]:
        """Projects the user owns or is a member of, newest first"""
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        pass

    @abstractmethod
    async def delete(self, project_id: UUID) -> None:
        """Delete a project with its boards, columns, tasks and members"""
        pass

    # Members

    @abstractmethod
    async def add_member(self, member: ProjectMember) -> ProjectMember:
        pass

    @abstractmethod
    async def get_member(self, project_id: UUID, user_id: UUID) -> Optional[ProjectMember]:
        pass

    @abstractmethod
    async def update_member(self, member: ProjectMember) -> ProjectMember:
        pass

    @abstractmethod
    async def remove_member(self, project_id: UUID, user_id: UUID) -> None:
        pass

    @abstractmethod
    async def list_member_user_ids(self, project_id: UUID) -> List[UUID]:
        """User IDs of every member of the project"""
        pass

    # Boards

    @abstractmethod
    async def create_board(self, board: Board) -> Board:
        pass

    @abstractmethod
    async def get_board(self, board_id: UUID) -> Optional[Board]:
        pass

    @abstractmethod
    async def update_board(self, board: Board) -> Board:
        pass

    @abstractmethod
    async def delete_board(self, board_id: UUID) -> None:
        """Delete a board with its columns and their tasks"""
        pass

    @abstractmethod
    async def next_board_order(self, project_id: UUID) -> int:
        pass

    # Columns

    @abstractmethod
    async def create_column(self, column: BoardColumn) -> BoardColumn:
        pass

    @abstractmethod
    async def get_column(self, column_id: UUID) -> Optional[BoardColumn]:
        pass

    @abstractmethod
    async def get_columns(self, column_ids: List[UUID]) -> List[BoardColumn]:
        pass

    @abstractmethod
    async def update_column(self, column: BoardColumn) -> BoardColumn:
        pass

    @abstractmethod
    async def delete_column(self, column_id: UUID) -> None:
        """Delete a column with its tasks"""
        pass

    @abstractmethod
    async def next_column_order(self, board_id: UUID) -> int:
        """max(order) + 1 for the board's columns, 0 when empty"""
        pass
