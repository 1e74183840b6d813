from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import selectinload
from sqlmodel import col, delete, func, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.task_repository import delete_tasks_where
from src.app.repositories.project_repository import IProjectRepository
from src.domain.entities import Board, BoardColumn, Project, ProjectMember, Task


class ProjectRepository(IProjectRepository):
    """Kanban project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _save(self, entity):
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    # Projects

    async def create(self, project: Project) -> Project:
        return await self._save(project)

    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        result = await self.session.exec(select(Project).where(Project.id == project_id))
        return result.one_or_none()

    async def get_with_board(self, project_id: UUID) -> Optional[Project]:
        tasks = selectinload(Project.boards).selectinload(Board.columns).selectinload(
            BoardColumn.tasks
        )
        stmt = (
            select(Project)
            .where(Project.id == project_id)
            .options(
                selectinload(Project.members).selectinload(ProjectMember.user),
                tasks.selectinload(Task.assigned_to),
                tasks.selectinload(Task.labels),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_for_user(self, user_id: UUID) -> List[Project]:
        member_of = select(ProjectMember.project_id).where(ProjectMember.user_id == user_id)
        stmt = (
            select(Project)
            .where(or_(Project.owner_id == user_id, col(Project.id).in_(member_of)))
            .order_by(col(Project.created_at).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def update(self, project: Project) -> Project:
        return await self._save(project)

    async def delete(self, project_id: UUID) -> None:
        board_ids = select(Board.id).where(Board.project_id == project_id)
        await delete_tasks_where(self.session, Task.project_id == project_id)
        await self.session.exec(delete(BoardColumn).where(col(BoardColumn.board_id).in_(board_ids)))
        await self.session.exec(delete(Board).where(Board.project_id == project_id))
        await self.session.exec(delete(ProjectMember).where(ProjectMember.project_id == project_id))
        await self.session.exec(delete(Project).where(Project.id == project_id))

    # Members

    async def add_member(self, member: ProjectMember) -> ProjectMember:
        return await self._save(member)

    async def get_member(self, project_id: UUID, user_id: UUID) -> Optional[ProjectMember]:
        stmt = select(ProjectMember).where(
            ProjectMember.project_id == project_id, ProjectMember.user_id == user_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update_member(self, member: ProjectMember) -> ProjectMember:
        return await self._save(member)

    async def remove_member(self, project_id: UUID, user_id: UUID) -> None:
        await self.session.exec(
            delete(ProjectMember).where(
                ProjectMember.project_id == project_id, ProjectMember.user_id == user_id
            )
        )

    async def list_member_user_ids(self, project_id: UUID) -> List[UUID]:
        stmt = select(ProjectMember.user_id).where(ProjectMember.project_id == project_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    # Boards

    async def create_board(self, board: Board) -> Board:
        return await self._save(board)

    async def get_board(self, board_id: UUID) -> Optional[Board]:
        result = await self.session.exec(select(Board).where(Board.id == board_id))
        return result.one_or_none()

    async def update_board(self, board: Board) -> Board:
        return await self._save(board)

    async def delete_board(self, board_id: UUID) -> None:
        column_ids = select(BoardColumn.id).where(BoardColumn.board_id == board_id)
        await delete_tasks_where(self.session, col(Task.column_id).in_(column_ids))
        await self.session.exec(delete(BoardColumn).where(BoardColumn.board_id == board_id))
        await self.session.exec(delete(Board).where(Board.id == board_id))

    async def next_board_order(self, project_id: UUID) -> int:
        stmt = select(func.max(Board.order)).where(Board.project_id == project_id)
        result = await self.session.exec(stmt)
        last_order = result.one()
        return (last_order if last_order is not None else -1) + 1

    # Columns

    async def create_column(self, column: BoardColumn) -> BoardColumn:
        return await self._save(column)

    async def get_column(self, column_id: UUID) -> Optional[BoardColumn]:
        result = await self.session.exec(select(BoardColumn).where(BoardColumn.id == column_id))
        return result.one_or_none()

    async def get_columns(self, column_ids: List[UUID]) -> List[BoardColumn]:
        result = await self.session.exec(
            select(BoardColumn).where(col(BoardColumn.id).in_(column_ids))
        )
        return list(result.all())

    async def update_column(self, column: BoardColumn) -> BoardColumn:
        self.session.add(column)
        await self.session.flush()
        return column

    async def delete_column(self, column_id: UUID) -> None:
        await delete_tasks_where(self.session, Task.column_id == column_id)
        await self.session.exec(delete(BoardColumn).where(BoardColumn.id == column_id))

    async def next_column_order(self, board_id: UUID) -> int:
        stmt = select(func.max(BoardColumn.order)).where(BoardColumn.board_id == board_id)
        result = await self.session.exec(stmt)
        last_order = result.one()
        return (last_order if last_order is not None else -1) + 1
