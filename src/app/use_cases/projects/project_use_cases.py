"""
Project Use Cases

Kanban projects. Project changes are audited but not notified.
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services import paths
from src.app.services.mutation_envelope import (
    ENVELOPE_ERRORS,
    UNAUTHORIZED,
    AuditEntry,
    MutationEnvelope,
)
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import (
    DEFAULT_COLUMNS,
    AuditAction,
    Board,
    BoardColumn,
    EntityType,
    Project,
    ProjectMember,
    ProjectMemberRole,
)

from .dtos import ProjectBoardResponse, ProjectCommand, ProjectResponse

logger = logging.getLogger(__name__)

PROJECT_NOT_FOUND = Error("PROJECT_NOT_FOUND", "Project not found")

MAIN_BOARD_NAME = "Main Board"


async def create_board_with_columns(uow: UnitOfWork, project_id: UUID, name: str, order: int) -> Board:
    """Create a board holding DEFAULT_COLUMNS in order"""
    board = await uow.projects.create_board(Board(project_id=project_id, name=name, order=order))
    for index, column_name in enumerate(DEFAULT_COLUMNS):
        await uow.projects.create_column(
            BoardColumn(board_id=board.id, name=column_name, order=index)
        )
    return board


class CreateProjectUseCase:
    """
    Use case for creating a project.

    Business Rules:
    - The acting user owns the project and is added as an OWNER member
    - A "Main Board" with To Do / In Progress / Review / Done is created
    - Project, membership, board and columns commit together
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, command: ProjectCommand) -> Result[ProjectResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                project = await self.uow.projects.create(
                    Project(**command.model_dump(), owner_id=ctx.actor_id)
                )
                await self.uow.projects.add_member(
                    ProjectMember(
                        project_id=project.id,
                        user_id=ctx.actor_id,
                        role=ProjectMemberRole.owner,
                    )
                )
                await create_board_with_columns(self.uow, project.id, MAIN_BOARD_NAME, 0)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(project.id),
                        entity_type=EntityType.project,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    paths=[paths.PROJECTS],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Project creation failed")
                return Return.err(
                    Error("PROJECT_CREATE_ERROR", "Failed to create project. Please try again.")
                )

            return Return.ok(ProjectResponse.model_validate(project))


class GetProjectsUseCase:
    """Projects the actor owns or is a member of, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[List[ProjectResponse]]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                projects = await self.uow.projects.list_for_user(ctx.actor_id)
            except SQLAlchemyError:
                logger.exception("Project listing failed")
                return Return.err(Error("PROJECT_FETCH_ERROR", "Failed to fetch projects"))

            return Return.ok([ProjectResponse.model_validate(p) for p in projects])


class GetProjectBoardUseCase:
    """A project with members and boards → columns → tasks, ordered by `order`"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext, project_id: UUID) -> Result[ProjectBoardResponse]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                project = await self.uow.projects.get_with_board(project_id)
            except SQLAlchemyError:
                logger.exception("Project fetch failed")
                return Return.err(Error("PROJECT_FETCH_ERROR", "Failed to fetch project"))

            if project is None:
                return Return.err(PROJECT_NOT_FOUND)

            response = ProjectBoardResponse.model_validate(project)
            response.boards.sort(key=lambda b: b.order)
            for board in response.boards:
                board.columns.sort(key=lambda c: c.order)
                for column in board.columns:
                    column.tasks.sort(key=lambda t: t.order)
            return Return.ok(response)


class UpdateProjectUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, project_id: UUID, command: ProjectCommand
    ) -> Result[ProjectResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                project = await self.uow.projects.get_by_id(project_id)
                if project is None:
                    return Return.err(PROJECT_NOT_FOUND)

                for field, value in command.model_dump().items():
                    setattr(project, field, value)
                project.updated_at = utc_now()
                project = await self.uow.projects.update(project)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(project.id),
                        entity_type=EntityType.project,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                    ),
                    paths=[paths.PROJECTS, paths.project_detail(project.id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Project update failed")
                return Return.err(
                    Error("PROJECT_UPDATE_ERROR", "Failed to update project. Please try again.")
                )

            return Return.ok(ProjectResponse.model_validate(project))


class DeleteProjectUseCase:
    """Delete a project with its members, boards, columns and tasks"""

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, project_id: UUID) -> Result[ProjectResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                project = await self.uow.projects.get_by_id(project_id)
                if project is None:
                    return Return.err(PROJECT_NOT_FOUND)

                response = ProjectResponse.model_validate(project)
                await self.uow.projects.delete(project_id)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(project_id),
                        entity_type=EntityType.project,
                        action=AuditAction.delete,
                    ),
                    paths=[paths.PROJECTS],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Project deletion failed")
                return Return.err(
                    Error("PROJECT_DELETE_ERROR", "Failed to delete project. Please try again.")
                )

            return Return.ok(response)
