"""
Board and Column Use Cases

Board structure of a project. Changes are audited but not notified.
"""

import logging
from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services import paths
from src.app.services.mutation_envelope import ENVELOPE_ERRORS, AuditEntry, MutationEnvelope
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, BoardColumn, EntityType

from .dtos import (
    BoardCommand,
    BoardResponse,
    ColumnCommand,
    ColumnResponse,
    ReorderColumnsCommand,
)
from .project_use_cases import PROJECT_NOT_FOUND, create_board_with_columns

logger = logging.getLogger(__name__)

BOARD_NOT_FOUND = Error("BOARD_NOT_FOUND", "Board not found")
COLUMN_NOT_FOUND = Error("COLUMN_NOT_FOUND", "Column not found")


class CreateBoardUseCase:
    """Add a board, with the default columns, after the project's last board"""

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, project_id: UUID, command: BoardCommand
    ) -> Result[BoardResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                project = await self.uow.projects.get_by_id(project_id)
                if project is None:
                    return Return.err(PROJECT_NOT_FOUND)

                order = await self.uow.projects.next_board_order(project_id)
                board = await create_board_with_columns(self.uow, project_id, command.name, order)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(board.id),
                        entity_type=EntityType.board,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    paths=[paths.project_detail(project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Board creation failed")
                return Return.err(
                    Error("BOARD_CREATE_ERROR", "Failed to create board. Please try again.")
                )

            return Return.ok(BoardResponse.model_validate(board))


class UpdateBoardUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, board_id: UUID, command: BoardCommand
    ) -> Result[BoardResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                board = await self.uow.projects.get_board(board_id)
                if board is None:
                    return Return.err(BOARD_NOT_FOUND)

                board.name = command.name
                board = await self.uow.projects.update_board(board)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(board.id),
                        entity_type=EntityType.board,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                    ),
                    paths=[paths.project_detail(board.project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Board update failed")
                return Return.err(
                    Error("BOARD_UPDATE_ERROR", "Failed to update board. Please try again.")
                )

            return Return.ok(BoardResponse.model_validate(board))


class DeleteBoardUseCase:
    """Delete a board with its columns and their tasks"""

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, board_id: UUID) -> Result[BoardResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                board = await self.uow.projects.get_board(board_id)
                if board is None:
                    return Return.err(BOARD_NOT_FOUND)

                response = BoardResponse.model_validate(board)
                await self.uow.projects.delete_board(board_id)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(board_id),
                        entity_type=EntityType.board,
                        action=AuditAction.delete,
                    ),
                    paths=[paths.project_detail(response.project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Board deletion failed")
                return Return.err(
                    Error("BOARD_DELETE_ERROR", "Failed to delete board. Please try again.")
                )

            return Return.ok(response)


class CreateColumnUseCase:
    """Append a column to the right of the board's last column"""

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, board_id: UUID, command: ColumnCommand
    ) -> Result[ColumnResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                board = await self.uow.projects.get_board(board_id)
                if board is None:
                    return Return.err(BOARD_NOT_FOUND)

                order = await self.uow.projects.next_column_order(board_id)
                column = await self.uow.projects.create_column(
                    BoardColumn(board_id=board_id, name=command.name, order=order)
                )
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(column.id),
                        entity_type=EntityType.column,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    paths=[paths.project_detail(board.project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Column creation failed")
                return Return.err(
                    Error("COLUMN_CREATE_ERROR", "Failed to create column. Please try again.")
                )

            return Return.ok(ColumnResponse.model_validate(column))


class UpdateColumnUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, column_id: UUID, command: ColumnCommand
    ) -> Result[ColumnResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                column = await self.uow.projects.get_column(column_id)
                if column is None:
                    return Return.err(COLUMN_NOT_FOUND)

                column.name = command.name
                column = await self.uow.projects.update_column(column)
                await self.uow.commit()

                board = await self.uow.projects.get_board(column.board_id)
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(column.id),
                        entity_type=EntityType.column,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                    ),
                    paths=[paths.project_detail(board.project_id)] if board else [],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Column update failed")
                return Return.err(
                    Error("COLUMN_UPDATE_ERROR", "Failed to update column. Please try again.")
                )

            return Return.ok(ColumnResponse.model_validate(column))


class DeleteColumnUseCase:
    """Delete a column with its tasks"""

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, column_id: UUID) -> Result[ColumnResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                column = await self.uow.projects.get_column(column_id)
                if column is None:
                    return Return.err(COLUMN_NOT_FOUND)

                response = ColumnResponse.model_validate(column)
                board = await self.uow.projects.get_board(column.board_id)
                await self.uow.projects.delete_column(column_id)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(column_id),
                        entity_type=EntityType.column,
                        action=AuditAction.delete,
                    ),
                    paths=[paths.project_detail(board.project_id)] if board else [],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Column deletion failed")
                return Return.err(
                    Error("COLUMN_DELETE_ERROR", "Failed to delete column. Please try again.")
                )

            return Return.ok(response)


class ReorderColumnsUseCase:
    """
    Use case for reordering the columns of a board.

    Business Rules:
    - Every listed column must belong to the board, else COLUMN_NOT_FOUND
      and nothing changes
    - Column order becomes its index in the list; all rows commit together
    - One audit row for the whole reorder
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, board_id: UUID, command: ReorderColumnsCommand
    ) -> Result[List[ColumnResponse]]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                board = await self.uow.projects.get_board(board_id)
                if board is None:
                    return Return.err(BOARD_NOT_FOUND)

                columns = {c.id: c for c in await self.uow.projects.get_columns(command.column_ids)}
                if any(
                    column_id not in columns or columns[column_id].board_id != board_id
                    for column_id in command.column_ids
                ):
                    return Return.err(COLUMN_NOT_FOUND)

                for index, column_id in enumerate(command.column_ids):
                    columns[column_id].order = index
                    await self.uow.projects.update_column(columns[column_id])
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(board_id),
                        entity_type=EntityType.board,
                        action=AuditAction.update,
                        changes={"column_order": [str(c) for c in command.column_ids]},
                    ),
                    paths=[paths.project_detail(board.project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Column reorder failed")
                return Return.err(
                    Error("COLUMN_REORDER_ERROR", "Failed to reorder columns. Please try again.")
                )

            return Return.ok([ColumnResponse.model_validate(columns[c]) for c in command.column_ids])
