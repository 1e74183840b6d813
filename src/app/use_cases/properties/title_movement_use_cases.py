"""
Property Title Movement Use Cases

Tracks the physical title document of a property as it is requested,
released and returned.
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
    NotificationDraft,
)
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import (
    AuditAction,
    EntityType,
    NotificationType,
    PropertyTitleMovement,
    TitleMovementStatus,
)

from .dtos import TitleMovementCommand, TitleMovementResponse, TitleMovementStatusCommand

logger = logging.getLogger(__name__)

PROPERTY_NOT_FOUND = Error("PROPERTY_NOT_FOUND", "Property not found")
TITLE_MOVEMENT_NOT_FOUND = Error("TITLE_MOVEMENT_NOT_FOUND", "Title movement not found")


class CreateTitleMovementUseCase:
    """Record a new request for a property's title document"""

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, property_id: UUID, command: TitleMovementCommand
    ) -> Result[TitleMovementResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                property = await self.uow.properties.get_by_id(property_id)
                if property is None:
                    return Return.err(PROPERTY_NOT_FOUND)

                movement = await self.uow.title_movements.create(
                    PropertyTitleMovement(**command.model_dump(), property_id=property_id)
                )
                await self.uow.commit()

                draft = NotificationDraft(
                    title="Title Movement Recorded",
                    message=f'Title of "{property.property_name}" requested by {movement.requested_by}.',
                    type=NotificationType.system,
                    entity_id=str(movement.id),
                    entity_type=EntityType.title_movement,
                    action_url=paths.property_detail(property_id),
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(movement.id),
                        entity_type=EntityType.title_movement,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out([ctx.actor_id]),
                    [paths.property_detail(property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Title movement creation failed")
                return Return.err(
                    Error(
                        "TITLE_MOVEMENT_CREATE_ERROR",
                        "Failed to create title movement. Please try again.",
                    )
                )

            return Return.ok(TitleMovementResponse.model_validate(movement))


class UpdateTitleMovementStatusUseCase:
    """
    Move a title document to a new status.

    Business Rules:
    - RETURNED stamps return_date
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, movement_id: UUID, command: TitleMovementStatusCommand
    ) -> Result[TitleMovementResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                movement = await self.uow.title_movements.get_by_id(movement_id)
                if movement is None:
                    return Return.err(TITLE_MOVEMENT_NOT_FOUND)

                movement.status = command.status
                if command.remarks is not None:
                    movement.remarks = command.remarks
                if command.status == TitleMovementStatus.returned:
                    movement.return_date = utc_now()
                movement.updated_at = utc_now()
                movement = await self.uow.title_movements.update(movement)
                await self.uow.commit()

                draft = NotificationDraft(
                    title="Title Movement Updated",
                    message=f"Title movement status changed to {command.status.value}.",
                    type=NotificationType.system,
                    entity_id=str(movement.id),
                    entity_type=EntityType.title_movement,
                    action_url=paths.property_detail(movement.property_id),
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(movement.id),
                        entity_type=EntityType.title_movement,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out([ctx.actor_id]),
                    [paths.property_detail(movement.property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Title movement update failed")
                return Return.err(
                    Error(
                        "TITLE_MOVEMENT_UPDATE_ERROR",
                        "Failed to update title movement. Please try again.",
                    )
                )

            return Return.ok(TitleMovementResponse.model_validate(movement))


class DeleteTitleMovementUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, movement_id: UUID
    ) -> Result[TitleMovementResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                movement = await self.uow.title_movements.get_by_id(movement_id)
                if movement is None:
                    return Return.err(TITLE_MOVEMENT_NOT_FOUND)

                await self.uow.title_movements.delete(movement_id)
                await self.uow.commit()

                draft = NotificationDraft(
                    title="Title Movement Deleted",
                    message="A title movement record has been deleted.",
                    type=NotificationType.system,
                    entity_id=str(movement_id),
                    entity_type=EntityType.title_movement,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(movement_id),
                        entity_type=EntityType.title_movement,
                        action=AuditAction.delete,
                    ),
                    draft.fan_out([ctx.actor_id]),
                    [paths.property_detail(movement.property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Title movement deletion failed")
                return Return.err(
                    Error(
                        "TITLE_MOVEMENT_DELETE_ERROR",
                        "Failed to delete title movement. Please try again.",
                    )
                )

            return Return.ok(TitleMovementResponse.model_validate(movement))


class GetTitleMovementsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, property_id: UUID
    ) -> Result[List[TitleMovementResponse]]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                movements = await self.uow.title_movements.list_for_property(property_id)
            except SQLAlchemyError:
                logger.exception("Title movement listing failed")
                return Return.err(
                    Error("TITLE_MOVEMENT_FETCH_ERROR", "Failed to fetch title movements")
                )

            return Return.ok([TitleMovementResponse.model_validate(m) for m in movements])
