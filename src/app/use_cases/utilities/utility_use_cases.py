"""
Property Utility Use Cases

Utility services contracted for a property. Only the acting user is
notified of changes.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services import paths
from src.app.services.mutation_envelope import (
    ENVELOPE_ERRORS,
    AuditEntry,
    MutationEnvelope,
    NotificationDraft,
)
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditAction, EntityType, NotificationType, PropertyUtility

from .dtos import UtilityCommand, UtilityResponse, UtilityStatusCommand

logger = logging.getLogger(__name__)

UTILITY_NOT_FOUND = Error("UTILITY_NOT_FOUND", "Utility not found")


class CreateUtilityUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, command: UtilityCommand) -> Result[UtilityResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                property = await self.uow.properties.get_by_id(command.property_id)
                if property is None:
                    return Return.err(Error("PROPERTY_NOT_FOUND", "Property not found"))

                utility = await self.uow.utilities.create(PropertyUtility(**command.model_dump()))
                await self.uow.commit()

                draft = NotificationDraft(
                    title="New Utility Added",
                    message=f"{utility.utility_type.value} utility has been added successfully.",
                    type=NotificationType.utility,
                    entity_id=str(utility.id),
                    entity_type=EntityType.utility,
                    action_url=paths.property_detail(utility.property_id),
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(utility.id),
                        entity_type=EntityType.utility,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out([ctx.actor_id]),
                    [paths.property_detail(utility.property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Utility creation failed")
                return Return.err(
                    Error("UTILITY_CREATE_ERROR", "Failed to create utility. Please try again.")
                )

            return Return.ok(UtilityResponse.model_validate(utility))


class UpdateUtilityStatusUseCase:
    """Activate or deactivate a property utility"""

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, utility_id: UUID, command: UtilityStatusCommand
    ) -> Result[UtilityResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                utility = await self.uow.utilities.get_by_id(utility_id)
                if utility is None:
                    return Return.err(UTILITY_NOT_FOUND)

                utility.is_active = command.is_active
                utility = await self.uow.utilities.update(utility)
                await self.uow.commit()

                state = "activated" if utility.is_active else "deactivated"
                draft = NotificationDraft(
                    title="Utility Updated",
                    message=f"{utility.utility_type.value} utility has been {state}.",
                    type=NotificationType.utility,
                    entity_id=str(utility.id),
                    entity_type=EntityType.utility,
                    action_url=paths.property_detail(utility.property_id),
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(utility.id),
                        entity_type=EntityType.utility,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out([ctx.actor_id]),
                    [paths.property_detail(utility.property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Utility update failed")
                return Return.err(
                    Error("UTILITY_UPDATE_ERROR", "Failed to update utility. Please try again.")
                )

            return Return.ok(UtilityResponse.model_validate(utility))


class DeleteUtilityUseCase:
    """Delete a property utility along with its bills"""

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, utility_id: UUID) -> Result[UtilityResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                utility = await self.uow.utilities.get_by_id(utility_id)
                if utility is None:
                    return Return.err(UTILITY_NOT_FOUND)

                await self.uow.utilities.delete(utility_id)
                await self.uow.commit()

                draft = NotificationDraft(
                    title="Utility Deleted",
                    message=f"{utility.utility_type.value} utility has been deleted.",
                    type=NotificationType.utility,
                    entity_id=str(utility_id),
                    entity_type=EntityType.utility,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(utility_id),
                        entity_type=EntityType.utility,
                        action=AuditAction.delete,
                    ),
                    draft.fan_out([ctx.actor_id]),
                    [paths.property_detail(utility.property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Utility deletion failed")
                return Return.err(
                    Error("UTILITY_DELETE_ERROR", "Failed to delete utility. Please try again.")
                )

            return Return.ok(UtilityResponse.model_validate(utility))
