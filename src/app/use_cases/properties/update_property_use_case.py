"""
Update Property Use Case
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
from src.domain.base import utc_now
from src.domain.entities import AuditAction, EntityType, NotificationType

from .dtos import PropertyCommand, PropertyResponse

logger = logging.getLogger(__name__)


class UpdatePropertyUseCase:
    """
    Use case for replacing a property's fields.

    Business Rules:
    - Caller must be authenticated
    - Property must exist
    - The acting user is notified
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, property_id: UUID, command: PropertyCommand
    ) -> Result[PropertyResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                property = await self.uow.properties.get_by_id(property_id)
                if property is None:
                    return Return.err(Error("PROPERTY_NOT_FOUND", "Property not found"))

                for field, value in command.model_dump().items():
                    setattr(property, field, value)
                property.updated_at = utc_now()
                property = await self.uow.properties.update(property)
                await self.uow.commit()

                draft = NotificationDraft(
                    title="Property Updated",
                    message=f'Property "{property.property_name}" has been updated successfully.',
                    type=NotificationType.system,
                    entity_id=str(property.id),
                    entity_type=EntityType.property,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(property.id),
                        entity_type=EntityType.property,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out([ctx.actor_id]),
                    [paths.PROPERTIES, paths.property_detail(property.id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Property update failed")
                return Return.err(
                    Error("PROPERTY_UPDATE_ERROR", "Failed to update property. Please try again.")
                )

            return Return.ok(PropertyResponse.model_validate(property))
