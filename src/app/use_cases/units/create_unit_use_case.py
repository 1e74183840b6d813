"""
Create Unit Use Case

Adds a space to a property and keeps the property's unit count in step.
"""

import logging

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
from src.domain.entities import AuditAction, EntityType, NotificationType, Unit

from .dtos import UnitCommand, UnitResponse

logger = logging.getLogger(__name__)


class CreateUnitUseCase:
    """
    Use case for creating a unit.

    Business Rules:
    - Parent property must exist
    - Property.total_units is incremented in the same transaction
    - Every user is notified
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, command: UnitCommand) -> Result[UnitResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                property = await self.uow.properties.get_by_id(command.property_id)
                if property is None:
                    return Return.err(Error("PROPERTY_NOT_FOUND", "Property not found"))

                unit = await self.uow.units.create(Unit(**command.model_dump()))
                property.total_units += 1
                property.updated_at = utc_now()
                await self.uow.properties.update(property)
                await self.uow.commit()

                creator = await self.envelope.actor_name(ctx)
                draft = NotificationDraft(
                    title="New Space Added",
                    message=(
                        f"Space {unit.unit_number} has been added to "
                        f"{property.property_name} by {creator}"
                    ),
                    type=NotificationType.unit,
                    entity_id=str(unit.id),
                    entity_type=EntityType.unit,
                    action_url=paths.space_detail(unit.id),
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(unit.id),
                        entity_type=EntityType.unit,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.SPACES, paths.property_detail(property.id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Unit creation failed")
                return Return.err(
                    Error("UNIT_CREATE_ERROR", "Failed to create space. Please try again.")
                )

            return Return.ok(UnitResponse.model_validate(unit))
