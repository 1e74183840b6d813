"""
Update Unit Use Case
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
from src.domain.entities import AuditAction, EntityType, NotificationType

from .dtos import UnitResponse, UnitUpdateCommand

logger = logging.getLogger(__name__)


class UpdateUnitUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, unit_id: UUID, command: UnitUpdateCommand
    ) -> Result[UnitResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                unit = await self.uow.units.get_by_id(unit_id)
                if unit is None:
                    return Return.err(Error("UNIT_NOT_FOUND", "Space not found"))

                for field, value in command.model_dump().items():
                    setattr(unit, field, value)
                unit = await self.uow.units.update(unit)
                await self.uow.commit()

                creator = await self.envelope.actor_name(ctx)
                draft = NotificationDraft(
                    title="Space Updated",
                    message=f"Space {unit.unit_number} has been updated by {creator}",
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
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.SPACES, paths.property_detail(unit.property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Unit update failed")
                return Return.err(
                    Error("UNIT_UPDATE_ERROR", "Failed to update space. Please try again.")
                )

            return Return.ok(UnitResponse.model_validate(unit))
