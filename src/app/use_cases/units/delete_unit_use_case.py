"""
Delete Unit Use Cases

Single and bulk deletion of units. Each deletion decrements the parent
property's unit count.
"""

import logging
from collections import Counter
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
from src.domain.entities import (
    AuditAction,
    EntityType,
    NotificationPriority,
    NotificationType,
)

from ..shared_dtos import BulkDeleteCommand, BulkDeleteResponse
from .dtos import UnitResponse

logger = logging.getLogger(__name__)


async def _decrement_total_units(uow: UnitOfWork, property_id: UUID, count: int) -> None:
    property = await uow.properties.get_by_id(property_id)
    if property is None:
        return
    property.total_units = max(0, property.total_units - count)
    property.updated_at = utc_now()
    await uow.properties.update(property)


class DeleteUnitUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, unit_id: UUID) -> Result[UnitResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                unit = await self.uow.units.get_by_id(unit_id)
                if unit is None:
                    return Return.err(Error("UNIT_NOT_FOUND", "Space not found"))

                await self.uow.units.delete(unit_id)
                await _decrement_total_units(self.uow, unit.property_id, 1)
                await self.uow.commit()

                creator = await self.envelope.actor_name(ctx)
                draft = NotificationDraft(
                    title="Space Deleted",
                    message=f"Space {unit.unit_number} has been deleted by {creator}",
                    type=NotificationType.unit,
                    entity_id=str(unit_id),
                    entity_type=EntityType.unit,
                    priority=NotificationPriority.high,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(unit_id),
                        entity_type=EntityType.unit,
                        action=AuditAction.delete,
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.SPACES, paths.property_detail(unit.property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Unit deletion failed")
                return Return.err(
                    Error("UNIT_DELETE_ERROR", "Failed to delete space. Please try again.")
                )

            return Return.ok(UnitResponse.model_validate(unit))


class BulkDeleteUnitsUseCase:
    """
    Use case for deleting several units at once.

    Business Rules:
    - All listed units are deleted in one transaction
    - Each parent property's total_units drops by its number of deleted units
    - One audit row per unit; one summary notification to every user
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, command: BulkDeleteCommand
    ) -> Result[BulkDeleteResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                units = await self.uow.units.get_many(command.ids)
                await self.uow.units.delete_many([u.id for u in units])
                per_property = Counter(u.property_id for u in units)
                for property_id, count in per_property.items():
                    await _decrement_total_units(self.uow, property_id, count)
                await self.uow.commit()

                notifications = []
                if units:
                    creator = await self.envelope.actor_name(ctx)
                    draft = NotificationDraft(
                        title="Spaces Deleted",
                        message=f"{len(units)} spaces have been deleted by {creator}",
                        type=NotificationType.unit,
                        entity_type=EntityType.unit,
                        priority=NotificationPriority.high,
                    )
                    notifications = draft.fan_out(await self.envelope.all_user_ids())

                await self.envelope.finalize(
                    ctx,
                    [
                        AuditEntry(
                            entity_id=str(unit.id),
                            entity_type=EntityType.unit,
                            action=AuditAction.delete,
                        )
                        for unit in units
                    ],
                    notifications,
                    [paths.SPACES] + [paths.property_detail(pid) for pid in per_property],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Bulk unit deletion failed")
                return Return.err(
                    Error("UNIT_BULK_DELETE_ERROR", "Failed to delete spaces. Please try again.")
                )

            return Return.ok(BulkDeleteResponse(deleted=len(units)))
