"""
Delete Property Use Cases

Single and bulk physical deletion of properties.
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
from src.domain.entities import AuditAction, EntityType, NotificationType, Property

from ..shared_dtos import BulkDeleteCommand, BulkDeleteResponse
from .dtos import PropertyResponse

logger = logging.getLogger(__name__)


def _deleted_draft(property: Property) -> NotificationDraft:
    return NotificationDraft(
        title="Property Deleted",
        message=f'Property "{property.property_name}" has been deleted successfully.',
        type=NotificationType.system,
        entity_id=str(property.id),
        entity_type=EntityType.property,
    )


class DeletePropertyUseCase:
    """
    Use case for deleting a property.

    Business Rules:
    - Deletion is physical and immediate
    - The acting user is notified
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, property_id: UUID) -> Result[PropertyResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                property = await self.uow.properties.get_by_id(property_id)
                if property is None:
                    return Return.err(Error("PROPERTY_NOT_FOUND", "Property not found"))

                await self.uow.properties.delete(property_id)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(property_id),
                        entity_type=EntityType.property,
                        action=AuditAction.delete,
                    ),
                    _deleted_draft(property).fan_out([ctx.actor_id]),
                    [paths.PROPERTIES],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Property deletion failed")
                return Return.err(
                    Error("PROPERTY_DELETE_ERROR", "Failed to delete property. Please try again.")
                )

            return Return.ok(PropertyResponse.model_validate(property))


class BulkDeletePropertiesUseCase:
    """
    Use case for deleting several properties at once.

    Business Rules:
    - All listed properties are deleted in one transaction
    - One audit row and one notification per deleted property
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
                properties = await self.uow.properties.get_many(command.ids)
                await self.uow.properties.delete_many([p.id for p in properties])
                await self.uow.commit()

                notifications = []
                for property in properties:
                    notifications.extend(_deleted_draft(property).fan_out([ctx.actor_id]))

                await self.envelope.finalize(
                    ctx,
                    [
                        AuditEntry(
                            entity_id=str(property.id),
                            entity_type=EntityType.property,
                            action=AuditAction.delete,
                        )
                        for property in properties
                    ],
                    notifications,
                    [paths.PROPERTIES],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Bulk property deletion failed")
                return Return.err(
                    Error("PROPERTY_BULK_DELETE_ERROR", "Failed to delete properties. Please try again.")
                )

            return Return.ok(BulkDeleteResponse(deleted=len(properties)))
