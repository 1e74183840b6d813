"""
Create Property Use Case

Registers a new property under management.
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
from src.domain.entities import AuditAction, EntityType, NotificationType, Property

from .dtos import PropertyCommand, PropertyResponse

logger = logging.getLogger(__name__)


class CreatePropertyUseCase:
    """
    Use case for creating a property.

    Business Rules:
    - Caller must be authenticated
    - created_by is the acting user
    - Audit row holds the submitted payload
    - The acting user is notified
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, command: PropertyCommand
    ) -> Result[PropertyResponse]:
        """
        Execute create property use case.

        Args:
            ctx: Request context (actor, IP, user agent)
            command: Property fields

        Returns:
            Result with PropertyResponse DTO, or Error
        """
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                property = await self.uow.properties.create(
                    Property(**command.model_dump(), created_by_id=ctx.actor_id)
                )
                await self.uow.commit()

                draft = NotificationDraft(
                    title="New Property Created",
                    message=f'Property "{property.property_name}" has been created successfully.',
                    type=NotificationType.system,
                    entity_id=str(property.id),
                    entity_type=EntityType.property,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(property.id),
                        entity_type=EntityType.property,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out([ctx.actor_id]),
                    [paths.PROPERTIES],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Property creation failed")
                return Return.err(
                    Error("PROPERTY_CREATE_ERROR", "Failed to create property. Please try again.")
                )

            return Return.ok(PropertyResponse.model_validate(property))
