"""
Create Tenant Use Case

Registers a new tenant and announces it to every user.
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
from src.domain.entities import AuditAction, EntityType, NotificationType, Tenant

from .dtos import TenantCommand, TenantResponse

logger = logging.getLogger(__name__)


class CreateTenantUseCase:
    """
    Use case for creating a tenant.

    Business Rules:
    - Caller must be authenticated
    - created_by is the acting user
    - Every user is notified
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, command: TenantCommand) -> Result[TenantResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                tenant = await self.uow.tenants.create(
                    Tenant(**command.model_dump(), created_by_id=ctx.actor_id)
                )
                await self.uow.commit()

                draft = NotificationDraft(
                    title="New Tenant Created",
                    message=(
                        f"Tenant {tenant.first_name} {tenant.last_name} "
                        "has been created successfully."
                    ),
                    type=NotificationType.tenant,
                    entity_id=str(tenant.id),
                    entity_type=EntityType.tenant,
                    action_url=paths.tenant_detail(tenant.id),
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(tenant.id),
                        entity_type=EntityType.tenant,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.TENANTS],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Tenant creation failed")
                return Return.err(
                    Error("TENANT_CREATE_ERROR", "Failed to create tenant. Please try again.")
                )

            return Return.ok(TenantResponse.model_validate(tenant))
