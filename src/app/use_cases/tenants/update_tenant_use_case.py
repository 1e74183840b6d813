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

from .dtos import TenantCommand, TenantResponse

logger = logging.getLogger(__name__)


class UpdateTenantUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, tenant_id: UUID, command: TenantCommand
    ) -> Result[TenantResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                tenant = await self.uow.tenants.get_by_id(tenant_id)
                if tenant is None:
                    return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

                for field, value in command.model_dump().items():
                    setattr(tenant, field, value)
                tenant = await self.uow.tenants.update(tenant)
                await self.uow.commit()

                draft = NotificationDraft(
                    title="Tenant Updated",
                    message=f"Tenant {tenant.full_name} has been updated successfully.",
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
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.TENANTS, paths.tenant_detail(tenant.id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Tenant update failed")
                return Return.err(
                    Error("TENANT_UPDATE_ERROR", "Failed to update tenant. Please try again.")
                )

            return Return.ok(TenantResponse.model_validate(tenant))
