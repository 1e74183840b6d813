"""
Delete Tenant Use Cases

Single and transactional bulk deletion of tenants.
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
from src.domain.entities import AuditAction, EntityType, NotificationType, Tenant

from ..shared_dtos import BulkDeleteCommand, BulkDeleteResponse
from .dtos import TenantResponse

logger = logging.getLogger(__name__)


def _deleted_draft(tenant: Tenant) -> NotificationDraft:
    return NotificationDraft(
        title="Tenant Deleted",
        message=f"Tenant {tenant.full_name} has been deleted.",
        type=NotificationType.tenant,
        entity_id=str(tenant.id),
        entity_type=EntityType.tenant,
    )


class DeleteTenantUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, tenant_id: UUID) -> Result[TenantResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                tenant = await self.uow.tenants.get_by_id(tenant_id)
                if tenant is None:
                    return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

                await self.uow.tenants.delete(tenant_id)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(tenant_id),
                        entity_type=EntityType.tenant,
                        action=AuditAction.delete,
                    ),
                    _deleted_draft(tenant).fan_out(await self.envelope.all_user_ids()),
                    [paths.TENANTS],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Tenant deletion failed")
                return Return.err(
                    Error("TENANT_DELETE_ERROR", "Failed to delete tenant. Please try again.")
                )

            return Return.ok(TenantResponse.model_validate(tenant))


class BulkDeleteTenantsUseCase:
    """
    Use case for deleting several tenants at once.

    Business Rules:
    - All-or-nothing: one failing row rolls back every deletion
    - One audit row and one notification set per deleted tenant
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
                tenants = await self.uow.tenants.get_many(command.ids)
                await self.uow.tenants.delete_many([t.id for t in tenants])
                await self.uow.commit()

                recipients = await self.envelope.all_user_ids()
                notifications = []
                for tenant in tenants:
                    notifications.extend(_deleted_draft(tenant).fan_out(recipients))

                await self.envelope.finalize(
                    ctx,
                    [
                        AuditEntry(
                            entity_id=str(tenant.id),
                            entity_type=EntityType.tenant,
                            action=AuditAction.delete,
                        )
                        for tenant in tenants
                    ],
                    notifications,
                    [paths.TENANTS],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Bulk tenant deletion failed")
                return Return.err(
                    Error("TENANT_BULK_DELETE_ERROR", "Failed to delete tenants. Please try again.")
                )

            return Return.ok(BulkDeleteResponse(deleted=len(tenants)))
