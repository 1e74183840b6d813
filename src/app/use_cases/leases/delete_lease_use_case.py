import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.mutation_envelope import (
    ENVELOPE_ERRORS,
    AuditEntry,
    MutationEnvelope,
    NotificationDraft,
)
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    AuditAction,
    EntityType,
    NotificationPriority,
    NotificationType,
    UnitStatus,
)

from .dtos import LeaseResponse
from .parties import LEASE_NOT_FOUND, load_parties

logger = logging.getLogger(__name__)


class DeleteLeaseUseCase:
    """Delete a lease with its payments and free the unit"""

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, lease_id: UUID) -> Result[LeaseResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                lease = await self.uow.leases.get_by_id(lease_id)
                if lease is None:
                    return Return.err(LEASE_NOT_FOUND)

                parties, not_found = await load_parties(self.uow, lease.tenant_id, lease.unit_id)
                if not_found:
                    return Return.err(not_found)

                response = LeaseResponse.model_validate(lease)
                await self.uow.leases.delete(lease_id)
                parties.unit.status = UnitStatus.vacant
                await self.uow.units.update(parties.unit)
                await self.uow.commit()

                draft = NotificationDraft(
                    title="Lease Deleted",
                    message=f"{parties.describe()} has been deleted.",
                    type=NotificationType.lease,
                    entity_id=str(lease_id),
                    entity_type=EntityType.lease,
                    priority=NotificationPriority.high,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(lease_id),
                        entity_type=EntityType.lease,
                        action=AuditAction.delete,
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    parties.affected_paths(),
                )
            except ENVELOPE_ERRORS:
                logger.exception("Lease deletion failed")
                return Return.err(
                    Error("LEASE_DELETE_ERROR", "Failed to delete lease. Please try again.")
                )

            return Return.ok(response)
