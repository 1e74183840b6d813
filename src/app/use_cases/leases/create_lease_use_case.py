"""
Create Lease Use Case

Binds a tenant to a unit. An ACTIVE lease occupies the unit in the same
transaction.
"""

import logging

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
    Lease,
    LeaseStatus,
    NotificationType,
    UnitStatus,
)

from .dtos import LeaseCommand, LeaseResponse
from .parties import load_parties

logger = logging.getLogger(__name__)


class CreateLeaseUseCase:
    """
    Use case for creating a lease.

    Business Rules:
    - Tenant and unit must exist
    - Lease and unit status change commit together
    - Overlapping leases on one unit are not rejected
    - Every user is notified
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, command: LeaseCommand) -> Result[LeaseResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                parties, not_found = await load_parties(
                    self.uow, command.tenant_id, command.unit_id
                )
                if not_found:
                    return Return.err(not_found)

                lease = await self.uow.leases.create(Lease(**command.model_dump()))
                if lease.status == LeaseStatus.active:
                    parties.unit.status = UnitStatus.occupied
                    await self.uow.units.update(parties.unit)
                await self.uow.commit()

                draft = NotificationDraft(
                    title="New Lease Created",
                    message=f"{parties.describe()} has been created.",
                    type=NotificationType.lease,
                    entity_id=str(lease.id),
                    entity_type=EntityType.lease,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(lease.id),
                        entity_type=EntityType.lease,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    parties.affected_paths(),
                )
            except ENVELOPE_ERRORS:
                logger.exception("Lease creation failed")
                return Return.err(
                    Error("LEASE_CREATE_ERROR", "Failed to create lease. Please try again.")
                )

            return Return.ok(LeaseResponse.model_validate(lease))
