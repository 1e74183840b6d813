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
from src.domain.base import utc_now
from src.domain.entities import AuditAction, EntityType, NotificationType, Payment

from .dtos import PaymentCommand, PaymentResponse
from .parties import LEASE_NOT_FOUND

logger = logging.getLogger(__name__)


class RecordPaymentUseCase:
    """
    Use case for recording a payment against a lease.

    Business Rules:
    - payment_date defaults to now
    - Only COMPLETED payments are counted as revenue by reports
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, lease_id: UUID, command: PaymentCommand
    ) -> Result[PaymentResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                lease = await self.uow.leases.get_by_id(lease_id)
                if lease is None:
                    return Return.err(LEASE_NOT_FOUND)

                values = command.model_dump()
                values["payment_date"] = command.payment_date or utc_now()
                payment = await self.uow.leases.create_payment(
                    Payment(**values, lease_id=lease_id)
                )
                await self.uow.commit()

                draft = NotificationDraft(
                    title="Payment Recorded",
                    message=f"A {payment.payment_type.value} payment of {payment.amount} has been recorded.",
                    type=NotificationType.lease,
                    entity_id=str(payment.id),
                    entity_type=EntityType.payment,
                    action_url=paths.tenant_detail(lease.tenant_id),
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(payment.id),
                        entity_type=EntityType.payment,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                        metadata={"lease_id": str(lease_id)},
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.TENANTS, paths.tenant_detail(lease.tenant_id), paths.DASHBOARD],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Payment recording failed")
                return Return.err(
                    Error("PAYMENT_CREATE_ERROR", "Failed to record payment. Please try again.")
                )

            return Return.ok(PaymentResponse.model_validate(payment))
