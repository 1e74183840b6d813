"""
Unit Tax Use Cases

Create, update and delete for tax records on individual units.
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
from src.domain.base import utc_now
from src.domain.entities import (
    AuditAction,
    EntityType,
    NotificationPriority,
    NotificationType,
    UnitTax,
)

from .dtos import UnitTaxCommand, UnitTaxResponse, UnitTaxUpdateCommand
from .paid_state import apply_paid_state

logger = logging.getLogger(__name__)

UNIT_TAX_NOT_FOUND = Error("UNIT_TAX_NOT_FOUND", "Unit tax record not found")


def _draft(title: str, message: str, tax: UnitTax, **kwargs) -> NotificationDraft:
    return NotificationDraft(
        title=title,
        message=message,
        type=NotificationType.tax,
        entity_id=str(tax.id),
        entity_type=EntityType.unit_tax,
        action_url=paths.space_detail(tax.unit_id),
        **kwargs,
    )


class CreateUnitTaxUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, command: UnitTaxCommand) -> Result[UnitTaxResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                unit = await self.uow.units.get_by_id(command.unit_id)
                if unit is None:
                    return Return.err(Error("UNIT_NOT_FOUND", "Space not found"))

                tax = UnitTax(**command.model_dump(exclude={"is_paid"}))
                apply_paid_state(tax, command.is_paid)
                tax = await self.uow.taxes.create_unit_tax(tax)
                await self.uow.commit()

                draft = _draft(
                    "Unit Tax Added",
                    f"Tax record for {tax.tax_year} has been added to space {unit.unit_number}.",
                    tax,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(tax.id),
                        entity_type=EntityType.unit_tax,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.SPACES],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Unit tax creation failed")
                return Return.err(
                    Error("UNIT_TAX_CREATE_ERROR", "Failed to create unit tax. Please try again.")
                )

            return Return.ok(UnitTaxResponse.model_validate(tax))


class UpdateUnitTaxUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, tax_id: UUID, command: UnitTaxUpdateCommand
    ) -> Result[UnitTaxResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                tax = await self.uow.taxes.get_unit_tax(tax_id)
                if tax is None:
                    return Return.err(UNIT_TAX_NOT_FOUND)

                for field, value in command.model_dump(exclude={"is_paid"}).items():
                    setattr(tax, field, value)
                apply_paid_state(tax, command.is_paid)
                tax.updated_at = utc_now()
                tax = await self.uow.taxes.update_unit_tax(tax)
                await self.uow.commit()

                draft = _draft(
                    "Unit Tax Updated",
                    f"Tax record for {tax.tax_year} has been updated.",
                    tax,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(tax.id),
                        entity_type=EntityType.unit_tax,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.SPACES],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Unit tax update failed")
                return Return.err(
                    Error("UNIT_TAX_UPDATE_ERROR", "Failed to update unit tax. Please try again.")
                )

            return Return.ok(UnitTaxResponse.model_validate(tax))


class DeleteUnitTaxUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, tax_id: UUID) -> Result[UnitTaxResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                tax = await self.uow.taxes.get_unit_tax(tax_id)
                if tax is None:
                    return Return.err(UNIT_TAX_NOT_FOUND)

                await self.uow.taxes.delete_unit_tax(tax_id)
                await self.uow.commit()

                draft = _draft(
                    "Unit Tax Deleted",
                    f"Tax record for {tax.tax_year} has been deleted.",
                    tax,
                    priority=NotificationPriority.high,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(tax_id),
                        entity_type=EntityType.unit_tax,
                        action=AuditAction.delete,
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.SPACES],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Unit tax deletion failed")
                return Return.err(
                    Error("UNIT_TAX_DELETE_ERROR", "Failed to delete unit tax. Please try again.")
                )

            return Return.ok(UnitTaxResponse.model_validate(tax))
