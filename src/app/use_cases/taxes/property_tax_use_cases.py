"""
Property Tax Use Cases

Create, update, delete and mark-paid for property tax records. Every user
is notified of each change.
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
    PropertyTax,
)

from .dtos import PropertyTaxCommand, PropertyTaxResponse, TaxCommand, TaxStatusCommand
from .paid_state import apply_paid_state

logger = logging.getLogger(__name__)

PROPERTY_TAX_NOT_FOUND = Error("PROPERTY_TAX_NOT_FOUND", "Property tax record not found")


def _draft(title: str, message: str, tax: PropertyTax, **kwargs) -> NotificationDraft:
    return NotificationDraft(
        title=title,
        message=message,
        type=NotificationType.tax,
        entity_id=str(tax.id),
        entity_type=EntityType.property_tax,
        action_url=paths.property_detail(tax.property_id),
        **kwargs,
    )


class CreatePropertyTaxUseCase:
    """
    Use case for adding a property tax record.

    Business Rules:
    - Property must exist
    - A record created as paid gets paid_date now
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, command: PropertyTaxCommand
    ) -> Result[PropertyTaxResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                property = await self.uow.properties.get_by_id(command.property_id)
                if property is None:
                    return Return.err(Error("PROPERTY_NOT_FOUND", "Property not found"))

                tax = PropertyTax(**command.model_dump(exclude={"is_paid"}))
                apply_paid_state(tax, command.is_paid)
                tax = await self.uow.taxes.create_property_tax(tax)
                await self.uow.commit()

                draft = _draft(
                    "Property Tax Record Added",
                    f"Tax record for {tax.tax_year} has been added to {property.property_name}.",
                    tax,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(tax.id),
                        entity_type=EntityType.property_tax,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.property_detail(tax.property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Property tax creation failed")
                return Return.err(
                    Error(
                        "PROPERTY_TAX_CREATE_ERROR",
                        "Failed to create property tax record. Please try again.",
                    )
                )

            return Return.ok(PropertyTaxResponse.model_validate(tax))


class UpdatePropertyTaxUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, tax_id: UUID, command: TaxCommand
    ) -> Result[PropertyTaxResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                tax = await self.uow.taxes.get_property_tax(tax_id)
                if tax is None:
                    return Return.err(PROPERTY_TAX_NOT_FOUND)

                for field, value in command.model_dump(exclude={"is_paid"}).items():
                    setattr(tax, field, value)
                apply_paid_state(tax, command.is_paid)
                tax.updated_at = utc_now()
                tax = await self.uow.taxes.update_property_tax(tax)
                await self.uow.commit()

                draft = _draft(
                    "Property Tax Record Updated",
                    f"Tax record for {tax.tax_year} has been updated.",
                    tax,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(tax.id),
                        entity_type=EntityType.property_tax,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.property_detail(tax.property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Property tax update failed")
                return Return.err(
                    Error(
                        "PROPERTY_TAX_UPDATE_ERROR",
                        "Failed to update property tax record. Please try again.",
                    )
                )

            return Return.ok(PropertyTaxResponse.model_validate(tax))


class UpdatePropertyTaxStatusUseCase:
    """
    Use case for marking a property tax paid or unpaid.

    Business Rules:
    - Idempotent: repeating the same flag leaves the record unchanged
    - paid_date is set when paid and cleared otherwise
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, tax_id: UUID, command: TaxStatusCommand
    ) -> Result[PropertyTaxResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                tax = await self.uow.taxes.get_property_tax(tax_id)
                if tax is None:
                    return Return.err(PROPERTY_TAX_NOT_FOUND)

                apply_paid_state(tax, command.is_paid)
                tax.updated_at = utc_now()
                tax = await self.uow.taxes.update_property_tax(tax)
                await self.uow.commit()

                state = "paid" if tax.is_paid else "unpaid"
                draft = _draft(
                    "Property Tax Record Updated",
                    f"Tax record for {tax.tax_year} has been marked as {state}.",
                    tax,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(tax.id),
                        entity_type=EntityType.property_tax,
                        action=AuditAction.update,
                        changes={"is_paid": tax.is_paid},
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.property_detail(tax.property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Property tax status update failed")
                return Return.err(
                    Error(
                        "PROPERTY_TAX_UPDATE_ERROR",
                        "Failed to update property tax status. Please try again.",
                    )
                )

            return Return.ok(PropertyTaxResponse.model_validate(tax))


class DeletePropertyTaxUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, tax_id: UUID) -> Result[PropertyTaxResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                tax = await self.uow.taxes.get_property_tax(tax_id)
                if tax is None:
                    return Return.err(PROPERTY_TAX_NOT_FOUND)

                await self.uow.taxes.delete_property_tax(tax_id)
                await self.uow.commit()

                draft = _draft(
                    "Property Tax Record Deleted",
                    f"Tax record for {tax.tax_year} has been deleted.",
                    tax,
                    priority=NotificationPriority.high,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(tax_id),
                        entity_type=EntityType.property_tax,
                        action=AuditAction.delete,
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    [paths.property_detail(tax.property_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Property tax deletion failed")
                return Return.err(
                    Error(
                        "PROPERTY_TAX_DELETE_ERROR",
                        "Failed to delete property tax record. Please try again.",
                    )
                )

            return Return.ok(PropertyTaxResponse.model_validate(tax))
