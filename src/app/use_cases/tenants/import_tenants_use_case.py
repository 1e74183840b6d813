"""
Import Tenants From CSV Use Case

Bulk-creates tenants from a CSV export of the tenant sheet.
"""

import logging
from typing import List

from libs.result import Error, Result, Return
from src.app.services import paths
from src.app.services.csv_import import CsvValidationError, parse_csv, parse_enum, require
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
    NotificationType,
    Tenant,
    TenantStatus,
)

from .dtos import TenantResponse

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("bp_code", "first_name", "last_name", "email", "phone", "company")


class ImportTenantsUseCase:
    """
    Use case for importing tenants from CSV text.

    Business Rules:
    - bpCode, firstName, lastName, email, phone and company are required
    - status matches TenantStatus case-insensitively; blank means active
    - One bad row rejects the whole file before anything is persisted
    - Every user is notified of each imported tenant
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    def _build(self, ctx: RequestContext, text: str) -> List[Tenant]:
        tenants = []
        for index, row in enumerate(parse_csv(text)):
            line_no = index + 2
            values = {field: require(row, field, line_no) for field in REQUIRED_COLUMNS}
            status = TenantStatus.active
            if row.get("status"):
                status = parse_enum(
                    row["status"], TenantStatus, "INVALID_TENANT_STATUS", "tenant status"
                )
            tenants.append(
                Tenant(
                    **values,
                    status=status,
                    emergency_contact_name=row.get("emergency_contact_name") or None,
                    emergency_contact_phone=row.get("emergency_contact_phone") or None,
                    created_by_id=ctx.actor_id,
                )
            )
        return tenants

    async def execute(self, ctx: RequestContext, text: str) -> Result[List[TenantResponse]]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        try:
            tenants = self._build(ctx, text)
        except CsvValidationError as e:
            return Return.err(e.error)

        async with self.uow:
            try:
                tenants = await self.uow.tenants.create_many(tenants)
                await self.uow.commit()

                recipients = await self.envelope.all_user_ids()
                audit = []
                notifications = []
                for tenant in tenants:
                    audit.append(
                        AuditEntry(
                            entity_id=str(tenant.id),
                            entity_type=EntityType.tenant,
                            action=AuditAction.create,
                            changes=TenantResponse.model_validate(tenant).model_dump(mode="json"),
                            metadata={"source": "CSV_IMPORT"},
                        )
                    )
                    draft = NotificationDraft(
                        title="Tenant Imported",
                        message=f"Tenant {tenant.full_name} has been imported successfully.",
                        type=NotificationType.tenant,
                        entity_id=str(tenant.id),
                        entity_type=EntityType.tenant,
                        action_url=paths.tenant_detail(tenant.id),
                    )
                    notifications.extend(draft.fan_out(recipients))

                await self.envelope.finalize(ctx, audit, notifications, [paths.TENANTS])
            except ENVELOPE_ERRORS:
                logger.exception("Tenant import failed")
                return Return.err(
                    Error("TENANT_IMPORT_ERROR", "Failed to import tenants. Please try again.")
                )

            return Return.ok([TenantResponse.model_validate(t) for t in tenants])
