"""
Import Properties From CSV Use Case

Bulk-creates properties from a CSV export of the property sheet.
"""

import logging
from typing import List

from libs.result import Error, Result, Return
from src.app.services import paths
from src.app.services.csv_import import (
    CsvValidationError,
    parse_csv,
    parse_enum,
    parse_number,
    require,
)
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
    Property,
    PropertyType,
)

from .dtos import PropertyResponse

logger = logging.getLogger(__name__)


class ImportPropertiesUseCase:
    """
    Use case for importing properties from CSV text.

    Business Rules:
    - Header row names the columns (propertyName, propertyCode, titleNo, lotNo,
      registeredOwner, leasableArea, address, propertyType, totalUnits)
    - propertyType must match PropertyType case-insensitively
    - Every row is validated before anything is persisted
    - All rows are inserted in one transaction
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    def _build(self, ctx: RequestContext, text: str) -> List[Property]:
        properties = []
        for index, row in enumerate(parse_csv(text)):
            line_no = index + 2
            properties.append(
                Property(
                    property_name=require(row, "property_name", line_no),
                    property_code=require(row, "property_code", line_no),
                    title_no=row.get("title_no") or "",
                    lot_no=row.get("lot_no") or "",
                    registered_owner=row.get("registered_owner") or "",
                    leasable_area=parse_number(row, "leasable_area", line_no),
                    address=row.get("address") or "",
                    property_type=parse_enum(
                        row.get("property_type"),
                        PropertyType,
                        "INVALID_PROPERTY_TYPE",
                        "property type",
                    ),
                    total_units=parse_number(row, "total_units", line_no, cast=int),
                    created_by_id=ctx.actor_id,
                )
            )
        return properties

    async def execute(self, ctx: RequestContext, text: str) -> Result[List[PropertyResponse]]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        try:
            properties = self._build(ctx, text)
        except CsvValidationError as e:
            return Return.err(e.error)

        async with self.uow:
            try:
                properties = await self.uow.properties.create_many(properties)
                await self.uow.commit()

                audit = []
                notifications = []
                for property in properties:
                    audit.append(
                        AuditEntry(
                            entity_id=str(property.id),
                            entity_type=EntityType.property,
                            action=AuditAction.create,
                            changes=PropertyResponse.model_validate(property).model_dump(
                                mode="json"
                            ),
                            metadata={"source": "CSV_IMPORT"},
                        )
                    )
                    draft = NotificationDraft(
                        title="Property Imported",
                        message=f'Property "{property.property_name}" has been imported successfully.',
                        type=NotificationType.system,
                        entity_id=str(property.id),
                        entity_type=EntityType.property,
                    )
                    notifications.extend(draft.fan_out([ctx.actor_id]))

                await self.envelope.finalize(ctx, audit, notifications, [paths.PROPERTIES])
            except ENVELOPE_ERRORS:
                logger.exception("Property import failed")
                return Return.err(
                    Error("PROPERTY_IMPORT_ERROR", "Failed to import properties. Please try again.")
                )

            return Return.ok([PropertyResponse.model_validate(p) for p in properties])
