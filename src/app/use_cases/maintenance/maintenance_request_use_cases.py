"""
Maintenance Request Use Cases

Repair requests raised against units. Every user is notified of changes.
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
    MaintenancePriority,
    MaintenanceRequest,
    MaintenanceStatus,
    NotificationPriority,
    NotificationType,
)

from .dtos import (
    MaintenanceRequestCommand,
    MaintenanceRequestResponse,
    MaintenanceRequestUpdateCommand,
)

logger = logging.getLogger(__name__)

MAINTENANCE_REQUEST_NOT_FOUND = Error(
    "MAINTENANCE_REQUEST_NOT_FOUND", "Maintenance request not found"
)

# Request urgency carried over to the notification
NOTIFICATION_PRIORITY = {
    MaintenancePriority.low: NotificationPriority.low,
    MaintenancePriority.medium: NotificationPriority.medium,
    MaintenancePriority.high: NotificationPriority.high,
    MaintenancePriority.emergency: NotificationPriority.urgent,
}

AFFECTED_PATHS = [paths.DASHBOARD, paths.SPACES]


class CreateMaintenanceRequestUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, command: MaintenanceRequestCommand
    ) -> Result[MaintenanceRequestResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                unit = await self.uow.units.get_by_id(command.unit_id)
                if unit is None:
                    return Return.err(Error("UNIT_NOT_FOUND", "Space not found"))

                request = await self.uow.maintenance_requests.create(
                    MaintenanceRequest(**command.model_dump())
                )
                await self.uow.commit()

                draft = NotificationDraft(
                    title="New Maintenance Request",
                    message=(
                        f"A {request.category.value} request has been raised "
                        f"for space {unit.unit_number}."
                    ),
                    type=NotificationType.maintenance,
                    entity_id=str(request.id),
                    entity_type=EntityType.maintenance_request,
                    action_url=paths.space_detail(unit.id),
                    priority=NOTIFICATION_PRIORITY[request.priority],
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(request.id),
                        entity_type=EntityType.maintenance_request,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    AFFECTED_PATHS,
                )
            except ENVELOPE_ERRORS:
                logger.exception("Maintenance request creation failed")
                return Return.err(
                    Error(
                        "MAINTENANCE_REQUEST_CREATE_ERROR",
                        "Failed to create maintenance request. Please try again.",
                    )
                )

            return Return.ok(MaintenanceRequestResponse.model_validate(request))


class UpdateMaintenanceRequestUseCase:
    """
    Use case for updating a maintenance request.

    Business Rules:
    - Moving to COMPLETED stamps completed_at
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, request_id: UUID, command: MaintenanceRequestUpdateCommand
    ) -> Result[MaintenanceRequestResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                request = await self.uow.maintenance_requests.get_by_id(request_id)
                if request is None:
                    return Return.err(MAINTENANCE_REQUEST_NOT_FOUND)

                changes = command.model_dump(exclude_unset=True)
                for field, value in changes.items():
                    setattr(request, field, value)
                if command.status == MaintenanceStatus.completed:
                    request.completed_at = utc_now()
                request.updated_at = utc_now()
                request = await self.uow.maintenance_requests.update(request)
                await self.uow.commit()

                draft = NotificationDraft(
                    title="Maintenance Request Updated",
                    message=f"Maintenance request is now {request.status.value}.",
                    type=NotificationType.maintenance,
                    entity_id=str(request.id),
                    entity_type=EntityType.maintenance_request,
                    action_url=paths.space_detail(request.unit_id),
                    priority=NOTIFICATION_PRIORITY[request.priority],
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(request.id),
                        entity_type=EntityType.maintenance_request,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json", exclude_unset=True),
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    AFFECTED_PATHS,
                )
            except ENVELOPE_ERRORS:
                logger.exception("Maintenance request update failed")
                return Return.err(
                    Error(
                        "MAINTENANCE_REQUEST_UPDATE_ERROR",
                        "Failed to update maintenance request. Please try again.",
                    )
                )

            return Return.ok(MaintenanceRequestResponse.model_validate(request))


class DeleteMaintenanceRequestUseCase:
    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, request_id: UUID
    ) -> Result[MaintenanceRequestResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                request = await self.uow.maintenance_requests.get_by_id(request_id)
                if request is None:
                    return Return.err(MAINTENANCE_REQUEST_NOT_FOUND)

                await self.uow.maintenance_requests.delete(request_id)
                await self.uow.commit()

                draft = NotificationDraft(
                    title="Maintenance Request Deleted",
                    message="A maintenance request has been deleted.",
                    type=NotificationType.maintenance,
                    entity_id=str(request_id),
                    entity_type=EntityType.maintenance_request,
                )
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(request_id),
                        entity_type=EntityType.maintenance_request,
                        action=AuditAction.delete,
                    ),
                    draft.fan_out(await self.envelope.all_user_ids()),
                    AFFECTED_PATHS,
                )
            except ENVELOPE_ERRORS:
                logger.exception("Maintenance request deletion failed")
                return Return.err(
                    Error(
                        "MAINTENANCE_REQUEST_DELETE_ERROR",
                        "Failed to delete maintenance request. Please try again.",
                    )
                )

            return Return.ok(MaintenanceRequestResponse.model_validate(request))
