import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services import paths
from src.app.services.mutation_envelope import ENVELOPE_ERRORS, AuditEntry, MutationEnvelope
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditAction, EntityType, TaskActivity, TaskActivityType

from .create_task_use_case import assigned_draft
from .dtos import TaskDetailResponse, TaskResponse, TaskUpdateCommand

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = Error("TASK_NOT_FOUND", "Task not found")

# Columns that cannot be cleared by an explicit null
NON_NULLABLE_FIELDS = ("title", "priority", "status", "column_id", "order")


class UpdateTaskUseCase:
    """
    Use case for editing a task.

    Business Rules:
    - Only submitted fields change
    - Moving to another column without an order puts the task at its bottom
    - An UPDATED activity is written with the change
    - A newly assigned user is notified
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, task_id: UUID, command: TaskUpdateCommand
    ) -> Result[TaskDetailResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                task = await self.uow.tasks.get_by_id(task_id)
                if task is None:
                    return Return.err(TASK_NOT_FOUND)

                previous_assignee = task.assigned_to_id
                changes = {
                    field: value
                    for field, value in command.model_dump(exclude_unset=True).items()
                    if value is not None or field not in NON_NULLABLE_FIELDS
                }
                column_id = changes.get("column_id")
                if column_id is not None and column_id != task.column_id:
                    column = await self.uow.projects.get_column(column_id)
                    if column is None:
                        return Return.err(Error("COLUMN_NOT_FOUND", "Column not found"))
                    if "order" not in changes:
                        changes["order"] = await self.uow.tasks.next_order(column_id)
                for field, value in changes.items():
                    setattr(task, field, value)
                task.updated_at = utc_now()
                task = await self.uow.tasks.update(task)
                await self.uow.tasks.add_activity(
                    TaskActivity(
                        task_id=task.id,
                        user_id=ctx.actor_id,
                        type=TaskActivityType.updated,
                        content=f"updated {', '.join(sorted(changes)) or 'task'}",
                    )
                )
                await self.uow.commit()
                task = await self.uow.tasks.get_by_id(task.id)

                notifications = []
                if task.assigned_to_id and task.assigned_to_id != previous_assignee:
                    notifications = assigned_draft(task).fan_out([task.assigned_to_id])

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(task.id),
                        entity_type=EntityType.task,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json", exclude_unset=True),
                    ),
                    notifications,
                    [paths.project_detail(task.project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Task update failed")
                return Return.err(
                    Error("TASK_UPDATE_ERROR", "Failed to update task. Please try again.")
                )

            return Return.ok(TaskDetailResponse.from_task(task))


class DeleteTaskUseCase:
    """Delete a task with its labels, comments, attachments and activity"""

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(self, ctx: RequestContext, task_id: UUID) -> Result[TaskResponse]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                task = await self.uow.tasks.get_by_id(task_id)
                if task is None:
                    return Return.err(TASK_NOT_FOUND)

                response = TaskResponse.model_validate(task)
                await self.uow.tasks.delete(task_id)
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(task_id),
                        entity_type=EntityType.task,
                        action=AuditAction.delete,
                    ),
                    paths=[paths.project_detail(response.project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Task deletion failed")
                return Return.err(
                    Error("TASK_DELETE_ERROR", "Failed to delete task. Please try again.")
                )

            return Return.ok(response)
