"""
Create Task Use Case

Adds a card to the bottom of a board column.
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
from src.domain.entities import (
    AuditAction,
    EntityType,
    NotificationType,
    Task,
    TaskActivity,
    TaskActivityType,
)

from .dtos import TaskCommand, TaskDetailResponse

logger = logging.getLogger(__name__)


def assigned_draft(task: Task) -> NotificationDraft:
    return NotificationDraft(
        title="Task Assigned",
        message=f'You have been assigned to "{task.title}".',
        type=NotificationType.task,
        entity_id=str(task.id),
        entity_type=EntityType.task,
        action_url=paths.project_detail(task.project_id),
    )


class CreateTaskUseCase:
    """
    Use case for creating a task.

    Business Rules:
    - Project must exist (checked first), then the column
    - order = last order in the column + 1
    - A CREATED activity is written with the task
    - Every project member is notified; an assignee other than the
      creator receives an extra "assigned" notification
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, project_id: UUID, command: TaskCommand
    ) -> Result[TaskDetailResponse]:
        """
        Execute create task use case.

        Args:
            ctx: Request context (actor, IP, user agent)
            project_id: Project the task belongs to
            command: Task fields, including the target column

        Returns:
            Result with TaskDetailResponse DTO, or PROJECT_NOT_FOUND / COLUMN_NOT_FOUND
        """
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                project = await self.uow.projects.get_by_id(project_id)
                if project is None:
                    return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

                column = await self.uow.projects.get_column(command.column_id)
                if column is None:
                    return Return.err(Error("COLUMN_NOT_FOUND", "Column not found"))

                order = await self.uow.tasks.next_order(command.column_id)
                task = await self.uow.tasks.create(
                    Task(
                        **command.model_dump(),
                        order=order,
                        project_id=project_id,
                        created_by_id=ctx.actor_id,
                    )
                )
                await self.uow.tasks.add_activity(
                    TaskActivity(
                        task_id=task.id,
                        user_id=ctx.actor_id,
                        type=TaskActivityType.created,
                        content=f'created task "{task.title}"',
                    )
                )
                await self.uow.commit()
                task = await self.uow.tasks.get_by_id(task.id)

                draft = NotificationDraft(
                    title="New Task Created",
                    message=f'Task "{task.title}" has been created in {project.name}.',
                    type=NotificationType.task,
                    entity_id=str(task.id),
                    entity_type=EntityType.task,
                    action_url=paths.project_detail(project_id),
                )
                members = await self.uow.projects.list_member_user_ids(project_id)
                notifications = draft.fan_out(members)
                if task.assigned_to_id and task.assigned_to_id != ctx.actor_id:
                    notifications.extend(assigned_draft(task).fan_out([task.assigned_to_id]))

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(task.id),
                        entity_type=EntityType.task,
                        action=AuditAction.create,
                        changes=command.model_dump(mode="json"),
                    ),
                    notifications,
                    [paths.project_detail(project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Task creation failed")
                return Return.err(
                    Error("TASK_CREATE_ERROR", "Failed to create task. Please try again.")
                )

            return Return.ok(TaskDetailResponse.from_task(task))
