"""
Task Detail Use Cases

Comments, attachments and labels on a task. Each writes a task activity
entry and an audit row; none notifies.
"""

import logging
from typing import Awaitable, Callable, TypeVar
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services import paths
from src.app.services.mutation_envelope import ENVELOPE_ERRORS, AuditEntry, MutationEnvelope
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import (
    AuditAction,
    EntityType,
    Task,
    TaskActivity,
    TaskActivityType,
    TaskAttachment,
    TaskComment,
    TaskLabel,
)

from .dtos import (
    AttachmentCommand,
    AttachmentResponse,
    CommentCommand,
    CommentResponse,
    LabelCommand,
    LabelResponse,
)
from .update_task_use_case import TASK_NOT_FOUND

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _TaskDetailUseCase:
    """Shared envelope for child-row mutations of a task"""

    activity_type: TaskActivityType
    error: Error

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def _run(
        self,
        ctx: RequestContext,
        task_id: UUID,
        mutate: Callable[[Task], Awaitable[T]],
        describe: Callable[[T], str],
        changes: dict,
    ) -> Result:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                task = await self.uow.tasks.get_by_id(task_id)
                if task is None:
                    return Return.err(TASK_NOT_FOUND)

                outcome = await mutate(task)
                if isinstance(outcome, Error):
                    return Return.err(outcome)

                await self.uow.tasks.add_activity(
                    TaskActivity(
                        task_id=task.id,
                        user_id=ctx.actor_id,
                        type=self.activity_type,
                        content=describe(outcome),
                    )
                )
                await self.uow.commit()

                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(task.id),
                        entity_type=EntityType.task,
                        action=AuditAction.update,
                        changes=changes,
                        metadata={"activity": self.activity_type.value},
                    ),
                    paths=[paths.project_detail(task.project_id)],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Task %s failed", self.activity_type.value)
                return Return.err(self.error)

            return Return.ok(outcome)


class AddCommentUseCase(_TaskDetailUseCase):
    activity_type = TaskActivityType.commented
    error = Error("TASK_COMMENT_ERROR", "Failed to add comment. Please try again.")

    async def execute(
        self, ctx: RequestContext, task_id: UUID, command: CommentCommand
    ) -> Result[CommentResponse]:
        async def mutate(task: Task):
            comment = await self.uow.tasks.add_comment(
                TaskComment(task_id=task.id, user_id=ctx.actor_id, content=command.content)
            )
            return CommentResponse.model_validate(comment)

        return await self._run(
            ctx, task_id, mutate, lambda _: "added a comment", command.model_dump(mode="json")
        )


class AddAttachmentUseCase(_TaskDetailUseCase):
    activity_type = TaskActivityType.attachment_added
    error = Error("TASK_ATTACHMENT_ERROR", "Failed to add attachment. Please try again.")

    async def execute(
        self, ctx: RequestContext, task_id: UUID, command: AttachmentCommand
    ) -> Result[AttachmentResponse]:
        async def mutate(task: Task):
            attachment = await self.uow.tasks.add_attachment(
                TaskAttachment(task_id=task.id, user_id=ctx.actor_id, **command.model_dump())
            )
            return AttachmentResponse.model_validate(attachment)

        return await self._run(
            ctx,
            task_id,
            mutate,
            lambda a: f'attached "{a.name}"',
            command.model_dump(mode="json"),
        )


class AddLabelUseCase(_TaskDetailUseCase):
    activity_type = TaskActivityType.label_added
    error = Error("TASK_LABEL_ERROR", "Failed to add label. Please try again.")

    async def execute(
        self, ctx: RequestContext, task_id: UUID, command: LabelCommand
    ) -> Result[LabelResponse]:
        async def mutate(task: Task):
            label = await self.uow.tasks.add_label(TaskLabel(task_id=task.id, **command.model_dump()))
            return LabelResponse.model_validate(label)

        return await self._run(
            ctx,
            task_id,
            mutate,
            lambda label: f'added label "{label.name}"',
            command.model_dump(mode="json"),
        )


class RemoveLabelUseCase(_TaskDetailUseCase):
    activity_type = TaskActivityType.label_removed
    error = Error("TASK_LABEL_ERROR", "Failed to remove label. Please try again.")

    async def execute(
        self, ctx: RequestContext, task_id: UUID, label_id: UUID
    ) -> Result[LabelResponse]:
        async def mutate(task: Task):
            label = await self.uow.tasks.get_label(label_id)
            if label is None or label.task_id != task.id:
                return Error("LABEL_NOT_FOUND", "Label not found")
            response = LabelResponse.model_validate(label)
            await self.uow.tasks.delete_label(label_id)
            return response

        return await self._run(
            ctx,
            task_id,
            mutate,
            lambda label: f'removed label "{label.name}"',
            {"label_id": str(label_id)},
        )
