"""
Update Task Order Use Case

Persists a kanban drag and drop: every moved task gets its new column and
position in one transaction.
"""

import logging
from typing import List

from libs.result import Error, Result, Return
from src.app.services import paths
from src.app.services.mutation_envelope import ENVELOPE_ERRORS, AuditEntry, MutationEnvelope
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditAction, EntityType

from .dtos import TaskResponse, UpdateTaskOrderCommand
from .update_task_use_case import TASK_NOT_FOUND

logger = logging.getLogger(__name__)


class UpdateTaskOrderUseCase:
    """
    Use case for reordering tasks.

    Business Rules:
    - Every listed task must exist, else TASK_NOT_FOUND and no task changes
    - column_id and order are written exactly as submitted
    - All rows commit together; one audit row covers the batch
    - Concurrent reorders are last-write-wins
    """

    def __init__(self, uow: UnitOfWork, invalidator: PathInvalidator):
        self.uow = uow
        self.envelope = MutationEnvelope(uow, invalidator)

    async def execute(
        self, ctx: RequestContext, command: UpdateTaskOrderCommand
    ) -> Result[List[TaskResponse]]:
        unauthorized = self.envelope.require_actor(ctx)
        if unauthorized:
            return Return.err(unauthorized)

        async with self.uow:
            try:
                tasks = {t.id: t for t in await self.uow.tasks.get_many([p.id for p in command.tasks])}
                if any(position.id not in tasks for position in command.tasks):
                    await self.uow.rollback()
                    return Return.err(TASK_NOT_FOUND)

                now = utc_now()
                for position in command.tasks:
                    task = tasks[position.id]
                    task.column_id = position.column_id
                    task.order = position.order
                    task.updated_at = now
                    await self.uow.tasks.update(task)
                await self.uow.commit()

                project_ids = list(dict.fromkeys(t.project_id for t in tasks.values()))
                await self.envelope.finalize(
                    ctx,
                    AuditEntry(
                        entity_id=str(project_ids[0]),
                        entity_type=EntityType.task,
                        action=AuditAction.update,
                        changes=command.model_dump(mode="json"),
                        metadata={"operation": "reorder", "count": len(command.tasks)},
                    ),
                    paths=[paths.project_detail(pid) for pid in project_ids],
                )
            except ENVELOPE_ERRORS:
                logger.exception("Task reorder failed")
                return Return.err(
                    Error("TASK_REORDER_ERROR", "Failed to reorder tasks. Please try again.")
                )

            return Return.ok([TaskResponse.model_validate(tasks[p.id]) for p in command.tasks])
