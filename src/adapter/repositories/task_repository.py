from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import selectinload
from sqlmodel import col, delete, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.task_repository import ITaskRepository
from src.domain.entities import (
    Task,
    TaskActivity,
    TaskAttachment,
    TaskComment,
    TaskLabel,
)


async def delete_tasks_where(session: AsyncSession, *criteria) -> None:
    """Delete the tasks matching `criteria` along with their labels, comments, attachments and activities"""
    task_ids = select(Task.id).where(*criteria)
    for child in (TaskActivity, TaskComment, TaskAttachment, TaskLabel):
        await session.exec(delete(child).where(col(child.task_id).in_(task_ids)))
    await session.exec(delete(Task).where(*criteria))


class TaskRepository(ITaskRepository):
    """Task repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, task: Task) -> Task:
        self.session.add(task)
        await self.session.flush()
        await self.session.refresh(task)
        return task

    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        stmt = (
            select(Task)
            .where(Task.id == task_id)
            .options(
                selectinload(Task.assigned_to),
                selectinload(Task.labels),
                selectinload(Task.comments),
                selectinload(Task.attachments),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_many(self, task_ids: List[UUID]) -> List[Task]:
        stmt = select(Task).where(col(Task.id).in_(task_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def update(self, task: Task) -> Task:
        self.session.add(task)
        await self.session.flush()
        return task

    async def delete(self, task_id: UUID) -> None:
        await delete_tasks_where(self.session, Task.id == task_id)

    async def next_order(self, column_id: UUID) -> int:
        stmt = select(func.max(Task.order)).where(Task.column_id == column_id)
        result = await self.session.exec(stmt)
        last_order = result.one()
        return (last_order if last_order is not None else -1) + 1

    async def add_activity(self, activity: TaskActivity) -> TaskActivity:
        self.session.add(activity)
        await self.session.flush()
        return activity

    async def add_comment(self, comment: TaskComment) -> TaskComment:
        self.session.add(comment)
        await self.session.flush()
        await self.session.refresh(comment)
        return comment

    async def add_attachment(self, attachment: TaskAttachment) -> TaskAttachment:
        self.session.add(attachment)
        await self.session.flush()
        await self.session.refresh(attachment)
        return attachment

    async def add_label(self, label: TaskLabel) -> TaskLabel:
        self.session.add(label)
        await self.session.flush()
        await self.session.refresh(label)
        return label

    async def get_label(self, label_id: UUID) -> Optional[TaskLabel]:
        result = await self.session.exec(select(TaskLabel).where(TaskLabel.id == label_id))
        return result.one_or_none()

    async def delete_label(self, label_id: UUID) -> None:
        await self.session.exec(delete(TaskLabel).where(TaskLabel.id == label_id))
