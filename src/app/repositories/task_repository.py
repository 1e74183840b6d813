from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import (
    Task,
    TaskActivity,
    TaskAttachment,
    TaskComment,
    TaskLabel,
)


class ITaskRepository(ABC):
    """Kanban task repository interface - tasks and their satellites"""

    @abstractmethod
    async def create(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Optional[Task]:
        """Get task with assignee, labels, comments and attachments loaded"""
        pass

    @abstractmethod
    async def get_many(self, task_ids: List[UUID]) -> List[Task]:
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def delete(self, task_id: UUID) -> None:
        """Delete a task with its labels, comments, attachments and activities"""
        pass

    @abstractmethod
    async def next_order(self, column_id: UUID) -> int:
        """(max order in column, or -1) + 1"""
        pass

    @abstractmethod
    async def add_activity(self, activity: TaskActivity) -> TaskActivity:
        pass

    @abstractmethod
    async def add_comment(self, comment: TaskComment) -> TaskComment:
        pass

    @abstractmethod
    async def add_attachment(self, attachment: TaskAttachment) -> TaskAttachment:
        pass

    @abstractmethod
    async def add_label(self, label: TaskLabel) -> TaskLabel:
        pass

    @abstractmethod
    async def get_label(self, label_id: UUID) -> Optional[TaskLabel]:
        pass

    @abstractmethod
    async def delete_label(self, label_id: UUID) -> None:
        pass
