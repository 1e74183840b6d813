from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from src.app.use_cases.tasks import CreateTaskUseCase, UpdateTaskOrderUseCase
from src.app.use_cases.tasks.dtos import TaskCommand, TaskPosition, UpdateTaskOrderCommand
from src.domain.entities import AuditAction, EntityType, Task


@pytest.fixture
def task_uow(mock_uow):
    mock_uow.projects = MagicMock()
    mock_uow.projects.get_by_id = AsyncMock()
    mock_uow.projects.get_column = AsyncMock()
    mock_uow.projects.list_member_user_ids = AsyncMock(return_value=[])

    saved = {}

    def save(task):
        saved[task.id] = task
        return task

    mock_uow.tasks = MagicMock()
    mock_uow.tasks.next_order = AsyncMock(return_value=0)
    mock_uow.tasks.create = AsyncMock(side_effect=save)
    mock_uow.tasks.get_by_id = AsyncMock(side_effect=lambda task_id: saved.get(task_id))
    mock_uow.tasks.add_activity = AsyncMock()
    mock_uow.tasks.get_many = AsyncMock(return_value=[])
    mock_uow.tasks.update = AsyncMock(side_effect=save)
    return mock_uow


def make_task(project_id, column_id, order):
    return Task(
        id=uuid4(),
        title=f"Task {order}",
        order=order,
        project_id=project_id,
        column_id=column_id,
        created_by_id=uuid4(),
    )


@pytest.mark.asyncio
async def test_create_task_appends_to_column_and_notifies_members(
    task_uow, mock_invalidator, ctx
):
    """New task goes to the bottom of the column; members and assignee are notified"""
    # Arrange
    project_id = uuid4()
    column_id = uuid4()
    member_id = uuid4()
    assignee_id = uuid4()
    task_uow.projects.get_by_id.return_value = SimpleNamespace(id=project_id, name="Fit-out")
    task_uow.projects.get_column.return_value = SimpleNamespace(id=column_id)
    task_uow.projects.list_member_user_ids.return_value = [ctx.actor_id, member_id]
    task_uow.tasks.next_order.return_value = 4

    command = TaskCommand(title="Install signage", column_id=column_id, assigned_to_id=assignee_id)

    # Act
    use_case = CreateTaskUseCase(task_uow, mock_invalidator)
    result = await use_case.execute(ctx, project_id, command)

    # Assert
    assert result.is_ok()
    assert result.value.order == 4
    assert result.value.project_id == project_id
    assert result.value.created_by_id == ctx.actor_id

    task_uow.tasks.add_activity.assert_called_once()

    audit_logs = task_uow.audit_logs.create_many.call_args.args[0]
    assert len(audit_logs) == 1
    assert audit_logs[0].entity_type == EntityType.task
    assert audit_logs[0].action == AuditAction.create
    assert audit_logs[0].user_id == ctx.actor_id
    assert audit_logs[0].ip_address == "10.0.0.1"

    notifications = task_uow.notifications.create_many.call_args.args[0]
    recipients = [n.user_id for n in notifications]
    assert recipients.count(ctx.actor_id) == 1
    assert recipients.count(member_id) == 1
    assert recipients.count(assignee_id) == 1
    assert len(notifications) == 3

    mock_invalidator.revalidate_path.assert_called_once_with(f"/dashboard/projects/{project_id}")


@pytest.mark.asyncio
async def test_create_task_self_assignment_sends_no_assigned_notification(
    task_uow, mock_invalidator, ctx
):
    """Assigning the task to its creator does not add an extra notification"""
    # Arrange
    project_id = uuid4()
    column_id = uuid4()
    task_uow.projects.get_by_id.return_value = SimpleNamespace(id=project_id, name="Fit-out")
    task_uow.projects.get_column.return_value = SimpleNamespace(id=column_id)
    task_uow.projects.list_member_user_ids.return_value = [ctx.actor_id]

    command = TaskCommand(title="Review", column_id=column_id, assigned_to_id=ctx.actor_id)

    # Act
    result = await CreateTaskUseCase(task_uow, mock_invalidator).execute(ctx, project_id, command)

    # Assert
    assert result.is_ok()
    notifications = task_uow.notifications.create_many.call_args.args[0]
    assert len(notifications) == 1


@pytest.mark.asyncio
async def test_create_task_project_not_found(task_uow, mock_invalidator, ctx):
    """Missing project is reported before the column is looked up"""
    # Arrange
    task_uow.projects.get_by_id.return_value = None
    command = TaskCommand(title="Orphan", column_id=uuid4())

    # Act
    result = await CreateTaskUseCase(task_uow, mock_invalidator).execute(ctx, uuid4(), command)

    # Assert
    assert result.is_err()
    assert result.error.code == "PROJECT_NOT_FOUND"
    task_uow.projects.get_column.assert_not_called()
    task_uow.tasks.create.assert_not_called()
    task_uow.audit_logs.create_many.assert_not_called()


@pytest.mark.asyncio
async def test_create_task_unauthorized(task_uow, mock_invalidator, anonymous_ctx):
    """No actor means nothing is read, written or audited"""
    # Act
    command = TaskCommand(title="Sneaky", column_id=uuid4())
    result = await CreateTaskUseCase(task_uow, mock_invalidator).execute(
        anonymous_ctx, uuid4(), command
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"
    task_uow.projects.get_by_id.assert_not_called()
    task_uow.audit_logs.create_many.assert_not_called()
    mock_invalidator.revalidate_path.assert_not_called()


@pytest.mark.asyncio
async def test_update_task_order_moves_tasks(task_uow, mock_invalidator, ctx):
    """Every listed task takes the submitted column and order"""
    # Arrange
    project_id = uuid4()
    todo, done = uuid4(), uuid4()
    first = make_task(project_id, todo, 0)
    second = make_task(project_id, todo, 1)
    task_uow.tasks.get_many.return_value = [first, second]

    command = UpdateTaskOrderCommand(
        tasks=[
            TaskPosition(id=second.id, column_id=todo, order=0),
            TaskPosition(id=first.id, column_id=done, order=0),
        ]
    )

    # Act
    result = await UpdateTaskOrderUseCase(task_uow, mock_invalidator).execute(ctx, command)

    # Assert
    assert result.is_ok()
    assert [t.id for t in result.value] == [second.id, first.id]
    assert first.column_id == done
    assert first.order == 0
    assert second.order == 0
    assert task_uow.tasks.update.call_count == 2

    audit_logs = task_uow.audit_logs.create_many.call_args.args[0]
    assert len(audit_logs) == 1
    assert audit_logs[0].event_metadata == {"operation": "reorder", "count": 2}


@pytest.mark.asyncio
async def test_update_task_order_missing_task_changes_nothing(task_uow, mock_invalidator, ctx):
    """One unknown id rejects the whole batch and rolls back"""
    # Arrange
    project_id = uuid4()
    column_id = uuid4()
    existing = make_task(project_id, column_id, 0)
    task_uow.tasks.get_many.return_value = [existing]

    command = UpdateTaskOrderCommand(
        tasks=[
            TaskPosition(id=existing.id, column_id=column_id, order=5),
            TaskPosition(id=uuid4(), column_id=column_id, order=6),
        ]
    )

    # Act
    result = await UpdateTaskOrderUseCase(task_uow, mock_invalidator).execute(ctx, command)

    # Assert
    assert result.is_err()
    assert result.error.code == "TASK_NOT_FOUND"
    assert existing.order == 0
    task_uow.tasks.update.assert_not_called()
    task_uow.rollback.assert_called_once()
    task_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_task_order_database_failure(task_uow, mock_invalidator, ctx):
    """A failing commit is reported as the generic reorder error"""
    # Arrange
    project_id = uuid4()
    column_id = uuid4()
    task = make_task(project_id, column_id, 0)
    task_uow.tasks.get_many.return_value = [task]
    task_uow.commit.side_effect = OperationalError("UPDATE tasks", {}, Exception("locked"))

    command = UpdateTaskOrderCommand(tasks=[TaskPosition(id=task.id, column_id=column_id, order=1)])

    # Act
    result = await UpdateTaskOrderUseCase(task_uow, mock_invalidator).execute(ctx, command)

    # Assert
    assert result.is_err()
    assert result.error.code == "TASK_REORDER_ERROR"
    task_uow.audit_logs.create_many.assert_not_called()
