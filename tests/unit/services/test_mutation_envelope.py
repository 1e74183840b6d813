from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import SQLAlchemyError

from src.app.services.mutation_envelope import AuditEntry, MutationEnvelope, NotificationDraft
from src.app.services.path_invalidator import InvalidationError
from src.app.use_cases.tenants import CreateTenantUseCase
from src.app.use_cases.tenants.dtos import TenantCommand
from src.domain.entities import AuditAction, EntityType, NotificationType


@pytest.fixture
def tenant_uow(mock_uow):
    mock_uow.tenants = MagicMock()
    mock_uow.tenants.create = AsyncMock(side_effect=lambda tenant: tenant)
    mock_uow.users.list_ids.return_value = [uuid4(), uuid4()]
    return mock_uow


@pytest.fixture
def command():
    return TenantCommand(
        bp_code="BP-1",
        first_name="Ana",
        last_name="Reyes",
        email="ana@example.com",
        phone="0917",
        company="Reyes Trading",
    )


def audit_entry():
    return AuditEntry(entity_id="t-1", entity_type=EntityType.tenant, action=AuditAction.update)


@pytest.mark.asyncio
async def test_finalize_commits_before_invalidating(mock_uow, mock_invalidator, ctx):
    """Audit and notifications are written, committed, then paths go stale"""
    # Arrange
    calls = []
    mock_uow.audit_logs.create_many.side_effect = lambda rows: calls.append("audit")
    mock_uow.notifications.create_many.side_effect = lambda rows: calls.append("notify")
    mock_uow.commit.side_effect = lambda: calls.append("commit")
    mock_invalidator.revalidate_path.side_effect = lambda path: calls.append(path)
    draft = NotificationDraft(title="Updated", message="Tenant updated", type=NotificationType.tenant)

    # Act
    envelope = MutationEnvelope(mock_uow, mock_invalidator)
    await envelope.finalize(
        ctx, audit_entry(), draft.fan_out([ctx.actor_id]), ["/dashboard/tenants", "/dashboard"]
    )

    # Assert
    assert calls == ["audit", "notify", "commit", "/dashboard/tenants", "/dashboard"]


@pytest.mark.asyncio
async def test_finalize_skips_empty_notification_batch(mock_uow, mock_invalidator, ctx):
    envelope = MutationEnvelope(mock_uow, mock_invalidator)
    await envelope.finalize(ctx, [audit_entry(), audit_entry()])

    assert len(mock_uow.audit_logs.create_many.call_args.args[0]) == 2
    mock_uow.notifications.create_many.assert_not_called()
    mock_invalidator.revalidate_path.assert_not_called()


@pytest.mark.asyncio
async def test_audit_failure_returns_generic_error_after_primary_commit(
    tenant_uow, mock_invalidator, ctx, command
):
    """The tenant is already committed when the audit insert fails"""
    # Arrange
    tenant_uow.audit_logs.create_many.side_effect = SQLAlchemyError("audit insert failed")

    # Act
    use_case = CreateTenantUseCase(tenant_uow, mock_invalidator)
    result = await use_case.execute(ctx, command)

    # Assert
    assert result.is_err()
    assert result.error.code == "TENANT_CREATE_ERROR"
    assert result.error.message == "Failed to create tenant. Please try again."
    tenant_uow.tenants.create.assert_called_once()
    assert tenant_uow.commit.await_count == 1
    tenant_uow.notifications.create_many.assert_not_called()
    mock_invalidator.revalidate_path.assert_not_called()


@pytest.mark.asyncio
async def test_invalidation_failure_returns_generic_error(
    tenant_uow, mock_invalidator, ctx, command
):
    """A cache backend failure surfaces after both the tenant and its audit row are committed"""
    # Arrange
    mock_invalidator.revalidate_path.side_effect = InvalidationError("cache unreachable")

    # Act
    use_case = CreateTenantUseCase(tenant_uow, mock_invalidator)
    result = await use_case.execute(ctx, command)

    # Assert
    assert result.is_err()
    assert result.error.code == "TENANT_CREATE_ERROR"
    assert tenant_uow.commit.await_count == 2
    tenant_uow.audit_logs.create_many.assert_called_once()
    assert len(tenant_uow.notifications.create_many.call_args.args[0]) == 2
    tenant_uow.rollback.assert_not_called()
