from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.use_cases.tenants import ImportTenantsUseCase
from src.domain.entities import TenantStatus

HEADER = "bpCode,firstName,lastName,email,phone,company,status"


@pytest.fixture
def tenant_uow(mock_uow):
    mock_uow.tenants = MagicMock()
    mock_uow.tenants.create_many = AsyncMock(side_effect=lambda tenants: tenants)
    return mock_uow


@pytest.mark.asyncio
async def test_import_tenants_success(tenant_uow, mock_invalidator, ctx):
    """Each row becomes a tenant; every user hears about every import"""
    # Arrange
    staff = [uuid4(), uuid4()]
    tenant_uow.users.list_ids.return_value = staff
    text = "\n".join(
        [
            HEADER,
            "BP-001,Ana,Reyes,ana@example.com,0917,Reyes Trading,ACTIVE",
            "BP-002,Ben,Cruz,ben@example.com,0918,Cruz Foods,",
            "",
        ]
    )

    # Act
    use_case = ImportTenantsUseCase(tenant_uow, mock_invalidator)
    result = await use_case.execute(ctx, text)

    # Assert
    assert result.is_ok()
    assert [t.bp_code for t in result.value] == ["BP-001", "BP-002"]
    assert result.value[0].status == TenantStatus.active
    # Blank status falls back to active
    assert result.value[1].status == TenantStatus.active

    audit_logs = tenant_uow.audit_logs.create_many.call_args.args[0]
    assert len(audit_logs) == 2
    assert all(log.event_metadata == {"source": "CSV_IMPORT"} for log in audit_logs)

    notifications = tenant_uow.notifications.create_many.call_args.args[0]
    assert len(notifications) == 4

    mock_invalidator.revalidate_path.assert_called_once_with("/dashboard/tenants")


@pytest.mark.asyncio
async def test_import_tenants_invalid_status_rejects_file(tenant_uow, mock_invalidator, ctx):
    """An unknown status fails the whole import before anything is stored"""
    # Arrange
    text = "\n".join(
        [
            HEADER,
            "BP-001,Ana,Reyes,ana@example.com,0917,Reyes Trading,active",
            "BP-002,Ben,Cruz,ben@example.com,0918,Cruz Foods,evicted",
        ]
    )

    # Act
    result = await ImportTenantsUseCase(tenant_uow, mock_invalidator).execute(ctx, text)

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_TENANT_STATUS"
    assert "evicted" in result.error.message
    tenant_uow.tenants.create_many.assert_not_called()
    tenant_uow.commit.assert_not_called()
    tenant_uow.audit_logs.create_many.assert_not_called()


@pytest.mark.asyncio
async def test_import_tenants_missing_required_column(tenant_uow, mock_invalidator, ctx):
    """A row without a company is rejected with its line number"""
    # Arrange
    text = "bpCode,firstName,lastName,email,phone\nBP-001,Ana,Reyes,ana@example.com,0917"

    # Act
    result = await ImportTenantsUseCase(tenant_uow, mock_invalidator).execute(ctx, text)

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_CSV_ROW"
    assert "Row 2" in result.error.message
    tenant_uow.tenants.create_many.assert_not_called()


@pytest.mark.asyncio
async def test_import_tenants_unauthorized(tenant_uow, mock_invalidator, anonymous_ctx):
    # Act
    result = await ImportTenantsUseCase(tenant_uow, mock_invalidator).execute(
        anonymous_ctx, HEADER
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "UNAUTHORIZED"
    tenant_uow.audit_logs.create_many.assert_not_called()
