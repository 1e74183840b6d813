from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from sqlmodel import select

from src.app.services.path_invalidator import InvalidationError
from src.domain.entities import AuditLog, Notification, Tenant

TENANT_PAYLOAD = {
    "bp_code": "BP-1001",
    "first_name": "Ana",
    "last_name": "Reyes",
    "email": "ana@reyestrading.com",
    "phone": "0917-555-0101",
    "company": "Reyes Trading",
}


@pytest.mark.asyncio
async def test_create_and_fetch_tenant(client, auth_headers, user, other_user, invalidator):
    """Created tenant is readable, audited, and every user is notified"""
    # Act
    response = await client.post("/tenants", json=TENANT_PAYLOAD, headers=auth_headers)

    # Assert
    assert response.status_code == 201
    created = response.json()
    assert created["bp_code"] == "BP-1001"
    assert created["status"] == "active"

    detail = await client.get(f"/tenants/{created['id']}", headers=auth_headers)
    assert detail.status_code == 200
    body = detail.json()
    assert body["email"] == "ana@reyestrading.com"
    assert body["leases"] == []
    assert body["documents"] == []

    logs = await client.get(
        "/audit/logs",
        params={"entity_type": "tenant", "entity_id": created["id"]},
        headers=auth_headers,
    )
    assert logs.status_code == 200
    entries = logs.json()["logs"]
    assert len(entries) == 1
    assert entries[0]["action"] == "create"
    assert entries[0]["user_email"] == "manager@example.com"

    assert await invalidator.is_stale("/dashboard/tenants")


@pytest.mark.asyncio
async def test_update_and_delete_tenant(client, auth_headers, user):
    # Arrange
    created = (await client.post("/tenants", json=TENANT_PAYLOAD, headers=auth_headers)).json()

    # Act
    updated = await client.put(
        f"/tenants/{created['id']}",
        json={**TENANT_PAYLOAD, "company": "Reyes Holdings", "status": "inactive"},
        headers=auth_headers,
    )
    deleted = await client.delete(f"/tenants/{created['id']}", headers=auth_headers)

    # Assert
    assert updated.status_code == 200
    assert updated.json()["company"] == "Reyes Holdings"
    assert updated.json()["status"] == "inactive"
    assert deleted.status_code == 200

    missing = await client.get(f"/tenants/{created['id']}", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "TENANT_NOT_FOUND"


@pytest.mark.asyncio
async def test_tenant_not_found(client, auth_headers, user):
    response = await client.get(f"/tenants/{uuid4()}", headers=auth_headers)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_tenant_requires_token(client, db_session, user):
    """No bearer token means 401 and nothing written"""
    # Act
    response = await client.post("/tenants", json=TENANT_PAYLOAD)

    # Assert
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHORIZED"
    for model in (Tenant, AuditLog, Notification):
        result = await db_session.exec(select(model))
        assert result.all() == [], model.__name__


@pytest.mark.asyncio
async def test_cache_failure_keeps_committed_tenant(
    client, auth_headers, db_session, user, invalidator
):
    """The tenant and its audit row stay committed when marking pages stale fails"""
    # Arrange
    invalidator.revalidate_path = AsyncMock(side_effect=InvalidationError("cache unreachable"))

    # Act
    response = await client.post("/tenants", json=TENANT_PAYLOAD, headers=auth_headers)

    # Assert
    assert response.status_code == 500
    assert response.json()["error"]["code"] == "TENANT_CREATE_ERROR"
    (tenant,) = (await db_session.exec(select(Tenant))).all()
    assert tenant.bp_code == "BP-1001"
    (log,) = (await db_session.exec(select(AuditLog))).all()
    assert log.entity_id == str(tenant.id)


@pytest.mark.asyncio
async def test_invalid_token_is_unauthorized(client, user):
    response = await client.get("/tenants", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_import_tenants_csv(client, auth_headers, user):
    # Arrange
    csv_text = (
        "bpCode,firstName,lastName,email,phone,company,status\n"
        "BP-1,Ana,Reyes,ana@example.com,0917,Reyes Trading,active\n"
        "BP-2,Ben,Cruz,ben@example.com,0918,Cruz Foods,PENDING\n"
    )

    # Act
    response = await client.post(
        "/tenants/import",
        content=csv_text.encode("utf-8"),
        headers={**auth_headers, "Content-Type": "text/csv"},
    )

    # Assert
    assert response.status_code == 201
    assert [t["status"] for t in response.json()] == ["active", "pending"]

    listing = await client.get("/tenants", headers=auth_headers)
    assert len(listing.json()) == 2


@pytest.mark.asyncio
async def test_import_tenants_invalid_status_persists_nothing(client, auth_headers, user):
    # Arrange
    csv_text = (
        "bpCode,firstName,lastName,email,phone,company,status\n"
        "BP-1,Ana,Reyes,ana@example.com,0917,Reyes Trading,active\n"
        "BP-2,Ben,Cruz,ben@example.com,0918,Cruz Foods,evicted\n"
    )

    # Act
    response = await client.post(
        "/tenants/import",
        content=csv_text.encode("utf-8"),
        headers={**auth_headers, "Content-Type": "text/csv"},
    )

    # Assert
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_TENANT_STATUS"

    listing = await client.get("/tenants", headers=auth_headers)
    assert listing.json() == []
