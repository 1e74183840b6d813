from uuid import uuid4

import pytest
from sqlmodel import select

from src.domain.entities import Document, Notification


@pytest.mark.asyncio
async def test_maintenance_request_lifecycle(
    client, auth_headers, user, other_user, portfolio, invalidator
):
    """Completing a request stamps completed_at"""
    # Arrange
    unit_id = str(portfolio["unit"].id)

    # Act
    created = await client.post(
        "/maintenance-requests",
        json={
            "unit_id": unit_id,
            "tenant_id": str(portfolio["tenant"].id),
            "category": "plumbing",
            "priority": "high",
            "description": "Leaking pipe under the sink",
        },
        headers=auth_headers,
    )
    request_id = created.json()["id"]
    assigned = await client.patch(
        f"/maintenance-requests/{request_id}",
        json={"status": "assigned", "assigned_to_id": str(other_user.id)},
        headers=auth_headers,
    )
    completed = await client.patch(
        f"/maintenance-requests/{request_id}", json={"status": "completed"}, headers=auth_headers
    )

    # Assert
    assert created.status_code == 201
    assert created.json()["status"] == "pending"
    assert await invalidator.is_stale("/dashboard/spaces")

    assert assigned.json()["assigned_to_id"] == str(other_user.id)
    assert assigned.json()["completed_at"] is None
    assert completed.json()["status"] == "completed"
    assert completed.json()["completed_at"] is not None
    assert completed.json()["priority"] == "high"

    deleted = await client.delete(f"/maintenance-requests/{request_id}", headers=auth_headers)
    missing = await client.delete(f"/maintenance-requests/{request_id}", headers=auth_headers)
    assert deleted.status_code == 200
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "MAINTENANCE_REQUEST_NOT_FOUND"


@pytest.mark.asyncio
async def test_maintenance_request_for_unknown_unit(client, auth_headers, user):
    response = await client.post(
        "/maintenance-requests",
        json={"unit_id": str(uuid4()), "description": "Broken lock"},
        headers=auth_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "UNIT_NOT_FOUND"


@pytest.mark.asyncio
async def test_document_invalidates_every_linked_route(
    client, auth_headers, db_session, user, portfolio, invalidator
):
    # Arrange
    property_id = portfolio["property"].id
    unit_id = portfolio["unit"].id
    tenant_id = portfolio["tenant"].id

    # Act
    response = await client.post(
        "/documents",
        json={
            "name": "Lease Contract",
            "document_type": "lease",
            "file_url": "https://files.example.com/lease.pdf",
            "property_id": str(property_id),
            "unit_id": str(unit_id),
            "tenant_id": str(tenant_id),
        },
        headers=auth_headers,
    )

    # Assert
    assert response.status_code == 201
    assert response.json()["uploaded_by_id"] == str(user.id)
    assert invalidator.stale_paths == {
        f"/dashboard/properties?selected={property_id}",
        f"/dashboard/spaces?selected={unit_id}",
        f"/dashboard/tenants/{tenant_id}",
    }

    (notification,) = (await db_session.exec(select(Notification))).all()
    assert notification.user_id == user.id
    assert notification.title == "Document Uploaded"
    assert notification.action_url == f"/dashboard/properties?selected={property_id}"


@pytest.mark.asyncio
async def test_unlinked_document_invalidates_nothing(client, auth_headers, user, invalidator):
    response = await client.post(
        "/documents",
        json={"name": "House Rules", "file_url": "https://files.example.com/rules.pdf"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert invalidator.stale_paths == set()


@pytest.mark.asyncio
async def test_document_for_unknown_property_is_rejected(client, auth_headers, db_session, user):
    """The foreign key is enforced, so nothing is written"""
    response = await client.post(
        "/documents",
        json={
            "name": "Deed",
            "file_url": "https://files.example.com/deed.pdf",
            "property_id": str(uuid4()),
        },
        headers=auth_headers,
    )

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "DOCUMENT_CREATE_ERROR"
    assert (await db_session.exec(select(Document))).all() == []
