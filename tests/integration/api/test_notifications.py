from uuid import uuid4

import pytest

from src.api.utils.jwt import generate_jwt

TENANT_PAYLOAD = {
    "bp_code": "BP-2001",
    "first_name": "Ben",
    "last_name": "Cruz",
    "email": "ben@cruzfoods.com",
    "phone": "0918-555-0102",
    "company": "Cruz Foods",
}


async def create_tenant(client, headers, bp_code="BP-2001"):
    response = await client.post(
        "/tenants", json={**TENANT_PAYLOAD, "bp_code": bp_code}, headers=headers
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_every_user_receives_tenant_notification(client, auth_headers, user, other_user):
    # Arrange
    tenant = await create_tenant(client, auth_headers)
    other_headers = {"Authorization": f"Bearer {generate_jwt(other_user.id)}"}

    # Act
    mine = (await client.get("/notifications", headers=auth_headers)).json()
    theirs = (await client.get("/notifications", headers=other_headers)).json()

    # Assert
    for inbox in (mine, theirs):
        assert inbox["unread_count"] == 1
        (notification,) = inbox["notifications"]
        assert notification["title"] == "New Tenant Created"
        assert notification["type"] == "tenant"
        assert notification["entity_id"] == tenant["id"]
        assert notification["action_url"] == f"/dashboard/tenants/{tenant['id']}"
        assert notification["is_read"] is False


@pytest.mark.asyncio
async def test_mark_read_and_read_all(client, auth_headers, user):
    # Arrange
    await create_tenant(client, auth_headers, "BP-1")
    await create_tenant(client, auth_headers, "BP-2")
    inbox = (await client.get("/notifications", headers=auth_headers)).json()
    first_id = inbox["notifications"][0]["id"]

    # Act
    read = await client.post(f"/notifications/{first_id}/read", headers=auth_headers)
    count_after_one = (await client.get("/notifications/unread-count", headers=auth_headers)).json()
    read_all = await client.post("/notifications/read-all", headers=auth_headers)
    count_after_all = (await client.get("/notifications/unread-count", headers=auth_headers)).json()

    # Assert
    assert read.status_code == 200
    assert read.json()["is_read"] is True
    assert read.json()["read_at"] is not None
    assert count_after_one == {"unread_count": 1}
    assert read_all.json() == {"count": 1}
    assert count_after_all == {"unread_count": 0}


@pytest.mark.asyncio
async def test_cannot_touch_another_users_notification(client, auth_headers, user, other_user):
    # Arrange
    await create_tenant(client, auth_headers)
    other_headers = {"Authorization": f"Bearer {generate_jwt(other_user.id)}"}
    theirs = (await client.get("/notifications", headers=other_headers)).json()
    their_id = theirs["notifications"][0]["id"]

    # Act
    response = await client.post(f"/notifications/{their_id}/read", headers=auth_headers)

    # Assert
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOTIFICATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_delete_notifications(client, auth_headers, user):
    # Arrange
    await create_tenant(client, auth_headers, "BP-1")
    await create_tenant(client, auth_headers, "BP-2")
    inbox = (await client.get("/notifications", headers=auth_headers)).json()

    # Act
    single = await client.delete(
        f"/notifications/{inbox['notifications'][0]['id']}", headers=auth_headers
    )
    rest = await client.delete("/notifications", headers=auth_headers)
    missing = await client.delete(f"/notifications/{uuid4()}", headers=auth_headers)

    # Assert
    assert single.status_code == 200
    assert rest.json() == {"count": 1}
    assert missing.status_code == 404
    assert (await client.get("/notifications", headers=auth_headers)).json()["notifications"] == []


@pytest.mark.asyncio
async def test_notifications_require_token(client, user):
    response = await client.get("/notifications")

    assert response.status_code == 401
