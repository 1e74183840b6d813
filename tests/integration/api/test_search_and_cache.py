import pytest

PROPERTY_PAYLOAD = {
    "property_name": "Harbor Point",
    "property_code": "HP-01",
    "title_no": "TCT-1",
    "lot_no": "L-1",
    "registered_owner": "Harbor Holdings",
    "leasable_area": 120,
    "address": "1 Pier Road",
    "property_type": "commercial",
    "total_units": 2,
}


@pytest.mark.asyncio
async def test_global_search(client, auth_headers, user):
    """Search matches properties, spaces and tenants case-insensitively"""
    # Arrange
    property = (
        await client.post("/properties", json=PROPERTY_PAYLOAD, headers=auth_headers)
    ).json()
    unit = await client.post(
        "/units",
        json={"property_id": property["id"], "unit_number": "HARB-101", "unit_area": 60},
        headers=auth_headers,
    )
    assert unit.status_code == 201
    await client.post(
        "/tenants",
        json={
            "bp_code": "BP-1",
            "first_name": "Ana",
            "last_name": "Reyes",
            "email": "ana@harbortrading.com",
            "phone": "0917",
            "company": "Harbor Trading",
        },
        headers=auth_headers,
    )

    # Act
    response = await client.get("/search", params={"q": "harb"}, headers=auth_headers)

    # Assert
    assert response.status_code == 200
    body = response.json()
    assert [p["title"] for p in body["properties"]] == ["Harbor Point"]
    assert body["properties"][0]["href"] == f"/dashboard/properties?selected={property['id']}"
    assert [u["title"] for u in body["units"]] == ["Space HARB-101"]
    assert body["units"][0]["subtitle"] == "Harbor Point"
    assert len(body["tenants"]) == 1


@pytest.mark.asyncio
async def test_blank_search_returns_nothing(client, auth_headers, user):
    response = await client.get("/search", params={"q": "  "}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"properties": [], "units": [], "tenants": []}


@pytest.mark.asyncio
async def test_mutation_marks_paths_stale_until_cleared(client, auth_headers, user):
    # Arrange
    await client.post("/properties", json=PROPERTY_PAYLOAD, headers=auth_headers)

    # Act
    before = await client.get(
        "/cache/stale", params={"path": "/dashboard/properties"}, headers=auth_headers
    )
    cleared = await client.delete(
        "/cache/stale", params={"path": "/dashboard/properties"}, headers=auth_headers
    )
    after = await client.get(
        "/cache/stale", params={"path": "/dashboard/properties"}, headers=auth_headers
    )

    # Assert
    assert before.json() == {"path": "/dashboard/properties", "stale": True}
    assert cleared.status_code == 200
    assert after.json() == {"path": "/dashboard/properties", "stale": False}


@pytest.mark.asyncio
async def test_cache_requires_token(client, user):
    response = await client.get("/cache/stale", params={"path": "/dashboard"})

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_list_users(client, auth_headers, user, other_user):
    response = await client.get("/users", headers=auth_headers)

    assert response.status_code == 200
    assert sorted(u["email"] for u in response.json()) == [
        "manager@example.com",
        "staff@example.com",
    ]


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
