from decimal import Decimal
from uuid import uuid4

import pytest

PROPERTY_PAYLOAD = {
    "property_name": "Harbor Point",
    "property_code": "HP-01",
    "title_no": "TCT-1",
    "lot_no": "L-1",
    "registered_owner": "Harbor Holdings",
    "address": "1 Pier Road",
    "property_type": "commercial",
}


async def create_property(client, headers):
    response = await client.post("/properties", json=PROPERTY_PAYLOAD, headers=headers)
    assert response.status_code == 201
    return response.json()


async def create_unit(client, headers, property_id, unit_number, **fields):
    response = await client.post(
        "/units",
        json={"property_id": property_id, "unit_number": unit_number, "unit_area": 40, **fields},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


async def total_units(client, headers, property_id):
    response = await client.get(f"/properties/{property_id}", headers=headers)
    return response.json()["total_units"]


@pytest.mark.asyncio
async def test_create_unit_counts_toward_property(client, auth_headers, user, invalidator):
    # Arrange
    property = await create_property(client, auth_headers)

    # Act
    unit = await create_unit(
        client, auth_headers, property["id"], "101", rent_amount="15000", is_first_floor=True
    )

    # Assert
    assert unit["status"] == "vacant"
    assert unit["is_first_floor"] is True
    assert Decimal(unit["rent_amount"]) == Decimal("15000")
    assert await total_units(client, auth_headers, property["id"]) == 1
    assert await invalidator.is_stale("/dashboard/spaces")


@pytest.mark.asyncio
async def test_create_unit_for_unknown_property(client, auth_headers, user):
    response = await client.post(
        "/units", json={"property_id": str(uuid4()), "unit_number": "101"}, headers=auth_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "PROPERTY_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_unit(client, auth_headers, user):
    # Arrange
    property = await create_property(client, auth_headers)
    unit = await create_unit(client, auth_headers, property["id"], "101")

    # Act
    response = await client.put(
        f"/units/{unit['id']}",
        json={"unit_number": "101-A", "unit_area": 55, "status": "reserved"},
        headers=auth_headers,
    )

    # Assert
    assert response.status_code == 200
    updated = response.json()
    assert updated["unit_number"] == "101-A"
    assert updated["unit_area"] == 55
    assert updated["status"] == "reserved"
    assert updated["property_id"] == property["id"]


@pytest.mark.asyncio
async def test_delete_unit_uncounts_it(client, auth_headers, user):
    # Arrange
    property = await create_property(client, auth_headers)
    unit = await create_unit(client, auth_headers, property["id"], "101")

    # Act
    response = await client.delete(f"/units/{unit['id']}", headers=auth_headers)
    missing = await client.delete(f"/units/{unit['id']}", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    assert await total_units(client, auth_headers, property["id"]) == 0
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "UNIT_NOT_FOUND"


@pytest.mark.asyncio
async def test_bulk_delete_units(client, auth_headers, user):
    # Arrange
    property = await create_property(client, auth_headers)
    first = await create_unit(client, auth_headers, property["id"], "101")
    second = await create_unit(client, auth_headers, property["id"], "102")
    await create_unit(client, auth_headers, property["id"], "103")

    # Act
    response = await client.post(
        "/units/bulk-delete", json={"ids": [first["id"], second["id"]]}, headers=auth_headers
    )

    # Assert
    assert response.status_code == 200
    assert response.json() == {"deleted": 2}
    assert await total_units(client, auth_headers, property["id"]) == 1


@pytest.mark.asyncio
async def test_available_units_are_vacant_or_reserved(client, auth_headers, user):
    # Arrange
    property = await create_property(client, auth_headers)
    await create_unit(client, auth_headers, property["id"], "101")
    await create_unit(client, auth_headers, property["id"], "102", status="reserved")
    await create_unit(client, auth_headers, property["id"], "103", status="occupied")
    await create_unit(client, auth_headers, property["id"], "104", status="maintenance")

    # Act
    response = await client.get("/units/available", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    available = response.json()
    assert [u["unit_number"] for u in available] == ["101", "102"]
    assert available[0]["property"]["property_name"] == "Harbor Point"
