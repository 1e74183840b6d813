from uuid import uuid4

import pytest
from sqlmodel import select

from src.domain.entities import AuditLog, Property

PROPERTY_PAYLOAD = {
    "property_name": "Harbor Point",
    "property_code": "HP-01",
    "title_no": "TCT-1",
    "lot_no": "L-1",
    "registered_owner": "Harbor Holdings",
    "leasable_area": 120,
    "address": "1 Pier Road",
    "property_type": "commercial",
}


async def create_property(client, headers, **overrides):
    response = await client.post(
        "/properties", json={**PROPERTY_PAYLOAD, **overrides}, headers=headers
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_update_and_delete_property(client, auth_headers, user, invalidator):
    # Arrange
    property = await create_property(client, auth_headers)
    assert property["created_by_id"] == str(user.id)
    assert property["total_units"] == 0
    assert await invalidator.is_stale("/dashboard/properties")

    # Act
    updated = await client.put(
        f"/properties/{property['id']}",
        json={**PROPERTY_PAYLOAD, "property_name": "Harbor Point Tower", "leasable_area": 150},
        headers=auth_headers,
    )
    deleted = await client.delete(f"/properties/{property['id']}", headers=auth_headers)

    # Assert
    assert updated.status_code == 200
    assert updated.json()["property_name"] == "Harbor Point Tower"
    assert updated.json()["leasable_area"] == 150
    assert deleted.status_code == 200
    assert (await client.get(f"/properties/{property['id']}", headers=auth_headers)).status_code == 404


@pytest.mark.asyncio
async def test_property_detail_lists_relations(client, auth_headers, user):
    # Arrange
    property = await create_property(client, auth_headers)

    # Act
    response = await client.get(f"/properties/{property['id']}", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    detail = response.json()
    for relation in ("units", "documents", "utilities", "property_taxes", "title_movements"):
        assert detail[relation] == []


@pytest.mark.asyncio
async def test_update_unknown_property(client, auth_headers, user):
    response = await client.put(f"/properties/{uuid4()}", json=PROPERTY_PAYLOAD, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "PROPERTY_NOT_FOUND"


@pytest.mark.asyncio
async def test_bulk_delete_properties_writes_one_audit_row_each(
    client, auth_headers, db_session, user
):
    # Arrange
    first = await create_property(client, auth_headers)
    second = await create_property(client, auth_headers, property_code="HP-02")
    keep = await create_property(client, auth_headers, property_code="HP-03")

    # Act
    response = await client.post(
        "/properties/bulk-delete",
        json={"ids": [first["id"], second["id"]]},
        headers=auth_headers,
    )

    # Assert
    assert response.json() == {"deleted": 2}
    remaining = (await client.get("/properties", headers=auth_headers)).json()
    assert [p["id"] for p in remaining] == [keep["id"]]

    deletes = await db_session.exec(select(AuditLog).where(AuditLog.action == "delete"))
    assert sorted(log.entity_id for log in deletes.all()) == sorted([first["id"], second["id"]])


@pytest.mark.asyncio
async def test_import_properties_csv(client, auth_headers, user):
    """propertyType is matched case-insensitively"""
    # Arrange
    csv_text = (
        "propertyName,propertyCode,titleNo,lotNo,registeredOwner,leasableArea,address,propertyType,totalUnits\n"
        "Harbor Point,HP-01,TCT-1,L-1,Harbor Holdings,120,1 Pier Road,Commercial,2\n"
        "Bayview Homes,BV-01,TCT-2,L-2,Bayview Corp,80.5,2 Bay Street,RESIDENTIAL,4\n"
    )

    # Act
    response = await client.post(
        "/properties/import",
        content=csv_text,
        headers={**auth_headers, "Content-Type": "text/csv"},
    )

    # Assert
    assert response.status_code == 201
    imported = response.json()
    assert [p["property_type"] for p in imported] == ["commercial", "residential"]
    assert [p["total_units"] for p in imported] == [2, 4]
    assert imported[1]["leasable_area"] == 80.5


@pytest.mark.asyncio
async def test_import_properties_rejects_unknown_type(client, auth_headers, db_session, user):
    # Arrange
    csv_text = (
        "propertyName,propertyCode,propertyType\n"
        "Harbor Point,HP-01,commercial\n"
        "Old Mill,OM-01,agricultural\n"
    )

    # Act
    response = await client.post(
        "/properties/import",
        content=csv_text,
        headers={**auth_headers, "Content-Type": "text/csv"},
    )

    # Assert
    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INVALID_PROPERTY_TYPE"
    assert "agricultural" in error["message"]
    assert (await db_session.exec(select(Property))).all() == []


@pytest.mark.asyncio
async def test_export_properties(client, auth_headers, user):
    # Arrange
    property = await create_property(client, auth_headers)
    await client.post(
        "/units",
        json={"property_id": property["id"], "unit_number": "101", "unit_area": 60},
        headers=auth_headers,
    )

    # Act
    response = await client.get("/properties/export", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    (exported,) = response.json()
    assert exported["property_code"] == "HP-01"
    assert [u["unit_number"] for u in exported["units"]] == ["101"]
    assert exported["documents"] == []
    assert exported["utilities"] == []


@pytest.mark.asyncio
async def test_title_movement_lifecycle(client, auth_headers, user):
    """Marking a movement returned stamps the return date"""
    # Arrange
    property = await create_property(client, auth_headers)
    movements_url = f"/properties/{property['id']}/title-movements"

    # Act
    created = await client.post(
        movements_url,
        json={"requested_by": "Maria Santos", "location": "Bank vault", "purpose": "Loan"},
        headers=auth_headers,
    )
    movement_id = created.json()["id"]
    released = await client.patch(
        f"/properties/title-movements/{movement_id}/status",
        json={"status": "released"},
        headers=auth_headers,
    )
    returned = await client.patch(
        f"/properties/title-movements/{movement_id}/status",
        json={"status": "returned", "remarks": "Back in vault"},
        headers=auth_headers,
    )

    # Assert
    assert created.status_code == 201
    assert created.json()["status"] == "requested"
    assert released.json()["return_date"] is None
    assert returned.json()["status"] == "returned"
    assert returned.json()["return_date"] is not None

    listed = (await client.get(movements_url, headers=auth_headers)).json()
    assert [m["id"] for m in listed] == [movement_id]

    deleted = await client.delete(
        f"/properties/title-movements/{movement_id}", headers=auth_headers
    )
    assert deleted.status_code == 200
    assert (await client.get(movements_url, headers=auth_headers)).json() == []


@pytest.mark.asyncio
async def test_title_movement_for_unknown_property(client, auth_headers, user):
    response = await client.post(
        f"/properties/{uuid4()}/title-movements",
        json={"requested_by": "Maria Santos", "location": "Bank vault", "purpose": "Loan"},
        headers=auth_headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "PROPERTY_NOT_FOUND"
