from decimal import Decimal
from uuid import uuid4

import pytest
from sqlmodel import select

from src.domain.entities import PropertyUtility, UtilityBill

TAX_PAYLOAD = {
    "tax_year": 2026,
    "tax_dec_no": "TD-2026-01",
    "tax_amount": "12500.50",
    "due_date": "2026-12-31T00:00:00",
}


@pytest.mark.asyncio
async def test_property_tax_lifecycle(client, auth_headers, user, portfolio, invalidator):
    """Paying stamps paid_date; unpaying clears it"""
    # Arrange
    property_id = str(portfolio["property"].id)

    # Act
    created = await client.post(
        "/taxes/property", json={**TAX_PAYLOAD, "property_id": property_id}, headers=auth_headers
    )
    tax_id = created.json()["id"]
    updated = await client.put(
        f"/taxes/property/{tax_id}",
        json={**TAX_PAYLOAD, "tax_amount": "13000", "is_quarterly": True},
        headers=auth_headers,
    )
    paid = await client.patch(
        f"/taxes/property/{tax_id}/status", json={"is_paid": True}, headers=auth_headers
    )
    unpaid = await client.patch(
        f"/taxes/property/{tax_id}/status", json={"is_paid": False}, headers=auth_headers
    )

    # Assert
    assert created.status_code == 201
    assert created.json()["is_paid"] is False
    assert created.json()["paid_date"] is None
    assert await invalidator.is_stale(f"/dashboard/properties?selected={property_id}")

    assert Decimal(updated.json()["tax_amount"]) == Decimal("13000")
    assert updated.json()["is_quarterly"] is True
    assert paid.json()["is_paid"] is True
    assert paid.json()["paid_date"] is not None
    assert unpaid.json()["paid_date"] is None

    deleted = await client.delete(f"/taxes/property/{tax_id}", headers=auth_headers)
    assert deleted.status_code == 200
    detail = (await client.get(f"/properties/{property_id}", headers=auth_headers)).json()
    assert [t["tax_dec_no"] for t in detail["property_taxes"]] == ["TD-1"]


@pytest.mark.asyncio
async def test_property_tax_errors(client, auth_headers, user):
    unknown_property = await client.post(
        "/taxes/property", json={**TAX_PAYLOAD, "property_id": str(uuid4())}, headers=auth_headers
    )
    unknown_tax = await client.delete(f"/taxes/property/{uuid4()}", headers=auth_headers)

    assert unknown_property.status_code == 404
    assert unknown_property.json()["error"]["code"] == "PROPERTY_NOT_FOUND"
    assert unknown_tax.status_code == 404
    assert unknown_tax.json()["error"]["code"] == "PROPERTY_TAX_NOT_FOUND"


@pytest.mark.asyncio
async def test_unit_tax_lifecycle(client, auth_headers, user, portfolio):
    # Arrange
    unit_id = str(portfolio["unit"].id)

    # Act
    created = await client.post(
        "/taxes/unit",
        json={**TAX_PAYLOAD, "unit_id": unit_id, "is_paid": True, "marked_as_paid_by": "Maria"},
        headers=auth_headers,
    )
    tax_id = created.json()["id"]
    updated = await client.put(
        f"/taxes/unit/{tax_id}",
        json={**TAX_PAYLOAD, "is_paid": False, "remarks": "Reversed"},
        headers=auth_headers,
    )
    deleted = await client.delete(f"/taxes/unit/{tax_id}", headers=auth_headers)
    missing = await client.delete(f"/taxes/unit/{tax_id}", headers=auth_headers)

    # Assert
    assert created.status_code == 201
    assert created.json()["unit_id"] == unit_id
    assert created.json()["marked_as_paid_by"] == "Maria"
    assert created.json()["paid_date"] is not None

    assert updated.status_code == 200
    assert updated.json()["is_paid"] is False
    assert updated.json()["paid_date"] is None
    assert updated.json()["remarks"] == "Reversed"

    assert deleted.status_code == 200
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "UNIT_TAX_NOT_FOUND"


@pytest.mark.asyncio
async def test_unit_tax_for_unknown_unit(client, auth_headers, user):
    response = await client.post(
        "/taxes/unit", json={**TAX_PAYLOAD, "unit_id": str(uuid4())}, headers=auth_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "UNIT_NOT_FOUND"


@pytest.mark.asyncio
async def test_create_and_toggle_utility(client, auth_headers, user, portfolio):
    # Arrange
    property_id = str(portfolio["property"].id)

    # Act
    created = await client.post(
        "/utilities",
        json={
            "property_id": property_id,
            "utility_type": "electricity",
            "provider": "Metro Power",
            "account_number": "E-77",
            "meter_number": "M-77",
        },
        headers=auth_headers,
    )
    toggled = await client.patch(
        f"/utilities/{created.json()['id']}/status", json={"is_active": False}, headers=auth_headers
    )

    # Assert
    assert created.status_code == 201
    assert created.json()["is_active"] is True
    assert toggled.status_code == 200
    assert toggled.json()["is_active"] is False

    detail = (await client.get(f"/properties/{property_id}", headers=auth_headers)).json()
    assert sorted(u["provider"] for u in detail["utilities"]) == ["City Water", "Metro Power"]


@pytest.mark.asyncio
async def test_delete_utility_removes_its_bills(client, auth_headers, db_session, user, portfolio):
    # Arrange
    utility_id = (await db_session.exec(select(PropertyUtility))).one().id

    # Act
    response = await client.delete(f"/utilities/{utility_id}", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    db_session.expire_all()
    assert (await db_session.exec(select(PropertyUtility))).all() == []
    (bill,) = (await db_session.exec(select(UtilityBill))).all()
    assert bill.unit_utility_account_id is not None

    missing = await client.patch(
        f"/utilities/{utility_id}/status", json={"is_active": True}, headers=auth_headers
    )
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "UTILITY_NOT_FOUND"
