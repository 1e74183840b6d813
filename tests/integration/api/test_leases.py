from datetime import timedelta
from decimal import Decimal
from uuid import uuid4

import pytest
import pytest_asyncio

from src.domain.base import utc_now


@pytest_asyncio.fixture
async def parties(client, auth_headers):
    property = (
        await client.post(
            "/properties",
            json={
                "property_name": "Harbor Point",
                "property_code": "HP-01",
                "title_no": "TCT-1",
                "lot_no": "L-1",
                "registered_owner": "Harbor Holdings",
                "leasable_area": 120,
                "address": "1 Pier Road",
                "property_type": "commercial",
            },
            headers=auth_headers,
        )
    ).json()
    unit = (
        await client.post(
            "/units",
            json={"property_id": property["id"], "unit_number": "101", "unit_area": 60},
            headers=auth_headers,
        )
    ).json()
    tenant = (
        await client.post(
            "/tenants",
            json={
                "bp_code": "BP-1",
                "first_name": "Ana",
                "last_name": "Reyes",
                "email": "ana@example.com",
                "phone": "0917",
                "company": "Reyes Trading",
            },
            headers=auth_headers,
        )
    ).json()
    return {"property": property, "unit": unit, "tenant": tenant}


def lease_payload(parties, **overrides):
    now = utc_now()
    payload = {
        "tenant_id": parties["tenant"]["id"],
        "unit_id": parties["unit"]["id"],
        "start_date": now.isoformat(),
        "end_date": (now + timedelta(days=365)).isoformat(),
        "rent_amount": "750.00",
        "status": "active",
    }
    payload.update(overrides)
    return payload


async def available_unit_ids(client, headers):
    response = await client.get("/units/available", headers=headers)
    assert response.status_code == 200
    return [u["id"] for u in response.json()]


@pytest.mark.asyncio
async def test_active_lease_occupies_unit_until_terminated(client, auth_headers, user, parties):
    """An ACTIVE lease takes the unit off the market; terminating frees it"""
    unit_id = parties["unit"]["id"]
    assert unit_id in await available_unit_ids(client, auth_headers)

    # Act
    created = await client.post("/leases", json=lease_payload(parties), headers=auth_headers)

    # Assert
    assert created.status_code == 201
    lease = created.json()
    assert lease["status"] == "active"
    assert unit_id not in await available_unit_ids(client, auth_headers)

    terminated = await client.post(
        f"/leases/{lease['id']}/terminate",
        json={"termination_reason": "Relocating"},
        headers=auth_headers,
    )
    assert terminated.status_code == 200
    assert terminated.json()["status"] == "terminated"
    assert terminated.json()["termination_reason"] == "Relocating"
    assert terminated.json()["termination_date"] is not None
    assert unit_id in await available_unit_ids(client, auth_headers)


@pytest.mark.asyncio
async def test_record_payment_shows_on_tenant(client, auth_headers, user, parties):
    # Arrange
    lease = (
        await client.post("/leases", json=lease_payload(parties), headers=auth_headers)
    ).json()

    # Act
    response = await client.post(
        f"/leases/{lease['id']}/payments",
        json={"amount": "750.00", "payment_method": "bank_transfer"},
        headers=auth_headers,
    )

    # Assert
    assert response.status_code == 201
    assert response.json()["payment_status"] == "completed"

    tenant = (
        await client.get(f"/tenants/{parties['tenant']['id']}", headers=auth_headers)
    ).json()
    (tenant_lease,) = tenant["leases"]
    assert [Decimal(p["amount"]) for p in tenant_lease["payments"]] == [Decimal("750")]


@pytest.mark.asyncio
async def test_lease_with_unknown_unit(client, auth_headers, user, parties):
    response = await client.post(
        "/leases", json=lease_payload(parties, unit_id=str(uuid4())), headers=auth_headers
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "UNIT_NOT_FOUND"


@pytest.mark.asyncio
async def test_lease_end_before_start_is_rejected(client, auth_headers, user, parties):
    now = utc_now()
    response = await client.post(
        "/leases",
        json=lease_payload(
            parties,
            start_date=now.isoformat(),
            end_date=(now - timedelta(days=1)).isoformat(),
        ),
        headers=auth_headers,
    )

    assert response.status_code == 422
