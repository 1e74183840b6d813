from decimal import Decimal

import pytest
import pytest_asyncio
from sqlmodel import select

from src.domain.entities import (
    Document,
    Lease,
    MaintenanceRequest,
    Payment,
    PropertyTax,
    PropertyTitleMovement,
    PropertyUtility,
    Unit,
    UnitStatus,
    UnitTax,
    UnitUtilityAccount,
    UtilityBill,
)


@pytest_asyncio.fixture
async def linked(db_session, user, portfolio):
    """A document, a title movement and a maintenance request hanging off the portfolio"""
    property, unit, tenant = portfolio["property"], portfolio["unit"], portfolio["tenant"]
    document = Document(
        name="Contract",
        file_url="https://files.example.com/contract.pdf",
        uploaded_by_id=user.id,
        property_id=property.id,
        unit_id=unit.id,
        tenant_id=tenant.id,
    )
    movement = PropertyTitleMovement(
        property_id=property.id,
        requested_by="Maria Santos",
        location="Bank vault",
        purpose="Loan",
    )
    request = MaintenanceRequest(unit_id=unit.id, tenant_id=tenant.id, description="Leaking pipe")
    for row in (document, movement, request):
        db_session.add(row)
        await db_session.flush()
    await db_session.commit()
    return {
        "property_id": property.id,
        "unit_id": unit.id,
        "tenant_id": tenant.id,
        "document_id": document.id,
    }


async def fetch_all(db_session, model):
    db_session.expire_all()
    result = await db_session.exec(select(model))
    return list(result.all())


@pytest.mark.asyncio
async def test_delete_property_removes_everything_under_it(client, auth_headers, db_session, linked):
    # Act
    response = await client.delete(f"/properties/{linked['property_id']}", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    for model in (
        Unit,
        Lease,
        Payment,
        PropertyTax,
        UnitTax,
        PropertyUtility,
        UnitUtilityAccount,
        UtilityBill,
        PropertyTitleMovement,
        MaintenanceRequest,
    ):
        assert await fetch_all(db_session, model) == [], model.__name__

    (document,) = await fetch_all(db_session, Document)
    assert document.property_id is None
    assert document.unit_id is None
    assert document.tenant_id == linked["tenant_id"]

    units = (await client.get("/reports/units", headers=auth_headers)).json()
    assert units == []
    (tenant_report,) = (await client.get("/reports/tenants", headers=auth_headers)).json()
    assert tenant_report["active_leases"] == 0
    assert Decimal(tenant_report["total_rent_paid"]) == Decimal("0")
    overview = (await client.get("/reports/dashboard", headers=auth_headers)).json()
    assert overview["total_properties"] == 0
    assert overview["total_units"] == 0


@pytest.mark.asyncio
async def test_bulk_delete_properties(client, auth_headers, db_session, linked):
    response = await client.post(
        "/properties/bulk-delete", json={"ids": [str(linked["property_id"])]}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json() == {"deleted": 1}
    assert await fetch_all(db_session, Unit) == []
    assert await fetch_all(db_session, Payment) == []


@pytest.mark.asyncio
async def test_delete_unit_keeps_property_records(client, auth_headers, db_session, linked):
    # Act
    response = await client.delete(f"/units/{linked['unit_id']}", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    for model in (Lease, Payment, UnitTax, UnitUtilityAccount, MaintenanceRequest):
        assert await fetch_all(db_session, model) == [], model.__name__

    (bill,) = await fetch_all(db_session, UtilityBill)
    assert bill.property_utility_id is not None
    assert len(await fetch_all(db_session, PropertyTax)) == 1
    assert len(await fetch_all(db_session, PropertyUtility)) == 1
    (document,) = await fetch_all(db_session, Document)
    assert document.unit_id is None
    assert document.property_id == linked["property_id"]

    property = (
        await client.get(f"/properties/{linked['property_id']}", headers=auth_headers)
    ).json()
    assert property["total_units"] == 0
    assert property["units"] == []


@pytest.mark.asyncio
async def test_delete_tenant_frees_the_space(client, auth_headers, db_session, linked):
    # Act
    response = await client.delete(f"/tenants/{linked['tenant_id']}", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    assert await fetch_all(db_session, Lease) == []
    assert await fetch_all(db_session, Payment) == []

    (unit,) = await fetch_all(db_session, Unit)
    assert unit.status == UnitStatus.vacant
    (request,) = await fetch_all(db_session, MaintenanceRequest)
    assert request.tenant_id is None
    (document,) = await fetch_all(db_session, Document)
    assert document.tenant_id is None

    available = (await client.get("/units/available", headers=auth_headers)).json()
    assert [u["id"] for u in available] == [str(linked["unit_id"])]


@pytest.mark.asyncio
async def test_bulk_delete_tenants(client, auth_headers, db_session, linked):
    response = await client.post(
        "/tenants/bulk-delete", json={"ids": [str(linked["tenant_id"])]}, headers=auth_headers
    )

    assert response.status_code == 200
    assert response.json() == {"deleted": 1}
    assert await fetch_all(db_session, Lease) == []
