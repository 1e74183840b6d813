from decimal import Decimal

import pytest


@pytest.mark.asyncio
async def test_financial_report(client, auth_headers, portfolio):
    """Completed revenue 1500 less 150 taxes and 50 utilities"""
    # Act
    response = await client.get("/reports/financial", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    report = response.json()
    assert Decimal(report["revenue"]["total"]) == Decimal("1500")
    assert Decimal(report["revenue"]["by_type"]["active"]) == Decimal("1500")
    assert Decimal(report["expenses"]["taxes"]) == Decimal("150")
    assert Decimal(report["expenses"]["utilities"]) == Decimal("50")
    assert Decimal(report["net_income"]) == Decimal("1300")


@pytest.mark.asyncio
async def test_property_report_occupancy(client, auth_headers, portfolio):
    # Act
    response = await client.get("/reports/properties", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    (report,) = response.json()
    assert report["property_name"] == "Harbor Point"
    assert report["occupancy_rate"] == 50.0
    assert report["created_by"] == "Maria Santos"
    assert Decimal(report["total_revenue"]) == Decimal("1500")
    assert Decimal(report["total_property_taxes"]) == Decimal("100")
    assert Decimal(report["total_utility_bills"]) == Decimal("30")
    assert report["units"][0]["unit_number"] == "101"


@pytest.mark.asyncio
async def test_tenant_report(client, auth_headers, portfolio):
    # Act
    response = await client.get("/reports/tenants", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    (report,) = response.json()
    assert report["name"] == "Ana Reyes"
    assert Decimal(report["total_rent_paid"]) == Decimal("1500")
    assert report["active_leases"] == 1
    assert report["leases"][0]["property_name"] == "Harbor Point"
    assert report["leases"][0]["unit_number"] == "101"


@pytest.mark.asyncio
async def test_unit_report(client, auth_headers, portfolio):
    # Act
    response = await client.get("/reports/units", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    (report,) = response.json()
    assert report["property_name"] == "Harbor Point"
    assert Decimal(report["total_taxes"]) == Decimal("50")
    assert Decimal(report["total_utilities"]) == Decimal("20")
    assert report["leases"][0]["tenant"]["company"] == "Reyes Trading"


@pytest.mark.asyncio
async def test_dashboard_overview(client, auth_headers, portfolio):
    # Act
    response = await client.get("/reports/dashboard", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    overview = response.json()
    assert overview["total_properties"] == 1
    assert overview["total_units"] == 1
    assert overview["total_tenants"] == 1
    assert overview["occupancy_rate"] == 50.0
    assert overview["overdue_payments"] == 0
    assert Decimal(overview["outstanding_amount"]) == Decimal("300")
    assert [r["unit_number"] for r in overview["upcoming_renewals"]] == ["101"]
    assert len(overview["occupancy_trend"]) == 12


@pytest.mark.asyncio
async def test_reports_require_token(client, portfolio):
    response = await client.get("/reports/financial")

    assert response.status_code == 401
