"""
Report Builders

Turn eagerly loaded entities into report DTOs. Every relation touched here
must already be loaded by the corresponding ReportRepository graph fetch.
"""

from typing import Optional

from src.app.services import report_aggregation as agg
from src.domain.entities import Lease, MaintenanceRequest, Tenant, Unit

from ..shared_dtos import DocumentSummary, PaymentSummary
from .dtos import (
    FloorFlags,
    ReportLease,
    ReportMaintenance,
    ReportTax,
    ReportUtility,
    TenantContact,
    UnitReport,
)


def tenant_contact(tenant: Optional[Tenant]) -> Optional[TenantContact]:
    if tenant is None:
        return None
    return TenantContact(
        name=tenant.full_name,
        company=tenant.company,
        email=tenant.email,
        phone=tenant.phone,
    )


def lease_fields(lease: Lease) -> dict:
    return {
        "id": lease.id,
        "start_date": lease.start_date,
        "end_date": lease.end_date,
        "rent_amount": lease.rent_amount,
        "security_deposit": lease.security_deposit,
        "status": lease.status,
        "termination_date": lease.termination_date,
        "termination_reason": lease.termination_reason,
        "payments": [PaymentSummary.model_validate(p) for p in lease.payments],
    }


def maintenance_fields(request: MaintenanceRequest, with_tenant: bool = True) -> dict:
    return {
        "id": request.id,
        "category": request.category,
        "priority": request.priority,
        "description": request.description,
        "status": request.status,
        "tenant": request.tenant.full_name if with_tenant and request.tenant else None,
        "assigned_to": request.assigned_to.full_name if request.assigned_to else None,
        "created_at": request.created_at,
        "completed_at": request.completed_at,
    }


def unit_report(unit: Unit, property_name: Optional[str]) -> UnitReport:
    return UnitReport(
        id=unit.id,
        unit_number=unit.unit_number,
        property_name=property_name,
        unit_area=unit.unit_area,
        unit_rate=unit.unit_rate,
        rent_amount=unit.rent_amount,
        status=unit.status,
        floor=FloorFlags(
            first=unit.is_first_floor,
            second=unit.is_second_floor,
            third=unit.is_third_floor,
            roof_top=unit.is_roof_top,
            mezzanine=unit.is_mezzanine,
        ),
        leases=[
            ReportLease(**lease_fields(lease), tenant=tenant_contact(lease.tenant))
            for lease in unit.leases
        ],
        maintenance_requests=[
            ReportMaintenance(**maintenance_fields(r)) for r in unit.maintenance_requests
        ],
        documents=[DocumentSummary.model_validate(d) for d in unit.documents],
        taxes=[ReportTax.model_validate(t) for t in unit.unit_taxes],
        utilities=[ReportUtility.model_validate(u) for u in unit.utility_accounts],
        total_revenue=agg.lease_revenue(unit.leases),
        total_taxes=sum((t.tax_amount for t in unit.unit_taxes), agg.ZERO),
        total_utilities=agg.bill_total(unit.utility_accounts),
    )
