from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.domain.entities import (
    LeaseStatus,
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceStatus,
    PropertyType,
    TenantStatus,
    UnitStatus,
    UtilityType,
)

from ..shared_dtos import DocumentSummary, PaymentSummary


# ============================================================================
# Building blocks
# ============================================================================


class TenantContact(BaseModel):
    name: str
    company: str
    email: str
    phone: str


class FloorFlags(BaseModel):
    first: bool
    second: bool
    third: bool
    roof_top: bool
    mezzanine: bool


class ReportLease(BaseModel):
    id: UUID
    start_date: datetime
    end_date: datetime
    rent_amount: Decimal
    security_deposit: Decimal
    status: LeaseStatus
    termination_date: Optional[datetime] = None
    termination_reason: Optional[str] = None
    tenant: Optional[TenantContact] = None
    payments: List[PaymentSummary]


class ReportMaintenance(BaseModel):
    id: UUID
    category: MaintenanceCategory
    priority: MaintenancePriority
    description: str
    status: MaintenanceStatus
    tenant: Optional[str] = None
    assigned_to: Optional[str] = None
    created_at: datetime
    completed_at: Optional[datetime] = None


class ReportTax(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tax_year: int
    tax_dec_no: str
    tax_amount: Decimal
    due_date: datetime
    is_paid: bool
    paid_date: Optional[datetime] = None


class ReportBill(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    billing_period_start: datetime
    billing_period_end: datetime
    amount: Decimal
    consumption: Optional[float] = None
    is_paid: bool


class ReportUtility(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    utility_type: UtilityType
    account_number: str
    meter_number: Optional[str] = None
    is_active: bool
    bills: List[ReportBill]


# ============================================================================
# Financial
# ============================================================================


class RevenueBreakdown(BaseModel):
    total: Decimal
    by_type: Dict[str, Decimal]


class ExpenseBreakdown(BaseModel):
    taxes: Decimal
    utilities: Decimal


class FinancialReport(BaseModel):
    revenue: RevenueBreakdown
    expenses: ExpenseBreakdown
    net_income: Decimal


# ============================================================================
# Per-entity reports
# ============================================================================


class UnitReport(BaseModel):
    id: UUID
    unit_number: str
    property_name: Optional[str] = None
    unit_area: float
    unit_rate: Decimal
    rent_amount: Decimal
    status: UnitStatus
    floor: FloorFlags
    leases: List[ReportLease]
    maintenance_requests: List[ReportMaintenance] = []
    documents: List[DocumentSummary] = []
    taxes: List[ReportTax]
    utilities: List[ReportUtility]
    total_revenue: Decimal
    total_taxes: Decimal
    total_utilities: Decimal


class PropertyReport(BaseModel):
    id: UUID
    property_code: str
    property_name: str
    title_no: str
    lot_no: str
    registered_owner: str
    address: str
    property_type: PropertyType
    leasable_area: float
    total_units: int
    created_by: Optional[str] = None
    created_at: datetime
    occupancy_rate: float
    total_revenue: Decimal
    total_property_taxes: Decimal
    total_utility_bills: Decimal
    units: List[UnitReport]
    documents: List[DocumentSummary]
    property_taxes: List[ReportTax]
    utilities: List[ReportUtility]


class TenantLeaseLine(ReportLease):
    property_name: Optional[str] = None
    unit_number: Optional[str] = None


class TenantMaintenanceLine(ReportMaintenance):
    property_name: Optional[str] = None
    unit_number: Optional[str] = None


class TenantReport(BaseModel):
    id: UUID
    bp_code: str
    name: str
    email: str
    phone: str
    company: str
    status: TenantStatus
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    created_at: datetime
    leases: List[TenantLeaseLine]
    maintenance_requests: List[TenantMaintenanceLine]
    documents: List[DocumentSummary]
    total_rent_paid: Decimal
    active_leases: int
    total_leases: int
    total_maintenance_requests: int


# ============================================================================
# Dashboard
# ============================================================================


class RenewalLine(BaseModel):
    lease_id: UUID
    tenant_name: Optional[str] = None
    property_name: Optional[str] = None
    unit_number: Optional[str] = None
    end_date: datetime
    rent_amount: Decimal


class RecentMaintenance(BaseModel):
    id: UUID
    description: str
    category: MaintenanceCategory
    priority: MaintenancePriority
    status: MaintenanceStatus
    property_name: Optional[str] = None
    unit_number: Optional[str] = None
    tenant_name: Optional[str] = None
    created_at: datetime


class OccupancyPoint(BaseModel):
    month: str
    occupied: int
    vacant: int
    total: int


class DashboardOverview(BaseModel):
    total_properties: int
    total_units: int
    total_tenants: int
    occupied_units: int
    vacant_units: int
    occupancy_rate: float
    open_maintenance: int
    overdue_payments: int
    upcoming_renewals: List[RenewalLine]
    recent_maintenance: List[RecentMaintenance]
    current_month_revenue: Decimal
    last_month_revenue: Decimal
    revenue_change: float
    outstanding_amount: Decimal
    occupancy_trend: List[OccupancyPoint]
