"""
Report Use Cases

Read-only aggregations over fetched entity graphs:
- GetFinancialReportUseCase: revenue, expenses and net income
- GetPropertyReportsUseCase: per-property breakdown with occupancy
- GetTenantReportsUseCase: per-tenant leases, rent paid and requests
- GetUnitReportsUseCase: per-unit revenue, taxes and utilities
- GetDashboardOverviewUseCase: headline numbers and the occupancy trend
"""

from .dashboard_use_case import GetDashboardOverviewUseCase
from .report_use_cases import (
    GetFinancialReportUseCase,
    GetPropertyReportsUseCase,
    GetTenantReportsUseCase,
    GetUnitReportsUseCase,
)

__all__ = [
    "GetFinancialReportUseCase",
    "GetPropertyReportsUseCase",
    "GetTenantReportsUseCase",
    "GetUnitReportsUseCase",
    "GetDashboardOverviewUseCase",
]
