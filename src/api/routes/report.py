"""
Report API Routes

Read-only aggregations for the dashboard and reports pages.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.reports import (
    GetDashboardOverviewUseCase,
    GetFinancialReportUseCase,
    GetPropertyReportsUseCase,
    GetTenantReportsUseCase,
    GetUnitReportsUseCase,
)
from src.app.use_cases.reports.dtos import (
    DashboardOverview,
    FinancialReport,
    PropertyReport,
    TenantReport,
    UnitReport,
)
from src.depends import get_request_context, get_unit_of_work

router = APIRouter(prefix="/reports", tags=["Report"])


@router.get("/financial", status_code=status.HTTP_200_OK, response_model=FinancialReport)
async def get_financial_report(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Financial Report

    Revenue from COMPLETED payments split by lease status, tax and utility
    expenses, and the resulting net income.
    """
    result = await GetFinancialReportUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/properties", status_code=status.HTTP_200_OK, response_model=List[PropertyReport])
async def get_property_reports(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetPropertyReportsUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/tenants", status_code=status.HTTP_200_OK, response_model=List[TenantReport])
async def get_tenant_reports(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetTenantReportsUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/units", status_code=status.HTTP_200_OK, response_model=List[UnitReport])
async def get_unit_reports(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await GetUnitReportsUseCase(uow).execute(ctx)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.get("/dashboard", status_code=status.HTTP_200_OK, response_model=DashboardOverview)
async def get_dashboard_overview(
    ctx: RequestContext = Depends(get_request_context),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetDashboardOverviewUseCase(
        uow, renewal_days=ApplicationConfig.UPCOMING_RENEWAL_DAYS
    )
    result = await use_case.execute(ctx)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
