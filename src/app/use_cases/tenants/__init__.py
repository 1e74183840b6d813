"""
Tenant Use Cases

Tenant lifecycle, including CSV import.
"""

from .create_tenant_use_case import CreateTenantUseCase
from .update_tenant_use_case import UpdateTenantUseCase
from .delete_tenant_use_case import DeleteTenantUseCase, BulkDeleteTenantsUseCase
from .get_tenants_use_case import GetTenantsUseCase, GetTenantByIdUseCase
from .import_tenants_use_case import ImportTenantsUseCase
from .dtos import TenantCommand, TenantResponse, TenantDetailResponse

__all__ = [
    "CreateTenantUseCase",
    "UpdateTenantUseCase",
    "DeleteTenantUseCase",
    "BulkDeleteTenantsUseCase",
    "GetTenantsUseCase",
    "GetTenantByIdUseCase",
    "ImportTenantsUseCase",
    "TenantCommand",
    "TenantResponse",
    "TenantDetailResponse",
]
