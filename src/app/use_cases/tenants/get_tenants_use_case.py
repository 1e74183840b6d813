"""
Tenant Query Use Cases
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.mutation_envelope import UNAUTHORIZED
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import TenantDetailResponse

logger = logging.getLogger(__name__)


class GetTenantsUseCase:
    """Every tenant with leases (unit, property, payments), requests and documents"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[List[TenantDetailResponse]]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                tenants = await self.uow.tenants.list_with_details()
            except SQLAlchemyError:
                logger.exception("Tenant listing failed")
                return Return.err(Error("TENANT_FETCH_ERROR", "Failed to fetch tenants"))

            return Return.ok([TenantDetailResponse.model_validate(t) for t in tenants])


class GetTenantByIdUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext, tenant_id: UUID) -> Result[TenantDetailResponse]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                tenant = await self.uow.tenants.get_with_details(tenant_id)
            except SQLAlchemyError:
                logger.exception("Tenant fetch failed")
                return Return.err(Error("TENANT_FETCH_ERROR", "Failed to fetch tenant"))

            if tenant is None:
                return Return.err(Error("TENANT_NOT_FOUND", "Tenant not found"))

            return Return.ok(TenantDetailResponse.model_validate(tenant))
