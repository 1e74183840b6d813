"""
Property Query Use Cases

Read-only property listings: detail list, single property and export.
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.mutation_envelope import UNAUTHORIZED
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import PropertyDetailResponse, PropertyExportResponse

logger = logging.getLogger(__name__)


class GetPropertiesUseCase:
    """List every property with units, documents, utilities, taxes and title movements"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[List[PropertyDetailResponse]]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                properties = await self.uow.properties.list_with_details()
            except SQLAlchemyError:
                logger.exception("Property listing failed")
                return Return.err(Error("PROPERTY_FETCH_ERROR", "Failed to fetch properties"))

            return Return.ok([PropertyDetailResponse.model_validate(p) for p in properties])


class GetPropertyByIdUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, ctx: RequestContext, property_id: UUID
    ) -> Result[PropertyDetailResponse]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                property = await self.uow.properties.get_with_details(property_id)
            except SQLAlchemyError:
                logger.exception("Property fetch failed")
                return Return.err(Error("PROPERTY_FETCH_ERROR", "Failed to fetch property"))

            if property is None:
                return Return.err(Error("PROPERTY_NOT_FOUND", "Property not found"))

            return Return.ok(PropertyDetailResponse.model_validate(property))


class ExportPropertiesUseCase:
    """Every property with units, documents and utilities, for spreadsheet export"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[List[PropertyExportResponse]]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                properties = await self.uow.properties.list_for_export()
            except SQLAlchemyError:
                logger.exception("Property export failed")
                return Return.err(Error("PROPERTY_EXPORT_ERROR", "Failed to export properties"))

            return Return.ok([PropertyExportResponse.model_validate(p) for p in properties])
