"""
Global Search Use Case

Case-insensitive substring search over properties, units and tenants.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services import paths
from src.app.services.mutation_envelope import UNAUTHORIZED
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import SearchHit, SearchResponse

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 5


class GlobalSearchUseCase:
    """
    Use case for the header search box.

    Business Rules:
    - Matches property name/code, unit number and tenant name/company
    - At most five hits per kind
    - A blank term returns no hits without querying
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext, term: str) -> Result[SearchResponse]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        term = term.strip()
        if not term:
            return Return.ok(SearchResponse(properties=[], units=[], tenants=[]))

        async with self.uow:
            try:
                properties = await self.uow.properties.search(term, SEARCH_LIMIT)
                units = await self.uow.units.search(term, SEARCH_LIMIT)
                tenants = await self.uow.tenants.search(term, SEARCH_LIMIT)
            except SQLAlchemyError:
                logger.exception(f"Search failed for term: {term}")
                return Return.err(Error("SEARCH_ERROR", "Search failed. Please try again."))

            return Return.ok(
                SearchResponse(
                    properties=[
                        SearchHit(
                            id=p.id,
                            title=p.property_name,
                            subtitle=p.property_code,
                            href=paths.property_detail(p.id),
                        )
                        for p in properties
                    ],
                    units=[
                        SearchHit(
                            id=u.id,
                            title=f"Space {u.unit_number}",
                            subtitle=u.property.property_name if u.property else "",
                            href=paths.space_detail(u.id),
                        )
                        for u in units
                    ],
                    tenants=[
                        SearchHit(
                            id=t.id,
                            title=t.full_name,
                            subtitle=t.company,
                            href=paths.tenant_detail(t.id),
                        )
                        for t in tenants
                    ],
                )
            )
