import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.mutation_envelope import UNAUTHORIZED
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from .dtos import AvailableUnitResponse

logger = logging.getLogger(__name__)


class GetAvailableUnitsUseCase:
    """Units that can take a new lease (VACANT or RESERVED)"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[List[AvailableUnitResponse]]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                units = await self.uow.units.list_available()
            except SQLAlchemyError:
                logger.exception("Available unit listing failed")
                return Return.err(Error("UNIT_FETCH_ERROR", "Failed to fetch available spaces"))

            return Return.ok([AvailableUnitResponse.model_validate(u) for u in units])
