import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from libs.result import Error, Result, Return
from src.app.services.mutation_envelope import UNAUTHORIZED
from src.app.services.request_context import RequestContext
from src.app.services.unit_of_work import UnitOfWork

from ..shared_dtos import UserSummary

logger = logging.getLogger(__name__)


class GetUsersUseCase:
    """Every user ordered by first name, for assignee and member pickers"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, ctx: RequestContext) -> Result[List[UserSummary]]:
        if not ctx.is_authenticated:
            return Return.err(UNAUTHORIZED)

        async with self.uow:
            try:
                users = await self.uow.users.list_all()
            except SQLAlchemyError:
                logger.exception("User listing failed")
                return Return.err(Error("USER_FETCH_ERROR", "Failed to fetch users"))

            return Return.ok([UserSummary.model_validate(u) for u in users])
