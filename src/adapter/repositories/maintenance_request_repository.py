from typing import Optional
from uuid import UUID

from sqlmodel import delete, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.maintenance_request_repository import IMaintenanceRequestRepository
from src.domain.entities import MaintenanceRequest


class MaintenanceRequestRepository(IMaintenanceRequestRepository):
    """Maintenance request repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, request: MaintenanceRequest) -> MaintenanceRequest:
        self.session.add(request)
        await self.session.flush()
        await self.session.refresh(request)
        return request

    async def get_by_id(self, request_id: UUID) -> Optional[MaintenanceRequest]:
        stmt = select(MaintenanceRequest).where(MaintenanceRequest.id == request_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def update(self, request: MaintenanceRequest) -> MaintenanceRequest:
        self.session.add(request)
        await self.session.flush()
        await self.session.refresh(request)
        return request

    async def delete(self, request_id: UUID) -> None:
        await self.session.exec(
            delete(MaintenanceRequest).where(MaintenanceRequest.id == request_id)
        )
