from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import MaintenanceRequest


class IMaintenanceRequestRepository(ABC):
    """Maintenance request repository interface - application layer"""

    @abstractmethod
    async def create(self, request: MaintenanceRequest) -> MaintenanceRequest:
        pass

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[MaintenanceRequest]:
        pass

    @abstractmethod
    async def update(self, request: MaintenanceRequest) -> MaintenanceRequest:
        pass

    @abstractmethod
    async def delete(self, request_id: UUID) -> None:
        pass
