from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Tenant


class ITenantRepository(ABC):
    """Tenant repository interface - application layer"""

    @abstractmethod
    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant"""
        pass

    @abstractmethod
    async def create_many(self, tenants: List[Tenant]) -> List[Tenant]:
        """Create several tenants in the current transaction"""
        pass

    @abstractmethod
    async def update(self, tenant: Tenant) -> Tenant:
        """Update existing tenant"""
        pass

    @abstractmethod
    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID without relations"""
        pass

    @abstractmethod
    async def get_with_details(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant with leases (unit, property, payments), maintenance and documents"""
        pass

    @abstractmethod
    async def list_with_details(self) -> List[Tenant]:
        """List tenants newest first with the same relations as get_with_details"""
        pass

    @abstractmethod
    async def get_many(self, tenant_ids: List[UUID]) -> List[Tenant]:
        pass

    @abstractmethod
    async def delete(self, tenant_id: UUID) -> None:
        pass

    @abstractmethod
    async def delete_many(self, tenant_ids: List[UUID]) -> None:
        pass

    @abstractmethod
    async def search(self, term: str, limit: int = 5) -> List[Tenant]:
        """Case-insensitive match on first name, last name or company"""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
