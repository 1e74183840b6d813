from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Lease, Payment


class ILeaseRepository(ABC):
    """Lease repository interface - application layer"""

    @abstractmethod
    async def create(self, lease: Lease) -> Lease:
        """Create a new lease"""
        pass

    @abstractmethod
    async def update(self, lease: Lease) -> Lease:
        """Update existing lease"""
        pass

    @abstractmethod
    async def get_by_id(self, lease_id: UUID) -> Optional[Lease]:
        """Get lease with tenant and unit loaded"""
        pass

    @abstractmethod
    async def delete(self, lease_id: UUID) -> None:
        """Delete a lease together with its payments"""
        pass

    @abstractmethod
    async def create_payment(self, payment: Payment) -> Payment:
        """Record a payment against a lease"""
        pass
