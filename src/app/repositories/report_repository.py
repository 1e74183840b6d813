from abc import ABC, abstractmethod
from typing import List

from src.domain.entities import MaintenanceRequest, Property, Tenant, Unit


class IReportRepository(ABC):
    """
    Read-only graph fetches for the reporting use cases.

    Each method loads the whole relevant subtree; aggregation happens in
    the application layer.
    """

    @abstractmethod
    async def property_graph(self) -> List[Property]:
        """
        Properties with units -> (leases -> tenant, payments; maintenance
        requests; documents; unit taxes; utility accounts -> bills), documents,
        property taxes, utilities -> bills and the creator.
        """
        pass

    @abstractmethod
    async def tenant_graph(self) -> List[Tenant]:
        """
        Tenants with leases -> (unit -> property, payments), maintenance
        requests -> (unit -> property, assignee) and documents.
        """
        pass

    @abstractmethod
    async def unit_graph(self) -> List[Unit]:
        """
        Units with property, leases -> (tenant, payments), maintenance requests
        -> (tenant, assignee), documents, unit taxes and utility accounts -> bills.
        """
        pass

    @abstractmethod
    async def maintenance_requests(self) -> List[MaintenanceRequest]:
        """Every maintenance request with unit -> property, newest first"""
        pass
