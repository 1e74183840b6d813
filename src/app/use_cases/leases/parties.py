"""Loading and describing the tenant/unit/property a lease binds together"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from libs.result import Error
from src.app.services import paths
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Property, Tenant, Unit

LEASE_NOT_FOUND = Error("LEASE_NOT_FOUND", "Lease not found")
TENANT_NOT_FOUND = Error("TENANT_NOT_FOUND", "Tenant not found")
UNIT_NOT_FOUND = Error("UNIT_NOT_FOUND", "Space not found")


@dataclass
class LeaseParties:
    tenant: Tenant
    unit: Unit
    property: Optional[Property]

    def describe(self) -> str:
        property_name = self.property.property_name if self.property else "Unknown property"
        return (
            f"Lease for {self.tenant.first_name} {self.tenant.last_name} "
            f"at {property_name} - {self.unit.unit_number}"
        )

    def affected_paths(self):
        return [paths.SPACES, paths.TENANTS, paths.tenant_detail(self.tenant.id)]


async def load_parties(uow: UnitOfWork, tenant_id: UUID, unit_id: UUID):
    """LeaseParties, or the NOT_FOUND error of whichever side is missing"""
    tenant = await uow.tenants.get_by_id(tenant_id)
    if tenant is None:
        return None, TENANT_NOT_FOUND
    unit = await uow.units.get_by_id(unit_id)
    if unit is None:
        return None, UNIT_NOT_FOUND
    property = await uow.properties.get_by_id(unit.property_id)
    return LeaseParties(tenant=tenant, unit=unit, property=property), None
