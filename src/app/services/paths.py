"""Routes whose cached renderings depend on mutated entities"""

from uuid import UUID

DASHBOARD = "/dashboard"
PROPERTIES = "/dashboard/properties"
SPACES = "/dashboard/spaces"
TENANTS = "/dashboard/tenants"
PROJECTS = "/dashboard/projects"


def property_detail(property_id: UUID) -> str:
    return f"{PROPERTIES}?selected={property_id}"


def space_detail(unit_id: UUID) -> str:
    return f"{SPACES}?selected={unit_id}"


def tenant_detail(tenant_id: UUID) -> str:
    return f"{TENANTS}/{tenant_id}"


def project_detail(project_id: UUID) -> str:
    return f"{PROJECTS}/{project_id}"
