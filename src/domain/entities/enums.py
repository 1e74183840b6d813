"""
Property Back-Office Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Back-office user role"""

    admin = "admin"
    staff = "staff"
    user = "user"


class EntityType(str, Enum):
    """Kind of entity an audit log or notification refers to"""

    property = "property"
    unit = "unit"
    tenant = "tenant"
    lease = "lease"
    payment = "payment"
    property_tax = "property_tax"
    unit_tax = "unit_tax"
    utility = "utility"
    maintenance_request = "maintenance_request"
    document = "document"
    title_movement = "title_movement"
    project = "project"
    project_member = "project_member"
    board = "board"
    column = "column"
    task = "task"


class AuditAction(str, Enum):
    """Mutation recorded by an audit log"""

    create = "create"
    update = "update"
    delete = "delete"


class NotificationType(str, Enum):
    """Notification category"""

    system = "system"
    tenant = "tenant"
    unit = "unit"
    lease = "lease"
    tax = "tax"
    utility = "utility"
    maintenance = "maintenance"
    document = "document"
    task = "task"


class NotificationPriority(str, Enum):
    """Notification priority, ordered low to urgent"""

    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class PropertyType(str, Enum):
    """Property classification"""

    residential = "residential"
    commercial = "commercial"
    industrial = "industrial"
    mixed_use = "mixed_use"


class UnitStatus(str, Enum):
    """Unit (space) occupancy status"""

    vacant = "vacant"
    occupied = "occupied"
    maintenance = "maintenance"
    reserved = "reserved"


class TenantStatus(str, Enum):
    """Tenant account status"""

    active = "active"
    inactive = "inactive"
    pending = "pending"


class LeaseStatus(str, Enum):
    """Lease lifecycle status"""

    pending = "pending"
    active = "active"
    expired = "expired"
    terminated = "terminated"


class PaymentType(str, Enum):
    """What a payment settles"""

    rent = "rent"
    deposit = "deposit"
    utility = "utility"
    maintenance = "maintenance"
    other = "other"


class PaymentMethod(str, Enum):
    """How a payment was made"""

    cash = "cash"
    check = "check"
    bank_transfer = "bank_transfer"
    credit_card = "credit_card"


class PaymentStatus(str, Enum):
    """Payment settlement status"""

    pending = "pending"
    completed = "completed"
    failed = "failed"
    refunded = "refunded"


class MaintenanceCategory(str, Enum):
    """Maintenance request category"""

    plumbing = "plumbing"
    electrical = "electrical"
    hvac = "hvac"
    appliance = "appliance"
    structural = "structural"
    other = "other"


class MaintenancePriority(str, Enum):
    """Maintenance request urgency"""

    low = "low"
    medium = "medium"
    high = "high"
    emergency = "emergency"


class MaintenanceStatus(str, Enum):
    """Maintenance request status"""

    pending = "pending"
    assigned = "assigned"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


class DocumentType(str, Enum):
    """Document classification"""

    lease = "lease"
    contract = "contract"
    invoice = "invoice"
    maintenance = "maintenance"
    other = "other"


class UtilityType(str, Enum):
    """Utility service type"""

    water = "water"
    electricity = "electricity"
    gas = "gas"
    internet = "internet"
    other = "other"


class TitleMovementStatus(str, Enum):
    """Where a property title document currently is"""

    requested = "requested"
    released = "released"
    in_transit = "in_transit"
    returned = "returned"


class ProjectStatus(str, Enum):
    """Project status"""

    active = "active"
    completed = "completed"
    archived = "archived"
    on_hold = "on_hold"


class ProjectMemberRole(str, Enum):
    """Role within a project"""

    owner = "owner"
    admin = "admin"
    member = "member"
    viewer = "viewer"


class TaskPriority(str, Enum):
    """Task priority"""

    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class TaskStatus(str, Enum):
    """Task workflow status"""

    todo = "todo"
    in_progress = "in_progress"
    review = "review"
    done = "done"


class TaskActivityType(str, Enum):
    """Task journal entry type"""

    created = "created"
    updated = "updated"
    commented = "commented"
    attachment_added = "attachment_added"
    label_added = "label_added"
    label_removed = "label_removed"
