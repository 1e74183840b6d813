"""
Property Back-Office Domain Entities

All domain entities organized by aggregate.
"""

# Export all enums
from .enums import (
    UserRole,
    EntityType,
    AuditAction,
    NotificationType,
    NotificationPriority,
    PropertyType,
    UnitStatus,
    TenantStatus,
    LeaseStatus,
    PaymentType,
    PaymentMethod,
    PaymentStatus,
    MaintenanceCategory,
    MaintenancePriority,
    MaintenanceStatus,
    DocumentType,
    UtilityType,
    TitleMovementStatus,
    ProjectStatus,
    ProjectMemberRole,
    TaskPriority,
    TaskStatus,
    TaskActivityType,
)

# Export all entities
from .user import User
from .property import Property, PropertyTitleMovement
from .unit import Unit
from .tenant import Tenant
from .lease import Lease, Payment
from .tax import PropertyTax, UnitTax
from .utility import PropertyUtility, UnitUtilityAccount, UtilityBill
from .maintenance_request import MaintenanceRequest
from .document import Document
from .project import DEFAULT_COLUMNS, Board, BoardColumn, Project, ProjectMember
from .task import Task, TaskActivity, TaskAttachment, TaskComment, TaskLabel
from .audit_log import AuditLog
from .notification import Notification

__all__ = [
    # Enums
    "UserRole",
    "EntityType",
    "AuditAction",
    "NotificationType",
    "NotificationPriority",
    "PropertyType",
    "UnitStatus",
    "TenantStatus",
    "LeaseStatus",
    "PaymentType",
    "PaymentMethod",
    "PaymentStatus",
    "MaintenanceCategory",
    "MaintenancePriority",
    "MaintenanceStatus",
    "DocumentType",
    "UtilityType",
    "TitleMovementStatus",
    "ProjectStatus",
    "ProjectMemberRole",
    "TaskPriority",
    "TaskStatus",
    "TaskActivityType",
    # Entities
    "User",
    "Property",
    "PropertyTitleMovement",
    "Unit",
    "Tenant",
    "Lease",
    "Payment",
    "PropertyTax",
    "UnitTax",
    "PropertyUtility",
    "UnitUtilityAccount",
    "UtilityBill",
    "MaintenanceRequest",
    "Document",
    "DEFAULT_COLUMNS",
    "Project",
    "ProjectMember",
    "Board",
    "BoardColumn",
    "Task",
    "TaskLabel",
    "TaskComment",
    "TaskAttachment",
    "TaskActivity",
    "AuditLog",
    "Notification",
]
