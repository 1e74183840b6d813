"""
Maintenance Request Use Cases
"""

from .maintenance_request_use_cases import (
    CreateMaintenanceRequestUseCase,
    UpdateMaintenanceRequestUseCase,
    DeleteMaintenanceRequestUseCase,
)
from .dtos import (
    MaintenanceRequestCommand,
    MaintenanceRequestUpdateCommand,
    MaintenanceRequestResponse,
)

__all__ = [
    "CreateMaintenanceRequestUseCase",
    "UpdateMaintenanceRequestUseCase",
    "DeleteMaintenanceRequestUseCase",
    "MaintenanceRequestCommand",
    "MaintenanceRequestUpdateCommand",
    "MaintenanceRequestResponse",
]
