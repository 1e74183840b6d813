"""
Property Use Cases

Properties, their CSV import/export and title document movements.
"""

from .create_property_use_case import CreatePropertyUseCase
from .delete_property_use_case import BulkDeletePropertiesUseCase, DeletePropertyUseCase
from .get_properties_use_case import (
    ExportPropertiesUseCase,
    GetPropertiesUseCase,
    GetPropertyByIdUseCase,
)
from .import_properties_use_case import ImportPropertiesUseCase
from .title_movement_use_cases import (
    CreateTitleMovementUseCase,
    DeleteTitleMovementUseCase,
    GetTitleMovementsUseCase,
    UpdateTitleMovementStatusUseCase,
)
from .update_property_use_case import UpdatePropertyUseCase

__all__ = [
    "CreatePropertyUseCase",
    "UpdatePropertyUseCase",
    "DeletePropertyUseCase",
    "BulkDeletePropertiesUseCase",
    "GetPropertiesUseCase",
    "GetPropertyByIdUseCase",
    "ExportPropertiesUseCase",
    "ImportPropertiesUseCase",
    "CreateTitleMovementUseCase",
    "UpdateTitleMovementStatusUseCase",
    "DeleteTitleMovementUseCase",
    "GetTitleMovementsUseCase",
]
