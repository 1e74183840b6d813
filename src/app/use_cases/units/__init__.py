"""
Unit Use Cases

Spaces inside properties.
"""

from .create_unit_use_case import CreateUnitUseCase
from .update_unit_use_case import UpdateUnitUseCase
from .delete_unit_use_case import DeleteUnitUseCase, BulkDeleteUnitsUseCase
from .get_available_units_use_case import GetAvailableUnitsUseCase
from .dtos import UnitCommand, UnitUpdateCommand, UnitResponse, AvailableUnitResponse

__all__ = [
    "CreateUnitUseCase",
    "UpdateUnitUseCase",
    "DeleteUnitUseCase",
    "BulkDeleteUnitsUseCase",
    "GetAvailableUnitsUseCase",
    "UnitCommand",
    "UnitUpdateCommand",
    "UnitResponse",
    "AvailableUnitResponse",
]
