"""
Tax Use Cases

Property and unit tax records.
"""

from .property_tax_use_cases import (
    CreatePropertyTaxUseCase,
    UpdatePropertyTaxUseCase,
    UpdatePropertyTaxStatusUseCase,
    DeletePropertyTaxUseCase,
)
from .unit_tax_use_cases import CreateUnitTaxUseCase, UpdateUnitTaxUseCase, DeleteUnitTaxUseCase

__all__ = [
    "CreatePropertyTaxUseCase",
    "UpdatePropertyTaxUseCase",
    "UpdatePropertyTaxStatusUseCase",
    "DeletePropertyTaxUseCase",
    "CreateUnitTaxUseCase",
    "UpdateUnitTaxUseCase",
    "DeleteUnitTaxUseCase",
]
