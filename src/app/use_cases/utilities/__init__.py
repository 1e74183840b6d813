"""
Utility Use Cases
"""

from .utility_use_cases import CreateUtilityUseCase, UpdateUtilityStatusUseCase, DeleteUtilityUseCase
from .dtos import UtilityCommand, UtilityStatusCommand, UtilityResponse

__all__ = [
    "CreateUtilityUseCase",
    "UpdateUtilityStatusUseCase",
    "DeleteUtilityUseCase",
    "UtilityCommand",
    "UtilityStatusCommand",
    "UtilityResponse",
]
