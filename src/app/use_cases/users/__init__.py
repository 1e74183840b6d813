"""
User Use Cases
"""

from .get_users_use_case import GetUsersUseCase

__all__ = ["GetUsersUseCase"]
