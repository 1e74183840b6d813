"""
Search Use Cases
"""

from .global_search_use_case import GlobalSearchUseCase

__all__ = ["GlobalSearchUseCase"]
