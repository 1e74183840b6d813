from abc import ABC, abstractmethod


class InvalidationError(Exception):
    """Raised when the cache backend cannot record a stale path"""


class PathInvalidator(ABC):
    """Path-keyed "mark stale" signal for cached page renderings"""

    @abstractmethod
    async def revalidate_path(self, path: str) -> None:
        """Mark the rendering of `path` stale"""
        pass

    @abstractmethod
    async def is_stale(self, path: str) -> bool:
        pass

    @abstractmethod
    async def clear(self, path: str) -> None:
        """Forget the stale mark once the page has been re-rendered"""
        pass
