import logging
from typing import Set

from redis import asyncio as aioredis
from redis.exceptions import RedisError

from src.app.services.path_invalidator import InvalidationError, PathInvalidator

logger = logging.getLogger(__name__)


class InMemoryPathInvalidator(PathInvalidator):
    """Process-local stale set, used for single-instance deployments and tests"""

    def __init__(self):
        self.stale_paths: Set[str] = set()

    async def revalidate_path(self, path: str) -> None:
        self.stale_paths.add(path)

    async def is_stale(self, path: str) -> bool:
        return path in self.stale_paths

    async def clear(self, path: str) -> None:
        self.stale_paths.discard(path)


class RedisPathInvalidator(PathInvalidator):
    """
    Stale marks shared through Redis so every API instance and renderer
    sees the same invalidation.

    Each stale path is a key `<prefix><path>`; renderers delete it after
    re-rendering.
    """

    def __init__(self, client: aioredis.Redis, key_prefix: str = "propdesk:stale:"):
        self.client = client
        self.key_prefix = key_prefix

    @classmethod
    def from_url(cls, url: str, key_prefix: str = "propdesk:stale:") -> "RedisPathInvalidator":
        return cls(aioredis.from_url(url, decode_responses=True), key_prefix)

    def _key(self, path: str) -> str:
        return f"{self.key_prefix}{path}"

    async def revalidate_path(self, path: str) -> None:
        try:
            await self.client.set(self._key(path), "1")
        except RedisError as e:
            logger.error(f"Failed to mark path stale: {path}")
            raise InvalidationError(str(e)) from e

    async def is_stale(self, path: str) -> bool:
        try:
            return bool(await self.client.exists(self._key(path)))
        except RedisError as e:
            raise InvalidationError(str(e)) from e

    async def clear(self, path: str) -> None:
        try:
            await self.client.delete(self._key(path))
        except RedisError as e:
            raise InvalidationError(str(e)) from e
