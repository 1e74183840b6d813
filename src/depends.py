from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.path_invalidator import InMemoryPathInvalidator, RedisPathInvalidator
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.app.services.path_invalidator import PathInvalidator
from src.app.services.request_context import RequestContext


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """SQLite leaves FOREIGN KEY constraints unenforced unless each connection opts in"""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
enable_sqlite_foreign_keys(engine)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# A missing token is not rejected here; use cases answer UNAUTHORIZED
security = HTTPBearer(auto_error=False)

_invalidator: Optional[PathInvalidator] = None


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_path_invalidator() -> PathInvalidator:
    """Process-wide invalidator for the configured CACHE_BACKEND"""
    global _invalidator
    if _invalidator is None:
        if ApplicationConfig.CACHE_BACKEND == "redis":
            _invalidator = RedisPathInvalidator.from_url(
                ApplicationConfig.REDIS_URL, ApplicationConfig.CACHE_KEY_PREFIX
            )
        else:
            _invalidator = InMemoryPathInvalidator()
    return _invalidator


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


async def get_request_context(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> RequestContext:
    """
    Build the RequestContext for the current request.

    The actor comes from the `user_id` claim of a valid bearer JWT; an
    absent, expired or malformed token leaves the actor empty.
    """
    actor_id = None
    if credentials is not None:
        payload = verify_jwt(credentials.credentials)
        if payload is not None:
            try:
                actor_id = UUID(payload["user_id"])
            except (KeyError, ValueError):
                actor_id = None

    return RequestContext(
        actor_id=actor_id,
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent", "unknown"),
    )
