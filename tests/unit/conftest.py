from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.request_context import RequestContext


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Repositories touched by every mutation's audit/notify step
    uow.users = MagicMock()
    uow.users.list_ids = AsyncMock(return_value=[])
    uow.users.get_by_id = AsyncMock(return_value=None)

    uow.audit_logs = MagicMock()
    uow.audit_logs.create_many = AsyncMock()

    uow.notifications = MagicMock()
    uow.notifications.create_many = AsyncMock()

    return uow


@pytest.fixture
def mock_invalidator():
    invalidator = MagicMock()
    invalidator.revalidate_path = AsyncMock()
    return invalidator


@pytest.fixture
def ctx():
    return RequestContext(actor_id=uuid4(), ip_address="10.0.0.1", user_agent="pytest")


@pytest.fixture
def anonymous_ctx():
    return RequestContext(actor_id=None)
