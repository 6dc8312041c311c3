"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from kvcache_infra.cache.redis_cache import RedisCacheClient
from tests.mocks.mock_redis import make_mock_redis
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def mock_redis() -> MagicMock:
    """Return a mock Redis handle whose PING succeeds."""
    return make_mock_redis()


@pytest.fixture
async def connected_client(mock_redis: MagicMock) -> RedisCacheClient:
    """Return a RedisCacheClient that has observed a successful ping."""
    client = RedisCacheClient(mock_redis)
    await client.ping()
    return client
