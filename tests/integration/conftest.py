"""Integration test fixtures — real Redis on localhost:6379, DB 1."""

from __future__ import annotations

import socket
import time
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from kvcache_infra.cache.factory import create_cache_client, create_redis
from kvcache_infra.cache.redis_cache import RedisCacheClient
from tests.mocks.mock_settings import make_real_settings

# ---------------------------------------------------------------------------
# Service health checks (with retry for CI container start-up)
# ---------------------------------------------------------------------------


def _tcp_reachable(
    host: str,
    port: int,
    timeout: float = 1.0,
    retries: int = 10,
    delay: float = 2.0,
) -> bool:
    """Check if a TCP service is reachable, retrying on failure."""
    for attempt in range(retries):
        try:
            with socket.create_connection((host, port), timeout=timeout):
                return True
        except OSError:
            if attempt < retries - 1:
                time.sleep(delay)
    return False


_redis_up = _tcp_reachable("localhost", 6379, retries=3, delay=1.0)

require_redis = pytest.mark.skipif(
    not _redis_up,
    reason="Redis not reachable on localhost:6379 — run `docker run -p 6379:6379 redis`",
)


# ---------------------------------------------------------------------------
# Redis fixtures
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def cache_client() -> AsyncGenerator[RedisCacheClient, None]:
    """Opened client on test DB 1, flushed before and after each test."""
    if not _redis_up:
        pytest.skip("Redis not available")

    settings = make_real_settings()
    admin = create_redis(settings)
    await admin.flushdb()

    client = create_cache_client(settings)
    await client.open()
    yield client
    await client.close()

    await admin.flushdb()
    await admin.aclose()  # type: ignore[attr-defined]
