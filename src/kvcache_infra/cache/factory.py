"""Factory functions for building cache clients from settings."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from redis.asyncio import Redis

from kvcache_core.observability.logging import cache_log_context
from kvcache_infra.cache.redis_cache import RedisCacheClient

if TYPE_CHECKING:
    from kvcache_core.config.settings import Settings


def create_redis(settings: Settings) -> Redis:  # type: ignore[type-arg]
    """Create a redis-py asyncio client from settings.

    Responses are decoded to ``str``; timeouts come from settings so that
    an unreachable server fails a call instead of hanging it.
    """
    return Redis.from_url(
        settings.redis_url,
        decode_responses=True,
        socket_timeout=settings.socket_timeout_seconds,
        socket_connect_timeout=settings.socket_connect_timeout_seconds,
    )


def create_cache_client(settings: Settings) -> RedisCacheClient:
    """Create an unopened RedisCacheClient. Call ``open()`` before use."""
    return RedisCacheClient(
        create_redis(settings),
        health_check_interval_seconds=settings.health_check_interval_seconds,
    )


@asynccontextmanager
async def cache_session(settings: Settings) -> AsyncIterator[RedisCacheClient]:
    """Yield an opened cache client and close it on exit.

    Log lines emitted while the session is open, including those from the
    health monitor, carry the redacted ``cache_target``.
    """
    with cache_log_context(settings.redis_url):
        client = create_cache_client(settings)
        await client.open()
        try:
            yield client
        finally:
            await client.close()
