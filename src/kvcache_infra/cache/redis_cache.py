"""Redis-backed implementation of CacheClient."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from types import TracebackType

import structlog
from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from kvcache_core.constants import DEFAULT_HEALTH_CHECK_INTERVAL_SECONDS
from kvcache_core.exceptions import NotConnectedError
from kvcache_core.interfaces.cache import CacheValue
from kvcache_core.state import ConnectionState
from kvcache_infra.cache.health import ConnectionMonitor

logger = structlog.get_logger()

# Errors that mean the server is unreachable, as opposed to a rejected command
_CONNECTION_ERRORS = (RedisConnectionError, RedisTimeoutError)


class RedisCacheClient:
    """Key-value cache backed by Redis, gated on last-known connectivity.

    The client starts ``Disconnected``. A successful ping moves it to
    ``Connected``; a failed ping, or a connection-level error raised by
    any operation, moves it back. Operations attempted while disconnected
    raise :class:`NotConnectedError` without touching the network.
    """

    def __init__(
        self,
        redis: Redis,  # type: ignore[type-arg]
        health_check_interval_seconds: float | None = None,
    ) -> None:
        """Initialize with a redis-py asyncio client.

        :meth:`open` starts a background monitor pinging every
        ``health_check_interval_seconds`` (default
        ``DEFAULT_HEALTH_CHECK_INTERVAL_SECONDS``). Pass 0 to disable it; a
        client without a monitor only recovers through explicit :meth:`ping`.
        """
        if health_check_interval_seconds is None:
            health_check_interval_seconds = DEFAULT_HEALTH_CHECK_INTERVAL_SECONDS
        self._redis = redis
        self._state = ConnectionState.DISCONNECTED
        self._monitor = ConnectionMonitor(self.ping, health_check_interval_seconds)

    @property
    def state(self) -> ConnectionState:
        """Last-observed connection state."""
        return self._state

    @property
    def monitor(self) -> ConnectionMonitor:
        """The background health-check loop owned by this client."""
        return self._monitor

    def is_alive(self) -> bool:
        """Return whether the last observation saw the server reachable."""
        return self._state is ConnectionState.CONNECTED

    # --- lifecycle ---

    async def open(self) -> None:
        """Probe the server once and start the health monitor.

        Does not raise when the server is down: the client stays
        disconnected and the monitor keeps probing.
        """
        if not await self.ping():
            logger.warning("cache_unreachable_on_open", monitor_enabled=self._monitor.enabled)
        self._monitor.start()

    async def close(self) -> None:
        """Stop the monitor and release the underlying connection pool."""
        await self._monitor.stop()
        try:
            await self._redis.aclose()  # type: ignore[attr-defined]
        finally:
            if self._state is ConnectionState.CONNECTED:
                logger.info("cache_closed")
            self._state = ConnectionState.DISCONNECTED

    async def __aenter__(self) -> RedisCacheClient:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    # --- health ---

    async def ping(self) -> bool:
        """Round-trip a PING and record the outcome. Returns True on success."""
        try:
            await self._redis.ping()
        except RedisError as exc:
            self._mark_disconnected(exc)
            return False
        self._mark_connected()
        return True

    # --- operations ---

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key."""
        self._ensure_alive()
        with self._observe_connection():
            value = await self._redis.get(key)
        if value is None:
            return None
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return str(value)

    async def set(self, key: str, value: CacheValue, ttl_seconds: int) -> None:
        """Store a value with TTL, replacing any previous value and expiry."""
        self._ensure_alive()
        with self._observe_connection():
            await self._redis.set(name=key, value=value, ex=ttl_seconds)

    async def delete(self, key: str) -> None:
        """Delete a key from the cache."""
        self._ensure_alive()
        with self._observe_connection():
            await self._redis.delete(key)

    async def exists(self, key: str) -> bool:
        """Check if a key exists."""
        self._ensure_alive()
        with self._observe_connection():
            count = await self._redis.exists(key)
        return bool(count)

    # --- internals ---

    def _ensure_alive(self) -> None:
        if not self.is_alive():
            raise NotConnectedError

    @contextmanager
    def _observe_connection(self) -> Iterator[None]:
        """Flip to disconnected when the wrapped call loses the server, then re-raise."""
        try:
            yield
        except _CONNECTION_ERRORS as exc:
            self._mark_disconnected(exc)
            raise

    def _mark_connected(self) -> None:
        if self._state is ConnectionState.CONNECTED:
            return
        self._state = ConnectionState.CONNECTED
        logger.info("cache_connected")

    def _mark_disconnected(self, exc: BaseException) -> None:
        if self._state is ConnectionState.DISCONNECTED:
            logger.debug("cache_still_unreachable", error=str(exc))
            return
        self._state = ConnectionState.DISCONNECTED
        logger.error("cache_connection_error", error=str(exc) or type(exc).__name__)
