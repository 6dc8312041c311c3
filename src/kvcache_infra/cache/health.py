"""Background health-check loop keeping a client's connectivity flag current."""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Awaitable, Callable

import structlog

logger = structlog.get_logger()


class ConnectionMonitor:
    """Periodically runs a probe coroutine until stopped.

    The probe is expected to record its own outcome (``RedisCacheClient.ping``
    flips the client state and logs transitions); the monitor only owns the
    schedule and the task.
    """

    def __init__(
        self,
        probe: Callable[[], Awaitable[bool]],
        interval_seconds: float,
    ) -> None:
        """Initialize with a probe and the delay between probes."""
        self._probe = probe
        self._interval = interval_seconds
        self._task: asyncio.Task[None] | None = None

    @property
    def enabled(self) -> bool:
        """Whether a positive interval was configured."""
        return self._interval > 0

    @property
    def running(self) -> bool:
        """Whether the background task is alive."""
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start probing in the background. No-op if disabled or already running."""
        if not self.enabled or self.running:
            return
        self._task = asyncio.create_task(self._run(), name="kvcache-health-monitor")
        logger.debug("cache_health_monitor_started", interval_seconds=self._interval)

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.debug("cache_health_monitor_stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self._probe()
            except Exception:
                logger.exception("cache_health_probe_crashed")
