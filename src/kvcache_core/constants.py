"""Shared constants for kv-cache-client."""

from __future__ import annotations

# Seconds between background PINGs when nothing else is configured
DEFAULT_HEALTH_CHECK_INTERVAL_SECONDS = 5.0

# Socket timeouts handed to redis-py (seconds)
DEFAULT_SOCKET_TIMEOUT_SECONDS = 5.0
DEFAULT_SOCKET_CONNECT_TIMEOUT_SECONDS = 5.0
