"""Connectivity state of a cache client."""

from __future__ import annotations

from enum import StrEnum


class ConnectionState(StrEnum):
    """Last-observed reachability of the cache server."""

    DISCONNECTED = "disconnected"
    CONNECTED = "connected"
