"""Custom exception hierarchy for kv-cache-client."""

from __future__ import annotations


class KVCacheError(Exception):
    """Base exception for all kv-cache-client errors."""


class NotConnectedError(KVCacheError):
    """Raised when an operation is attempted while the cache server is unreachable."""

    def __init__(self, msg: str = "Redis client is not connected") -> None:
        super().__init__(msg)
