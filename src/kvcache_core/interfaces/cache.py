"""Abstract cache interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# Numbers are stored by Redis as their decimal text and read back as str
CacheValue = str | int | float


@runtime_checkable
class CacheClient(Protocol):
    """Abstract cache interface — one concrete adapter per backing store."""

    def is_alive(self) -> bool:
        """Return the last-known connectivity flag without a round trip."""
        ...

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key, or None if not found."""
        ...

    async def set(self, key: str, value: CacheValue, ttl_seconds: int) -> None:
        """Store a value that expires after ``ttl_seconds``."""
        ...

    async def delete(self, key: str) -> None:
        """Delete a key from the cache. Missing keys are ignored."""
        ...

    async def exists(self, key: str) -> bool:
        """Check if a key exists in the cache."""
        ...
