"""Observability: structured logging."""

from kvcache_core.observability.logging import (
    cache_log_context,
    configure_logging,
    redact_url,
)

__all__ = [
    "cache_log_context",
    "configure_logging",
    "redact_url",
]
