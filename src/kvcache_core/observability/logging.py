"""Structured logging for cache clients, built on structlog."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING
from urllib.parse import urlsplit, urlunsplit

import structlog
from structlog.contextvars import bound_contextvars, merge_contextvars

if TYPE_CHECKING:
    from kvcache_core.config.settings import Settings

# Third-party loggers that are chatty below WARNING (redis-py logs every reconnect)
_QUIET_LOGGERS = ("redis", "asyncio")


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib records through one root handler.

    ``settings.log_format`` picks the final renderer: ``json`` for log
    shippers, ``console`` for a terminal.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_renderers(settings.log_format),
            ],
            foreign_pre_chain=pre_chain,
        )
    )

    level = _resolve_level(settings.log_level)
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


@contextmanager
def cache_log_context(redis_url: str) -> Iterator[None]:
    """Tag every log line emitted inside the block with the cache target.

    Credentials in the URL are dropped before binding. Tasks created inside
    the block (the health monitor) inherit the tag.
    """
    with bound_contextvars(cache_target=redact_url(redis_url)):
        yield


def redact_url(url: str) -> str:
    """Strip username and password from a redis:// or rediss:// URL."""
    parts = urlsplit(url)
    if "@" not in parts.netloc:
        return url
    host = parts.netloc.rsplit("@", 1)[1]
    return urlunsplit(parts._replace(netloc=host))


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def _renderers(log_format: str) -> list[structlog.types.Processor]:
    if log_format == "json":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer()]


def _resolve_level(level_name: str) -> int:
    """Map a level name to its logging constant; unknown names mean INFO."""
    return logging.getLevelNamesMapping().get(level_name.upper(), logging.INFO)
