"""Cache adapters and their lifecycle helpers."""

from kvcache_infra.cache.factory import cache_session, create_cache_client, create_redis
from kvcache_infra.cache.health import ConnectionMonitor
from kvcache_infra.cache.redis_cache import RedisCacheClient

__all__ = [
    "ConnectionMonitor",
    "RedisCacheClient",
    "cache_session",
    "create_cache_client",
    "create_redis",
]
