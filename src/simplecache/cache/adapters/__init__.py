"""Cache adapters: concrete cache implementations."""

from simplecache.cache.adapters.redis import RedisSimpleCache

__all__ = ["RedisSimpleCache"]
