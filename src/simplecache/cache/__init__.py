"""simplecache cache: simple key/value cache contract over Redis."""

from simplecache.cache.adapters.redis import RedisSimpleCache
from simplecache.cache.factory import create_simple_cache
from simplecache.cache.ports.outbound import SimpleCache
from simplecache.cache.serialization import JsonSerializer, PickleSerializer, Serializer, create_serializer
from simplecache.cache.types import TTL, Duration

__all__ = [
    "TTL",
    "Duration",
    "JsonSerializer",
    "PickleSerializer",
    "RedisSimpleCache",
    "Serializer",
    "SimpleCache",
    "create_serializer",
    "create_simple_cache",
]
