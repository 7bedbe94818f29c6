"""simplecache: a simple key/value cache contract implemented over Redis."""

from simplecache.cache import (
    TTL,
    JsonSerializer,
    PickleSerializer,
    RedisSimpleCache,
    Serializer,
    SimpleCache,
    create_simple_cache,
)
from simplecache.core.config import Config
from simplecache.kernel.exceptions import (
    InvalidArgumentException,
    InvalidKeyException,
    SerializationException,
    SimpleCacheException,
)

__version__ = "1.0.0"

__all__ = [
    "TTL",
    "Config",
    "InvalidArgumentException",
    "InvalidKeyException",
    "JsonSerializer",
    "PickleSerializer",
    "RedisSimpleCache",
    "Serializer",
    "SerializationException",
    "SimpleCache",
    "SimpleCacheException",
    "create_simple_cache",
]
