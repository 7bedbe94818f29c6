"""simplecache logging: structlog configuration for cache events."""

from simplecache.logging.structlog_adapter import StructlogAdapter

__all__ = ["StructlogAdapter"]
