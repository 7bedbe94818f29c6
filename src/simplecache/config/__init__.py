"""simplecache configuration properties."""

from simplecache.config.properties import CacheProperties, LoggingProperties

__all__ = ["CacheProperties", "LoggingProperties"]
