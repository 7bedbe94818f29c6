"""Tests for @config_properties dataclass binding of cache and logging settings."""

import pytest

from simplecache.config.properties import CacheProperties, LoggingProperties
from simplecache.core.config import Config


class TestCacheProperties:
    def test_bind_defaults(self):
        props = Config({}).bind(CacheProperties)
        assert props.default_ttl == 300
        assert props.redis_url == "redis://localhost:6379/0"
        assert props.serializer == "pickle"

    def test_bind_custom_values(self):
        config = Config(
            {"simplecache": {"cache": {"default_ttl": 30, "redis_url": "redis://r:1/3", "serializer": "json"}}}
        )
        props = config.bind(CacheProperties)
        assert props.default_ttl == 30
        assert props.redis_url == "redis://r:1/3"
        assert props.serializer == "json"

    def test_env_string_is_coerced_to_int(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SIMPLECACHE_CACHE_DEFAULT_TTL", "45")
        assert Config({}).bind(CacheProperties).default_ttl == 45


class TestLoggingProperties:
    def test_bind_defaults(self):
        props = Config({}).bind(LoggingProperties)
        assert props.level == {"root": "INFO"}
        assert props.format == "console"

    def test_bind_custom_values(self):
        config = Config({"simplecache": {"logging": {"level": {"root": "DEBUG"}, "format": "json"}}})
        props = config.bind(LoggingProperties)
        assert props.level == {"root": "DEBUG"}
        assert props.format == "json"
