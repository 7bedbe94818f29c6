# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Redis-backed simple cache adapter."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, cast

import structlog
from redis.exceptions import RedisError

from simplecache.cache.serialization import PickleSerializer, Serializer
from simplecache.cache.types import TTL
from simplecache.cache.validation import (
    normalize_key,
    resolve_ttl,
    validate_default_ttl,
    validate_iterable,
    validate_key,
)
from simplecache.kernel.exceptions import InvalidArgumentException

logger = structlog.get_logger("simplecache.cache")


class RedisSimpleCache:
    """Simple cache that delegates to a ``redis.Redis``-like client.

    The client is created, owned and closed by the caller; it must return raw
    ``bytes`` (the default, ``decode_responses=False``). Values are encoded
    with *serializer*, pickle unless told otherwise.

    A TTL that resolves to zero or fewer seconds is immediate expiration: the
    key is deleted instead of written. Expiry itself is left to Redis.
    """

    def __init__(self, client: Any, default_ttl: int, serializer: Serializer | None = None) -> None:
        self._client = client
        self._default_ttl = validate_default_ttl(default_ttl)
        self._serializer: Serializer = serializer or PickleSerializer()

    @property
    def client(self) -> Any:
        return self._client

    @property
    def default_ttl(self) -> int:
        return self._default_ttl

    def get(self, key: str, default: Any = None) -> Any:
        """Return the cached value for *key*, or *default* when absent."""
        validate_key(key)
        raw = self._client.get(key)
        if raw is None:
            return default
        return self._serializer.loads(raw)

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        """Store *value* under *key* for *ttl* (default TTL when ``None``).

        Returns ``False`` when Redis rejects the write.
        """
        validate_key(key)
        seconds = resolve_ttl(ttl, self._default_ttl)

        try:
            if seconds <= 0:
                self._client.delete(key)
                return True
            return bool(self._client.setex(key, seconds, self._serializer.dumps(value)))
        except RedisError as exc:
            logger.warning("cache_set_failed", key=key, error=str(exc), error_type=type(exc).__name__)
            return False

    def delete(self, key: str) -> bool:
        """Remove *key*; succeeds whether or not it existed."""
        validate_key(key)
        self._client.delete(key)
        return True

    def clear(self) -> bool:
        """Flush the whole Redis server, not only keys written through this cache."""
        try:
            return bool(self._client.flushall())
        except RedisError as exc:
            logger.warning("cache_clear_failed", error=str(exc), error_type=type(exc).__name__)
            return False

    def get_multiple(self, keys: Iterable[str | int], default: Any = None) -> dict[str | int, Any]:
        """Fetch several keys in one round trip.

        The result maps every requested key, as given, to its value or
        *default*.
        """
        requested = list(validate_iterable(keys, "keys"))
        store_keys = [normalize_key(key) for key in requested]
        if not store_keys:
            return {}

        payloads = self._client.mget(store_keys)
        return {
            key: default if raw is None else self._serializer.loads(raw)
            for key, raw in zip(requested, payloads)
        }

    def set_multiple(
        self,
        values: Mapping[str | int, Any] | Iterable[tuple[str | int, Any]],
        ttl: TTL = None,
    ) -> bool:
        """Write every pair in *values* inside one MULTI/EXEC transaction.

        Keys and TTL are validated before anything is queued, and invalid
        input raises. Any other failure while encoding values or running
        the transaction discards it and returns ``False``: either every pair
        is written or none is.
        """
        items = values.items() if isinstance(values, Mapping) else validate_iterable(values, "values")
        seconds = resolve_ttl(ttl, self._default_ttl)
        entries = self._validate_entries(items)
        if not entries:
            return True

        try:
            if seconds > 0:
                commands = [(key, self._serializer.dumps(value)) for key, value in entries]
            else:
                commands = [(key, None) for key, _ in entries]
        except Exception as exc:
            logger.warning(
                "cache_transaction_discarded",
                keys=len(entries),
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return False

        with self._client.pipeline(transaction=True) as pipe:
            try:
                for key, payload in commands:
                    if payload is None:
                        pipe.delete(key)
                    else:
                        pipe.setex(key, seconds, payload)
                pipe.execute()
            except Exception as exc:
                pipe.reset()
                logger.warning(
                    "cache_transaction_discarded",
                    keys=len(entries),
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                return False

        return True

    def delete_multiple(self, keys: Iterable[str | int]) -> bool:
        """Remove several keys with a single DEL; succeeds whether or not they existed."""
        store_keys = [normalize_key(key) for key in validate_iterable(keys, "keys")]
        if not store_keys:
            return True

        self._client.delete(*store_keys)
        return True

    def has(self, key: str) -> bool:
        """Check whether *key* currently exists, without fetching its value."""
        validate_key(key)
        count = self._client.exists(key)
        return cast(bool, count > 0)

    @staticmethod
    def _validate_entries(items: Iterable[Any]) -> list[tuple[str, Any]]:
        entries: list[tuple[str, Any]] = []
        for item in items:
            if isinstance(item, (str, bytes, bytearray)):
                raise InvalidArgumentException(
                    "values must be a mapping or an iterable of (key, value) pairs",
                    context={"item": item},
                )
            try:
                key, value = item
            except (TypeError, ValueError):
                raise InvalidArgumentException(
                    "values must be a mapping or an iterable of (key, value) pairs",
                    context={"item": item},
                ) from None
            entries.append((normalize_key(key), value))
        return entries
