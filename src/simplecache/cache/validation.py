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
"""Argument validation for cache operations.

Every check here runs before a command is issued to the store, so a
rejected call leaves the store untouched.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone
from typing import Any

from dateutil.relativedelta import relativedelta

from simplecache.cache.types import TTL
from simplecache.kernel.exceptions import InvalidArgumentException, InvalidKeyException

RESERVED_CHARACTERS = "{}()/\\@:"

_RESERVED_RE = re.compile(r"[{}()/\\@:]")


def validate_key(key: Any) -> str:
    """Return *key* unchanged if it is a legal cache key.

    Raises:
        InvalidKeyException: If *key* is not a ``str``, is empty, or contains
            one of ``{}()/\\@:``.
    """
    if not isinstance(key, str):
        raise InvalidKeyException(
            f"Invalid key type {type(key).__name__}",
            context={"key": key},
        )

    if key == "":
        raise InvalidKeyException("Key must contain at least 1 character")

    match = _RESERVED_RE.search(key)
    if match is not None:
        raise InvalidKeyException(
            f"Illegal character in key '{match.group(0)}'",
            context={"key": key, "character": match.group(0)},
        )

    return key


def is_integer_key(key: Any) -> bool:
    """Integer keys (never ``bool``) cannot contain reserved characters."""
    return isinstance(key, int) and not isinstance(key, bool)


def normalize_key(key: Any) -> str:
    """Validate a key from a bulk operation and return its store form.

    Integer keys skip the grammar check and are stored under ``str(key)``.
    """
    if is_integer_key(key):
        return str(key)
    return validate_key(key)


def validate_iterable(values: Any, name: str = "keys") -> Iterable[Any]:
    """Return *values* if it is an iterable collection.

    ``str`` and ``bytes`` are iterable but never a collection of keys, so
    they are rejected too.
    """
    if isinstance(values, (str, bytes, bytearray)) or not isinstance(values, Iterable):
        raise InvalidArgumentException(
            f"{name} must be an iterable collection, got {type(values).__name__}",
            context={name: values},
        )
    return values


def validate_default_ttl(default_ttl: Any) -> int:
    if isinstance(default_ttl, bool) or not isinstance(default_ttl, int):
        raise InvalidArgumentException(
            f"Default TTL must be an integer number of seconds, got {type(default_ttl).__name__}",
            context={"default_ttl": default_ttl},
        )
    return default_ttl


def resolve_ttl(ttl: TTL, default_ttl: int, now: datetime | None = None) -> int:
    """Resolve *ttl* to a signed number of seconds.

    ``None`` resolves to *default_ttl* and an ``int`` to itself. A
    ``timedelta`` or ``relativedelta`` is added to the current wall-clock
    time and the difference taken, so calendar units such as months resolve
    to the concrete number of seconds they span right now.

    Raises:
        InvalidArgumentException: For any other type, including ``bool``
            and ``float``, or for a duration that overflows the date range.
    """
    if ttl is None:
        return default_ttl

    if isinstance(ttl, bool):
        raise InvalidArgumentException("Invalid TTL value", context={"ttl": ttl})

    if isinstance(ttl, int):
        return ttl

    if isinstance(ttl, (timedelta, relativedelta)):
        start = (now or datetime.now(timezone.utc)).replace(microsecond=0)
        try:
            expires = start + ttl
        except (OverflowError, ValueError):
            raise InvalidArgumentException(
                "TTL is out of the representable date range",
                context={"ttl": ttl},
            ) from None
        return int((expires - start).total_seconds())

    raise InvalidArgumentException("Invalid TTL value", context={"ttl": ttl})
