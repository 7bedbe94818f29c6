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
"""Simple cache protocol."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from simplecache.cache.types import TTL


@runtime_checkable
class SimpleCache(Protocol):
    """Standard key/value cache interface.

    Keys are non-empty strings free of ``{}()/\\@:``; bulk operations also
    accept integer keys. Malformed keys and TTLs raise
    :class:`~simplecache.kernel.exceptions.InvalidArgumentException` (or its
    subclass ``InvalidKeyException``) before the backend is touched.
    """

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool: ...

    def delete(self, key: str) -> bool: ...

    def clear(self) -> bool: ...

    def get_multiple(self, keys: Iterable[str | int], default: Any = None) -> dict[str | int, Any]: ...

    def set_multiple(
        self,
        values: Mapping[str | int, Any] | Iterable[tuple[str | int, Any]],
        ttl: TTL = None,
    ) -> bool: ...

    def delete_multiple(self, keys: Iterable[str | int]) -> bool: ...

    def has(self, key: str) -> bool: ...
