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
"""Value serializers: turn cached values into opaque byte payloads and back."""

from __future__ import annotations

import json
import pickle
from typing import Any, Protocol, runtime_checkable

from simplecache.kernel.exceptions import InvalidArgumentException, SerializationException


@runtime_checkable
class Serializer(Protocol):
    """Encode/decode pair used by cache adapters.

    The only contract is "equal in, equal out": ``loads(dumps(v)) == v``
    for every value the serializer accepts.
    """

    def dumps(self, value: Any) -> bytes: ...

    def loads(self, payload: bytes) -> Any: ...


class PickleSerializer:
    """Default serializer; round-trips arbitrary picklable object graphs and raw bytes.

    Only read payloads written by a trusted producer: unpickling runs code.
    """

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self._protocol = protocol

    def dumps(self, value: Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except Exception as exc:
            raise SerializationException(
                f"Cannot serialize value of type {type(value).__name__}: {exc}",
                context={"type": type(value).__name__},
            ) from exc

    def loads(self, payload: bytes) -> Any:
        try:
            return pickle.loads(payload)
        except (
            pickle.UnpicklingError,
            EOFError,
            ValueError,
            KeyError,
            IndexError,
            TypeError,
            AttributeError,
            ImportError,
        ) as exc:
            raise SerializationException(f"Cannot deserialize cached payload: {exc}") from exc


class JsonSerializer:
    """UTF-8 JSON serializer for payloads shared with non-Python readers.

    Accepts JSON-compatible values only; tuples come back as lists.
    """

    def dumps(self, value: Any) -> bytes:
        try:
            return json.dumps(value).encode("utf-8")
        except (TypeError, ValueError, RecursionError) as exc:
            raise SerializationException(
                f"Cannot serialize value of type {type(value).__name__}: {exc}",
                context={"type": type(value).__name__},
            ) from exc

    def loads(self, payload: bytes) -> Any:
        try:
            return json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as exc:
            raise SerializationException(f"Cannot deserialize cached payload: {exc}") from exc


_SERIALIZERS: dict[str, type[PickleSerializer] | type[JsonSerializer]] = {
    "pickle": PickleSerializer,
    "json": JsonSerializer,
}


def create_serializer(name: str) -> Serializer:
    """Build a serializer by its configuration name (``pickle`` or ``json``)."""
    try:
        serializer_cls = _SERIALIZERS[name.lower()]
    except KeyError:
        raise InvalidArgumentException(
            f"Unknown serializer '{name}', expected one of: {', '.join(sorted(_SERIALIZERS))}",
            context={"serializer": name},
        ) from None
    return serializer_cls()
