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
"""Unified exception hierarchy for simplecache.

All library exceptions inherit from SimpleCacheException, so callers can
catch the base class or a specific subclass.

Categories:
- ValidationException: Malformed keys, TTLs and bulk-operation arguments
- InfrastructureException: Failures encoding or decoding cached payloads

Store failures are not wrapped: they surface as the Redis client's own
``redis.exceptions.RedisError``, or as a ``False`` return where the cache
contract asks for a success flag.
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class SimpleCacheException(Exception):
    """Base exception for all simplecache errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_KEY").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Validation Exceptions
# =============================================================================


class ValidationException(SimpleCacheException):
    """Input validation failures, raised before the store is contacted."""


class InvalidArgumentException(ValidationException):
    """An argument has an unsupported type or value (TTL, iterable, default TTL)."""

    def __init__(
        self,
        message: str,
        code: str | None = "INVALID_ARGUMENT",
        context: dict | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)


class InvalidKeyException(InvalidArgumentException):
    """A cache key is not a string, is empty, or contains a reserved character."""

    def __init__(
        self,
        message: str,
        code: str | None = "INVALID_KEY",
        context: dict | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(SimpleCacheException):
    """Infrastructure failures outside the store itself."""


class SerializationException(InfrastructureException):
    """A value could not be encoded to, or decoded from, a cache payload."""

    def __init__(
        self,
        message: str,
        code: str | None = "SERIALIZATION_ERROR",
        context: dict | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)
