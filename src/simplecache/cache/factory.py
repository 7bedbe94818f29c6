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
"""Build a Redis-backed cache from configuration."""

from __future__ import annotations

import redis
import structlog

from simplecache.cache.adapters.redis import RedisSimpleCache
from simplecache.cache.serialization import create_serializer
from simplecache.config.properties.cache import CacheProperties
from simplecache.core.config import Config

logger = structlog.get_logger("simplecache.cache")


def create_simple_cache(config: Config) -> RedisSimpleCache:
    """Create a :class:`RedisSimpleCache` from the ``simplecache.cache`` section.

    The Redis client is created here but owned by the caller, who closes it
    through ``cache.client.close()``. Connecting is lazy: no command is sent
    until the first cache operation.
    """
    props = config.bind(CacheProperties)
    serializer = create_serializer(props.serializer)
    client = redis.Redis.from_url(props.redis_url)

    logger.debug(
        "cache_created",
        redis_url=props.redis_url,
        default_ttl=props.default_ttl,
        serializer=props.serializer,
    )
    return RedisSimpleCache(client=client, default_ttl=props.default_ttl, serializer=serializer)
