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
"""Type aliases shared by the cache port and its adapters."""

from __future__ import annotations

from datetime import timedelta
from typing import TypeAlias

from dateutil.relativedelta import relativedelta

Duration: TypeAlias = timedelta | relativedelta
"""A relative span of time; ``relativedelta`` allows calendar units such as months."""

TTL: TypeAlias = int | Duration | None
"""Time-to-live: ``None`` for the configured default, whole seconds, or a duration."""
