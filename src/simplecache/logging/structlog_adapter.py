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
"""Structlog setup for the events cache adapters emit.

Adapters log through ``structlog.get_logger("simplecache.cache")`` with
event names such as ``cache_set_failed`` and keyword fields. This module
decides how those events are rendered and which levels reach stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from simplecache.config.properties.logging import LoggingProperties
from simplecache.core.config import Config


def _split_levels(level: str | dict[str, Any]) -> tuple[str, dict[str, str]]:
    """Return the root level and the per-logger overrides.

    A plain string (e.g. from ``SIMPLECACHE_LOGGING_LEVEL``) sets the root
    level only.
    """
    if isinstance(level, str):
        return level.upper(), {}
    overrides = {name: str(value).upper() for name, value in level.items()}
    return overrides.pop("root", "INFO"), overrides


def _build_processors(fmt: str) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if fmt == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


class StructlogAdapter:
    """Configures structlog from the ``simplecache.logging`` section.

    Reconfiguring is allowed at any time; loggers are not cached, so events
    from module-level loggers follow the latest configuration.
    """

    def __init__(self) -> None:
        self._root_level = "INFO"
        self._module_levels: dict[str, str] = {}
        self._format = "console"

    @property
    def root_level(self) -> str:
        return self._root_level

    @property
    def module_levels(self) -> dict[str, str]:
        return dict(self._module_levels)

    @property
    def format(self) -> str:
        return self._format

    def configure(self, config: Config) -> None:
        props = config.bind(LoggingProperties)
        self._root_level, self._module_levels = _split_levels(props.level)
        self._format = str(props.format).lower()

        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=getattr(logging, self._root_level, logging.INFO),
            force=True,
        )
        structlog.configure(
            processors=_build_processors(self._format),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        for name, level in self._module_levels.items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the stdlib level of one logger; unknown level names mean INFO."""
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))
