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
"""StdlibLoggingAdapter — LoggingPort over the standard library ``logging`` module."""

from __future__ import annotations

import json
import logging
import sys

from logadvice.core.config import Config
from logadvice.logging.entries import split_entry
from logadvice.logging.properties import LoggingProperties

_CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class AdviceJsonFormatter(logging.Formatter):
    """One JSON object per record; advice entries are split into fields."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: dict[str, str] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
        }
        payload.update(split_entry(message) or {"event": message})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class StdlibLoggingAdapter:
    """LoggingPort using only stdlib logging.

    Selected with ``logadvice.logging.adapter: stdlib``. Loggers are plain
    :class:`logging.Logger` objects writing to one stdout handler.
    """

    def __init__(self) -> None:
        self._properties = LoggingProperties()

    @property
    def properties(self) -> LoggingProperties:
        return self._properties

    def configure(self, config: Config) -> None:
        self._properties = config.bind(LoggingProperties)

        handler = logging.StreamHandler(sys.stdout)
        if self._properties.format == "json":
            handler.setFormatter(AdviceJsonFormatter())
        else:
            handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        logging.basicConfig(handlers=[handler], level=self._properties.root_level, force=True)

        for name, level in self._properties.module_levels.items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))
