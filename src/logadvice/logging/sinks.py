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
"""Helpers turning a logger into the info/error sinks used by LoggingAdvice."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from logadvice.core.config import Config
from logadvice.logging.port import LoggingPort
from logadvice.logging.properties import LoggingProperties
from logadvice.logging.stdlib_adapter import StdlibLoggingAdapter
from logadvice.logging.structlog_adapter import StructlogAdapter

Sink = Callable[[str], None]


def logger_sinks(logger: Any, info_prefix: str = "", error_prefix: str = "") -> tuple[Sink, Sink]:
    """Return ``(log_info, log_error)`` callables that forward to *logger*."""

    def log_info(message: str) -> None:
        logger.info(info_prefix + message)

    def log_error(message: str) -> None:
        logger.error(error_prefix + message)

    return log_info, log_error


def create_logging_adapter(config: Config) -> LoggingPort:
    """Build and configure the adapter named by ``logadvice.logging.adapter``."""
    properties = config.bind(LoggingProperties)
    adapter: LoggingPort = StdlibLoggingAdapter() if properties.adapter == "stdlib" else StructlogAdapter()
    adapter.configure(config)
    return adapter
