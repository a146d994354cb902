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
"""LoggingAdviceFactory — builds logging proxies wired to a configured logger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from logadvice.aop.advice import LoggingAdvice
from logadvice.aop.render import Serializer
from logadvice.core.config import Config, config_properties
from logadvice.logging.port import LoggingPort
from logadvice.logging.properties import LoggingProperties
from logadvice.logging.sinks import create_logging_adapter, logger_sinks

T = TypeVar("T")


@config_properties(prefix="logadvice.advice")
@dataclass
class AdviceProperties:
    """Settings for proxies built by :class:`LoggingAdviceFactory`."""

    logger_name: str = "logadvice"
    info_prefix: str = ""
    error_prefix: str = ""


class LoggingAdviceFactory:
    """Create logging proxies whose sinks write to the configured logger.

    Usage::

        factory = LoggingAdviceFactory(Config.from_file("logadvice.yaml"))
        calculator = factory.create(SimpleCalculator(), interface=Calculator)
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        logging_port: LoggingPort | None = None,
        serialize: Serializer | None = None,
    ) -> None:
        self._config = config or Config()
        self._logging_properties = self._config.bind(LoggingProperties)
        self._properties = self._config.bind(AdviceProperties)
        self._logging = logging_port or create_logging_adapter(self._config)
        self._serialize = serialize
        self._logger = self._logging.get_logger(self._properties.logger_name)
        self._log_info, self._log_error = logger_sinks(
            self._logger,
            self._properties.info_prefix,
            self._properties.error_prefix,
        )

    @property
    def properties(self) -> AdviceProperties:
        return self._properties

    @property
    def logging_properties(self) -> LoggingProperties:
        return self._logging_properties

    @property
    def logger(self) -> Any:
        return self._logger

    def create(self, wrapped: T, *, interface: type | None = None, scheduler: Any = None) -> T:
        """Wrap *wrapped* in a proxy logging through the configured logger."""
        return LoggingAdvice.create(
            wrapped,
            self._log_info,
            self._log_error,
            self._serialize,
            scheduler,
            interface=interface,
        )
