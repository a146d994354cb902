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
"""logadvice logging — hexagonal logging port and adapters."""

from logadvice.logging.entries import split_entry
from logadvice.logging.port import LoggingPort
from logadvice.logging.properties import LoggingProperties
from logadvice.logging.sinks import create_logging_adapter, logger_sinks
from logadvice.logging.stdlib_adapter import AdviceJsonFormatter, StdlibLoggingAdapter
from logadvice.logging.structlog_adapter import StructlogAdapter, advice_fields

__all__ = [
    "AdviceJsonFormatter",
    "LoggingPort",
    "LoggingProperties",
    "StdlibLoggingAdapter",
    "StructlogAdapter",
    "advice_fields",
    "create_logging_adapter",
    "logger_sinks",
    "split_entry",
]
