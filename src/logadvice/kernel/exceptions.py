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
"""Exception hierarchy for logadvice.

All library exceptions inherit from LogAdviceException, mirroring the
code/context shape used across the rest of the package.

Faults raised by a wrapped object are never converted into these types;
they always reach the caller as the original exception object.
"""

from __future__ import annotations


class LogAdviceException(Exception):
    """Base exception for all logadvice errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "ADVICE_001").
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


class InvalidArgumentException(LogAdviceException, ValueError):
    """A required construction argument was missing or unusable."""


class ConfigurationException(LogAdviceException):
    """Configuration could not be loaded or bound."""
