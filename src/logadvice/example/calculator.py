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
"""Calculator demonstration: manual logging versus a logging proxy."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from logadvice.aop.advice import LoggingAdvice


@runtime_checkable
class MessageLogger(Protocol):
    def log(self, message: str) -> None: ...


@runtime_checkable
class Calculator(Protocol):
    def add(self, a: int, b: int) -> int: ...

    def subtract(self, a: int, b: int) -> int: ...


class ConsoleLogger:
    """Prints every message to stdout."""

    def log(self, message: str) -> None:
        print(message)


class SimpleCalculator:
    def add(self, a: int, b: int) -> int:
        return a + b

    def subtract(self, a: int, b: int) -> int:
        return a - b


class CalculatorWithoutAdvice:
    """The same calculator with logging written by hand into every method."""

    def __init__(self, logger: MessageLogger) -> None:
        self._logger = logger

    def add(self, a: int, b: int) -> int:
        self._logger.log(f"Adding {a} + {b}")
        result = a + b
        self._logger.log(f"Result is {result}")
        return result

    def subtract(self, a: int, b: int) -> int:
        self._logger.log(f"Subtracting {a} - {b}")
        result = a - b
        self._logger.log(f"Result is {result}")
        return result


class CalculatorFactory:
    """Builds calculators whose calls are logged through *logger*."""

    def __init__(self, logger: MessageLogger) -> None:
        self._logger = logger

    def create_calculator(self) -> Calculator:
        return LoggingAdvice.create(
            SimpleCalculator(),
            lambda s: self._logger.log("Info:" + s),
            lambda s: self._logger.log("Error:" + s),
            lambda o: None if o is None else str(o),
            interface=Calculator,
        )
