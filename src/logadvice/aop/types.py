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
"""AOP core types — invocation record and mutable parameter cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

V = TypeVar("V")


class ParameterDirection(Enum):
    """How a parameter flows across an intercepted call."""

    IN = "in"
    OUT = "out"
    REF = "ref"


class Ref(Generic[V]):
    """A mutable cell the callee may read and overwrite.

    The caller keeps the same cell, so ``cell.value`` after the call is
    whatever the wrapped member left in it::

        cell = Ref(0)
        counter.bump(cell)
        assert cell.value == 1
    """

    __slots__ = ("value",)

    direction = ParameterDirection.REF

    def __init__(self, value: V) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Out(Ref[V]):
    """A cell the callee is expected to fill; its initial value is optional."""

    __slots__ = ()

    direction = ParameterDirection.OUT

    def __init__(self, value: V | None = None) -> None:  # type: ignore[assignment]
        super().__init__(value)  # type: ignore[arg-type]


def direction_of(value: Any) -> ParameterDirection:
    """Return the direction implied by an argument value."""
    if isinstance(value, Ref):
        return value.direction
    return ParameterDirection.IN


@dataclass
class InvocationParameter:
    """One bound argument of an intercepted call.

    Attributes:
        name: Parameter name from the member's signature.
        direction: ``IN`` for plain values, ``OUT``/``REF`` for cells.
        value: The argument as passed by the caller (the cell itself for
            mutable parameters).
    """

    name: str
    direction: ParameterDirection
    value: Any

    @property
    def is_mutable(self) -> bool:
        return self.direction is not ParameterDirection.IN

    def current(self) -> Any:
        """The value readable right now (cell contents for mutable parameters)."""
        if self.is_mutable:
            return self.value.value
        return self.value


@dataclass
class Invocation:
    """Represents one intercepted member access.

    Attributes:
        target: The wrapped object.
        member_name: Method name, or ``get_<prop>`` / ``set_<prop>``.
        parameters: Bound arguments in signature order.
        return_value: The result (set after successful execution).
        exception: The fault raised by the wrapped member or its async handle.
    """

    target: Any
    member_name: str
    parameters: list[InvocationParameter] = field(default_factory=list)
    return_value: Any = None
    exception: BaseException | None = None

    @property
    def type_name(self) -> str:
        cls = type(self.target)
        return f"{cls.__module__}.{cls.__qualname__}"

    @property
    def mutable_parameters(self) -> list[InvocationParameter]:
        return [p for p in self.parameters if p.is_mutable]
