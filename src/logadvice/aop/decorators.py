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
"""AOP decorators — @logged marks classes whose instances get a logging proxy."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar, overload

T = TypeVar("T", bound=type)

_LOGGED_ATTR = "__logadvice_logged__"
_INTERFACE_ATTR = "__logadvice_interface__"


@overload
def logged(cls: T, /) -> T: ...


@overload
def logged(*, interface: type | None = None) -> Callable[[T], T]: ...


def logged(cls: T | None = None, /, *, interface: type | None = None) -> T | Callable[[T], T]:
    """Mark a class so :class:`LoggingAdvicePostProcessor` wraps its instances.

    Sets the following metadata on the class:

    * ``__logadvice_logged__``    = True
    * ``__logadvice_interface__`` = *interface* (or ``None``)

    Usable bare (``@logged``) or with an interface
    (``@logged(interface=Calculator)``).
    """

    def decorator(klass: T) -> T:
        setattr(klass, _LOGGED_ATTR, True)
        setattr(klass, _INTERFACE_ATTR, interface)
        return klass

    if cls is not None:
        return decorator(cls)
    return decorator


def is_logged(cls: type) -> bool:
    return bool(cls.__dict__.get(_LOGGED_ATTR, False))


def logged_interface(cls: type) -> type | None:
    return cls.__dict__.get(_INTERFACE_ATTR)
