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
"""Value renderer — turns arbitrary values into text for log messages."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from logadvice.aop.types import Ref

_PRIMITIVES = (bool, int, float, complex, str)

Serializer = Callable[[Any], "str | None"]
RenderErrorHook = Callable[[Any, Exception], None]


class ValueRenderer:
    """Render values safely, isolating serializer failures.

    * ``None`` renders as ``"null"``.
    * ``bool``, numbers and ``str`` render with ``str()``.
    * Enum members render as their name.
    * Everything else goes through *serialize*; when it is absent or returns
      ``None`` the value's ``str()`` is used. If *serialize* raises, the
      ``str()`` form is used instead and *on_error* (if given) is told.

    ``Ref``/``Out`` cells render their current contents.
    """

    __slots__ = ("_serialize", "_on_error")

    def __init__(self, serialize: Serializer | None = None, on_error: RenderErrorHook | None = None) -> None:
        self._serialize = serialize
        self._on_error = on_error

    def render(self, value: Any) -> str:
        if isinstance(value, Ref):
            value = value.value

        if value is None:
            return "null"

        if isinstance(value, Enum):
            return value.name

        if isinstance(value, _PRIMITIVES):
            return str(value)

        if self._serialize is None:
            return str(value)

        try:
            text = self._serialize(value)
        except Exception as exc:
            if self._on_error is not None:
                self._on_error(value, exc)
            return str(value)

        return str(value) if text is None else text

    __call__ = render
