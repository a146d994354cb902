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
"""Message builders for the before / after / error log entries."""

from __future__ import annotations

import traceback
from collections.abc import Collection

from logadvice.aop.render import ValueRenderer
from logadvice.aop.types import Invocation


def format_before(invocation: Invocation, renderer: ValueRenderer) -> str:
    lines = [
        f"Class {invocation.type_name}",
        f"Method {invocation.member_name} executing",
    ]
    if invocation.parameters:
        lines.append("Parameters:")
        lines.extend(f"{p.name}:{renderer.render(p.current())}" for p in invocation.parameters)
    return "\n".join(lines) + "\n"


def format_after(invocation: Invocation, renderer: ValueRenderer) -> str:
    """Build the after entry; mutable parameters show their post-call value."""
    lines = [
        f"Class {invocation.type_name}",
        f"Method {invocation.member_name} executed",
        "Output:",
        renderer.render(invocation.return_value),
    ]
    if invocation.parameters:
        lines.append("Parameters:")
        lines.extend(f"{p.name}:{renderer.render(p.current())}" for p in invocation.parameters)
    return "\n".join(lines) + "\n"


def format_exception(
    type_name: str,
    member_name: str | None,
    exc: BaseException,
    skip_files: Collection[str] = (),
    event: str = "threw exception",
) -> str:
    lines = [
        f"Class {type_name}",
        f"Method {member_name or ''} {event}",
        describe_exception(exc, skip_files),
    ]
    return "\n".join(lines)


def describe_exception(exc: BaseException, skip_files: Collection[str] = ()) -> str:
    """Describe *exc* and every exception chained to it.

    Each link contributes a ``Message:`` line and a ``Stack Trace:`` block;
    links after the first are introduced by ``Inner Exception``. Frames
    from files in *skip_files* are left out of the trace.
    """
    parts: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if parts:
            parts.append("Inner Exception")
        parts.append(f"Message: {type(current).__qualname__}: {current}")
        parts.append(f"Stack Trace: {_format_trace(current, skip_files)}")
        current = _inner(current)
    return "\n".join(parts) + "\n"


def _inner(exc: BaseException) -> BaseException | None:
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def _format_trace(exc: BaseException, skip_files: Collection[str]) -> str:
    frames = [f for f in traceback.extract_tb(exc.__traceback__) if f.filename not in skip_files]
    return "".join(traceback.format_list(frames)).rstrip("\n")
