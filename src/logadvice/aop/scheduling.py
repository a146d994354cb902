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
"""Schedulers that run completion logging for asynchronous results.

The engine never reads ambient state at call time: the scheduler is
captured once, when the proxy is built.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from concurrent.futures import Executor
from typing import Any, Protocol, runtime_checkable

from logadvice.kernel.exceptions import InvalidArgumentException

Callback = Callable[[], None]


@runtime_checkable
class LoggingScheduler(Protocol):
    """Port for running deferred logging callbacks."""

    def schedule(self, callback: Callback) -> None:
        """Arrange for *callback* to run."""
        ...


class InlineScheduler:
    """Run callbacks immediately on whichever thread settles the result."""

    def schedule(self, callback: Callback) -> None:
        callback()

    def __repr__(self) -> str:
        return "InlineScheduler()"


class EventLoopScheduler:
    """Run callbacks on an asyncio event loop.

    Callbacks only run once the loop gets control again, so a caller that
    never yields will not see async completion logs.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def schedule(self, callback: Callback) -> None:
        self._loop.call_soon_threadsafe(callback)

    def __repr__(self) -> str:
        return f"EventLoopScheduler({self._loop!r})"


class ExecutorScheduler:
    """Submit callbacks to a :class:`concurrent.futures.Executor`."""

    def __init__(self, executor: Executor) -> None:
        self._executor = executor

    def schedule(self, callback: Callback) -> None:
        self._executor.submit(callback)


class CallableScheduler:
    """Adapt a plain ``fn(callback)`` to the scheduler port."""

    def __init__(self, submit: Callable[[Callback], Any]) -> None:
        self._submit = submit

    def schedule(self, callback: Callback) -> None:
        self._submit(callback)


def capture_scheduler() -> LoggingScheduler:
    """Capture the scheduler for the current context.

    Inside a running event loop that loop is used; otherwise callbacks run
    inline.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return InlineScheduler()
    return EventLoopScheduler(loop)


def as_scheduler(obj: Any) -> LoggingScheduler:
    """Coerce *obj* into a :class:`LoggingScheduler`.

    ``None`` captures the current context; event loops, executors and plain
    callables are wrapped in the matching adapter.
    """
    if obj is None:
        return capture_scheduler()
    if isinstance(obj, LoggingScheduler):
        return obj
    if isinstance(obj, asyncio.AbstractEventLoop):
        return EventLoopScheduler(obj)
    if isinstance(obj, Executor):
        return ExecutorScheduler(obj)
    if callable(obj):
        return CallableScheduler(obj)
    raise InvalidArgumentException(
        f"Cannot use {type(obj).__name__} as a logging scheduler",
        code="ADVICE_SCHEDULER",
    )
