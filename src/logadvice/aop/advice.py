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
"""LoggingAdvice — transparent logging proxy around any capability set.

Every member access made through the proxy is logged before it runs,
logged again after it succeeds, and logged to the error sink when it
fails. The caller always gets back exactly what the wrapped member
returned or raised.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import functools
import inspect
import logging
import types
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

from logadvice.aop.messages import format_after, format_before, format_exception
from logadvice.aop.render import Serializer, ValueRenderer
from logadvice.aop.scheduling import LoggingScheduler, as_scheduler
from logadvice.aop.types import Invocation, InvocationParameter, direction_of
from logadvice.kernel.exceptions import InvalidArgumentException

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sink = Callable[[str], None]

_ADVICE_ATTR = "_logadvice_advice"
_MEMBERS_ATTR = "_logadvice_members"

# Frames of this module are left out of logged stack traces.
_OWN_FILES = frozenset({__file__})

_FORWARDED_DUNDERS = frozenset(
    {
        "__call__",
        "__bool__",
        "__len__",
        "__iter__",
        "__next__",
        "__reversed__",
        "__contains__",
        "__getitem__",
        "__setitem__",
        "__delitem__",
        "__eq__",
        "__ne__",
        "__lt__",
        "__le__",
        "__gt__",
        "__ge__",
        "__hash__",
        "__enter__",
        "__exit__",
        "__aenter__",
        "__aexit__",
        "__aiter__",
        "__anext__",
        "__await__",
    }
)

_FUTURE_TYPES = (asyncio.Future, concurrent.futures.Future)


class LoggingAdvice:
    """Before / after / error logging around every call to *wrapped*.

    Args:
        wrapped: The object whose members are intercepted. Must not be ``None``.
        log_info: Sink for before and after entries.
        log_error: Sink for error entries and logging failures.
        serialize: Renders non-primitive values; failures fall back to ``str()``.
        scheduler: Where completion logging for async results runs. Accepts a
            :class:`LoggingScheduler`, an event loop, an executor or a
            ``fn(callback)``. Defaults to the context active right now.

    Use :meth:`create` (or :func:`create`) to get a proxy; the advice itself
    only drives the logging protocol.
    """

    __slots__ = ("_wrapped", "_log_info", "_log_error", "_renderer", "_scheduler")

    def __init__(
        self,
        wrapped: Any,
        log_info: Sink | None = None,
        log_error: Sink | None = None,
        serialize: Serializer | None = None,
        scheduler: Any = None,
    ) -> None:
        if wrapped is None:
            raise InvalidArgumentException(
                "wrapped must not be None",
                code="ADVICE_WRAPPED",
                context={"argument": "wrapped"},
            )
        self._wrapped = wrapped
        self._log_info = log_info
        self._log_error = log_error
        self._renderer = ValueRenderer(serialize, on_error=self._on_render_error)
        self._scheduler: LoggingScheduler = as_scheduler(scheduler)

    @classmethod
    def create(
        cls,
        wrapped: T,
        log_info: Sink | None = None,
        log_error: Sink | None = None,
        serialize: Serializer | None = None,
        scheduler: Any = None,
        *,
        interface: type | None = None,
    ) -> T:
        """Wrap *wrapped* in a logging proxy.

        When *interface* is given the proxy subclasses it, so
        ``isinstance(proxy, interface)`` holds. Otherwise the public surface
        of ``type(wrapped)`` is mirrored.

        The surface is read from the class, not the instance. Attributes
        that exist only on the wrapped instance (neither declared on the
        class nor annotated) are read and written through the proxy without
        ``get_<name>`` / ``set_<name>`` entries. Annotate them on the class
        or the interface to have them logged.
        """
        advice = cls(wrapped, log_info, log_error, serialize, scheduler)
        return advice.proxy(interface)

    @property
    def wrapped(self) -> Any:
        return self._wrapped

    @property
    def scheduler(self) -> LoggingScheduler:
        return self._scheduler

    def proxy(self, interface: type | None = None) -> Any:
        if interface is None:
            proxy_cls = proxy_type_for(type(self._wrapped), False)
        else:
            proxy_cls = proxy_type_for(interface, True)
        instance = object.__new__(proxy_cls)
        object.__setattr__(instance, _ADVICE_ATTR, self)
        return instance

    # ------------------------------------------------------------------
    # Member entry points
    # ------------------------------------------------------------------

    def call(self, name: str, args: tuple, kwargs: dict[str, Any]) -> Any:
        """Intercept a method call."""
        member = getattr(self._wrapped, name)
        return self._intercept(name, member, args, kwargs, member)

    def get_property(self, name: str) -> Any:
        """Intercept a property read, logged as ``get_<name>``."""
        return self._intercept(f"get_{name}", functools.partial(getattr, self._wrapped, name), (), {}, None)

    def set_property(self, name: str, value: Any) -> None:
        """Intercept a property write, logged as ``set_<name>``."""
        self._intercept(
            f"set_{name}",
            functools.partial(setattr, self._wrapped, name),
            (value,),
            {},
            _property_setter,
        )

    # ------------------------------------------------------------------
    # Protocol
    # ------------------------------------------------------------------

    def _intercept(
        self,
        member_name: str,
        member: Callable[..., Any],
        args: tuple,
        kwargs: dict[str, Any],
        signature_source: Callable[..., Any] | None,
    ) -> Any:
        invocation = Invocation(target=self._wrapped, member_name=member_name)

        # 1. Before (best-effort)
        try:
            invocation.parameters = bind_parameters(signature_source, args, kwargs)
            self._emit_info(format_before(invocation, self._renderer))
        except Exception as exc:
            self._report_logging_failure(exc, invocation)

        # 2. Invoke
        try:
            result = member(*args, **kwargs)
        except Exception as exc:
            invocation.exception = exc
            self._log_exception(invocation)
            raise

        # 3. Classify
        if inspect.iscoroutine(result):
            return self._observe(invocation, result)

        if isinstance(result, _FUTURE_TYPES):
            result.add_done_callback(functools.partial(self._on_future_done, invocation))
            return result

        # 4. After (best-effort, inline)
        invocation.return_value = result
        self._log_after(invocation)
        return result

    async def _observe(self, invocation: Invocation, coro: Coroutine[Any, Any, Any]) -> Any:
        try:
            result = await coro
        except Exception as exc:
            invocation.exception = exc
            self._schedule(self._log_exception, invocation)
            raise
        invocation.return_value = result
        self._schedule(self._log_after, invocation)
        return result

    def _on_future_done(self, invocation: Invocation, future: Any) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            invocation.exception = exc
            self._schedule(self._log_exception, invocation)
        else:
            invocation.return_value = future.result()
            self._schedule(self._log_after, invocation)

    def _schedule(self, fn: Callable[[Invocation], None], invocation: Invocation) -> None:
        try:
            self._scheduler.schedule(functools.partial(fn, invocation))
        except Exception:
            logger.debug("Could not schedule completion logging for %s", invocation.member_name, exc_info=True)

    # ------------------------------------------------------------------
    # Sinks
    # ------------------------------------------------------------------

    def _emit_info(self, message: str) -> None:
        if self._log_info is not None:
            self._log_info(message)

    def _emit_error(self, message: str) -> None:
        if self._log_error is not None:
            self._log_error(message)

    def _log_after(self, invocation: Invocation) -> None:
        try:
            self._emit_info(format_after(invocation, self._renderer))
        except Exception as exc:
            self._report_logging_failure(exc, invocation)

    def _log_exception(self, invocation: Invocation) -> None:
        # Never raises: the fault being propagated must stay the caller's.
        if invocation.exception is None:
            return
        try:
            self._emit_error(
                format_exception(invocation.type_name, invocation.member_name, invocation.exception, _OWN_FILES)
            )
        except Exception:
            logger.debug("Error sink failed for %s", invocation.member_name, exc_info=True)

    def _report_logging_failure(self, exc: Exception, invocation: Invocation) -> None:
        try:
            self._emit_error(
                format_exception(invocation.type_name, invocation.member_name, exc, event="logging failed")
            )
        except Exception:
            logger.debug("Error sink failed for %s", invocation.member_name, exc_info=True)

    def _on_render_error(self, value: Any, exc: Exception) -> None:
        try:
            self._emit_error(f"Serializer failed for {type(value).__qualname__}: {type(exc).__qualname__}: {exc}\n")
        except Exception:
            logger.debug("Error sink failed while reporting a serializer failure", exc_info=True)

    def __repr__(self) -> str:
        return f"LoggingAdvice({self._wrapped!r}, scheduler={self._scheduler!r})"


def create(
    wrapped: T,
    log_info: Sink | None = None,
    log_error: Sink | None = None,
    serialize: Serializer | None = None,
    scheduler: Any = None,
    *,
    interface: type | None = None,
) -> T:
    """Shortcut for :meth:`LoggingAdvice.create`."""
    return LoggingAdvice.create(wrapped, log_info, log_error, serialize, scheduler, interface=interface)


def advice_of(proxy: Any) -> LoggingAdvice:
    """Return the :class:`LoggingAdvice` behind *proxy*."""
    try:
        return object.__getattribute__(proxy, _ADVICE_ATTR)
    except AttributeError:
        raise InvalidArgumentException(f"{type(proxy).__name__} is not a logging proxy") from None


def unwrap(proxy: Any) -> Any:
    """Return the object wrapped by *proxy*."""
    return advice_of(proxy).wrapped


def is_proxy(obj: Any) -> bool:
    return isinstance(getattr(type(obj), _MEMBERS_ATTR, None), frozenset)


# ---------------------------------------------------------------------------
# Parameter binding
# ---------------------------------------------------------------------------


def _property_setter(value: Any) -> None:
    """Signature template for ``set_<name>`` invocations."""


def bind_parameters(func: Callable[..., Any] | None, args: tuple, kwargs: dict[str, Any]) -> list[InvocationParameter]:
    """Pair call arguments with parameter names from *func*'s signature.

    Falls back to ``arg0``, ``arg1``, ... (plus keyword names) when the
    signature is unavailable or the arguments do not bind.
    """
    if func is not None:
        try:
            bound = inspect.signature(func).bind(*args, **kwargs)
        except (TypeError, ValueError):
            pass
        else:
            bound.apply_defaults()
            return [InvocationParameter(name, direction_of(value), value) for name, value in bound.arguments.items()]

    parameters = [InvocationParameter(f"arg{i}", direction_of(value), value) for i, value in enumerate(args)]
    parameters.extend(InvocationParameter(name, direction_of(value), value) for name, value in kwargs.items())
    return parameters


# ---------------------------------------------------------------------------
# Proxy type generation
# ---------------------------------------------------------------------------


@functools.cache
def proxy_type_for(interface: type, inherit: bool) -> type:
    """Build (once) the proxy class exposing *interface*'s public surface.

    Methods get a forwarder that runs the call protocol; properties, plain
    class attributes and annotated attributes get an intercepted property.
    With *inherit* the proxy subclasses *interface*.
    """
    namespace: dict[str, Any] = {
        "__slots__": (_ADVICE_ATTR,),
        "__module__": interface.__module__,
        "__doc__": interface.__doc__,
    }
    members: list[str] = []

    for name, attr in _surface(interface):
        if attr is None:
            # e.g. ``__hash__ = None`` on classes defining ``__eq__``
            namespace[name] = None
            continue
        members.append(name)
        if isinstance(attr, property):
            namespace[name] = _property_forwarder(name, attr.fset is not None, attr.__doc__)
        elif attr is _DATA_MEMBER or not callable(_unwrap_descriptor(attr)) or inspect.isclass(attr):
            namespace[name] = _property_forwarder(name, True, None)
        else:
            namespace[name] = _method_forwarder(name, attr)

    namespace[_MEMBERS_ATTR] = frozenset(members)
    namespace["__getattribute__"] = _forward_getattribute
    namespace["__setattr__"] = _forward_setattr
    namespace["__repr__"] = _forward_repr
    namespace["__str__"] = _forward_str

    bases = (interface,) if inherit else ()
    proxy_cls = types.new_class(
        f"{interface.__name__}LoggingProxy",
        bases,
        exec_body=lambda ns: ns.update(namespace),
    )
    proxy_cls.__qualname__ = f"{interface.__qualname__}LoggingProxy"
    if getattr(proxy_cls, "__abstractmethods__", None):
        proxy_cls.__abstractmethods__ = frozenset()  # type: ignore[attr-defined]
    return proxy_cls


_DATA_MEMBER = object()


def _surface(interface: type) -> list[tuple[str, Any]]:
    seen: dict[str, Any] = {}
    for name in dir(interface):
        if name.startswith("_") and name not in _FORWARDED_DUNDERS:
            continue
        attr = inspect.getattr_static(interface, name)
        if name in _FORWARDED_DUNDERS and getattr(object, name, None) is attr:
            continue
        seen[name] = attr

    # Annotation-only members, as declared on protocols.
    for klass in reversed(interface.__mro__):
        if klass is object:
            continue
        for name in inspect.get_annotations(klass):
            if not name.startswith("_") and name not in seen:
                seen[name] = _DATA_MEMBER
    return sorted(seen.items())


def _unwrap_descriptor(attr: Any) -> Any:
    if isinstance(attr, (staticmethod, classmethod)):
        return attr.__func__
    return attr


def _method_forwarder(name: str, original: Any) -> Callable[..., Any]:
    def forward(self: Any, *args: Any, **kwargs: Any) -> Any:
        return self._logadvice_advice.call(name, args, kwargs)

    if inspect.isfunction(original):
        forward = functools.wraps(original)(forward)
        forward.__isabstractmethod__ = False  # type: ignore[attr-defined]
        if inspect.iscoroutinefunction(original):
            inspect.markcoroutinefunction(forward)
    else:
        forward.__name__ = name
        forward.__qualname__ = name
    return forward


def _property_forwarder(name: str, settable: bool, doc: str | None) -> property:
    def fget(self: Any) -> Any:
        return self._logadvice_advice.get_property(name)

    def fset(self: Any, value: Any) -> None:
        self._logadvice_advice.set_property(name, value)

    return property(fget, fset if settable else None, doc=doc)


def _forward_getattribute(self: Any, name: str) -> Any:
    try:
        return object.__getattribute__(self, name)
    except AttributeError:
        # Surface members re-raise the wrapped member's own error object.
        if name == _ADVICE_ATTR or name in type(self)._logadvice_members:
            raise
    return getattr(object.__getattribute__(self, _ADVICE_ATTR).wrapped, name)


def _forward_setattr(self: Any, name: str, value: Any) -> None:
    if name in type(self)._logadvice_members:
        object.__setattr__(self, name, value)
    else:
        setattr(self._logadvice_advice.wrapped, name, value)


def _forward_repr(self: Any) -> str:
    return repr(self._logadvice_advice.wrapped)


def _forward_str(self: Any) -> str:
    return str(self._logadvice_advice.wrapped)
