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
"""Tests for LoggingAdvice — synchronous call protocol and fault transparency."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import pytest

import logadvice.aop.advice as advice_module
from logadvice.aop.advice import LoggingAdvice, advice_of, create, is_proxy, unwrap
from logadvice.aop.scheduling import InlineScheduler
from logadvice.kernel.exceptions import InvalidArgumentException

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class Data:
    def __init__(self, prop: str) -> None:
        self.prop = prop


@runtime_checkable
class Contract(Protocol):
    def void_method(self) -> None: ...

    def describe(self, int_param: int) -> str: ...

    def transform(self, data_param: Data) -> Data: ...

    def greet(self, name: str, punctuation: str = "!") -> str: ...

    def explode(self) -> None: ...

    def explode_chained(self) -> None: ...


class FakeService:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self.raised: Exception | None = None

    def void_method(self) -> None:
        self.calls.append("void_method")

    def describe(self, int_param: int) -> str:
        self.calls.append(f"describe:{int_param}")
        return "Result12345"

    def transform(self, data_param: Data) -> Data:
        self.calls.append(f"transform:{data_param.prop}")
        return Data("Result12345")

    def greet(self, name: str, punctuation: str = "!") -> str:
        return f"hello {name}{punctuation}"

    def explode(self) -> None:
        self.raised = ValueError("boom")
        raise self.raised

    def explode_chained(self) -> None:
        try:
            raise KeyError("inner-cause")
        except KeyError as exc:
            raise RuntimeError("outer") from exc


def _proxy(svc: object, info: list[str], errors: list[str], serialize=str) -> Contract:
    return create(svc, info.append, errors.append, serialize, InlineScheduler(), interface=Contract)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_none_wrapped_is_rejected(self) -> None:
        with pytest.raises(InvalidArgumentException) as excinfo:
            LoggingAdvice.create(None, print, print, str)
        assert excinfo.value.code == "ADVICE_WRAPPED"

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            create(None)

    def test_sinks_and_serializer_are_optional(self) -> None:
        proxy = create(FakeService(), interface=Contract)
        assert proxy.describe(1) == "Result12345"

    def test_proxy_implements_interface(self) -> None:
        proxy = _proxy(FakeService(), [], [])
        assert isinstance(proxy, Contract)
        assert is_proxy(proxy)

    def test_unwrap_returns_same_object(self) -> None:
        svc = FakeService()
        proxy = _proxy(svc, [], [])
        assert unwrap(proxy) is svc
        assert advice_of(proxy).wrapped is svc

    def test_advice_of_rejects_plain_objects(self) -> None:
        with pytest.raises(InvalidArgumentException):
            advice_of(FakeService())

    def test_proxy_without_interface_mirrors_concrete_type(self) -> None:
        info: list[str] = []
        proxy = create(FakeService(), info.append)
        assert proxy.describe(3) == "Result12345"
        assert not isinstance(proxy, FakeService)
        assert len(info) == 2

    def test_proxy_types_are_cached(self) -> None:
        first = _proxy(FakeService(), [], [])
        second = _proxy(FakeService(), [], [])
        assert type(first) is type(second)


# ---------------------------------------------------------------------------
# Successful calls
# ---------------------------------------------------------------------------


class TestSuccessfulCalls:
    def test_void_method_logs_before_and_after(self) -> None:
        info: list[str] = []
        errors: list[str] = []
        svc = FakeService()

        _proxy(svc, info, errors).void_method()

        assert svc.calls == ["void_method"]
        assert len(info) == 2
        assert "void_method executing" in info[0]
        assert "void_method executed" in info[1]
        assert "Output:\nnull" in info[1]
        assert errors == []

    def test_parameters_and_result_are_logged(self) -> None:
        info: list[str] = []
        errors: list[str] = []

        result = _proxy(FakeService(), info, errors).describe(12345)

        assert result == "Result12345"
        assert len(info) == 2
        assert "int_param:12345" in info[0]
        assert "Result12345" in info[1]
        assert "int_param:12345" in info[1]
        assert errors == []

    def test_class_parameter_and_result_use_serializer(self) -> None:
        info: list[str] = []
        errors: list[str] = []
        proxy = _proxy(FakeService(), info, errors, serialize=lambda o: o.prop)

        result = proxy.transform(Data("Parameter12345"))

        assert result.prop == "Result12345"
        assert "data_param:Parameter12345" in info[0]
        assert "data_param:Parameter12345" in info[1]
        assert "Result12345" in info[1]
        assert errors == []

    def test_keyword_and_default_arguments_are_bound(self) -> None:
        info: list[str] = []
        proxy = _proxy(FakeService(), info, [])

        assert proxy.greet(name="bob") == "hello bob!"
        assert "name:bob" in info[0]
        assert "punctuation:!" in info[0]

    def test_result_identity_is_preserved(self) -> None:
        expected = Data("same")

        class Holder:
            def transform(self, data_param: Data) -> Data:
                return expected

        proxy = create(Holder())
        assert proxy.transform(Data("x")) is expected

    def test_message_names_wrapped_type(self) -> None:
        info: list[str] = []
        _proxy(FakeService(), info, []).void_method()

        expected = f"Class {FakeService.__module__}.FakeService"
        assert info[0].startswith(expected)
        assert info[1].startswith(expected)

    def test_non_surface_attributes_are_forwarded_without_logging(self) -> None:
        info: list[str] = []
        svc = FakeService()
        proxy = _proxy(svc, info, [])

        proxy.void_method()
        assert proxy.calls == ["void_method"]
        assert len(info) == 2

    def test_repr_matches_wrapped(self) -> None:
        svc = FakeService()
        assert repr(_proxy(svc, [], [])) == repr(svc)


# ---------------------------------------------------------------------------
# Faults
# ---------------------------------------------------------------------------


class TestFaults:
    def test_original_exception_reaches_caller(self) -> None:
        info: list[str] = []
        errors: list[str] = []
        svc = FakeService()

        with pytest.raises(ValueError, match="boom") as excinfo:
            _proxy(svc, info, errors).explode()

        assert excinfo.value is svc.raised
        assert len(info) == 1
        assert "explode executing" in info[0]
        assert len(errors) == 1
        assert "Method explode threw exception" in errors[0]
        assert "boom" in errors[0]

    def test_error_entry_contains_original_frames_only(self) -> None:
        errors: list[str] = []

        with pytest.raises(ValueError):
            _proxy(FakeService(), [], errors).explode()

        assert "Stack Trace:" in errors[0]
        assert "test_advice.py" in errors[0]
        assert "in explode" in errors[0]
        assert advice_module.__file__ not in errors[0]

    def test_chained_causes_are_described(self) -> None:
        errors: list[str] = []

        with pytest.raises(RuntimeError, match="outer") as excinfo:
            _proxy(FakeService(), [], errors).explode_chained()

        assert isinstance(excinfo.value.__cause__, KeyError)
        assert "Inner Exception" in errors[0]
        assert "inner-cause" in errors[0]

    def test_failing_error_sink_does_not_mask_fault(self) -> None:
        svc = FakeService()

        def broken_sink(message: str) -> None:
            raise OSError("sink down")

        proxy = create(svc, None, broken_sink, interface=Contract)
        with pytest.raises(ValueError) as excinfo:
            proxy.explode()
        assert excinfo.value is svc.raised

    def test_base_exceptions_pass_through_unlogged(self) -> None:
        errors: list[str] = []

        class Exiting:
            def stop(self) -> None:
                raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            create(Exiting(), None, errors.append).stop()
        assert errors == []


# ---------------------------------------------------------------------------
# Logging failures never break the call
# ---------------------------------------------------------------------------


class TestLoggingResilience:
    def test_serializer_failure_falls_back_to_str(self) -> None:
        info: list[str] = []
        errors: list[str] = []

        def broken(value: object) -> str:
            raise RuntimeError("cannot serialize")

        proxy = _proxy(FakeService(), info, errors, serialize=broken)
        result = proxy.transform(Data("Parameter12345"))

        assert result.prop == "Result12345"
        assert len(info) == 2
        assert "Data" in info[0]
        assert "Data" in info[1]
        # data_param before; result and data_param after
        assert len(errors) == 3
        assert all(e.startswith("Serializer failed for Data") for e in errors)

    def test_failing_info_sink_is_reported_to_error_sink(self) -> None:
        errors: list[str] = []

        def broken_info(message: str) -> None:
            raise OSError("disk full")

        proxy = create(FakeService(), broken_info, errors.append, interface=Contract)

        assert proxy.describe(1) == "Result12345"
        assert len(errors) == 2
        assert all("Method describe logging failed" in e for e in errors)
        assert "disk full" in errors[0]

    def test_failing_sinks_everywhere_still_return_result(self) -> None:
        def broken(message: str) -> None:
            raise OSError("down")

        proxy = create(FakeService(), broken, broken, interface=Contract)
        assert proxy.describe(1) == "Result12345"


# ---------------------------------------------------------------------------
# Special members
# ---------------------------------------------------------------------------


class TestDunderMembers:
    def test_len_and_call_are_intercepted(self) -> None:
        info: list[str] = []

        class Bag:
            def __len__(self) -> int:
                return 3

            def __call__(self, item: str) -> str:
                return item.upper()

        proxy = create(Bag(), info.append)

        assert len(proxy) == 3
        assert proxy("x") == "X"
        assert "Method __len__ executing" in info[0]
        assert "item:x" in info[2]
