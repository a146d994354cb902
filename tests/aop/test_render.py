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
"""Tests for ValueRenderer."""

from __future__ import annotations

from enum import Enum, IntEnum

from logadvice.aop.render import ValueRenderer
from logadvice.aop.types import Out, Ref


class Color(Enum):
    RED = "r"


class Level(IntEnum):
    HIGH = 3


class Point:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def __str__(self) -> str:
        return f"Point({self.x}, {self.y})"


class TestPrimitives:
    def test_none_renders_null(self) -> None:
        assert ValueRenderer().render(None) == "null"

    def test_scalars_use_str(self) -> None:
        renderer = ValueRenderer(lambda o: "serialized")
        assert renderer.render(True) == "True"
        assert renderer.render(12345) == "12345"
        assert renderer.render(1.5) == "1.5"
        assert renderer.render("text") == "text"

    def test_enum_members_render_by_name(self) -> None:
        renderer = ValueRenderer(lambda o: "serialized")
        assert renderer.render(Color.RED) == "RED"
        assert renderer.render(Level.HIGH) == "HIGH"


class TestSerializer:
    def test_objects_go_through_serializer(self) -> None:
        renderer = ValueRenderer(lambda p: f"{p.x}:{p.y}")
        assert renderer.render(Point(1, 2)) == "1:2"

    def test_missing_serializer_uses_str(self) -> None:
        assert ValueRenderer().render(Point(1, 2)) == "Point(1, 2)"

    def test_serializer_returning_none_uses_str(self) -> None:
        assert ValueRenderer(lambda o: None).render(Point(1, 2)) == "Point(1, 2)"

    def test_serializer_failure_falls_back_and_notifies(self) -> None:
        failures: list[tuple[object, Exception]] = []

        def broken(value: object) -> str:
            raise TypeError("not serializable")

        point = Point(3, 4)
        renderer = ValueRenderer(broken, on_error=lambda v, e: failures.append((v, e)))

        assert renderer.render(point) == "Point(3, 4)"
        assert len(failures) == 1
        assert failures[0][0] is point
        assert isinstance(failures[0][1], TypeError)

    def test_rendering_is_repeatable(self) -> None:
        renderer = ValueRenderer(lambda p: f"{p.x}:{p.y}")
        point = Point(5, 6)
        assert renderer.render(point) == renderer.render(point)

    def test_renderer_is_callable(self) -> None:
        assert ValueRenderer()(7) == "7"


class TestCells:
    def test_cells_render_their_contents(self) -> None:
        renderer = ValueRenderer(lambda p: f"{p.x}:{p.y}")
        assert renderer.render(Ref(Point(1, 1))) == "1:1"
        assert renderer.render(Out()) == "null"
        assert renderer.render(Ref(9)) == "9"
