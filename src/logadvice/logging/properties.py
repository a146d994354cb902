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
"""Logging backend settings shared by the adapters and the advice factory."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from logadvice.core.config import config_properties


@config_properties(prefix="logadvice.logging")
class LoggingProperties(BaseModel):
    """Logging backend selection, validated at startup.

    ``level`` maps logger names to levels, with ``root`` for the root
    logger. A plain string (``LOGADVICE_LOGGING_LEVEL=DEBUG``) sets the root
    level only.
    """

    adapter: Literal["structlog", "stdlib"] = "structlog"
    format: Literal["console", "json"] = "console"
    level: dict[str, str] = Field(default_factory=lambda: {"root": "INFO"})

    @field_validator("adapter", "format", mode="before")
    @classmethod
    def _lowercase(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    @field_validator("level", mode="before")
    @classmethod
    def _expand_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"root": value.upper()}
        if isinstance(value, dict):
            return {str(name): str(level).upper() for name, level in value.items()}
        return value

    @property
    def root_level(self) -> str:
        return self.level.get("root", "INFO")

    @property
    def module_levels(self) -> dict[str, str]:
        return {name: level for name, level in self.level.items() if name != "root"}
