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
"""LoggingAdvicePostProcessor — swaps @logged objects for logging proxies."""

from __future__ import annotations

from typing import Any

from logadvice.aop.advice import LoggingAdvice, Sink, is_proxy
from logadvice.aop.decorators import is_logged, logged_interface
from logadvice.aop.render import Serializer


class LoggingAdvicePostProcessor:
    """Post-processor that wraps instances of ``@logged`` classes.

    ``before_init`` leaves objects untouched. ``after_init`` returns a
    logging proxy for instances of ``@logged`` classes (using the class's
    declared interface, if any) and the object itself otherwise.
    """

    def __init__(
        self,
        log_info: Sink | None = None,
        log_error: Sink | None = None,
        serialize: Serializer | None = None,
        scheduler: Any = None,
    ) -> None:
        self._log_info = log_info
        self._log_error = log_error
        self._serialize = serialize
        self._scheduler = scheduler
        self._wrapped_names: list[str] = []

    @property
    def wrapped_names(self) -> list[str]:
        """Names passed to ``after_init`` that were replaced by a proxy."""
        return list(self._wrapped_names)

    def before_init(self, bean: Any, bean_name: str) -> Any:
        return bean

    def after_init(self, bean: Any, bean_name: str) -> Any:
        """Wrap *bean* when its class is marked with ``@logged``."""
        if is_proxy(bean) or not is_logged(type(bean)):
            return bean

        proxy = LoggingAdvice.create(
            bean,
            self._log_info,
            self._log_error,
            self._serialize,
            self._scheduler,
            interface=logged_interface(type(bean)),
        )
        self._wrapped_names.append(bean_name)
        return proxy
