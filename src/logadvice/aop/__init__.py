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
"""Aspect-oriented logging: transparent proxies that log every call."""

from logadvice.aop.advice import LoggingAdvice, advice_of, create, is_proxy, unwrap
from logadvice.aop.decorators import logged
from logadvice.aop.factory import AdviceProperties, LoggingAdviceFactory
from logadvice.aop.post_processor import LoggingAdvicePostProcessor
from logadvice.aop.render import ValueRenderer
from logadvice.aop.scheduling import (
    CallableScheduler,
    EventLoopScheduler,
    ExecutorScheduler,
    InlineScheduler,
    LoggingScheduler,
    capture_scheduler,
)
from logadvice.aop.types import Invocation, InvocationParameter, Out, ParameterDirection, Ref

__all__ = [
    "AdviceProperties",
    "CallableScheduler",
    "EventLoopScheduler",
    "ExecutorScheduler",
    "InlineScheduler",
    "Invocation",
    "InvocationParameter",
    "LoggingAdvice",
    "LoggingAdviceFactory",
    "LoggingAdvicePostProcessor",
    "LoggingScheduler",
    "Out",
    "ParameterDirection",
    "Ref",
    "ValueRenderer",
    "advice_of",
    "capture_scheduler",
    "create",
    "is_proxy",
    "logged",
    "unwrap",
]
