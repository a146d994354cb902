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
"""Structured fields for advice log entries.

An entry produced by :class:`~logadvice.aop.advice.LoggingAdvice` starts
with a ``Class <type>`` line followed by a ``Method <name> <event>`` line.
Sink prefixes, when configured, sit in front of the ``Class`` line.
"""

from __future__ import annotations


def split_entry(message: str) -> dict[str, str] | None:
    """Split an advice entry into ``event``, ``target`` and ``details``.

    Returns ``None`` for messages that are not advice entries, such as
    serializer failure notes.
    """
    header, newline, body = message.partition("\n")
    prefix, marker, target = header.partition("Class ")
    if not newline or not marker:
        return None
    member_line, _, details = body.partition("\n")
    if not member_line.startswith("Method "):
        return None

    fields = {"event": prefix + member_line, "target": target}
    details = details.rstrip("\n")
    if details:
        fields["details"] = details
    return fields
