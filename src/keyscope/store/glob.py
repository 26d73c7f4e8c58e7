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
"""Glob pattern helpers matching the store's MATCH semantics.

Supported syntax: ``*`` (any run), ``?`` (one character), ``[abc]``,
``[^abc]``, ``[a-z]`` and backslash escapes.
"""

from __future__ import annotations

import re

_SPECIAL = re.compile(r"([*?\[\]\\])")
_ESCAPED = re.compile(r"\\(.)", re.DOTALL)


def escape(term: str) -> str:
    """Backslash-escape glob metacharacters so *term* matches literally."""
    return _SPECIAL.sub(r"\\\1", term)


def unescape(pattern: str) -> str:
    """Drop backslash escapes: the inverse of :func:`escape`."""
    return _ESCAPED.sub(r"\1", pattern)


def compile_glob(pattern: str) -> re.Pattern[str]:
    """Translate a glob pattern into an anchored regular expression."""
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "*":
            out.append(".*")
        elif ch == "?":
            out.append(".")
        elif ch == "\\" and i + 1 < n:
            i += 1
            out.append(re.escape(pattern[i]))
        elif ch == "[":
            end = pattern.find("]", i + 1)
            if end == -1:
                out.append(re.escape(ch))
            else:
                body = pattern[i + 1 : end]
                negate = body.startswith("^")
                if negate:
                    body = body[1:]
                body = body.replace("\\", "\\\\").replace("[", "\\[")
                if body:
                    out.append(f"[{'^' if negate else ''}{body}]")
                else:
                    out.append("." if negate else "(?!)")
                i = end
        else:
            out.append(re.escape(ch))
        i += 1
    return re.compile("".join(out), re.DOTALL)


def matches(pattern: str, key: str) -> bool:
    return compile_glob(pattern).fullmatch(key) is not None
