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
"""Translation of user search input into scan patterns."""

from __future__ import annotations

from keyscope.store import glob
from keyscope.store.types import MATCH_ALL


def search_pattern(raw_term: str, escape: bool = False) -> str:
    """Wrap *raw_term* for a substring match: ``user`` -> ``*user*``.

    An empty term matches everything. With *escape*, glob metacharacters
    typed by the user are matched literally; otherwise they pass through
    to the store and keep their wildcard meaning.
    """
    if not raw_term:
        return MATCH_ALL
    term = glob.escape(raw_term) if escape else raw_term
    return f"*{term}*"


def search_term(pattern: str, escape: bool = False) -> str:
    """Recover the search-box text from a pattern built by :func:`search_pattern`.

    Pass the same *escape* flag the pattern was built with so that escaped
    metacharacters come back as the user typed them.
    """
    if pattern == MATCH_ALL:
        return ""
    term = pattern
    if len(pattern) >= 2 and pattern.startswith("*") and pattern.endswith("*"):
        term = pattern[1:-1]
    return glob.unescape(term) if escape else term
