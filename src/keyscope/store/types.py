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
"""Store-level constants and value types."""

from __future__ import annotations

from enum import Enum

SCAN_SENTINEL = "0"
"""Cursor that both starts a scan and marks it complete."""

MATCH_ALL = "*"

NO_EXPIRY = -1
"""TTL reported for a key without an expiry."""

MISSING_KEY_TTL = -2
"""TTL reported for a key that does not exist."""


class KeyType(str, Enum):
    """Value types reported by the store's TYPE command."""

    STRING = "string"
    HASH = "hash"
    LIST = "list"
    SET = "set"
    ZSET = "zset"
    STREAM = "stream"
    NONE = "none"

    @classmethod
    def parse(cls, raw: str) -> KeyType | None:
        """Return the member for *raw*, or ``None`` for unknown type tags."""
        try:
            return cls(raw)
        except ValueError:
            return None
