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
"""In-memory store client with SCAN-compatible cursor semantics."""

from __future__ import annotations

import math
import time
from typing import Any

from keyscope.kernel.exceptions import BackendException
from keyscope.store.glob import compile_glob
from keyscope.store.types import MISSING_KEY_TTL, NO_EXPIRY, SCAN_SENTINEL, KeyType

_WRONGTYPE = "WRONGTYPE Operation against a key holding the wrong kind of value"


class InMemoryStoreClient:
    """In-memory store with optional TTL support.

    Suitable for development, testing, and offline demos. Every new key gets
    the next insertion number; ``scan`` walks keys in that order and its
    cursor is the lowest number still to examine. Deletes leave gaps rather
    than renumbering, so a key present for the whole scan is always
    returned. ``count`` keys are examined per call and the matches among
    them are returned, so a batch may be smaller than the hint.
    """

    def __init__(self) -> None:
        self._store: dict[str, tuple[KeyType, Any]] = {}
        self._expires: dict[str, float] = {}
        # insertion number per key, ascending in dict order
        self._seq: dict[str, int] = {}
        self._next_seq = 0
        self._closed = False

    # -- write helpers ------------------------------------------------------

    def set(self, key: str, value: str, ex: int | None = None) -> None:
        self._purge(key)
        self._put(key, (KeyType.STRING, str(value)))
        self._expires.pop(key, None)
        if ex is not None:
            self.expire(key, ex)

    def hset(self, key: str, mapping: dict[str, str]) -> None:
        current = self._typed(key, KeyType.HASH, dict)
        current.update({str(k): str(v) for k, v in mapping.items()})

    def rpush(self, key: str, *values: str) -> None:
        self._typed(key, KeyType.LIST, list).extend(str(v) for v in values)

    def sadd(self, key: str, *members: str) -> None:
        self._typed(key, KeyType.SET, set).update(str(m) for m in members)

    def zadd(self, key: str, mapping: dict[str, float]) -> None:
        self._typed(key, KeyType.ZSET, dict).update({str(k): float(v) for k, v in mapping.items()})

    def expire(self, key: str, seconds: int) -> bool:
        if key not in self._store:
            return False
        self._expires[key] = time.monotonic() + seconds
        return True

    def _typed(self, key: str, key_type: KeyType, factory: type) -> Any:
        self._purge(key)
        entry = self._store.get(key)
        if entry is None:
            value = factory()
            self._put(key, (key_type, value))
            return value
        if entry[0] is not key_type:
            raise BackendException(_WRONGTYPE, operation="write", context={"key": key})
        return entry[1]

    # -- internals ----------------------------------------------------------

    def _put(self, key: str, entry: tuple[KeyType, Any]) -> None:
        if key not in self._store:
            self._seq[key] = self._next_seq
            self._next_seq += 1
        self._store[key] = entry

    def _forget(self, key: str) -> bool:
        self._expires.pop(key, None)
        self._seq.pop(key, None)
        return self._store.pop(key, None) is not None

    def _check_open(self, operation: str) -> None:
        if self._closed:
            raise BackendException(f"{operation} failed: connection closed", operation=operation)

    def _purge(self, key: str) -> None:
        expires_at = self._expires.get(key)
        if expires_at is not None and time.monotonic() > expires_at:
            self._forget(key)

    def _entry(self, key: str, operation: str, expected: KeyType) -> Any | None:
        self._check_open(operation)
        self._purge(key)
        entry = self._store.get(key)
        if entry is None:
            return None
        if entry[0] is not expected:
            raise BackendException(_WRONGTYPE, operation=operation, context={"key": key})
        return entry[1]

    # -- StoreClient --------------------------------------------------------

    async def scan(self, cursor: str, pattern: str, count: int) -> tuple[list[str], str]:
        self._check_open("scan")
        try:
            position = int(cursor)
        except ValueError as exc:
            raise BackendException("ERR invalid cursor", operation="scan") from exc

        regex = compile_glob(pattern)
        window = [(name, seq) for name, seq in self._seq.items() if seq >= position][: max(count, 1)]
        found = []
        for name, _ in window:
            self._purge(name)
            if name in self._store and regex.fullmatch(name):
                found.append(name)

        if not window:
            return found, SCAN_SENTINEL
        last = window[-1][1]
        more = any(seq > last for seq in self._seq.values())
        return found, str(last + 1) if more else SCAN_SENTINEL

    async def type(self, key: str) -> str:
        self._check_open("type")
        self._purge(key)
        entry = self._store.get(key)
        return entry[0].value if entry is not None else KeyType.NONE.value

    async def ttl(self, key: str) -> int:
        self._check_open("ttl")
        self._purge(key)
        if key not in self._store:
            return MISSING_KEY_TTL
        expires_at = self._expires.get(key)
        if expires_at is None:
            return NO_EXPIRY
        return math.ceil(expires_at - time.monotonic())

    async def get(self, key: str) -> str | None:
        return self._entry(key, "get", KeyType.STRING)

    async def hash_get_all(self, key: str) -> dict[str, str]:
        return dict(self._entry(key, "hgetall", KeyType.HASH) or {})

    async def list_range(self, key: str, start: int, stop: int) -> list[str]:
        values = self._entry(key, "lrange", KeyType.LIST) or []
        # Redis ranges are inclusive and accept negative indices.
        end = len(values) + stop + 1 if stop < 0 else stop + 1
        begin = max(len(values) + start, 0) if start < 0 else start
        return list(values[begin:end])

    async def set_members(self, key: str) -> set[str]:
        return set(self._entry(key, "smembers", KeyType.SET) or ())

    async def sorted_set_range_with_scores(self, key: str, start: int, stop: int) -> list[tuple[str, float]]:
        scores = self._entry(key, "zrange", KeyType.ZSET) or {}
        ordered = sorted(scores.items(), key=lambda item: (item[1], item[0]))
        end = len(ordered) + stop + 1 if stop < 0 else stop + 1
        begin = max(len(ordered) + start, 0) if start < 0 else start
        return ordered[begin:end]

    async def delete(self, key: str) -> bool:
        self._check_open("delete")
        self._purge(key)
        return self._forget(key)

    async def flush_all(self) -> None:
        self._check_open("flushdb")
        self._store.clear()
        self._expires.clear()
        self._seq.clear()

    async def ping(self) -> None:
        self._check_open("ping")

    async def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._store)
