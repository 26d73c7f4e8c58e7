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
"""Keyspace notifications and snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from keyscope.store.types import SCAN_SENTINEL


@dataclass(frozen=True)
class ScanBatch:
    """One bounded result set returned by a single scan call."""

    keys: tuple[str, ...]
    cursor: str

    @property
    def has_more(self) -> bool:
        return self.cursor != SCAN_SENTINEL


@dataclass(frozen=True)
class KeyspaceSnapshot:
    """Point-in-time copy of the keyspace cache state."""

    keys: tuple[str, ...]
    cursor: str
    pattern: str
    generation: int
    started: bool
    error: str | None = None

    @property
    def has_more(self) -> bool:
        return self.cursor != SCAN_SENTINEL


@dataclass(frozen=True)
class KeyspaceEvent:
    """Emitted after every cache mutation or surfaced failure a view should react to."""

    keys: tuple[str, ...]
    count: int
    has_more: bool
    error: str | None = None

    @classmethod
    def from_snapshot(cls, snapshot: KeyspaceSnapshot) -> KeyspaceEvent:
        return cls(
            keys=snapshot.keys,
            count=len(snapshot.keys),
            has_more=snapshot.has_more,
            error=snapshot.error,
        )


@runtime_checkable
class KeyspaceObserver(Protocol):
    """Subscriber to keyspace cache notifications."""

    async def on_keyspace_changed(self, event: KeyspaceEvent) -> None: ...
