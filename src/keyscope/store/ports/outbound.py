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
"""Store client protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StoreClient(Protocol):
    """Abstract key-value store interface bound to one backend connection.

    All store backends (Redis, in-memory) must implement this protocol.
    Implementations raise ``BackendException`` on transport or protocol
    failures; timeouts are their concern, not the caller's.
    """

    async def scan(self, cursor: str, pattern: str, count: int) -> tuple[list[str], str]: ...

    async def type(self, key: str) -> str: ...

    async def ttl(self, key: str) -> int: ...

    async def get(self, key: str) -> str | None: ...

    async def hash_get_all(self, key: str) -> dict[str, str]: ...

    async def list_range(self, key: str, start: int, stop: int) -> list[str]: ...

    async def set_members(self, key: str) -> set[str]: ...

    async def sorted_set_range_with_scores(self, key: str, start: int, stop: int) -> list[tuple[str, float]]: ...

    async def delete(self, key: str) -> bool: ...

    async def flush_all(self) -> None: ...

    async def ping(self) -> None: ...

    async def close(self) -> None: ...
