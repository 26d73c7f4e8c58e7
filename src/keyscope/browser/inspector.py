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
"""KeyInspector — typed value lookup for a single key."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from keyscope.kernel.exceptions import ResourceNotFoundException
from keyscope.session.ports.outbound import SessionProvider
from keyscope.store.ports.outbound import StoreClient
from keyscope.store.types import KeyType


@dataclass(frozen=True)
class KeyValue:
    """A key's declared type, remaining TTL in seconds (negative: none) and value."""

    key: str
    type: str
    ttl: int
    value: Any

    @property
    def expires(self) -> bool:
        return self.ttl >= 0


async def _read(client: StoreClient, key: str, key_type: KeyType | None) -> Any:
    if key_type is KeyType.STRING:
        return await client.get(key)
    if key_type is KeyType.HASH:
        return await client.hash_get_all(key)
    if key_type is KeyType.LIST:
        return await client.list_range(key, 0, -1)
    if key_type is KeyType.SET:
        return await client.set_members(key)
    if key_type is KeyType.ZSET:
        return await client.sorted_set_range_with_scores(key, 0, -1)
    return None


class KeyInspector:
    """Reads one key with the command that matches its type.

    Types without a reader (streams, module types) come back with
    ``value=None`` and their type tag intact.
    """

    def __init__(self, sessions: SessionProvider) -> None:
        self._sessions = sessions

    async def inspect(self, key: str) -> KeyValue:
        """Return the key's type, TTL and value.

        Raises:
            NoActiveSessionException: If no session is connected.
            ResourceNotFoundException: If the key does not exist.
            BackendException: If a store call fails.
        """
        client = self._sessions.get_client()
        raw_type = await client.type(key)
        key_type = KeyType.parse(raw_type)
        if key_type is KeyType.NONE:
            raise ResourceNotFoundException(f"Key '{key}' not found", code="KEY_NOT_FOUND", context={"key": key})
        ttl = await client.ttl(key)
        value = await _read(client, key, key_type)
        return KeyValue(key=key, type=raw_type, ttl=ttl, value=value)
