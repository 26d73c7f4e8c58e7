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
"""Redis-backed store client adapter."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from redis.exceptions import RedisError

from keyscope.kernel.exceptions import BackendException

if TYPE_CHECKING:
    from keyscope.session.connection import ConnectionSpec

_logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    return value.decode("utf-8", errors="replace") if isinstance(value, bytes) else str(value)


@contextmanager
def _backend_errors(operation: str, key: str | None = None) -> Iterator[None]:
    try:
        yield
    except RedisError as exc:
        context = {"key": key} if key is not None else {}
        _logger.warning("Redis %s failed: %s", operation, exc)
        raise BackendException(f"{operation} failed: {exc}", operation=operation, context=context) from exc


class RedisStoreClient:
    """Store client that delegates to a ``redis.asyncio.Redis``-like client.

    Responses are normalized to ``str`` whether or not the wrapped client
    was created with ``decode_responses``. Every ``RedisError`` is raised
    as ``BackendException`` with the original chained.
    """

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_spec(cls, spec: ConnectionSpec, timeout: float | None = None) -> RedisStoreClient:
        """Build a client for a validated connection spec."""
        import redis.asyncio as aioredis

        client = aioredis.Redis(
            host=spec.host,
            port=spec.port,
            db=spec.db,
            password=spec.password or None,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
            decode_responses=True,
        )
        return cls(client)

    async def scan(self, cursor: str, pattern: str, count: int) -> tuple[list[str], str]:
        """Run one SCAN step. Returns the batch and the next cursor."""
        with _backend_errors("scan"):
            next_cursor, keys = await self._client.scan(cursor=int(cursor), match=pattern, count=count)
        return [_text(k) for k in keys], _text(next_cursor)

    async def type(self, key: str) -> str:
        with _backend_errors("type", key):
            raw = await self._client.type(key)
        return _text(raw)

    async def ttl(self, key: str) -> int:
        with _backend_errors("ttl", key):
            return int(await self._client.ttl(key))

    async def get(self, key: str) -> str | None:
        with _backend_errors("get", key):
            raw = await self._client.get(key)
        return None if raw is None else _text(raw)

    async def hash_get_all(self, key: str) -> dict[str, str]:
        with _backend_errors("hgetall", key):
            raw = await self._client.hgetall(key)
        return {_text(k): _text(v) for k, v in raw.items()}

    async def list_range(self, key: str, start: int, stop: int) -> list[str]:
        with _backend_errors("lrange", key):
            raw = await self._client.lrange(key, start, stop)
        return [_text(v) for v in raw]

    async def set_members(self, key: str) -> set[str]:
        with _backend_errors("smembers", key):
            raw = await self._client.smembers(key)
        return {_text(v) for v in raw}

    async def sorted_set_range_with_scores(self, key: str, start: int, stop: int) -> list[tuple[str, float]]:
        with _backend_errors("zrange", key):
            raw = await self._client.zrange(key, start, stop, withscores=True)
        return [(_text(member), float(score)) for member, score in raw]

    async def delete(self, key: str) -> bool:
        """Remove a key. Returns True if the key existed."""
        with _backend_errors("delete", key):
            count = await self._client.delete(key)
        return bool(count > 0)

    async def flush_all(self) -> None:
        """Flush the connected database."""
        with _backend_errors("flushdb"):
            await self._client.flushdb()

    async def ping(self) -> None:
        """Validate connectivity."""
        with _backend_errors("ping"):
            await self._client.ping()

    async def close(self) -> None:
        """Close the underlying Redis connection."""
        with _backend_errors("close"):
            await self._client.aclose()
