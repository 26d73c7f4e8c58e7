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
"""Tests for KeyInspector."""

from __future__ import annotations

import pytest

from keyscope.browser.inspector import KeyInspector
from keyscope.kernel.exceptions import NoActiveSessionException, ResourceNotFoundException
from keyscope.store.adapters.memory import InMemoryStoreClient
from keyscope.testing import StaticSessionProvider


@pytest.fixture
def store() -> InMemoryStoreClient:
    s = InMemoryStoreClient()
    s.set("greeting", "hello")
    s.set("session:1", "token", ex=60)
    s.hset("user:1", {"name": "Ada", "role": "admin"})
    s.rpush("queue", "a", "b", "c")
    s.sadd("tags", "x", "y")
    s.zadd("scores", {"low": 1, "high": 10})
    return s


class TestInspect:
    @pytest.mark.asyncio
    async def test_string(self, store):
        value = await KeyInspector(StaticSessionProvider(store)).inspect("greeting")
        assert value.type == "string"
        assert value.value == "hello"
        assert value.ttl == -1
        assert not value.expires

    @pytest.mark.asyncio
    async def test_string_with_ttl(self, store):
        value = await KeyInspector(StaticSessionProvider(store)).inspect("session:1")
        assert 0 < value.ttl <= 60
        assert value.expires

    @pytest.mark.asyncio
    async def test_hash(self, store):
        value = await KeyInspector(StaticSessionProvider(store)).inspect("user:1")
        assert value.type == "hash"
        assert value.value == {"name": "Ada", "role": "admin"}

    @pytest.mark.asyncio
    async def test_list(self, store):
        value = await KeyInspector(StaticSessionProvider(store)).inspect("queue")
        assert value.value == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_set(self, store):
        value = await KeyInspector(StaticSessionProvider(store)).inspect("tags")
        assert value.value == {"x", "y"}

    @pytest.mark.asyncio
    async def test_sorted_set_ordered_by_score(self, store):
        value = await KeyInspector(StaticSessionProvider(store)).inspect("scores")
        assert value.type == "zset"
        assert value.value == [("low", 1.0), ("high", 10.0)]


class TestInspectErrors:
    @pytest.mark.asyncio
    async def test_missing_key(self, store):
        with pytest.raises(ResourceNotFoundException) as exc_info:
            await KeyInspector(StaticSessionProvider(store)).inspect("nope")
        assert exc_info.value.code == "KEY_NOT_FOUND"
        assert exc_info.value.context == {"key": "nope"}

    @pytest.mark.asyncio
    async def test_requires_session(self):
        with pytest.raises(NoActiveSessionException):
            await KeyInspector(StaticSessionProvider(None)).inspect("greeting")
