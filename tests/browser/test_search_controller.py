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
"""Tests for SearchController debouncing."""

from __future__ import annotations

import asyncio
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from keyscope.browser.keyspace_cache import KeyspaceCache
from keyscope.browser.search import DEFAULT_DEBOUNCE, SearchController

QUIET = timedelta(milliseconds=20)


def _controller() -> tuple[SearchController, AsyncMock]:
    cache = AsyncMock(spec=KeyspaceCache)
    return SearchController(cache, debounce=QUIET), cache


class TestDebounce:
    def test_default_quiet_period(self):
        assert DEFAULT_DEBOUNCE == timedelta(milliseconds=400)

    @pytest.mark.asyncio
    async def test_only_last_input_is_committed(self):
        controller, cache = _controller()
        for raw in ("u", "us", "use", "user"):
            controller.submit(raw)
            await asyncio.sleep(0)

        await asyncio.sleep(0.1)

        cache.search.assert_awaited_once_with("user")
        assert controller.committed_term == "user"
        assert controller.pending_term is None

    @pytest.mark.asyncio
    async def test_nothing_forwarded_during_quiet_period(self):
        controller, cache = _controller()
        controller.submit("user")
        await asyncio.sleep(0)
        cache.search.assert_not_awaited()
        assert controller.pending_term == "user"
        await controller.stop()

    @pytest.mark.asyncio
    async def test_separate_bursts_commit_separately(self):
        controller, cache = _controller()
        controller.submit("a")
        await asyncio.sleep(0.1)
        controller.submit("b")
        await asyncio.sleep(0.1)

        assert [call.args[0] for call in cache.search.await_args_list] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_empty_input_is_forwarded(self):
        controller, cache = _controller()
        controller.submit("user")
        controller.submit("")
        await asyncio.sleep(0.1)
        cache.search.assert_awaited_once_with("")


class TestFlushAndStop:
    @pytest.mark.asyncio
    async def test_flush_commits_immediately(self):
        controller, cache = _controller()
        controller.submit("order")
        await controller.flush()
        cache.search.assert_awaited_once_with("order")

        await asyncio.sleep(0.1)
        cache.search.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_flush_without_pending_input(self):
        controller, cache = _controller()
        await controller.flush()
        cache.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_stop_drops_pending_input(self):
        controller, cache = _controller()
        controller.submit("user")
        await controller.stop()
        await asyncio.sleep(0.1)
        cache.search.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_stop_waits_for_running_search(self):
        finished = asyncio.Event()

        async def slow_search(term: str) -> None:
            await asyncio.sleep(0.05)
            finished.set()

        controller, cache = _controller()
        cache.search.side_effect = slow_search
        controller.submit("user")
        await asyncio.sleep(0.04)

        await controller.stop()
        assert finished.is_set()
