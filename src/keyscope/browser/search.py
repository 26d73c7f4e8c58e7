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
"""SearchController — debounces raw keystrokes into committed searches."""

from __future__ import annotations

import asyncio
import logging
from datetime import timedelta
from typing import Any

from keyscope.browser.keyspace_cache import KeyspaceCache

_logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE = timedelta(milliseconds=400)


class SearchController:
    """Forwards search input to the cache once typing has paused.

    Each :meth:`submit` cancels the pending commit and schedules a new one
    after the quiet period, so only the most recent input is ever searched.
    A commit that has already started is not cancelled: the cache's
    generation check discards its result if a newer search follows.
    """

    def __init__(self, cache: KeyspaceCache, debounce: timedelta = DEFAULT_DEBOUNCE) -> None:
        self._cache = cache
        self._delay = debounce.total_seconds()
        self._timer: asyncio.TimerHandle | None = None
        self._pending: str | None = None
        self._committed: str | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def pending_term(self) -> str | None:
        """Input waiting for the quiet period to elapse, if any."""
        return self._pending

    @property
    def committed_term(self) -> str | None:
        """The last term forwarded to the cache."""
        return self._committed

    def submit(self, raw: str) -> None:
        """Record new input and (re)start the quiet-period timer.

        Must be called from a running event loop.
        """
        loop = asyncio.get_running_loop()
        self._cancel_timer()
        self._pending = raw
        self._timer = loop.call_later(self._delay, self._commit)

    async def flush(self) -> None:
        """Commit pending input now instead of waiting for the quiet period."""
        self._cancel_timer()
        if self._pending is None:
            return
        term, self._pending = self._pending, None
        await self._search(term)

    async def start(self) -> None:
        """No-op -- the controller is ready after construction."""

    async def stop(self) -> None:
        """Drop pending input and wait for commits already running."""
        self._cancel_timer()
        self._pending = None
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks.clear()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _commit(self) -> None:
        self._timer = None
        if self._pending is None:
            return
        term, self._pending = self._pending, None
        task = asyncio.get_running_loop().create_task(self._search(term))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _search(self, term: str) -> None:
        self._committed = term
        _logger.debug("Committing search %r", term)
        await self._cache.search(term)
