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
"""KeyspaceCache — the locally accumulated, de-duplicated view of a scan.

The store's scan primitive is not transactional: batches may repeat keys,
and a scan started for one filter may still be answering when the user has
already moved on to another. The cache turns that into a snapshot that only
grows within one *generation* and never mixes results across generations.

Every ``refresh``/``search`` (and every session change) bumps the generation
synchronously, before any network call is awaited. A scan step remembers
the generation it was issued under and, when its batch arrives, applies it
only if that generation is still current. Stale batches, and stale
failures, are dropped. There is no cancellation of in-flight calls; this
check is the whole mechanism.
"""

from __future__ import annotations

import logging

from keyscope.browser.events import KeyspaceEvent, KeyspaceObserver, KeyspaceSnapshot
from keyscope.browser.patterns import search_pattern
from keyscope.browser.scan_driver import ScanDriver
from keyscope.kernel.exceptions import KeyscopeException
from keyscope.session.ports.outbound import Unsubscribe
from keyscope.session.session import Session
from keyscope.store.types import MATCH_ALL, SCAN_SENTINEL

_logger = logging.getLogger(__name__)


class KeyspaceCache:
    """Owns the accumulated keys, cursor, filter and generation.

    Presentation adapters read from the cache and subscribe to it; they
    never run scans themselves. Failures never raise out of the public
    operations: they are recorded in :attr:`error` and published to
    observers, leaving keys and cursor as they were so that a retry
    (``load_more`` or ``refresh``) is always safe.

    Args:
        driver: Performs single scan steps against the active session.
        batch_size: Count hint passed with every scan step.
        escape_search: Match glob metacharacters in search terms literally.
    """

    def __init__(self, driver: ScanDriver, batch_size: int = 100, escape_search: bool = False) -> None:
        self._driver = driver
        self._batch_size = batch_size
        self._escape_search = escape_search
        self._observers: list[KeyspaceObserver] = []

        # dict as an insertion-ordered set
        self._keys: dict[str, None] = {}
        self._cursor = SCAN_SENTINEL
        self._pattern = MATCH_ALL
        self._generation = 0
        self._started = False
        self._error: str | None = None
        self._inflight: int | None = None

    # -- state --------------------------------------------------------------

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(self._keys)

    @property
    def cursor(self) -> str:
        return self._cursor

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def started(self) -> bool:
        """Whether a scan was issued since the last reset."""
        return self._started

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def has_more(self) -> bool:
        return self._cursor != SCAN_SENTINEL

    @property
    def batch_size(self) -> int:
        return self._batch_size

    @property
    def escape_search(self) -> bool:
        return self._escape_search

    def snapshot(self) -> KeyspaceSnapshot:
        return KeyspaceSnapshot(
            keys=self.keys,
            cursor=self._cursor,
            pattern=self._pattern,
            generation=self._generation,
            started=self._started,
            error=self._error,
        )

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    # -- observers ----------------------------------------------------------

    def subscribe(self, observer: KeyspaceObserver) -> Unsubscribe:
        """Register *observer*. Returns a callable that removes it again."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    async def _notify(self) -> None:
        event = KeyspaceEvent.from_snapshot(self.snapshot())
        for observer in list(self._observers):
            await observer.on_keyspace_changed(event)

    # -- operations ---------------------------------------------------------

    async def refresh(self) -> None:
        """Drop everything, clear the filter and scan the first batch."""
        self._reset(MATCH_ALL)
        await self._step()

    async def search(self, raw_term: str) -> None:
        """Drop everything and scan the first batch of keys containing *raw_term*."""
        self._reset(search_pattern(raw_term, escape=self._escape_search))
        await self._step()

    async def load_more(self) -> None:
        """Scan the next batch of the current generation.

        No-op once the scan is complete, and while a step of the current
        generation is still outstanding.
        """
        if self._cursor == SCAN_SENTINEL:
            return
        if self._inflight == self._generation:
            _logger.debug("load_more ignored: step for generation %d in flight", self._generation)
            return
        await self._step()

    async def remove_local(self, key: str) -> bool:
        """Forget *key* without rescanning. Returns True if it was listed."""
        if key not in self._keys:
            return False
        del self._keys[key]
        await self._notify()
        return True

    async def report_error(self, message: str) -> None:
        """Publish a collaborator's failure without touching keys or cursor."""
        self._error = message
        await self._notify()

    async def invalidate(self) -> None:
        """Discard all state, including outstanding steps, and go back to not-started."""
        self._reset(MATCH_ALL, started=False)
        await self._notify()

    async def on_session_changed(self, session: Session | None) -> None:
        if session is None:
            await self.invalidate()
        else:
            await self.refresh()

    # -- internals ----------------------------------------------------------

    def _reset(self, pattern: str, started: bool = True) -> None:
        self._generation += 1
        self._keys = {}
        self._cursor = SCAN_SENTINEL
        self._pattern = pattern
        self._error = None
        self._started = started

    async def _step(self) -> None:
        generation = self._generation
        self._inflight = generation
        try:
            batch = await self._driver.scan(self._cursor, self._pattern, self._batch_size)
        except KeyscopeException as exc:
            if generation != self._generation:
                _logger.debug("Dropping failure of stale scan (generation %d): %s", generation, exc)
                return
            _logger.warning("Scan failed: %s", exc)
            self._error = str(exc)
            await self._notify()
            return
        finally:
            if self._inflight == generation:
                self._inflight = None

        if generation != self._generation:
            _logger.debug(
                "Dropping stale batch of %d keys (generation %d, current %d)",
                len(batch.keys),
                generation,
                self._generation,
            )
            return

        for key in batch.keys:
            self._keys.setdefault(key, None)
        self._cursor = batch.cursor
        self._error = None
        await self._notify()
