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
"""Push-updated list view over the keyspace cache."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from keyscope.browser.events import KeyspaceEvent
from keyscope.browser.keyspace_cache import KeyspaceCache
from keyscope.browser.patterns import search_term
from keyscope.session.ports.outbound import Unsubscribe


@dataclass(frozen=True)
class KeyListModel:
    """Everything a list renderer needs for one repaint."""

    rows: tuple[str, ...] = ()
    count: int = 0
    show_load_more: bool = False
    error: str | None = None

    @property
    def status(self) -> str:
        return f"{self.count} keys"

    @property
    def empty(self) -> bool:
        return not self.rows and self.error is None

    @classmethod
    def from_event(cls, event: KeyspaceEvent) -> KeyListModel:
        return cls(rows=event.keys, count=event.count, show_load_more=event.has_more, error=event.error)


class KeyListView:
    """Re-renders its full list on every cache notification.

    The view keeps only the model of its last repaint. Scanning,
    pagination and filtering are delegated to the cache.
    """

    def __init__(self, cache: KeyspaceCache, render: Callable[[KeyListModel], None] | None = None) -> None:
        self._cache = cache
        self._render = render
        self._model = KeyListModel()
        self._renders = 0
        self._unsubscribe: Unsubscribe | None = None

    @property
    def model(self) -> KeyListModel:
        return self._model

    @property
    def renders(self) -> int:
        return self._renders

    @property
    def search_text(self) -> str:
        """Text to restore into the search box for the active filter."""
        return search_term(self._cache.pattern, escape=self._cache.escape_search)

    async def attach(self) -> None:
        """Subscribe and paint.

        A cache that already scanned is replayed as-is; an untouched cache
        gets its first batch loaded.
        """
        if self._unsubscribe is None:
            self._unsubscribe = self._cache.subscribe(self)
        if self._cache.started:
            await self.on_keyspace_changed(KeyspaceEvent.from_snapshot(self._cache.snapshot()))
        else:
            await self._cache.refresh()

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def load_more(self) -> None:
        """Handle the "load more" affordance, shown only while batches are pending."""
        if self._model.show_load_more:
            await self._cache.load_more()

    async def on_keyspace_changed(self, event: KeyspaceEvent) -> None:
        self._model = KeyListModel.from_event(event)
        self._renders += 1
        if self._render is not None:
            self._render(self._model)
