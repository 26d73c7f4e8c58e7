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
"""KeyspaceBrowser — composition root wiring sessions, cache, search and views."""

from __future__ import annotations

import logging
from typing import Any

from keyscope.browser.deletion import ConfirmPrompt, DeletionReconciler
from keyscope.browser.inspector import KeyInspector
from keyscope.browser.keyspace_cache import KeyspaceCache
from keyscope.browser.scan_driver import ScanDriver
from keyscope.browser.search import SearchController
from keyscope.config.properties.browser import BrowserProperties
from keyscope.config.properties.redis import RedisProperties
from keyscope.core.config import Config
from keyscope.kernel.lifecycle import Lifecycle
from keyscope.session.manager import ClientFactory, SessionManager
from keyscope.views.list_view import KeyListView
from keyscope.views.tree_view import KeyTreeView

_logger = logging.getLogger(__name__)


def _refuse(message: str) -> bool:
    return False


class KeyspaceBrowser:
    """Builds the browser components around one session manager.

    Every collaborator is passed in explicitly; nothing is looked up
    globally. The cache is subscribed to session changes, so connecting,
    switching or disconnecting resets it.

    Without a *confirm* prompt every delete and flush is cancelled.
    """

    def __init__(
        self,
        sessions: SessionManager,
        properties: BrowserProperties | None = None,
        confirm: ConfirmPrompt | None = None,
    ) -> None:
        self.properties = properties or BrowserProperties()
        self.sessions = sessions
        self.driver = ScanDriver(sessions)
        self.cache = KeyspaceCache(
            self.driver,
            batch_size=self.properties.batch_size,
            escape_search=self.properties.escape_search,
        )
        self.search = SearchController(self.cache, self.properties.debounce)
        self.deletion = DeletionReconciler(sessions, self.cache, confirm or _refuse)
        self.inspector = KeyInspector(sessions)
        self._unsubscribe = sessions.subscribe(self.cache)
        self._components: list[Lifecycle] = [self.sessions, self.search]
        self._tree: KeyTreeView | None = None

    @classmethod
    def from_config(
        cls,
        config: Config,
        confirm: ConfirmPrompt | None = None,
        client_factory: ClientFactory | None = None,
    ) -> KeyspaceBrowser:
        """Bind ``keyscope.browser`` and ``keyscope.redis`` and build a browser."""
        redis_props = config.bind(RedisProperties)
        sessions = SessionManager(client_factory=client_factory, timeout=redis_props.timeout)
        return cls(sessions, config.bind(BrowserProperties), confirm)

    def list_view(self, **kwargs: Any) -> KeyListView:
        return KeyListView(self.cache, **kwargs)

    def tree_view(self) -> KeyTreeView:
        """Return the browser's tree view, creating it on first use.

        The view subscribes to the cache, so one instance is shared and
        detached when the browser stops.
        """
        if self._tree is None:
            self._tree = KeyTreeView(self.sessions, self.cache)
        return self._tree

    async def start(self) -> None:
        for component in self._components:
            await component.start()

    async def stop(self) -> None:
        """Cancel pending searches and close the active session."""
        self._unsubscribe()
        if self._tree is not None:
            self._tree.detach()
            self._tree = None
        for component in reversed(self._components):
            await component.stop()
        _logger.debug("Keyspace browser stopped")

    async def __aenter__(self) -> KeyspaceBrowser:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.stop()
