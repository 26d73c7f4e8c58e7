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
"""Pull-based tree view over the keyspace cache."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from keyscope.browser.events import KeyspaceEvent
from keyscope.browser.keyspace_cache import KeyspaceCache
from keyscope.session.ports.outbound import SessionProvider, Unsubscribe

LOAD_MORE_LABEL = "Load More Keys..."


class NodeKind(Enum):
    KEY = "key"
    LOAD_MORE = "load_more"
    MESSAGE = "message"


@dataclass(frozen=True)
class TreeNode:
    label: str
    kind: NodeKind
    key: str | None = None

    @property
    def tooltip(self) -> str:
        return f"Redis Key: {self.key}" if self.kind is NodeKind.KEY else self.label

    @property
    def is_leaf(self) -> bool:
        return True


class KeyTreeView:
    """Answers child queries from the cache's current keys.

    Keys are listed flat under the root. The first root query on a cache
    that has not scanned yet triggers a refresh; while more batches are
    pending a synthetic trailing load-more node is appended. Change
    listeners are told to re-query whenever the cache changes.
    """

    def __init__(self, sessions: SessionProvider, cache: KeyspaceCache) -> None:
        self._sessions = sessions
        self._cache = cache
        self._listeners: list[Callable[[], None]] = []
        self._unsubscribe: Unsubscribe = cache.subscribe(self)

    def on_did_change(self, listener: Callable[[], None]) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def detach(self) -> None:
        self._unsubscribe()

    async def get_children(self, node: TreeNode | None = None) -> list[TreeNode]:
        if self._sessions.get_active_session() is None:
            return []
        if node is not None:
            return []

        if not self._cache.started:
            await self._cache.refresh()

        children = [TreeNode(label=key, kind=NodeKind.KEY, key=key) for key in self._cache.keys]
        if self._cache.error is not None:
            children.append(TreeNode(label=self._cache.error, kind=NodeKind.MESSAGE))
        if self._cache.has_more:
            children.append(TreeNode(label=LOAD_MORE_LABEL, kind=NodeKind.LOAD_MORE))
        return children

    async def load_more(self) -> None:
        await self._cache.load_more()

    async def on_keyspace_changed(self, event: KeyspaceEvent) -> None:
        for listener in list(self._listeners):
            listener()
