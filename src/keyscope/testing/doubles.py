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
"""Test doubles for code built on the keyscope ports."""

from __future__ import annotations

from keyscope.browser.events import KeyspaceEvent
from keyscope.kernel.exceptions import NoActiveSessionException
from keyscope.session.ports.outbound import SessionListener, Unsubscribe
from keyscope.session.session import Session
from keyscope.store.ports.outbound import StoreClient


class StaticSessionProvider:
    """Session provider over a fixed store client.

    ``client=None`` behaves as "not connected". :meth:`switch` swaps the
    client and notifies listeners the way a real session manager does.
    """

    def __init__(self, client: StoreClient | None = None, name: str = "test") -> None:
        self._client = client
        self._session = Session(id=name, name=name, host="localhost", port=6379) if client is not None else None
        self._listeners: list[SessionListener] = []

    def get_active_session(self) -> Session | None:
        return self._session

    def get_active_session_name(self) -> str | None:
        return self._session.name if self._session is not None else None

    def get_client(self) -> StoreClient:
        if self._client is None:
            raise NoActiveSessionException()
        return self._client

    def subscribe(self, listener: SessionListener) -> Unsubscribe:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    async def switch(self, client: StoreClient | None, name: str = "other") -> None:
        self._client = client
        self._session = Session(id=name, name=name, host="localhost", port=6379) if client is not None else None
        for listener in list(self._listeners):
            await listener.on_session_changed(self._session)


class RecordingObserver:
    """Keyspace observer that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[KeyspaceEvent] = []

    async def on_keyspace_changed(self, event: KeyspaceEvent) -> None:
        self.events.append(event)

    @property
    def last(self) -> KeyspaceEvent:
        assert self.events, "Expected at least one keyspace event"
        return self.events[-1]

    def clear(self) -> None:
        self.events.clear()
