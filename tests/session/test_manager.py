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
"""Tests for SessionManager."""

from __future__ import annotations

import pytest

from keyscope.kernel.exceptions import BackendException, NoActiveSessionException
from keyscope.session.connection import ConnectionSpec
from keyscope.session.manager import SessionManager
from keyscope.session.session import Session
from keyscope.store.adapters.memory import InMemoryStoreClient


class SessionRecorder:
    def __init__(self) -> None:
        self.changes: list[Session | None] = []

    async def on_session_changed(self, session: Session | None) -> None:
        self.changes.append(session)


class StoreFactory:
    """Hands out a fresh in-memory store per connect; unreachable hosts are closed stores."""

    def __init__(self) -> None:
        self.created: list[InMemoryStoreClient] = []

    def __call__(self, spec: ConnectionSpec) -> InMemoryStoreClient:
        store = InMemoryStoreClient()
        if spec.host == "unreachable":
            store._closed = True
        self.created.append(store)
        return store


class OrderedStore(InMemoryStoreClient):
    def __init__(self, name: str, log: list[str]) -> None:
        super().__init__()
        self.name = name
        self.log = log

    async def ping(self) -> None:
        self.log.append(f"ping {self.name}")

    async def close(self) -> None:
        self.log.append(f"close {self.name}")
        await super().close()


def _spec(name: str = "local", host: str = "localhost") -> ConnectionSpec:
    return ConnectionSpec.create(name=name, host=host)


class TestConnect:
    @pytest.mark.asyncio
    async def test_starts_disconnected(self):
        manager = SessionManager(client_factory=StoreFactory())
        assert manager.get_active_session() is None
        assert manager.get_active_session_name() is None
        with pytest.raises(NoActiveSessionException):
            manager.get_client()

    @pytest.mark.asyncio
    async def test_connect_activates_session(self):
        factory = StoreFactory()
        manager = SessionManager(client_factory=factory)
        recorder = SessionRecorder()
        manager.subscribe(recorder)

        session = await manager.connect(_spec())

        assert manager.get_active_session() == session
        assert manager.get_active_session_name() == "local"
        assert manager.get_client() is factory.created[0]
        assert recorder.changes == [session]

    @pytest.mark.asyncio
    async def test_switching_closes_previous_client(self):
        factory = StoreFactory()
        manager = SessionManager(client_factory=factory)
        recorder = SessionRecorder()
        manager.subscribe(recorder)

        await manager.connect(_spec("a"))
        await manager.connect(_spec("b"))

        assert factory.created[0].closed
        assert not factory.created[1].closed
        assert [s.name for s in recorder.changes] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_pings_new_store_before_closing_previous(self):
        log: list[str] = []
        manager = SessionManager(client_factory=lambda spec: OrderedStore(spec.name, log))

        await manager.connect(_spec("a"))
        await manager.connect(_spec("b"))

        assert log == ["ping a", "ping b", "close a"]

    @pytest.mark.asyncio
    async def test_unreachable_store_keeps_previous_session(self):
        factory = StoreFactory()
        manager = SessionManager(client_factory=factory)
        recorder = SessionRecorder()
        manager.subscribe(recorder)
        await manager.connect(_spec("a"))

        with pytest.raises(BackendException):
            await manager.connect(_spec("b", host="unreachable"))

        assert manager.get_active_session_name() == "a"
        assert not factory.created[0].closed
        assert len(recorder.changes) == 1


class TestDisconnect:
    @pytest.mark.asyncio
    async def test_disconnect_notifies_none(self):
        factory = StoreFactory()
        manager = SessionManager(client_factory=factory)
        recorder = SessionRecorder()
        manager.subscribe(recorder)
        await manager.connect(_spec())

        await manager.disconnect()

        assert recorder.changes[-1] is None
        assert factory.created[0].closed
        assert manager.get_active_session() is None

    @pytest.mark.asyncio
    async def test_disconnect_when_idle_is_silent(self):
        manager = SessionManager(client_factory=StoreFactory())
        recorder = SessionRecorder()
        manager.subscribe(recorder)
        await manager.disconnect()
        assert recorder.changes == []

    @pytest.mark.asyncio
    async def test_stop_disconnects(self):
        manager = SessionManager(client_factory=StoreFactory())
        await manager.start()
        await manager.connect(_spec())
        await manager.stop()
        assert manager.get_active_session() is None

    @pytest.mark.asyncio
    async def test_unsubscribe(self):
        manager = SessionManager(client_factory=StoreFactory())
        recorder = SessionRecorder()
        unsubscribe = manager.subscribe(recorder)
        unsubscribe()
        unsubscribe()
        await manager.connect(_spec())
        assert recorder.changes == []


class TestProbe:
    @pytest.mark.asyncio
    async def test_probe_closes_client_and_leaves_session(self):
        factory = StoreFactory()
        manager = SessionManager(client_factory=factory)

        await manager.probe(_spec())

        assert factory.created[0].closed
        assert manager.get_active_session() is None

    @pytest.mark.asyncio
    async def test_probe_failure_raises(self):
        manager = SessionManager(client_factory=StoreFactory())
        with pytest.raises(BackendException):
            await manager.probe(_spec(host="unreachable"))
