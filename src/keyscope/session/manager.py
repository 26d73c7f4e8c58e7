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
"""SessionManager — owns the single active store connection."""

from __future__ import annotations

import logging
from collections.abc import Callable

from keyscope.kernel.exceptions import KeyscopeException, NoActiveSessionException
from keyscope.session.connection import ConnectionSpec
from keyscope.session.ports.outbound import SessionListener, Unsubscribe
from keyscope.session.session import Session
from keyscope.store.ports.outbound import StoreClient

_logger = logging.getLogger(__name__)

ClientFactory = Callable[[ConnectionSpec], StoreClient]


class SessionManager:
    """Session provider with an explicit connect, use, disconnect lifecycle.

    At most one session is active. Connecting pings the new store first and
    only then closes the previous client, so an unreachable target leaves
    the current session in place. Every change is announced to subscribed
    listeners, which must drop any state tied to the old session.

    Args:
        client_factory: Builds an unconnected store client for a spec.
            Defaults to :meth:`RedisStoreClient.from_spec`.
        timeout: Socket timeout in seconds for the default factory.
    """

    def __init__(self, client_factory: ClientFactory | None = None, timeout: float | None = None) -> None:
        if client_factory is None:
            from keyscope.store.adapters.redis import RedisStoreClient

            def client_factory(spec: ConnectionSpec) -> StoreClient:
                return RedisStoreClient.from_spec(spec, timeout=timeout)

        self._client_factory: ClientFactory = client_factory
        self._client: StoreClient | None = None
        self._session: Session | None = None
        self._listeners: list[SessionListener] = []

    # -- SessionProvider ----------------------------------------------------

    def get_active_session(self) -> Session | None:
        return self._session

    def get_active_session_name(self) -> str | None:
        return self._session.name if self._session is not None else None

    def get_client(self) -> StoreClient:
        if self._client is None:
            raise NoActiveSessionException("No active connection. Please connect to a server.")
        return self._client

    def subscribe(self, listener: SessionListener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # -- lifecycle ----------------------------------------------------------

    async def connect(self, spec: ConnectionSpec) -> Session:
        """Open *spec*, verify it answers, then make it the active session.

        If the new store cannot be reached the previous session stays active.
        """
        client = self._client_factory(spec)
        try:
            await client.ping()
        except KeyscopeException:
            await self._close_quietly(client)
            raise

        await self._release()
        self._client = client
        self._session = spec.to_session()
        _logger.info("Connected to '%s' at %s", self._session.name, self._session.address)
        await self._notify(self._session)
        return self._session

    async def disconnect(self) -> None:
        """Close the active session, if any, and notify listeners."""
        if self._client is None:
            return
        name = self.get_active_session_name()
        await self._release()
        _logger.info("Disconnected from '%s'", name)
        await self._notify(None)

    async def probe(self, spec: ConnectionSpec) -> None:
        """Check that *spec* is reachable without touching the active session.

        Raises:
            BackendException: If the store does not answer a ping.
        """
        client = self._client_factory(spec)
        try:
            await client.ping()
        finally:
            await self._close_quietly(client)

    async def start(self) -> None:
        """No-op -- sessions are opened explicitly with connect()."""

    async def stop(self) -> None:
        await self.disconnect()

    # -- internals ----------------------------------------------------------

    async def _release(self) -> None:
        client, self._client, self._session = self._client, None, None
        if client is not None:
            await self._close_quietly(client)

    @staticmethod
    async def _close_quietly(client: StoreClient) -> None:
        try:
            await client.close()
        except KeyscopeException as exc:
            _logger.warning("Failed to close store client: %s", exc)

    async def _notify(self, session: Session | None) -> None:
        for listener in list(self._listeners):
            await listener.on_session_changed(session)
