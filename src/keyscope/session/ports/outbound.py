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
"""Session provider protocols."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from keyscope.session.session import Session
from keyscope.store.ports.outbound import StoreClient

Unsubscribe = Callable[[], None]


@runtime_checkable
class SessionListener(Protocol):
    """Receives notifications when the active session changes.

    ``session`` is the new active session, or ``None`` after a disconnect.
    """

    async def on_session_changed(self, session: Session | None) -> None: ...


@runtime_checkable
class SessionProvider(Protocol):
    """Read access to the single active session and its store client."""

    def get_active_session(self) -> Session | None: ...

    def get_active_session_name(self) -> str | None: ...

    def get_client(self) -> StoreClient:
        """Return the active store client or raise ``NoActiveSessionException``."""
        ...

    def subscribe(self, listener: SessionListener) -> Unsubscribe: ...
