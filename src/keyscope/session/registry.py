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
"""In-memory registry of saved connection specifications."""

from __future__ import annotations

from typing import Any

from keyscope.core.config import Config
from keyscope.kernel.exceptions import ResourceNotFoundException
from keyscope.session.connection import ConnectionSpec


class ConnectionRegistry:
    """Saved connections, keyed by id, in registration order.

    Suitable for a single process. Entries are validated on add and edit,
    so everything in the registry can be handed to a session manager.
    """

    def __init__(self) -> None:
        self._connections: dict[str, ConnectionSpec] = {}

    @classmethod
    def from_config(cls, config: Config) -> ConnectionRegistry:
        """Load the ``keyscope.connections`` list from configuration."""
        registry = cls()
        for entry in config.get("keyscope.connections", None) or []:
            registry.add(**entry)
        return registry

    def add(self, **data: Any) -> ConnectionSpec:
        """Validate and save a connection. Returns the stored spec."""
        spec = ConnectionSpec.create(**data)
        self._connections[spec.id] = spec
        return spec

    def get(self, connection_id: str) -> ConnectionSpec:
        spec = self._connections.get(connection_id)
        if spec is None:
            raise ResourceNotFoundException(
                f"Unknown connection '{connection_id}'",
                code="CONNECTION_NOT_FOUND",
                context={"id": connection_id},
            )
        return spec

    def find_by_name(self, name: str) -> ConnectionSpec | None:
        return next((c for c in self._connections.values() if c.name == name), None)

    def edit(self, connection_id: str, **updates: Any) -> ConnectionSpec:
        """Apply *updates* to a saved connection, re-validating the result."""
        spec = self.get(connection_id).updated(**updates)
        self._connections[connection_id] = spec
        return spec

    def remove(self, connection_id: str) -> bool:
        """Remove a connection. Returns True if it existed."""
        return self._connections.pop(connection_id, None) is not None

    def list(self) -> list[ConnectionSpec]:
        return list(self._connections.values())

    def __len__(self) -> int:
        return len(self._connections)
