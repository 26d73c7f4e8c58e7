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
"""Connection specifications validated before any network call."""

from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from keyscope.session.session import Session
from keyscope.validation.helpers import validate_model


class ConnectionSpec(BaseModel):
    """How to reach one store: display name, address and credentials."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str = Field(min_length=1)
    host: str = Field(min_length=1)
    port: int = Field(default=6379, ge=1, le=65535)
    password: str = Field(default="", repr=False)
    db: int = Field(default=0, ge=0)

    @classmethod
    def create(cls, **data: Any) -> ConnectionSpec:
        """Validate *data*, raising ``ValidationException`` on bad input."""
        return validate_model(cls, data)

    def updated(self, **changes: Any) -> ConnectionSpec:
        """Return a re-validated copy with *changes* applied. The id is kept."""
        changes.pop("id", None)
        return validate_model(type(self), {**self.model_dump(), **changes})

    def to_session(self) -> Session:
        return Session(id=self.id, name=self.name, host=self.host, port=self.port, db=self.db)
