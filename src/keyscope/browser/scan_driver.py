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
"""ScanDriver — one stateless step of a cursor scan."""

from __future__ import annotations

import logging

from keyscope.browser.events import ScanBatch
from keyscope.session.ports.outbound import SessionProvider

_logger = logging.getLogger(__name__)


class ScanDriver:
    """Wraps a single store scan call into a (cursor, pattern, count) -> batch step.

    Owns no state: the client is looked up from the session provider on
    every call, so a step always runs against the current session.
    """

    def __init__(self, sessions: SessionProvider) -> None:
        self._sessions = sessions

    async def scan(self, cursor: str, pattern: str, batch_size: int) -> ScanBatch:
        """Run one scan step.

        ``batch_size`` is a hint: the store filters after examining that
        many entries, so the batch may hold fewer or more matching keys.

        Raises:
            NoActiveSessionException: If no session is connected.
            BackendException: If the store call fails.
        """
        client = self._sessions.get_client()
        keys, next_cursor = await client.scan(cursor, pattern, batch_size)
        _logger.debug(
            "scan cursor=%s pattern=%s count=%d -> %d keys, next=%s",
            cursor,
            pattern,
            batch_size,
            len(keys),
            next_cursor,
        )
        return ScanBatch(keys=tuple(keys), cursor=next_cursor)
