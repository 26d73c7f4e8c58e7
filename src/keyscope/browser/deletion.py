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
"""DeletionReconciler — confirmed deletes applied to the store and the cache."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from keyscope.browser.keyspace_cache import KeyspaceCache
from keyscope.kernel.exceptions import KeyscopeException
from keyscope.session.ports.outbound import SessionProvider

_logger = logging.getLogger(__name__)

ConfirmPrompt = Callable[[str], bool]
"""Synchronous yes/no prompt supplied by the host."""


class DeleteStatus(Enum):
    CANCELLED = "cancelled"
    DELETED = "deleted"
    FAILED = "failed"


@dataclass(frozen=True)
class DeleteResult:
    target: str
    status: DeleteStatus
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is DeleteStatus.DELETED


class DeletionReconciler:
    """Removes keys from the store and patches the cache in place.

    A successful delete removes the key from the cached listing without a
    rescan. A failed delete leaves the cache untouched (the key is still
    there, which is the truth) and publishes the error to cache observers.
    """

    def __init__(self, sessions: SessionProvider, cache: KeyspaceCache, confirm: ConfirmPrompt) -> None:
        self._sessions = sessions
        self._cache = cache
        self._confirm = confirm

    async def delete(self, key: str) -> DeleteResult:
        if not self._confirm(f"Are you sure you want to delete key: {key}?"):
            return DeleteResult(key, DeleteStatus.CANCELLED)

        try:
            await self._sessions.get_client().delete(key)
        except KeyscopeException as exc:
            message = f"Failed to delete key: {exc}"
            _logger.warning("Delete of %r failed: %s", key, exc)
            await self._cache.report_error(message)
            return DeleteResult(key, DeleteStatus.FAILED, message)

        _logger.info("Deleted key %r", key)
        await self._cache.remove_local(key)
        return DeleteResult(key, DeleteStatus.DELETED)

    async def flush_all(self) -> DeleteResult:
        """Flush the whole database, then rescan from scratch."""
        if not self._confirm("Are you sure you want to flush the entire database? This action cannot be undone."):
            return DeleteResult("*", DeleteStatus.CANCELLED)

        try:
            await self._sessions.get_client().flush_all()
        except KeyscopeException as exc:
            message = f"Failed to flush database: {exc}"
            _logger.warning("Flush failed: %s", exc)
            await self._cache.report_error(message)
            return DeleteResult("*", DeleteStatus.FAILED, message)

        _logger.info("Database flushed")
        await self._cache.refresh()
        return DeleteResult("*", DeleteStatus.DELETED)
