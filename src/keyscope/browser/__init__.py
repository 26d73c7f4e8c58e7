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
"""keyscope browser — scan driver, keyspace cache, search, delete and inspection."""

from keyscope.browser.deletion import DeleteResult, DeleteStatus, DeletionReconciler
from keyscope.browser.events import KeyspaceEvent, KeyspaceObserver, KeyspaceSnapshot, ScanBatch
from keyscope.browser.inspector import KeyInspector, KeyValue
from keyscope.browser.keyspace_cache import KeyspaceCache
from keyscope.browser.patterns import search_pattern, search_term
from keyscope.browser.scan_driver import ScanDriver
from keyscope.browser.search import SearchController

__all__ = [
    "DeleteResult",
    "DeleteStatus",
    "DeletionReconciler",
    "KeyInspector",
    "KeyValue",
    "KeyspaceCache",
    "KeyspaceEvent",
    "KeyspaceObserver",
    "KeyspaceSnapshot",
    "ScanBatch",
    "ScanDriver",
    "SearchController",
    "search_pattern",
    "search_term",
]
