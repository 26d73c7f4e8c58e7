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
"""'keyscope keys' — page through keys matching a search term."""

from __future__ import annotations

from typing import Any

import click

from keyscope.cli.console import console
from keyscope.cli.runtime import open_browser, run
from keyscope.kernel.exceptions import KeyscopeException


async def _list_keys(obj: dict[str, Any], term: str, pages: int, fetch_all: bool) -> None:
    async with open_browser(obj) as browser:
        cache = browser.cache
        if term:
            await cache.search(term)

        loaded = 1
        while cache.error is None and cache.has_more and (fetch_all or loaded < pages):
            await cache.load_more()
            loaded += 1

        if cache.error is not None:
            raise KeyscopeException(cache.error)

        for key in cache.keys:
            console.print(key, markup=False, highlight=False)

        suffix = " (more available, use --pages or --all)" if cache.has_more else ""
        console.print(f"[dim]{len(cache)} keys matching {cache.pattern}{suffix}[/dim]", highlight=False)


@click.command()
@click.argument("term", default="")
@click.option("--pages", type=click.IntRange(min=1), default=1, show_default=True, help="Number of scan batches to load.")
@click.option("--all", "fetch_all", is_flag=True, help="Keep scanning until the keyspace is exhausted.")
@click.pass_obj
def keys_command(obj: dict[str, Any], term: str, pages: int, fetch_all: bool) -> None:
    """List keys whose name contains TERM (all keys when omitted)."""
    run(_list_keys(obj, term, pages, fetch_all))


