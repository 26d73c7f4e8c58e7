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
"""'keyscope get' — show a key's type, TTL and value."""

from __future__ import annotations

import json
from typing import Any

import click
from rich.markup import escape

from keyscope.cli.console import console
from keyscope.cli.runtime import open_browser, run


def _jsonable(value: Any) -> Any:
    if isinstance(value, set):
        return sorted(value)
    if isinstance(value, list):
        return [list(item) if isinstance(item, tuple) else item for item in value]
    return value


async def _show(obj: dict[str, Any], key: str) -> None:
    async with open_browser(obj) as browser:
        result = await browser.inspector.inspect(key)

    console.print(f"[dim]KEY:[/dim]  {escape(result.key)}", highlight=False)
    console.print(f"[dim]TYPE:[/dim] {result.type}", highlight=False)
    console.print(f"[dim]TTL:[/dim]  {result.ttl}", highlight=False)
    if isinstance(result.value, str) or result.value is None:
        console.print(result.value if result.value is not None else "(unsupported type)", markup=False, highlight=False)
    else:
        console.print_json(json.dumps(_jsonable(result.value)))


@click.command()
@click.argument("key")
@click.pass_obj
def get_command(obj: dict[str, Any], key: str) -> None:
    """Show KEY's type, TTL and value."""
    run(_show(obj, key))
