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
"""Glue between click commands and the async browser."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Coroutine
from contextlib import asynccontextmanager
from typing import Any

import click

from keyscope.application import KeyspaceBrowser
from keyscope.browser.deletion import ConfirmPrompt
from keyscope.cli.console import print_error
from keyscope.kernel.exceptions import KeyscopeException, ResourceNotFoundException
from keyscope.session.connection import ConnectionSpec
from keyscope.session.registry import ConnectionRegistry


def resolve_connection(obj: dict[str, Any]) -> ConnectionSpec:
    """Pick the saved connection named on the command line, or build one from options."""
    name = obj.get("connection_name")
    if name:
        registry = ConnectionRegistry.from_config(obj["config"])
        spec = registry.find_by_name(name)
        if spec is None:
            raise ResourceNotFoundException(f"No saved connection named '{name}'", code="CONNECTION_NOT_FOUND")
        return spec.updated(**obj["overrides"]) if obj["overrides"] else spec
    return ConnectionSpec.create(**{**obj["defaults"], **obj["overrides"]})


@asynccontextmanager
async def open_browser(obj: dict[str, Any], confirm: ConfirmPrompt | None = None) -> AsyncIterator[KeyspaceBrowser]:
    """Connect a browser for the duration of one command."""
    spec = resolve_connection(obj)
    browser = KeyspaceBrowser.from_config(obj["config"], confirm=confirm, client_factory=obj.get("client_factory"))
    async with browser:
        await browser.sessions.connect(spec)
        yield browser


def run(coro: Coroutine[Any, Any, None]) -> None:
    """Run a command coroutine, turning keyscope errors into exit code 1."""
    try:
        asyncio.run(coro)
    except KeyscopeException as exc:
        print_error(str(exc))
        raise click.exceptions.Exit(1) from exc
