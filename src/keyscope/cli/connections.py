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
"""'keyscope connections' and 'keyscope ping' — saved connections and reachability."""

from __future__ import annotations

from typing import Any

import click
from rich.table import Table

from keyscope.cli.console import console, print_success
from keyscope.cli.runtime import resolve_connection, run
from keyscope.session.manager import SessionManager
from keyscope.session.registry import ConnectionRegistry


@click.command()
@click.pass_obj
def connections_command(obj: dict[str, Any]) -> None:
    """List connections saved under keyscope.connections."""
    registry = ConnectionRegistry.from_config(obj["config"])
    if not len(registry):
        console.print("[dim]No saved connections.[/dim]")
        return

    table = Table(title="Saved Connections", border_style="dim")
    table.add_column("Name", style="info")
    table.add_column("Address")
    for spec in registry.list():
        table.add_row(spec.name, f"{spec.host}:{spec.port}/{spec.db}")
    console.print(table)


async def _ping(obj: dict[str, Any]) -> None:
    spec = resolve_connection(obj)
    sessions = SessionManager(client_factory=obj.get("client_factory"))
    await sessions.probe(spec)
    print_success(f"Connection '{spec.name}' at {spec.host}:{spec.port} is reachable.")


@click.command()
@click.pass_obj
def ping_command(obj: dict[str, Any]) -> None:
    """Check that the selected connection answers."""
    run(_ping(obj))
