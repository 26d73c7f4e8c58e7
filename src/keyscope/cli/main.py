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
"""keyscope CLI — browse, inspect and prune Redis keyspaces."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from keyscope import __version__
from keyscope.config.properties.redis import RedisProperties
from keyscope.core.config import Config
from keyscope.logging.structlog_adapter import StructlogAdapter


@click.group()
@click.version_option(version=__version__, prog_name="keyscope")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ./keyscope.yaml or ./keyscope.toml).",
)
@click.option("--connection", "-c", "connection_name", default=None, help="Use a saved connection by name.")
@click.option("--host", default=None, help="Redis host.")
@click.option("--port", type=int, default=None, help="Redis port.")
@click.option("--password", default=None, help="Redis password.")
@click.option("--db", type=int, default=None, help="Database index.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    connection_name: str | None,
    host: str | None,
    port: int | None,
    password: str | None,
    db: int | None,
) -> None:
    """keyscope — incremental Redis keyspace browser."""
    obj: dict[str, Any] = ctx.ensure_object(dict)
    config = Config.load(config_path)
    StructlogAdapter().configure(config)

    defaults = config.bind(RedisProperties)
    obj["config"] = config
    obj["connection_name"] = connection_name
    obj["defaults"] = {
        "name": defaults.name,
        "host": defaults.host,
        "port": defaults.port,
        "password": defaults.password,
        "db": defaults.db,
    }
    obj["overrides"] = {
        k: v for k, v in {"host": host, "port": port, "password": password, "db": db}.items() if v is not None
    }


from keyscope.cli.connections import connections_command, ping_command
from keyscope.cli.delete import delete_command, flush_command
from keyscope.cli.get import get_command
from keyscope.cli.keys import keys_command

cli.add_command(keys_command, name="keys")
cli.add_command(get_command, name="get")
cli.add_command(delete_command, name="delete")
cli.add_command(flush_command, name="flush")
cli.add_command(connections_command, name="connections")
cli.add_command(ping_command, name="ping")
