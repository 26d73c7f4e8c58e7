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
"""'keyscope delete' and 'keyscope flush' — confirmed destructive commands."""

from __future__ import annotations

from typing import Any

import click

from keyscope.browser.deletion import ConfirmPrompt, DeleteStatus
from keyscope.cli.console import console, print_success
from keyscope.cli.runtime import open_browser, run
from keyscope.kernel.exceptions import KeyscopeException


def _prompt(assume_yes: bool) -> ConfirmPrompt:
    if assume_yes:
        return lambda message: True
    return lambda message: click.confirm(message, default=False)


async def _delete(obj: dict[str, Any], key: str, assume_yes: bool) -> None:
    async with open_browser(obj, confirm=_prompt(assume_yes)) as browser:
        result = await browser.deletion.delete(key)

    if result.status is DeleteStatus.FAILED:
        raise KeyscopeException(result.error or "Delete failed")
    if result.status is DeleteStatus.CANCELLED:
        console.print("[warning]Cancelled[/warning]")
        return
    print_success(f"Key '{key}' deleted.")


async def _flush(obj: dict[str, Any], assume_yes: bool) -> None:
    async with open_browser(obj, confirm=_prompt(assume_yes)) as browser:
        result = await browser.deletion.flush_all()

    if result.status is DeleteStatus.FAILED:
        raise KeyscopeException(result.error or "Flush failed")
    if result.status is DeleteStatus.CANCELLED:
        console.print("[warning]Cancelled[/warning]")
        return
    print_success("Database flushed.")


@click.command()
@click.argument("key")
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def delete_command(obj: dict[str, Any], key: str, assume_yes: bool) -> None:
    """Delete KEY after confirmation."""
    run(_delete(obj, key, assume_yes))


@click.command()
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def flush_command(obj: dict[str, Any], assume_yes: bool) -> None:
    """Remove every key from the connected database."""
    run(_flush(obj, assume_yes))
