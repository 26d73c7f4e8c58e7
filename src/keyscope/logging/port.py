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
"""Logging port: how the command line and the browser set up log output.

keyscope modules never configure handlers themselves; they log through
``logging.getLogger(__name__)`` and leave rendering to whichever adapter
the entry point configured.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from keyscope.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Configures log rendering and levels for keyscope."""

    def configure(self, config: Config) -> None:
        """Install the renderer and levels described under ``keyscope.logging``.

        ``keyscope.logging.format`` selects ``console`` or ``json`` output;
        ``keyscope.logging.level.root`` sets the root level and every other
        key under ``keyscope.logging.level`` names a logger, such as
        ``keyscope.browser: DEBUG`` to trace scan steps.
        """
        ...

    def get_logger(self, name: str) -> Any:
        """Return a logger that renders through the configured pipeline."""
        ...

    def set_level(self, name: str, level: str) -> None:
        """Change one logger's level at runtime. Unknown level names mean INFO."""
        ...
