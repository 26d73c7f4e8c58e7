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
"""Redis connection configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from keyscope.core.config import config_properties


@config_properties(prefix="keyscope.redis")
@dataclass
class RedisProperties:
    """Default connection used by the command line (keyscope.redis.*)."""

    name: str = "default"
    host: str = "localhost"
    port: int = 6379
    password: str = ""
    db: int = 0
    timeout: float = 5.0
