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
"""Tests for layered Config loading, lookup and env overrides."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from keyscope.core.config import Config, config_properties


@config_properties(prefix="keyscope.sample")
@dataclass
class SampleProperties:
    count: int = 1
    ratio: float = 0.5
    enabled: bool = False
    label: str = "none"


class TestLoad:
    def test_packaged_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = Config.load()
        assert config.get("keyscope.redis.host") == "localhost"
        assert config.get("keyscope.browser.batch_size") == 100
        assert config.loaded_sources == ["keyscope-defaults.yaml (defaults)"]

    def test_yaml_in_working_directory_overrides_defaults(self, tmp_path, monkeypatch):
        (tmp_path / "keyscope.yaml").write_text("keyscope:\n  redis:\n    host: redis.internal\n")
        monkeypatch.chdir(tmp_path)

        config = Config.load()

        assert config.get("keyscope.redis.host") == "redis.internal"
        assert config.get("keyscope.redis.port") == 6379
        assert len(config.loaded_sources) == 2

    def test_explicit_toml_path(self, tmp_path):
        path = tmp_path / "custom.toml"
        path.write_text('[keyscope.browser]\nbatch_size = 500\n')

        config = Config.load(path)

        assert config.get("keyscope.browser.batch_size") == 500
        assert config.get("keyscope.browser.debounce_ms") == 400

    def test_missing_explicit_file_falls_back_to_defaults(self, tmp_path):
        config = Config.load(tmp_path / "absent.yaml")
        assert config.get("keyscope.redis.host") == "localhost"

    def test_without_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = Config.load(load_defaults=False)
        assert config.to_dict() == {}


class TestGet:
    def test_dotted_lookup_and_default(self):
        config = Config({"keyscope": {"redis": {"host": "h"}}})
        assert config.get("keyscope.redis.host") == "h"
        assert config.get("keyscope.redis.port", 6379) == 6379
        assert config.get("keyscope.redis.host.deeper") is None

    def test_env_var_wins(self, monkeypatch):
        monkeypatch.setenv("KEYSCOPE_REDIS_HOST", "from-env")
        config = Config({"keyscope": {"redis": {"host": "h"}}})
        assert config.get("keyscope.redis.host") == "from-env"

    def test_env_key(self):
        assert Config.env_key("keyscope.browser.batch-size") == "KEYSCOPE_BROWSER_BATCH_SIZE"

    def test_placeholders(self, monkeypatch):
        monkeypatch.setenv("REDIS_PASSWORD", "s3cret")
        config = Config(
            {
                "keyscope": {
                    "redis": {"password": "${REDIS_PASSWORD}", "host": "${keyscope.default-host}", "name": "${NAME:local}"},
                    "default-host": "cache",
                }
            }
        )
        assert config.get("keyscope.redis.password") == "s3cret"
        assert config.get("keyscope.redis.host") == "cache"
        assert config.get("keyscope.redis.name") == "local"

    def test_unresolvable_placeholder(self):
        config = Config({"keyscope": {"redis": {"host": "${NOWHERE_TO_BE_FOUND}"}}})
        with pytest.raises(ValueError, match="Cannot resolve placeholder"):
            config.get("keyscope.redis.host")

    def test_get_section(self):
        config = Config({"keyscope": {"logging": {"level": {"root": "INFO"}}}})
        assert config.get_section("keyscope.logging.level") == {"root": "INFO"}
        assert config.get_section("keyscope.missing") == {}


class TestBind:
    def test_dataclass_defaults(self):
        props = Config({}).bind(SampleProperties)
        assert props == SampleProperties()

    def test_values_from_data(self):
        config = Config({"keyscope": {"sample": {"count": 7, "enabled": True}}})
        props = config.bind(SampleProperties)
        assert props.count == 7
        assert props.enabled is True

    def test_env_strings_are_coerced(self, monkeypatch):
        monkeypatch.setenv("KEYSCOPE_SAMPLE_COUNT", "42")
        monkeypatch.setenv("KEYSCOPE_SAMPLE_RATIO", "0.25")
        monkeypatch.setenv("KEYSCOPE_SAMPLE_ENABLED", "yes")
        monkeypatch.setenv("KEYSCOPE_SAMPLE_LABEL", "env")

        props = Config({}).bind(SampleProperties)

        assert props == SampleProperties(count=42, ratio=0.25, enabled=True, label="env")

    def test_undecorated_class_rejected(self):
        @dataclass
        class Plain:
            x: int = 0

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
