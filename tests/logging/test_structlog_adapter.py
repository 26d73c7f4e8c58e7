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
"""Tests for StructlogAdapter, the default LoggingPort implementation."""

import io
import json
import logging

import pytest

from keyscope.core.config import Config
from keyscope.logging.port import LoggingPort
from keyscope.logging.structlog_adapter import StructlogAdapter


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter(stream=io.StringIO())
        adapter.configure(Config({}))
        assert adapter._root_level == "WARNING"
        assert adapter._format == "console"
        assert logging.getLogger().level == logging.WARNING

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter(stream=io.StringIO())
        adapter.configure(Config({"keyscope": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_applies_module_levels(self):
        adapter = StructlogAdapter(stream=io.StringIO())
        config = Config({"keyscope": {"logging": {"level": {"root": "WARNING", "keyscope.browser": "DEBUG"}}}})
        adapter.configure(config)
        assert logging.getLogger("keyscope.browser").level == logging.DEBUG
        logging.getLogger("keyscope.browser").setLevel(logging.NOTSET)

    def test_env_overrides_root_level(self, monkeypatch):
        monkeypatch.setenv("KEYSCOPE_LOGGING_LEVEL_ROOT", "ERROR")
        adapter = StructlogAdapter(stream=io.StringIO())
        adapter.configure(Config({}))
        assert adapter._root_level == "ERROR"


class TestStructlogAdapterOutput:
    def test_stdlib_records_render_as_json(self):
        stream = io.StringIO()
        adapter = StructlogAdapter(stream=stream)
        adapter.configure(Config({"keyscope": {"logging": {"format": "json", "level": {"root": "INFO"}}}}))

        logging.getLogger("keyscope.test").info("Connected to '%s'", "local")

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "Connected to 'local'"
        assert record["level"] == "info"
        assert record["logger"] == "keyscope.test"

    def test_console_format(self):
        stream = io.StringIO()
        adapter = StructlogAdapter(stream=stream)
        adapter.configure(Config({"keyscope": {"logging": {"level": {"root": "INFO"}}}}))

        logging.getLogger("keyscope.test").warning("Scan failed")

        assert "Scan failed" in stream.getvalue()

    def test_records_below_root_level_are_dropped(self):
        stream = io.StringIO()
        StructlogAdapter(stream=stream).configure(Config({}))
        logging.getLogger("keyscope.test").info("quiet")
        assert stream.getvalue() == ""

    def test_set_level(self):
        adapter = StructlogAdapter()
        adapter.set_level("keyscope.store", "error")
        assert logging.getLogger("keyscope.store").level == logging.ERROR
        logging.getLogger("keyscope.store").setLevel(logging.NOTSET)

    def test_set_level_unknown_name_means_info(self):
        adapter = StructlogAdapter()
        adapter.set_level("keyscope.views", "chatty")
        assert logging.getLogger("keyscope.views").level == logging.INFO
        logging.getLogger("keyscope.views").setLevel(logging.NOTSET)

    def test_get_logger_renders_through_configured_pipeline(self):
        stream = io.StringIO()
        adapter = StructlogAdapter(stream=stream)
        adapter.configure(Config({"keyscope": {"logging": {"format": "json", "level": {"root": "INFO"}}}}))

        adapter.get_logger("keyscope.cli").info("keys listed", count=3)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "keys listed"
        assert record["count"] == 3
