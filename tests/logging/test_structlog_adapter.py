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
"""Tests for StructlogAdapter — default LoggingPort implementation."""

import logging

import pytest
import structlog

from fieldbind.core.config import Config
from fieldbind.logging.port import LoggingPort
from fieldbind.logging.properties import LoggingProperties
from fieldbind.logging.structlog_adapter import StructlogAdapter


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    builder_level = logging.getLogger("fieldbind.data.builder").level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("fieldbind.data.builder").setLevel(builder_level)
    structlog.reset_defaults()


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"fieldbind": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_applies_module_levels(self):
        adapter = StructlogAdapter()
        config = Config({"fieldbind": {"logging": {"level": {"root": "INFO", "fieldbind.data.builder": "DEBUG"}}}})
        adapter.configure(config)
        assert logging.getLogger("fieldbind.data.builder").level == logging.DEBUG

    def test_configure_json_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"fieldbind": {"logging": {"format": "JSON"}}}))
        assert adapter._format == "json"

    def test_scalar_level_from_environment_sets_root(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FIELDBIND_LOGGING_LEVEL", "debug")
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "DEBUG"
        assert adapter._module_levels == {}

    def test_scalar_level_from_file_sets_root(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"fieldbind": {"logging": {"level": "WARNING"}}}))
        assert adapter._root_level == "WARNING"
        assert logging.getLogger().level == logging.WARNING

    def test_format_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("FIELDBIND_LOGGING_FORMAT", "json")
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._format == "json"


class TestStructlogAdapterLoggers:
    def test_get_logger_returns_usable_logger(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("fieldbind.test")
        logger.info("hello", fields=2)

    def test_set_level(self):
        adapter = StructlogAdapter()
        adapter.set_level("fieldbind.custom", "warning")
        assert logging.getLogger("fieldbind.custom").level == logging.WARNING


class TestLoggingProperties:
    def test_defaults(self):
        props = Config({}).bind(LoggingProperties)
        assert props.level == {"root": "INFO"}
        assert props.format == "console"

    def test_levels_from_mapping(self):
        props = LoggingProperties(level={"root": "info", "fieldbind.data": "debug"})
        assert props.levels() == {"root": "INFO", "fieldbind.data": "DEBUG"}

    def test_levels_from_scalar(self):
        assert LoggingProperties(level="error").levels() == {"root": "ERROR"}
