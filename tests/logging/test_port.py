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
"""Tests for LoggingPort — structural conformance of logging adapters."""

from __future__ import annotations

from typing import Any

import pytest

from fieldbind.core.config import Config
from fieldbind.logging import LoggingPort, LoggingProperties, StructlogAdapter


class RecordingLogging:
    """Minimal adapter that records the levels it is asked to apply."""

    def __init__(self) -> None:
        self.applied: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        for name, level in config.bind(LoggingProperties).levels().items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return name

    def set_level(self, name: str, level: str) -> None:
        self.applied[name] = level


class TestLoggingPortConformance:
    @pytest.mark.parametrize("adapter", [RecordingLogging(), StructlogAdapter()])
    def test_adapters_satisfy_port(self, adapter: Any) -> None:
        assert isinstance(adapter, LoggingPort)

    def test_missing_set_level_does_not_satisfy_port(self) -> None:
        class ReadOnlyLogging:
            def configure(self, config: Config) -> None:
                pass

            def get_logger(self, name: str) -> Any:
                return name

        assert not isinstance(ReadOnlyLogging(), LoggingPort)


class TestPortDrivenConfiguration:
    def test_custom_adapter_receives_bound_levels(self) -> None:
        adapter = RecordingLogging()

        adapter.configure(Config({"fieldbind": {"logging": {"level": {"fieldbind.data.builder": "debug"}}}}))

        assert adapter.applied == {"fieldbind.data.builder": "DEBUG"}

    def test_custom_adapter_defaults_to_root_info(self) -> None:
        adapter = RecordingLogging()

        adapter.configure(Config({}))

        assert adapter.applied == {"root": "INFO"}
