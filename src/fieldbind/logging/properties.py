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
"""Logging configuration properties."""

from __future__ import annotations

from dataclasses import dataclass, field

from fieldbind.core.config import config_properties


@config_properties(prefix="fieldbind.logging")
@dataclass
class LoggingProperties:
    """Configuration for logging (fieldbind.logging.*).

    ``level`` maps logger names to levels, with the ``root`` key setting the
    root level. A bare level string (``level: DEBUG`` or
    ``FIELDBIND_LOGGING_LEVEL=DEBUG``) is shorthand for ``{"root": ...}``.
    """

    level: dict[str, str] | str = field(default_factory=lambda: {"root": "INFO"})
    format: str = "console"

    def levels(self) -> dict[str, str]:
        """Upper-cased levels keyed by logger name, ``root`` included."""
        raw = self.level if isinstance(self.level, dict) else {"root": self.level}
        return {name: str(value).upper() for name, value in raw.items()}
