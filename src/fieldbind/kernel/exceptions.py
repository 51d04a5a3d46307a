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
"""Exception hierarchy for fieldbind.

All library exceptions inherit from FieldBindException, which carries an
optional error code and a context dict for structured error data.

Categories:
- SelectorException: a selector passed to a builder is a programming error
  - InvalidSelectorShapeException: selector is not a single field access
  - ForeignPropertyException: selector names a field declared on another type
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class FieldBindException(Exception):
    """Base exception for all fieldbind errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "SELECTOR_INVALID_SHAPE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Selector Exceptions
# =============================================================================


class SelectorException(FieldBindException):
    """A field selector could not be resolved against the builder's model."""


class InvalidSelectorShapeException(SelectorException):
    """The selector does not reduce to a single field access."""

    CODE = "SELECTOR_INVALID_SHAPE"

    def __init__(
        self,
        message: str,
        *,
        model: type | None = None,
        selector: Any = None,
    ) -> None:
        context: dict[str, Any] = {}
        if model is not None:
            context["model"] = _qualified_name(model)
        if selector is not None:
            context["selector"] = repr(selector)
        super().__init__(message, code=self.CODE, context=context)


class ForeignPropertyException(SelectorException):
    """The selected field is not declared by exactly the builder's model type."""

    CODE = "SELECTOR_FOREIGN_PROPERTY"

    def __init__(self, expected_type: type, actual_type: type, field: str) -> None:
        self.expected_type = expected_type
        self.actual_type = actual_type
        self.field = field
        super().__init__(
            f"Type {_qualified_name(expected_type)} required, but received "
            f"{_qualified_name(actual_type)} (field '{field}').",
            code=self.CODE,
            context={
                "expected_type": _qualified_name(expected_type),
                "actual_type": _qualified_name(actual_type),
                "field": field,
            },
        )


def _qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"
