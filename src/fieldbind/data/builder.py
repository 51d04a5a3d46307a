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
"""FieldSelectorBuilder — fluent, ordered field-name lists for model types.

Replaces hand-written "magic string" lists handed to bind/update operations
with selectors that are checked against one model type::

    # module level, built once
    movie_binder = (
        FieldSelectorBuilder.get(Movie)
        .add(lambda m: m.id)
        .add(lambda m: m.name)
    )

    # request handler
    payload = form.model_dump(include=set(movie_binder.fields))

A builder is meant to be configured once and then only read. It is not safe
to mutate one instance from several threads at the same time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

from fieldbind.data.introspection import declared_fields
from fieldbind.data.selector import Selector, resolve_selector

M = TypeVar("M")

logger = logging.getLogger(__name__)


class FieldSelectorBuilder(Generic[M]):
    """Accumulates an ordered, deduplicated list of field names of *model*.

    Every mutating method returns the builder so calls can be chained.
    Selectors are resolved before any mutation, so a rejected selector
    leaves the accumulated names untouched.

    Note:
        Fields inherited from a base class are rejected by ``add``/``remove``
        on a subclass builder (``ForeignPropertyException``), even though
        ``select_all`` includes them.
    """

    def __init__(self, model: type[M]) -> None:
        if not isinstance(model, type):
            raise TypeError(f"FieldSelectorBuilder requires a model class, got {model!r}")
        self._model = model
        # list for editing, tuple handed out to callers; rebuilt on each change
        self._names: list[str] = []
        self._fields: tuple[str, ...] = ()

    @classmethod
    def get(cls, model: type[M]) -> FieldSelectorBuilder[M]:
        """Factory for fluent use: ``FieldSelectorBuilder.get(Movie).add(...)``."""
        return cls(model)

    @property
    def model(self) -> type[M]:
        return self._model

    @property
    def fields(self) -> tuple[str, ...]:
        """The selected field names in insertion order."""
        return self._fields

    def select_all(self) -> FieldSelectorBuilder[M]:
        """Add every declared field of the model, in declaration order."""
        names = declared_fields(self._model)
        for name in names:
            if name not in self._names:
                self._names.append(name)
        self._build()
        logger.debug("Selected all %d fields of %s", len(names), self._model.__qualname__)
        return self

    def add(self, selector: Selector) -> FieldSelectorBuilder[M]:
        """Append the selected field unless it is already present."""
        name = self.get_property_name(selector)
        if name not in self._names:
            self._names.append(name)
        self._build()
        return self

    def remove(self, selector: Selector) -> FieldSelectorBuilder[M]:
        """Drop the selected field if present."""
        name = self.get_property_name(selector)
        if name in self._names:
            self._names.remove(name)
        self._build()
        return self

    def get_property_name(self, selector: Selector) -> str:
        """Resolve *selector* to its field name without changing the builder.

        Raises:
            InvalidSelectorShapeException: *selector* is not a single field access.
            ForeignPropertyException: the field is not declared on the model itself.
        """
        return resolve_selector(self._model, selector).name

    def to_delimited_string(self, delimiter: str) -> str:
        return delimiter.join(self._names)

    def _build(self) -> None:
        self._fields = tuple(self._names)

    def __str__(self) -> str:
        return self.to_delimited_string(",")

    def __repr__(self) -> str:
        return f"FieldSelectorBuilder({self._model.__qualname__}, fields={list(self._fields)!r})"

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields
