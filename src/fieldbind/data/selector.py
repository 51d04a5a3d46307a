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
"""Field selectors — name a model field without a magic string.

A selector takes one of three shapes:

1. A direct reference: a :class:`FieldRef` (``fields_of(Movie).name``) or a
   SQLAlchemy instrumented attribute (``MovieEntity.title``).
2. A callable evaluated against a recording proxy of the model that returns a
   direct reference, typically a lambda::

       lambda m: m.name

3. A field name string, checked against the model's declared fields.

All shapes resolve to the same :class:`FieldRef` for the same field.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from sqlalchemy.orm.attributes import QueryableAttribute

from fieldbind.data.introspection import declaring_type
from fieldbind.kernel.exceptions import ForeignPropertyException, InvalidSelectorShapeException

Selector: TypeAlias = "FieldRef | str | QueryableAttribute[Any] | Callable[[Any], object]"

_SHAPE_HINT = "You must pass a selector of the form: 'lambda m: m.field'"


@dataclass(frozen=True)
class FieldRef:
    """Reference to one declared field of a model type."""

    model: type
    name: str
    declaring_type: type

    def __getattr__(self, item: str) -> Any:
        if item.startswith("__"):
            raise AttributeError(item)
        raise InvalidSelectorShapeException(
            f"Nested field paths are not supported: '{self.name}.{item}'",
            model=self.model,
        )


class _FieldProxy:
    """Stands in for a model instance; attribute access yields FieldRefs."""

    __slots__ = ("_fieldbind_model",)

    def __init__(self, model: type) -> None:
        object.__setattr__(self, "_fieldbind_model", model)

    def __getattr__(self, name: str) -> FieldRef:
        if name.startswith("__"):
            raise AttributeError(name)
        return field_ref(object.__getattribute__(self, "_fieldbind_model"), name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise InvalidSelectorShapeException(
            f"Selectors cannot assign to fields (tried '{name}')",
            model=object.__getattribute__(self, "_fieldbind_model"),
        )

    def __repr__(self) -> str:
        return f"fields_of({object.__getattribute__(self, '_fieldbind_model').__qualname__})"


def field_ref(model: type, name: str) -> FieldRef:
    """Build a FieldRef for *name* on *model*, failing if it is not a field."""
    declared_on = declaring_type(model, name)
    if declared_on is None:
        raise InvalidSelectorShapeException(
            f"{model.__qualname__} has no field '{name}'",
            model=model,
            selector=name,
        )
    return FieldRef(model=model, name=name, declaring_type=declared_on)


def fields_of(model: type) -> Any:
    """Return a proxy whose attributes are FieldRefs for *model*'s fields.

    Usage::

        Movie_ = fields_of(Movie)
        builder.add(Movie_.name).add(Movie_.genre_id)
    """
    return _FieldProxy(model)


def resolve_selector(model: type, selector: Selector) -> FieldRef:
    """Resolve *selector* and check that *model* itself declares the field.

    The declaring-type check is an exact type match: a field inherited from a
    base class does not belong to a subclass builder.

    Raises:
        InvalidSelectorShapeException: *selector* is not a single field access.
        ForeignPropertyException: the field is declared on another type.
    """
    ref = _to_field_ref(model, selector)
    if ref.declaring_type is not model:
        raise ForeignPropertyException(model, ref.declaring_type, ref.name)
    return ref


def _to_field_ref(model: type, selector: Any) -> FieldRef:
    if isinstance(selector, str):
        return field_ref(model, selector)
    direct = _direct_ref(selector)
    if direct is not None:
        return direct
    if callable(selector):
        try:
            result = selector(_FieldProxy(model))
        except (AttributeError, TypeError) as exc:
            raise InvalidSelectorShapeException(
                f"{_SHAPE_HINT} ({exc})",
                model=model,
                selector=selector,
            ) from exc
        # The lambda may wrap any direct shape, e.g. ``lambda m: Movie.title``.
        boxed = _direct_ref(result)
        if boxed is not None:
            return boxed
    raise InvalidSelectorShapeException(_SHAPE_HINT, model=model, selector=selector)


def _direct_ref(value: Any) -> FieldRef | None:
    if isinstance(value, FieldRef):
        return value
    if isinstance(value, QueryableAttribute):
        return field_ref(value.class_, value.key)
    return None
