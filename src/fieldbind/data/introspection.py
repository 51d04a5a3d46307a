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
"""Declared-field introspection for model types.

Supports the model kinds found in typical service code:

- dataclasses (``dataclasses.fields``)
- Pydantic models (``model_fields``)
- SQLAlchemy declarative mapped classes (mapper attributes)
- plain annotated classes, including ``@property`` members

Class-level members (``ClassVar``) and private (``_``-prefixed) names are
never reported as fields.
"""

from __future__ import annotations

import dataclasses
import inspect
from typing import Any, ClassVar, get_origin

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Mapper


def declared_fields(model: type) -> list[str]:
    """Get the instance field names of *model* in natural declaration order."""
    if dataclasses.is_dataclass(model):
        names = [f.name for f in dataclasses.fields(model)]
    elif issubclass(model, BaseModel):
        names = list(model.model_fields)
    elif (mapper := _sqlalchemy_mapper(model)) is not None:
        names = [prop.key for prop in mapper.attrs]
    else:
        names = _annotated_fields(model)
    return [name for name in names if not name.startswith("_")]


def declaring_type(model: type, name: str) -> type | None:
    """Find the class in *model*'s MRO that declares the field *name*.

    Returns ``None`` when *name* is not one of ``declared_fields(model)``.
    Annotations win over plain namespace entries, so a field annotated on a
    base class is reported as declared there even when a subclass re-exposes
    it (as SQLAlchemy does with instrumented attributes).
    """
    if name not in declared_fields(model):
        return None
    for klass in model.__mro__:
        if name in inspect.get_annotations(klass):
            return klass
    for klass in model.__mro__:
        if name in vars(klass):
            return klass
    return model


def _sqlalchemy_mapper(model: type) -> Mapper | None:
    mapper = sa_inspect(model, raiseerr=False)
    return mapper if isinstance(mapper, Mapper) else None


def _annotated_fields(model: type) -> list[str]:
    """Annotated instance attributes followed by properties, base classes first.

    Annotations are read unevaluated, so hints naming types imported only
    under ``TYPE_CHECKING`` are fine.
    """
    names: list[str] = []
    for klass in reversed(model.__mro__):
        for name, annotation in inspect.get_annotations(klass).items():
            if name not in names and not _is_class_var(annotation):
                names.append(name)
    for klass in reversed(model.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, property) and name not in names:
                names.append(name)
    return names


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.split("[", 1)[0].strip() in ("ClassVar", "typing.ClassVar")
    return annotation is ClassVar or get_origin(annotation) is ClassVar
