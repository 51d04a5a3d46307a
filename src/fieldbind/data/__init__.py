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
"""fieldbind Data — field selection for model types.

Framework-agnostic: works with dataclasses, Pydantic models, SQLAlchemy
mapped classes and plain annotated classes.
"""

from fieldbind.data.builder import FieldSelectorBuilder
from fieldbind.data.introspection import declared_fields, declaring_type
from fieldbind.data.selector import FieldRef, Selector, field_ref, fields_of, resolve_selector

__all__ = [
    "FieldRef",
    "FieldSelectorBuilder",
    "Selector",
    "declared_fields",
    "declaring_type",
    "field_ref",
    "fields_of",
    "resolve_selector",
]
