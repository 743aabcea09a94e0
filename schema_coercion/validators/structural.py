# Copyright 2025 TIER IV, inc.
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

"""Validators that recurse into mappings and sequences."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from ..exceptions import (
    LengthViolationError,
    MissingRequiredPropertyError,
    TypeMismatchError,
    UniqueItemsError,
    UnpermittedAdditionalPropertyError,
    ValidationError,
)
from ..models.schema import Schema
from .base import BaseValidator, ValidationOutcome


class ObjectValidator(BaseValidator):

    def coerce_and_validate(
        self, value: Any, schema: Schema, parent_all_of: bool = False, **keyword_args: Any
    ) -> ValidationOutcome:
        """Validate a mapping property by property.

        Args:
            parent_all_of: Set by an enclosing ``allOf``, which then checks
                undeclared keys across all of its object schemas itself.
        """
        if not isinstance(value, Mapping):
            return value, TypeMismatchError(value, schema, "object")

        missing = [name for name in schema.required if name not in value]
        if missing:
            return value, MissingRequiredPropertyError(value, schema, missing)

        if schema.additional_properties is False and not parent_all_of:
            unknown = [name for name in value if name not in schema.properties]
            if unknown:
                return value, UnpermittedAdditionalPropertyError(value, schema, unknown)

        coerced = {}
        for name, item in value.items():
            sub_schema = self._property_schema(name, schema)
            if sub_schema is None:
                coerced[name] = item
                continue
            result, err = self.validatable.validate_schema(item, sub_schema)
            if err is not None:
                return value, err.prepend_path(name)
            coerced[name] = result

        if self.coerce_value:
            return coerced, None
        return value, None

    @staticmethod
    def _property_schema(name: str, schema: Schema) -> Optional[Schema]:
        if name in schema.properties:
            return schema.properties[name]
        if isinstance(schema.additional_properties, Schema):
            return schema.additional_properties
        return None


class ArrayValidator(BaseValidator):

    def coerce_and_validate(self, value: Any, schema: Schema, **keyword_args: Any) -> ValidationOutcome:
        if not isinstance(value, (list, tuple)):
            return value, TypeMismatchError(value, schema, "array")

        err = self._check_items_count(value, schema) or self._check_unique_items(value, schema)
        if err is not None:
            return value, err

        coerced: List[Any] = []
        for idx, item in enumerate(value):
            result, err = self.validatable.validate_schema(item, schema.items)
            if err is not None:
                return value, err.prepend_path(idx)
            coerced.append(result)

        if self.coerce_value:
            return coerced, None
        return value, None

    @staticmethod
    def _check_items_count(value: Sequence[Any], schema: Schema) -> Optional[ValidationError]:
        if schema.max_items is not None and len(value) > schema.max_items:
            return LengthViolationError(
                value, schema, f"{len(value)} items is more than max items {schema.max_items} in {schema.reference}"
            )
        if schema.min_items is not None and len(value) < schema.min_items:
            return LengthViolationError(
                value, schema, f"{len(value)} items is less than min items {schema.min_items} in {schema.reference}"
            )
        return None

    @staticmethod
    def _check_unique_items(value: Sequence[Any], schema: Schema) -> Optional[ValidationError]:
        if not schema.unique_items:
            return None
        # items may be unhashable mappings, so compare pairwise
        for idx, item in enumerate(value):
            for other in value[idx + 1:]:
                if item == other and isinstance(item, bool) == isinstance(other, bool):
                    return UniqueItemsError(value, schema)
        return None
