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

"""Keyword constraints shared between validators: enum and numeric bounds."""

from __future__ import annotations

from typing import Any, Optional

from ..exceptions import EnumMismatchError, RangeViolationError, ValidationError
from ..models.schema import Schema


def check_enum(value: Any, schema: Schema) -> Optional[ValidationError]:
    if schema.enum is None:
        return None
    for candidate in schema.enum:
        # 1 == True in Python, enums must not mix them up
        if candidate == value and isinstance(candidate, bool) == isinstance(value, bool):
            return None
    return EnumMismatchError(value, schema)


def check_minimum_maximum(value: Any, schema: Schema) -> Optional[ValidationError]:
    """Check numeric bounds.

    ``exclusiveMinimum``/``exclusiveMaximum`` may be booleans modifying
    ``minimum``/``maximum`` or numbers acting as bounds of their own.
    """
    err = _check_lower(value, schema)
    if err is not None:
        return err
    return _check_upper(value, schema)


def _check_lower(value: Any, schema: Schema) -> Optional[ValidationError]:
    exclusive = schema.exclusive_minimum
    if schema.minimum is not None:
        if exclusive is True and value <= schema.minimum:
            return RangeViolationError(
                value, schema, f"{value!r} is less than or equal to exclusive minimum {schema.minimum} in {schema.reference}"
            )
        if value < schema.minimum:
            return RangeViolationError(
                value, schema, f"{value!r} is less than minimum {schema.minimum} in {schema.reference}"
            )
    if _is_numeric_bound(exclusive) and value <= exclusive:
        return RangeViolationError(
            value, schema, f"{value!r} is less than or equal to exclusive minimum {exclusive} in {schema.reference}"
        )
    return None


def _check_upper(value: Any, schema: Schema) -> Optional[ValidationError]:
    exclusive = schema.exclusive_maximum
    if schema.maximum is not None:
        if exclusive is True and value >= schema.maximum:
            return RangeViolationError(
                value, schema, f"{value!r} is more than or equal to exclusive maximum {schema.maximum} in {schema.reference}"
            )
        if value > schema.maximum:
            return RangeViolationError(
                value, schema, f"{value!r} is more than maximum {schema.maximum} in {schema.reference}"
            )
    if _is_numeric_bound(exclusive) and value >= exclusive:
        return RangeViolationError(
            value, schema, f"{value!r} is more than or equal to exclusive maximum {exclusive} in {schema.reference}"
        )
    return None


def _is_numeric_bound(bound: Any) -> bool:
    return isinstance(bound, (int, float)) and not isinstance(bound, bool)
