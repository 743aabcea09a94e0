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

"""Leaf validators for scalar values."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any

from jsonschema import FormatChecker

from ..exceptions import (
    FormatParseError,
    LengthViolationError,
    PatternMismatchError,
    SchemaDefinitionError,
    TypeMismatchError,
    UnsupportedValueError,
)
from ..models.schema import Schema
from ..utils.numeric import coerce_number, is_integer, is_integral, is_number, parse_decimal
from ..utils.temporal import TEMPORAL_FORMATS, convert_temporal, parse_temporal
from .base import BaseValidator, ValidationOutcome
from .constraints import check_enum, check_minimum_maximum

# Checks email, uuid, ipv4, ipv6, ... and accepts formats it does not know.
_FORMAT_CHECKER = FormatChecker()


@lru_cache(maxsize=256)
def _compile_pattern(pattern: str) -> "re.Pattern[str]":
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise SchemaDefinitionError(f"Invalid pattern {pattern!r}: {exc}") from exc


class StringValidator(BaseValidator):

    def coerce_and_validate(self, value: Any, schema: Schema, **keyword_args: Any) -> ValidationOutcome:
        candidate = self._coerce(value) if self.coerce_value else value
        if not isinstance(candidate, str):
            return value, TypeMismatchError(value, schema, "string")

        err = (
            check_enum(candidate, schema)
            or self._check_pattern(candidate, schema)
            or self._check_length(candidate, schema)
        )
        if err is not None:
            return value, err

        return self._validate_format(value, candidate, schema)

    @staticmethod
    def _coerce(value: Any) -> Any:
        if isinstance(value, bool):
            return "true" if value else "false"
        if is_number(value):
            return str(value)
        return value

    @staticmethod
    def _check_pattern(value: str, schema: Schema):
        if schema.pattern is None:
            return None
        if _compile_pattern(schema.pattern).search(value) is None:
            return PatternMismatchError(value, schema)
        return None

    @staticmethod
    def _check_length(value: str, schema: Schema):
        if schema.max_length is not None and len(value) > schema.max_length:
            return LengthViolationError(
                value, schema, f"{value!r} is longer than max length {schema.max_length} in {schema.reference}"
            )
        if schema.min_length is not None and len(value) < schema.min_length:
            return LengthViolationError(
                value, schema, f"{value!r} is shorter than min length {schema.min_length} in {schema.reference}"
            )
        return None

    def _validate_format(self, original: Any, value: str, schema: Schema) -> ValidationOutcome:
        fmt = schema.format
        if not fmt:
            return value, None

        if fmt in TEMPORAL_FORMATS:
            try:
                parsed = parse_temporal(value, fmt)
            except ValueError as exc:
                return original, FormatParseError(original, schema, str(exc))

            target = self.options.datetime_coerce_class
            if not self.coerce_value or target is None:
                return value, None
            try:
                return convert_temporal(parsed, value, target), None
            except (ValueError, TypeError) as exc:
                return original, FormatParseError(original, schema, str(exc))

        if not _FORMAT_CHECKER.conforms(value, fmt):
            return original, FormatParseError(original, schema, f"does not conform to format '{fmt}'")
        return value, None


class IntegerValidator(BaseValidator):

    def coerce_and_validate(self, value: Any, schema: Schema, **keyword_args: Any) -> ValidationOutcome:
        candidate = value
        if not is_integer(value):
            if not self.coerce_value:
                return value, TypeMismatchError(value, schema, "integer")
            try:
                dec = parse_decimal(value)
            except OverflowError as exc:
                return value, UnsupportedValueError(value, schema, f"{exc} in {schema.reference}")
            except ValueError:
                return value, TypeMismatchError(value, schema, "integer")
            if not is_integral(dec):
                return value, UnsupportedValueError(
                    value, schema, f"{value!r} is not an exact integer in {schema.reference}"
                )
            candidate = int(dec)

        err = check_enum(candidate, schema) or check_minimum_maximum(candidate, schema)
        if err is not None:
            return value, err
        return candidate, None


class FloatValidator(BaseValidator):
    """Validator for ``number``: accepts floats and integers."""

    def coerce_and_validate(self, value: Any, schema: Schema, **keyword_args: Any) -> ValidationOutcome:
        candidate = value
        if self.coerce_value and isinstance(value, str):
            try:
                candidate = coerce_number(value)
            except OverflowError as exc:
                return value, UnsupportedValueError(value, schema, f"{exc} in {schema.reference}")
            except ValueError:
                return value, TypeMismatchError(value, schema, "number")

        if is_integer(candidate):
            coerced, err = self.validatable.validate_integer(candidate, schema)
            if err is not None:
                return value, err
            if not self.coerce_value:
                return coerced, None
            try:
                return float(coerced), None
            except OverflowError:
                return value, UnsupportedValueError(
                    value, schema, f"{value!r} is out of float range in {schema.reference}"
                )

        if not is_number(candidate):
            return value, TypeMismatchError(value, schema, "number")

        err = check_enum(candidate, schema) or check_minimum_maximum(candidate, schema)
        if err is not None:
            return value, err
        return candidate, None


class BooleanValidator(BaseValidator):
    TRUE_VALUES = ("true", "True", "TRUE", "1")
    FALSE_VALUES = ("false", "False", "FALSE", "0")

    def coerce_and_validate(self, value: Any, schema: Schema, **keyword_args: Any) -> ValidationOutcome:
        candidate = self._coerce(value) if self.coerce_value else value
        if not isinstance(candidate, bool):
            return value, TypeMismatchError(value, schema, "boolean")

        err = check_enum(candidate, schema)
        if err is not None:
            return value, err
        return candidate, None

    def _coerce(self, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            text = value.strip()
            if text in self.TRUE_VALUES:
                return True
            if text in self.FALSE_VALUES:
                return False
            return value
        if is_integer(value) and value in (0, 1):
            return value == 1
        return value


class NullValidator(BaseValidator):
    """Selected for every ``None`` value whatever the declared type.

    Schemas are nullable unless they say ``nullable: false``; presence of a
    non-null value must be enforced by the caller.
    """

    def coerce_and_validate(self, value: Any, schema: Schema, **keyword_args: Any) -> ValidationOutcome:
        if value is None and schema.nullable is not False:
            return value, None
        return value, TypeMismatchError(value, schema, schema.type or "null")


class UnspecifiedTypeValidator(BaseValidator):

    def coerce_and_validate(self, value: Any, schema: Schema, **keyword_args: Any) -> ValidationOutcome:
        return value, None
