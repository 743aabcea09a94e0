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

"""Custom exceptions for schema validation and coercion."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, Optional, Tuple

from .utils.pointer import PathToken, format_pointer

if TYPE_CHECKING:
    from .models.schema import Schema


class SchemaCoercionError(Exception):
    """Base exception for schema coercion related errors."""
    pass


class SchemaDefinitionError(SchemaCoercionError):
    """Exception raised when a schema mapping cannot be turned into a Schema."""
    pass


class ScopeConfigurationError(SchemaCoercionError):
    """Exception raised for validator scope registration and lookup errors."""
    pass


class CompositionOperator(str, Enum):
    ANY_OF = "anyOf"
    ALL_OF = "allOf"
    ONE_OF = "oneOf"


class ValidationError(SchemaCoercionError):
    """A value does not conform to a schema node.

    ``path`` locates the offending value inside the validated document. It is
    empty where the error is raised and grows as the error travels back up
    through object and array validators.
    """

    def __init__(self, value: Any, schema: Optional["Schema"], reason: str):
        self.value = value
        self.schema = schema
        self.reason = reason
        self.path: Tuple[PathToken, ...] = ()
        super().__init__(reason)

    @property
    def pointer(self) -> str:
        return format_pointer(self.path)

    @property
    def schema_reference(self) -> str:
        if self.schema is None:
            return "#"
        return self.schema.reference

    def prepend_path(self, token: PathToken) -> "ValidationError":
        self.path = (token,) + self.path
        return self

    def __str__(self) -> str:
        location = self.pointer or "/"
        return f"{location}: {self.reason}"


class TypeMismatchError(ValidationError):
    """The value's runtime shape is incompatible with the declared type."""

    def __init__(self, value: Any, schema: Optional["Schema"], expected: Optional[str] = None):
        expected = expected or (schema.type if schema is not None else None) or "unknown"
        self.expected = expected
        reference = schema.reference if schema is not None else "#"
        super().__init__(
            value,
            schema,
            f"{value!r} class is {type(value).__name__} but it's not valid {expected} in {reference}",
        )


class UnsupportedValueError(ValidationError):
    """The value has the right kind but cannot be represented exactly."""
    pass


class MissingRequiredPropertyError(ValidationError):
    def __init__(self, value: Any, schema: "Schema", missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            value,
            schema,
            f"required parameters {', '.join(self.missing)} not exist in {schema.reference}",
        )


class UnpermittedAdditionalPropertyError(ValidationError):
    def __init__(self, value: Any, schema: "Schema", keys: Iterable[str]):
        self.keys = tuple(keys)
        super().__init__(
            value,
            schema,
            f"properties {', '.join(self.keys)} are not defined in {schema.reference}",
        )


class CompositionFailedError(ValidationError):
    def __init__(self, value: Any, schema: "Schema", operator: CompositionOperator, detail: str):
        self.operator = operator
        self.detail = detail
        super().__init__(value, schema, f"{value!r} isn't {operator.value} in {schema.reference}: {detail}")


class FormatParseError(ValidationError):
    def __init__(self, value: Any, schema: "Schema", detail: str):
        self.format = schema.format
        super().__init__(
            value,
            schema,
            f"{value!r} is not a valid {schema.format} in {schema.reference}: {detail}",
        )


class EnumMismatchError(ValidationError):
    def __init__(self, value: Any, schema: "Schema"):
        super().__init__(
            value,
            schema,
            f"{value!r} isn't included in enum {list(schema.enum or ())!r} in {schema.reference}",
        )


class RangeViolationError(ValidationError):
    """A number falls outside a minimum/maximum bound."""
    pass


class LengthViolationError(ValidationError):
    """A string length or array item count falls outside its bounds."""
    pass


class PatternMismatchError(ValidationError):
    def __init__(self, value: Any, schema: "Schema"):
        super().__init__(
            value,
            schema,
            f"{value!r} does not match pattern {schema.pattern!r} in {schema.reference}",
        )


class UniqueItemsError(ValidationError):
    def __init__(self, value: Any, schema: "Schema"):
        super().__init__(value, schema, f"{value!r} contains duplicate items in {schema.reference}")
