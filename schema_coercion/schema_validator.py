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

"""Schema dispatcher and the ``validate`` entry point."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Union

from .exceptions import TypeMismatchError
from .models.options import Options
from .models.schema import Schema
from .validators.base import BaseValidator, ValidationOutcome
from .validators.registry import DEFAULT_SCOPE_NAME, ScopeRegistry, ValidatorCategory, ValidatorScope

logger = logging.getLogger(__name__)

_TYPE_CATEGORIES = {
    "string": ValidatorCategory.STRING,
    "integer": ValidatorCategory.INTEGER,
    "boolean": ValidatorCategory.BOOLEAN,
    "number": ValidatorCategory.FLOAT,
    "object": ValidatorCategory.OBJECT,
    "array": ValidatorCategory.ARRAY,
    "null": ValidatorCategory.NULL,
}


class Validatable(ABC):
    """Entry points validators use to recurse into nested values."""

    @abstractmethod
    def validate_schema(self, value: Any, schema: Optional[Schema], **keyword_args: Any) -> ValidationOutcome:
        pass

    @abstractmethod
    def validate_integer(self, value: Any, schema: Schema) -> ValidationOutcome:
        """Validate as integer; used by the number validator for integral values."""
        pass


class SchemaValidator(Validatable):
    """Dispatches each (value, schema) pair to the validator for its category.

    One instance serves a single top-level validation call: validators are
    built lazily with this call's options and reused for the whole recursion.
    """

    def __init__(self, options: Optional[Options] = None, scope: Union[str, ValidatorScope] = DEFAULT_SCOPE_NAME):
        self.options = options or Options()
        self.scope = ScopeRegistry.resolve(scope)
        self._validators: Dict[ValidatorCategory, BaseValidator] = {}

    def validate_data(self, value: Any, schema: Optional[Schema]) -> Any:
        """Validate and return the coerced value.

        Raises:
            ValidationError: The first conformance failure encountered.
        """
        coerced, err = self.validate_schema(value, schema)
        if err is not None:
            logger.debug(f"Validation failed in scope '{self.scope.name}': {err}")
            raise err
        return coerced

    def validate_schema(self, value: Any, schema: Optional[Schema], **keyword_args: Any) -> ValidationOutcome:
        if schema is None:
            return value, None

        validator = self._select(value, schema)
        if validator is None:
            return value, TypeMismatchError(value, schema)
        return validator.coerce_and_validate(value, schema, **keyword_args)

    def validate_integer(self, value: Any, schema: Schema) -> ValidationOutcome:
        return self._validator(ValidatorCategory.INTEGER).coerce_and_validate(value, schema)

    def _select(self, value: Any, schema: Schema) -> Optional[BaseValidator]:
        return self._validator(self.category_for(value, schema))

    @staticmethod
    def category_for(value: Any, schema: Schema) -> ValidatorCategory:
        """Pick the validator category; combinators win over ``type``."""
        if schema.any_of:
            return ValidatorCategory.ANY_OF
        if schema.all_of:
            return ValidatorCategory.ALL_OF
        if schema.one_of:
            return ValidatorCategory.ONE_OF
        if value is None:
            return ValidatorCategory.NULL
        return _TYPE_CATEGORIES.get(schema.type, ValidatorCategory.UNSPECIFIED_TYPE)

    def _validator(self, category: ValidatorCategory) -> Optional[BaseValidator]:
        validator = self._validators.get(category)
        if validator is None:
            validator_cls = self.scope.get(category)
            if validator_cls is None:
                return None
            logger.debug(f"Creating {validator_cls.__name__} for '{category.value}' in scope '{self.scope.name}'")
            validator = validator_cls(self, self.options)
            self._validators[category] = validator
        return validator


def validate(
    value: Any,
    schema: Union[Schema, Mapping[str, Any], None],
    options: Optional[Options] = None,
    validation_scope: Union[str, ValidatorScope] = DEFAULT_SCOPE_NAME,
) -> Any:
    """Validate ``value`` against ``schema`` and return the coerced value.

    Args:
        value: Data to validate.
        schema: Resolved schema tree, or a plain OpenAPI schema mapping.
        options: Coercion options; defaults to no coercion.
        validation_scope: Registered scope name or a scope instance.

    Returns:
        The coerced value (the original value when nothing was coerced).

    Raises:
        ValidationError: The first conformance failure encountered.
        ScopeConfigurationError: If the scope name is not registered.
    """
    if schema is not None and not isinstance(schema, Schema):
        schema = Schema.from_dict(schema)
    return SchemaValidator(options, validation_scope).validate_data(value, schema)
