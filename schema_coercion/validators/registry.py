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

"""Validator scopes: named sets of validator implementations.

A scope maps every :class:`ValidatorCategory` to a validator class. The
dispatcher resolves one scope per top-level call, so callers can substitute
stricter or looser validators for any category without touching dispatch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Type

from ..exceptions import ScopeConfigurationError
from .base import BaseValidator
from .composition import AllOfValidator, AnyOfValidator, OneOfValidator
from .primitive import (
    BooleanValidator,
    FloatValidator,
    IntegerValidator,
    NullValidator,
    StringValidator,
    UnspecifiedTypeValidator,
)
from .structural import ArrayValidator, ObjectValidator

logger = logging.getLogger(__name__)

DEFAULT_SCOPE_NAME = "default"


class ValidatorCategory(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    ANY_OF = "any_of"
    ALL_OF = "all_of"
    ONE_OF = "one_of"
    NULL = "null"
    UNSPECIFIED_TYPE = "unspecified_type"


@dataclass(frozen=True)
class ValidatorScope:
    name: str
    validators: Mapping[ValidatorCategory, Type[BaseValidator]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise ScopeConfigurationError("Validator scope name must be a non-empty string")

        validators: Dict[ValidatorCategory, Type[BaseValidator]] = {}
        for category, validator_cls in self.validators.items():
            category = ValidatorCategory(category)
            if not (isinstance(validator_cls, type) and issubclass(validator_cls, BaseValidator)):
                raise ScopeConfigurationError(
                    f"Validator for '{category.value}' in scope '{self.name}' must subclass BaseValidator, "
                    f"got {validator_cls!r}"
                )
            validators[category] = validator_cls

        missing = [c.value for c in ValidatorCategory if c not in validators]
        if missing:
            raise ScopeConfigurationError(
                f"Validator scope '{self.name}' is missing categories: {', '.join(missing)}"
            )
        object.__setattr__(self, "validators", MappingProxyType(validators))

    def get(self, category: ValidatorCategory) -> Optional[Type[BaseValidator]]:
        return self.validators.get(category)

    def derive(self, name: str, overrides: Mapping[ValidatorCategory, Type[BaseValidator]]) -> "ValidatorScope":
        """Return a new scope with some categories replaced."""
        validators = dict(self.validators)
        validators.update(overrides)
        return ValidatorScope(name=name, validators=validators)


DEFAULT_SCOPE = ValidatorScope(
    name=DEFAULT_SCOPE_NAME,
    validators={
        ValidatorCategory.STRING: StringValidator,
        ValidatorCategory.INTEGER: IntegerValidator,
        ValidatorCategory.FLOAT: FloatValidator,
        ValidatorCategory.BOOLEAN: BooleanValidator,
        ValidatorCategory.OBJECT: ObjectValidator,
        ValidatorCategory.ARRAY: ArrayValidator,
        ValidatorCategory.ANY_OF: AnyOfValidator,
        ValidatorCategory.ALL_OF: AllOfValidator,
        ValidatorCategory.ONE_OF: OneOfValidator,
        ValidatorCategory.NULL: NullValidator,
        ValidatorCategory.UNSPECIFIED_TYPE: UnspecifiedTypeValidator,
    },
)


class ScopeRegistry:
    """Registry of validator scopes by name."""

    _scopes: Dict[str, ValidatorScope] = {DEFAULT_SCOPE_NAME: DEFAULT_SCOPE}

    @classmethod
    def register(cls, scope: ValidatorScope, replace: bool = False) -> ValidatorScope:
        if not isinstance(scope, ValidatorScope):
            raise ScopeConfigurationError(f"Expected a ValidatorScope, got {type(scope).__name__}")
        if scope.name == DEFAULT_SCOPE_NAME and scope is not DEFAULT_SCOPE:
            raise ScopeConfigurationError("The default validator scope cannot be replaced")
        if scope.name in cls._scopes and not replace:
            raise ScopeConfigurationError(f"Validator scope '{scope.name}' is already registered")
        logger.debug(f"Registering validator scope: {scope.name}")
        cls._scopes[scope.name] = scope
        return scope

    @classmethod
    def unregister(cls, name: str) -> None:
        if name == DEFAULT_SCOPE_NAME:
            raise ScopeConfigurationError("The default validator scope cannot be removed")
        cls._scopes.pop(name, None)

    @classmethod
    def get(cls, name: str) -> ValidatorScope:
        if name not in cls._scopes:
            raise ScopeConfigurationError(
                f"Unknown validator scope: '{name}'. Registered scopes: {cls.names()}"
            )
        return cls._scopes[name]

    @classmethod
    def resolve(cls, scope) -> ValidatorScope:
        """Accept a registered scope name or a scope instance."""
        if isinstance(scope, ValidatorScope):
            return scope
        return cls.get(scope)

    @classmethod
    def names(cls) -> List[str]:
        return sorted(cls._scopes)
