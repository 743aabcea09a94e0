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

"""Recursive schema validation and value coercion for OpenAPI-style schemas."""

import logging

from .config import LoggingConfig
from .exceptions import (
    CompositionFailedError,
    CompositionOperator,
    EnumMismatchError,
    FormatParseError,
    LengthViolationError,
    MissingRequiredPropertyError,
    PatternMismatchError,
    RangeViolationError,
    SchemaCoercionError,
    SchemaDefinitionError,
    ScopeConfigurationError,
    TypeMismatchError,
    UniqueItemsError,
    UnpermittedAdditionalPropertyError,
    UnsupportedValueError,
    ValidationError,
)
from .models import Options, Schema
from .schema_validator import SchemaValidator, Validatable, validate
from .validators import BaseValidator, ScopeRegistry, ValidatorCategory, ValidatorScope

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaseValidator",
    "CompositionFailedError",
    "CompositionOperator",
    "EnumMismatchError",
    "FormatParseError",
    "LengthViolationError",
    "LoggingConfig",
    "MissingRequiredPropertyError",
    "Options",
    "PatternMismatchError",
    "RangeViolationError",
    "Schema",
    "SchemaCoercionError",
    "SchemaDefinitionError",
    "SchemaValidator",
    "ScopeConfigurationError",
    "ScopeRegistry",
    "TypeMismatchError",
    "UniqueItemsError",
    "UnpermittedAdditionalPropertyError",
    "UnsupportedValueError",
    "Validatable",
    "ValidationError",
    "ValidatorCategory",
    "ValidatorScope",
    "validate",
]
