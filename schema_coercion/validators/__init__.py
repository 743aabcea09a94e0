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

"""Validator strategies, one per schema category."""

from .base import BaseValidator, ValidationOutcome
from .composition import AllOfValidator, AnyOfValidator, OneOfValidator
from .primitive import (
    BooleanValidator,
    FloatValidator,
    IntegerValidator,
    NullValidator,
    StringValidator,
    UnspecifiedTypeValidator,
)
from .registry import DEFAULT_SCOPE, DEFAULT_SCOPE_NAME, ScopeRegistry, ValidatorCategory, ValidatorScope
from .structural import ArrayValidator, ObjectValidator

__all__ = [
    "AllOfValidator",
    "AnyOfValidator",
    "ArrayValidator",
    "BaseValidator",
    "BooleanValidator",
    "DEFAULT_SCOPE",
    "DEFAULT_SCOPE_NAME",
    "FloatValidator",
    "IntegerValidator",
    "NullValidator",
    "ObjectValidator",
    "OneOfValidator",
    "ScopeRegistry",
    "StringValidator",
    "UnspecifiedTypeValidator",
    "ValidationOutcome",
    "ValidatorCategory",
    "ValidatorScope",
]
