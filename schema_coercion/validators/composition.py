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

"""Validators for the anyOf / allOf / oneOf combinators."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple

from ..exceptions import (
    CompositionFailedError,
    CompositionOperator,
    TypeMismatchError,
    UnpermittedAdditionalPropertyError,
)
from ..models.schema import Schema
from .base import BaseValidator, ValidationOutcome

logger = logging.getLogger(__name__)


def _null_outcome(value: Any, schema: Schema, operator: CompositionOperator) -> Optional[ValidationOutcome]:
    """Settle a None value on a combinator node that states its nullability."""
    if value is not None or schema.nullable is None:
        return None
    if schema.nullable:
        return value, None
    return value, TypeMismatchError(value, schema, f"non-null {operator.value}")


class AllOfValidator(BaseValidator):
    """Every branch must accept the value.

    Coercion is cumulative: each branch sees the value produced by the
    previous one. The first failing branch aborts with its own error.
    """

    def coerce_and_validate(self, value: Any, schema: Schema, **keyword_args: Any) -> ValidationOutcome:
        null_outcome = _null_outcome(value, schema, CompositionOperator.ALL_OF)
        if null_outcome is not None:
            return null_outcome

        current = value
        remaining = list(value.keys()) if isinstance(value, Mapping) else []
        nested_additional_properties = False

        for sub_schema in schema.all_of:
            current, err = self.validatable.validate_schema(current, sub_schema, parent_all_of=True)
            if err is not None:
                return value, err

            if sub_schema.type == "object" and not sub_schema.is_composed:
                remaining = [name for name in remaining if name not in sub_schema.properties]
                if sub_schema.allows_additional_properties:
                    nested_additional_properties = True
            else:
                # nested combinators or non-object branches own their keys
                remaining = []

        if remaining and not nested_additional_properties:
            return value, UnpermittedAdditionalPropertyError(value, schema, remaining)
        return current, None


class AnyOfValidator(BaseValidator):
    """The first branch accepting the value wins.

    When every branch fails a single aggregate error is reported.
    """

    def coerce_and_validate(self, value: Any, schema: Schema, **keyword_args: Any) -> ValidationOutcome:
        null_outcome = _null_outcome(value, schema, CompositionOperator.ANY_OF)
        if null_outcome is not None:
            return null_outcome

        for sub_schema in schema.any_of:
            coerced, err = self.validatable.validate_schema(value, sub_schema)
            if err is None:
                return coerced, None
            logger.debug(f"anyOf branch {sub_schema.reference} rejected value: {err}")

        return value, CompositionFailedError(
            value,
            schema,
            CompositionOperator.ANY_OF,
            f"none of {len(schema.any_of)} schemas matched",
        )


class OneOfValidator(BaseValidator):
    """Exactly one branch may accept the value; all branches are evaluated."""

    def coerce_and_validate(self, value: Any, schema: Schema, **keyword_args: Any) -> ValidationOutcome:
        null_outcome = _null_outcome(value, schema, CompositionOperator.ONE_OF)
        if null_outcome is not None:
            return null_outcome

        matches: List[Tuple[Schema, Any]] = []
        for sub_schema in schema.one_of:
            coerced, err = self.validatable.validate_schema(value, sub_schema)
            if err is None:
                matches.append((sub_schema, coerced))

        if len(matches) == 1:
            return matches[0][1], None

        if matches:
            refs = ", ".join(sub_schema.reference for sub_schema, _ in matches)
            detail = f"{len(matches)} schemas matched ({refs})"
        else:
            detail = f"none of {len(schema.one_of)} schemas matched"
        return value, CompositionFailedError(value, schema, CompositionOperator.ONE_OF, detail)
