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

"""Strategy interface shared by every validator category."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, Tuple

from ..exceptions import ValidationError
from ..models.options import Options
from ..models.schema import Schema

if TYPE_CHECKING:
    from ..schema_validator import Validatable

ValidationOutcome = Tuple[Any, Optional[ValidationError]]


class BaseValidator(ABC):
    """Abstract base validator.

    A validator is built once per top-level validation call with the
    dispatcher that owns it (used to recurse into nested values) and the
    call's options.
    """

    def __init__(self, validatable: "Validatable", options: Options):
        self.validatable = validatable
        self.options = options

    @property
    def coerce_value(self) -> bool:
        return self.options.coerce_value

    @abstractmethod
    def coerce_and_validate(self, value: Any, schema: Schema, **keyword_args: Any) -> ValidationOutcome:
        """Validate ``value`` against ``schema``.

        Returns:
            ``(coerced, None)`` on success, ``(value, error)`` on failure.
        """
        pass
