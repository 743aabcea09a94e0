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

"""Options threaded unchanged through one validation call."""

from __future__ import annotations

import importlib
import os
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

_TEMPORAL_ALIASES = {
    "": None,
    "none": None,
    "date": date,
    "datetime": datetime,
}


def resolve_datetime_class(name: Optional[str]) -> Optional[type]:
    """Resolve ``datetime``, ``date`` or a dotted ``module.Class`` path."""
    if name is None:
        return None
    key = name.strip()
    if key.lower() in _TEMPORAL_ALIASES:
        return _TEMPORAL_ALIASES[key.lower()]
    module_name, _, class_name = key.rpartition(".")
    if not module_name:
        raise ValueError(f"Unknown datetime coerce class: '{name}'")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, class_name)
    except AttributeError as exc:
        raise ValueError(f"Unknown datetime coerce class: '{name}'") from exc


@dataclass(frozen=True)
class Options:
    """Validation options.

    Attributes:
        coerce_value: Convert scalars into the declared representation
            (``"5"`` -> ``5`` for ``integer``).
        datetime_coerce_class: Target class for ``date``/``date-time`` strings
            when ``coerce_value`` is on. ``None`` keeps the string.
    """
    coerce_value: bool = False
    datetime_coerce_class: Optional[type] = None

    @classmethod
    def from_env(cls) -> 'Options':
        """Create options from environment variables."""
        return cls(
            coerce_value=os.getenv('SCHEMA_COERCION_COERCE_VALUE', 'false').lower() == 'true',
            datetime_coerce_class=resolve_datetime_class(
                os.getenv('SCHEMA_COERCION_DATETIME_COERCE_CLASS')
            ),
        )
