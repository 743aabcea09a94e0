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

"""Parsing for the ``date`` and ``date-time`` string formats.

``date`` follows RFC 3339 ``full-date`` (``2024-05-01``) and ``date-time``
follows RFC 3339 ``date-time`` (``2024-05-01T10:20:30Z``, fractional seconds
and numeric offsets allowed). Both are parsed with the ``fromisoformat``
constructors after the shape has been checked, so strings accepted by Python's
lenient ISO parser but not by RFC 3339 (``20240501``) are rejected.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional, Union

DATE_FORMAT = "date"
DATE_TIME_FORMAT = "date-time"
TEMPORAL_FORMATS = (DATE_FORMAT, DATE_TIME_FORMAT)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DATE_TIME_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2})[Tt ](\d{2}:\d{2}:\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)

Temporal = Union[date, datetime]


def parse_date(text: str) -> date:
    """Parse an RFC 3339 full-date.

    Raises:
        ValueError: If the string is not a valid calendar date.
    """
    if _DATE_RE.match(text) is None:
        raise ValueError(f"Invalid date: '{text}'. Expected 'YYYY-MM-DD'.")
    return date.fromisoformat(text)


def parse_date_time(text: str) -> datetime:
    """Parse an RFC 3339 date-time into an aware datetime.

    Raises:
        ValueError: If the string is not a valid date-time.
    """
    m = _DATE_TIME_RE.match(text)
    if m is None:
        raise ValueError(
            f"Invalid date-time: '{text}'. Expected RFC 3339 (e.g. '2024-05-01T10:20:30Z')."
        )
    day, clock, fraction, offset = m.groups()
    if fraction:
        # fromisoformat accepts at most microsecond precision
        fraction = fraction[:7].ljust(7, "0")
    if offset in ("Z", "z"):
        offset = "+00:00"
    return datetime.fromisoformat(f"{day}T{clock}{fraction or ''}{offset}")


def parse_temporal(text: str, fmt: str) -> Temporal:
    if fmt == DATE_FORMAT:
        return parse_date(text)
    if fmt == DATE_TIME_FORMAT:
        return parse_date_time(text)
    raise ValueError(f"Unsupported temporal format '{fmt}'")


def convert_temporal(parsed: Temporal, text: str, target: Optional[type]) -> object:
    """Convert an already-parsed value into the requested target class.

    ``datetime`` and ``date`` targets reuse the parsed value; any other class
    is built through its ``fromisoformat`` constructor.
    """
    if target is None:
        return text
    if isinstance(target, type) and issubclass(target, datetime):
        if isinstance(parsed, datetime):
            return parsed
        return datetime(parsed.year, parsed.month, parsed.day)
    if isinstance(target, type) and issubclass(target, date):
        if isinstance(parsed, datetime):
            return parsed.date()
        return parsed
    constructor = getattr(target, "fromisoformat", None)
    if constructor is None:
        raise ValueError(f"{getattr(target, '__name__', target)!s} cannot be built from an ISO string")
    return constructor(text)
