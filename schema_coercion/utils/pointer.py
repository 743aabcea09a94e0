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

"""JSON pointer helpers used for schema references and error paths."""

from __future__ import annotations

from typing import Iterable, Optional, Union

JsonPointer = str
PathToken = Union[str, int]


def jp_escape(token: PathToken) -> str:
    return str(token).replace("~", "~0").replace("/", "~1")


def join_path(base: Optional[JsonPointer], token: PathToken) -> JsonPointer:
    if not base:
        return f"/{jp_escape(token)}"
    return f"{base}/{jp_escape(token)}"


def format_pointer(tokens: Iterable[PathToken]) -> JsonPointer:
    """Render path tokens as a JSON pointer (``""`` is the document root)."""
    pointer = ""
    for token in tokens:
        pointer = join_path(pointer, token)
    return pointer
