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

"""In-memory schema tree consumed by the validators.

A :class:`Schema` is an immutable node. Trees are built once, either directly
or with :meth:`Schema.from_dict` from an already-parsed and already-resolved
OpenAPI schema mapping, and then shared read-only between validation calls.
Trees must be acyclic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from ..exceptions import SchemaDefinitionError
from ..utils.pointer import JsonPointer, join_path

Bound = Union[bool, int, float, None]


@dataclass(frozen=True)
class Schema:
    type: Optional[str] = None
    nullable: Optional[bool] = None
    format: Optional[str] = None
    enum: Optional[Tuple[Any, ...]] = field(default=None, hash=False)

    # object
    properties: Mapping[str, "Schema"] = field(default_factory=dict, hash=False)
    required: Tuple[str, ...] = ()
    additional_properties: Union[bool, "Schema"] = True

    # array
    items: Optional["Schema"] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    unique_items: bool = False

    # composition
    any_of: Optional[Tuple["Schema", ...]] = None
    all_of: Optional[Tuple["Schema", ...]] = None
    one_of: Optional[Tuple["Schema", ...]] = None

    # number; exclusive bounds accept the 3.0 boolean or the 3.1 numeric form
    minimum: Optional[Union[int, float]] = None
    maximum: Optional[Union[int, float]] = None
    exclusive_minimum: Bound = None
    exclusive_maximum: Bound = None

    # string
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None

    reference: JsonPointer = "#"

    def __post_init__(self) -> None:
        # Freeze the containers too; nodes are shared between calls.
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        object.__setattr__(self, "required", tuple(self.required))
        if self.enum is not None:
            object.__setattr__(self, "enum", tuple(self.enum))
        for key in ("any_of", "all_of", "one_of"):
            branches = getattr(self, key)
            if branches is not None:
                object.__setattr__(self, key, tuple(branches))

    @property
    def is_composed(self) -> bool:
        return bool(self.any_of or self.all_of or self.one_of)

    @property
    def allows_additional_properties(self) -> bool:
        return self.additional_properties is not False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], reference: JsonPointer = "#") -> "Schema":
        """Build a schema tree from an OpenAPI-style mapping.

        Args:
            data: Resolved schema mapping (``type``, ``properties``, ``anyOf`` ...).
            reference: Pointer naming this node in error messages.

        Raises:
            SchemaDefinitionError: If the mapping is malformed or still holds a ``$ref``.
        """
        if isinstance(data, Schema):
            return data
        if not isinstance(data, Mapping):
            raise SchemaDefinitionError(
                f"Schema at {reference} must be a mapping, got {type(data).__name__}"
            )
        if "$ref" in data:
            raise SchemaDefinitionError(
                f"Unresolved reference {data['$ref']!r} at {reference}; resolve references before validating"
            )

        schema_type, nullable = _parse_type(data.get("type"), data.get("nullable"), reference)

        properties_data = data.get("properties") or {}
        if not isinstance(properties_data, Mapping):
            raise SchemaDefinitionError(f"'properties' at {reference} must be a mapping")
        properties_ref = join_path(reference, "properties")
        properties = {
            str(name): cls.from_dict(sub, join_path(properties_ref, name))
            for name, sub in properties_data.items()
        }

        additional = data.get("additionalProperties", True)
        if isinstance(additional, Mapping):
            additional = cls.from_dict(additional, join_path(reference, "additionalProperties"))
        elif not isinstance(additional, bool):
            raise SchemaDefinitionError(
                f"'additionalProperties' at {reference} must be a boolean or a schema"
            )

        items = data.get("items")
        if items is not None:
            items = cls.from_dict(items, join_path(reference, "items"))

        enum = data.get("enum")
        if enum is not None:
            if isinstance(enum, (str, bytes)) or not isinstance(enum, Sequence):
                raise SchemaDefinitionError(f"'enum' at {reference} must be a list")
            enum = tuple(enum)

        required = data.get("required") or ()
        if isinstance(required, str) or not all(isinstance(r, str) for r in required):
            raise SchemaDefinitionError(f"'required' at {reference} must be a list of property names")

        return cls(
            type=schema_type,
            nullable=nullable,
            format=data.get("format"),
            enum=enum,
            properties=properties,
            required=tuple(required),
            additional_properties=additional,
            items=items,
            min_items=data.get("minItems"),
            max_items=data.get("maxItems"),
            unique_items=bool(data.get("uniqueItems", False)),
            any_of=_parse_composition(cls, data, "anyOf", reference),
            all_of=_parse_composition(cls, data, "allOf", reference),
            one_of=_parse_composition(cls, data, "oneOf", reference),
            minimum=data.get("minimum"),
            maximum=data.get("maximum"),
            exclusive_minimum=data.get("exclusiveMinimum"),
            exclusive_maximum=data.get("exclusiveMaximum"),
            min_length=data.get("minLength"),
            max_length=data.get("maxLength"),
            pattern=data.get("pattern"),
            reference=reference,
        )


def _parse_type(raw: Any, nullable: Any, reference: JsonPointer) -> Tuple[Optional[str], Optional[bool]]:
    if nullable is not None and not isinstance(nullable, bool):
        raise SchemaDefinitionError(f"'nullable' at {reference} must be a boolean")

    if raw is None or isinstance(raw, str):
        return raw, nullable

    # OpenAPI 3.1 spelling: type: [string, "null"]
    if isinstance(raw, Sequence):
        types = [t for t in raw if t != "null"]
        if len(types) > 1 or not all(isinstance(t, str) for t in types):
            raise SchemaDefinitionError(
                f"Unsupported type list {list(raw)!r} at {reference}; use anyOf for multiple types"
            )
        if len(types) < len(raw):
            nullable = True
        return (types[0] if types else "null"), nullable

    raise SchemaDefinitionError(f"'type' at {reference} must be a string, got {type(raw).__name__}")


def _parse_composition(
    cls: type, data: Mapping[str, Any], key: str, reference: JsonPointer
) -> Optional[Tuple[Schema, ...]]:
    branches = data.get(key)
    if branches is None:
        return None
    if isinstance(branches, (str, bytes, Mapping)) or not isinstance(branches, Sequence) or not branches:
        raise SchemaDefinitionError(f"'{key}' at {reference} must be a non-empty list of schemas")
    base = join_path(reference, key)
    return tuple(cls.from_dict(branch, join_path(base, idx)) for idx, branch in enumerate(branches))
