"""Tests for object and array validation."""

import copy
from datetime import datetime, timezone

import pytest

from schema_coercion import (
    EnumMismatchError,
    LengthViolationError,
    MissingRequiredPropertyError,
    Options,
    Schema,
    SchemaValidator,
    TypeMismatchError,
    UniqueItemsError,
    UnpermittedAdditionalPropertyError,
    ValidatorCategory,
    validate,
)
from schema_coercion.validators import DEFAULT_SCOPE, IntegerValidator


@pytest.fixture
def order():
    return {
        "id": "7",
        "placed_at": "2024-05-01T10:20:30Z",
        "express": "true",
        "total": "12",
        "pets": [{"name": "Rex", "age": "3", "tags": ["good", 1], "status": "available"}],
        "notes": None,
        "metadata": {"visits": "4"},
    }


def test_object_property_coercion():
    schema = Schema.from_dict({"type": "object", "properties": {"n": {"type": "integer"}}})
    assert validate({"n": "5"}, schema, Options(coerce_value=True)) == {"n": 5}


def test_nested_document_is_coerced(pet_store_schema, order):
    options = Options(coerce_value=True, datetime_coerce_class=datetime)
    original = copy.deepcopy(order)

    result = validate(order, pet_store_schema, options)

    assert result == {
        "id": 7,
        "placed_at": datetime(2024, 5, 1, 10, 20, 30, tzinfo=timezone.utc),
        "express": True,
        "total": 12.0,
        "pets": [{"name": "Rex", "age": 3, "tags": ["good", "1"], "status": "available"}],
        "notes": None,
        "metadata": {"visits": 4},
    }
    assert order == original


def test_round_trip_without_coercion(pet_store_schema):
    value = {
        "id": 7,
        "placed_at": "2024-05-01T10:20:30Z",
        "ship_date": "2024-05-03",
        "contact": "shop@example.com",
        "pets": [{"name": "Rex", "tags": ["good"]}],
        "total": 12,
    }
    result = validate(value, pet_store_schema, Options(datetime_coerce_class=datetime))
    assert result is value
    assert result == {
        "id": 7,
        "placed_at": "2024-05-01T10:20:30Z",
        "ship_date": "2024-05-03",
        "contact": "shop@example.com",
        "pets": [{"name": "Rex", "tags": ["good"]}],
        "total": 12,
    }


def test_object_requires_mapping(pet_store_schema):
    with pytest.raises(TypeMismatchError, match="not valid object"):
        validate(["id", 1], pet_store_schema)


def test_missing_required_properties(pet_store_schema):
    with pytest.raises(MissingRequiredPropertyError) as exc_info:
        validate({"total": 1}, pet_store_schema)
    assert exc_info.value.missing == ("id", "pets")
    assert exc_info.value.pointer == ""


def test_unpermitted_additional_property(pet_store_schema):
    with pytest.raises(UnpermittedAdditionalPropertyError) as exc_info:
        validate({"id": 1, "pets": [{"name": "a"}], "coupon": "X"}, pet_store_schema)
    assert exc_info.value.keys == ("coupon",)


def test_additional_properties_pass_through_by_default():
    schema = Schema(type="object", properties={"a": Schema(type="integer")})
    assert validate({"a": "1", "b": "2"}, schema, Options(coerce_value=True)) == {"a": 1, "b": "2"}


def test_additional_properties_schema_validates_extra_values(pet_store_schema):
    with pytest.raises(TypeMismatchError) as exc_info:
        validate({"id": 1, "pets": [{"name": "a"}], "metadata": {"visits": "x"}}, pet_store_schema)
    assert exc_info.value.path == ("metadata", "visits")


def test_nested_error_path(pet_store_schema):
    value = {"id": 1, "pets": [{"name": "a"}, {"name": "b", "status": "lost"}]}
    with pytest.raises(EnumMismatchError) as exc_info:
        validate(value, pet_store_schema)
    assert exc_info.value.pointer == "/pets/1/status"
    assert exc_info.value.schema_reference == "#/properties/pets/items/properties/status"


def test_non_nullable_property_rejects_null(pet_store_schema):
    with pytest.raises(TypeMismatchError) as exc_info:
        validate({"id": 1, "pets": [{"name": "a", "status": None}]}, pet_store_schema)
    assert exc_info.value.path == ("pets", 0, "status")


def test_min_items(pet_store_schema):
    with pytest.raises(LengthViolationError):
        validate({"id": 1, "pets": []}, pet_store_schema)


def test_array_requires_sequence():
    schema = Schema(type="array", items=Schema(type="string"))
    with pytest.raises(TypeMismatchError):
        validate("abc", schema)
    with pytest.raises(TypeMismatchError):
        validate({"a": 1}, schema)


def test_tuple_is_accepted_and_coerced_to_list():
    schema = Schema(type="array", items=Schema(type="integer"))
    assert validate((1, 2), schema) == (1, 2)
    assert validate(("1", 2), schema, Options(coerce_value=True)) == [1, 2]


def test_array_without_items_schema_accepts_anything():
    assert validate([1, "a", None], Schema(type="array")) == [1, "a", None]


def test_max_items():
    schema = Schema(type="array", max_items=1)
    with pytest.raises(LengthViolationError, match="more than max items 1"):
        validate([1, 2], schema)


def test_unique_items():
    schema = Schema(type="array", unique_items=True)
    assert validate([1, True, "1"], schema) == [1, True, "1"]
    with pytest.raises(UniqueItemsError):
        validate([{"a": 1}, {"a": 1}], schema)


def test_array_fails_fast_at_first_invalid_element():
    seen = []

    class RecordingIntegerValidator(IntegerValidator):
        def coerce_and_validate(self, value, schema, **keyword_args):
            seen.append(value)
            return super().coerce_and_validate(value, schema, **keyword_args)

    scope = DEFAULT_SCOPE.derive("recording", {ValidatorCategory.INTEGER: RecordingIntegerValidator})
    validator = SchemaValidator(Options(), scope)
    value = [1, "bad", 3]

    coerced, err = validator.validate_schema(value, Schema(type="array", items=Schema(type="integer")))

    assert coerced is value
    assert isinstance(err, TypeMismatchError)
    assert err.path == (1,)
    assert err.value == "bad"
    assert seen == [1, "bad"]
