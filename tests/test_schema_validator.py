"""Tests for the dispatcher and the validate() entry point."""

from typing import Any, List

import pytest

from schema_coercion import (
    Options,
    Schema,
    SchemaValidator,
    ScopeConfigurationError,
    TypeMismatchError,
    ValidatorCategory,
    ValidatorScope,
    validate,
)
from schema_coercion.validators import DEFAULT_SCOPE, StringValidator, UnspecifiedTypeValidator


class RecordingStringValidator(StringValidator):
    """String validator that records the keyword arguments it receives."""

    calls: List[Any] = []

    def coerce_and_validate(self, value, schema, **keyword_args):
        RecordingStringValidator.calls.append(keyword_args)
        return super().coerce_and_validate(value, schema, **keyword_args)


@pytest.fixture(autouse=True)
def reset_recorder():
    RecordingStringValidator.calls = []
    yield


def test_missing_schema_returns_value_unchanged(strict_validator):
    value = {"anything": [1, 2]}
    coerced, err = strict_validator.validate_schema(value, None)
    assert err is None
    assert coerced is value


@pytest.mark.parametrize(
    "schema, value, expected",
    [
        (Schema(type="string", any_of=(Schema(type="integer"),)), "x", ValidatorCategory.ANY_OF),
        (Schema(all_of=(Schema(),), one_of=(Schema(),)), 1, ValidatorCategory.ALL_OF),
        (Schema(type="object", one_of=(Schema(),)), None, ValidatorCategory.ONE_OF),
        (Schema(type="string"), None, ValidatorCategory.NULL),
        (Schema(type="string"), "x", ValidatorCategory.STRING),
        (Schema(type="integer"), 1, ValidatorCategory.INTEGER),
        (Schema(type="boolean"), True, ValidatorCategory.BOOLEAN),
        (Schema(type="number"), 1.5, ValidatorCategory.FLOAT),
        (Schema(type="object"), {}, ValidatorCategory.OBJECT),
        (Schema(type="array"), [], ValidatorCategory.ARRAY),
        (Schema(type="file"), b"raw", ValidatorCategory.UNSPECIFIED_TYPE),
        (Schema(), 42, ValidatorCategory.UNSPECIFIED_TYPE),
    ],
)
def test_category_selection_order(schema, value, expected):
    assert SchemaValidator.category_for(value, schema) == expected


@pytest.mark.parametrize("value", ["text", 3, 2.5, True, [1, "a"], {"k": {"nested": None}}])
def test_unspecified_type_is_identity(value):
    assert validate(value, Schema()) is value
    assert validate(value, Schema(), Options(coerce_value=True)) is value


def test_validators_are_created_once_per_call(coercing_validator):
    schema = Schema(type="array", items=Schema(type="integer"))
    assert coercing_validator.validate_data(["1", "2", "3"], schema) == [1, 2, 3]
    first = coercing_validator._validators[ValidatorCategory.INTEGER]
    coercing_validator.validate_data(["4"], schema)
    assert coercing_validator._validators[ValidatorCategory.INTEGER] is first
    assert ValidatorCategory.STRING not in coercing_validator._validators


def test_validate_integer_passes_through_to_integer_validator(coercing_validator):
    assert coercing_validator.validate_integer("7", Schema(type="number")) == (7, None)


def test_validate_raises_first_error():
    schema = Schema.from_dict({"type": "object", "properties": {"n": {"type": "integer"}}})
    with pytest.raises(TypeMismatchError) as exc_info:
        validate({"n": "5"}, schema)
    assert exc_info.value.path == ("n",)
    assert exc_info.value.pointer == "/n"
    assert str(exc_info.value).startswith("/n: ")


def test_validate_accepts_plain_mapping_schema():
    assert validate({"n": "5"}, {"type": "object", "properties": {"n": {"type": "integer"}}},
                    Options(coerce_value=True)) == {"n": 5}


def test_validate_with_unknown_scope_name():
    with pytest.raises(ScopeConfigurationError, match="Unknown validator scope"):
        validate("x", Schema(type="string"), validation_scope="missing")


def test_keyword_arguments_are_forwarded_verbatim():
    scope = DEFAULT_SCOPE.derive("recording", {ValidatorCategory.STRING: RecordingStringValidator})
    validator = SchemaValidator(Options(), scope)

    validator.validate_schema("x", Schema(type="string"), parent_all_of=True, hint="email")
    validator.validate_schema("y", Schema(type="string"))

    assert RecordingStringValidator.calls == [{"parent_all_of": True, "hint": "email"}, {}]


def test_all_of_forwards_parent_flag_to_branches():
    scope = DEFAULT_SCOPE.derive("recording", {ValidatorCategory.STRING: RecordingStringValidator})
    validate("x", Schema(all_of=(Schema(type="string"),)), validation_scope=scope)
    assert RecordingStringValidator.calls == [{"parent_all_of": True}]


def test_missing_validator_produces_type_mismatch():
    class PartialScope(ValidatorScope):
        def get(self, category):
            if category == ValidatorCategory.UNSPECIFIED_TYPE:
                return None
            return super().get(category)

    scope = PartialScope(name="partial", validators=dict(DEFAULT_SCOPE.validators))
    coerced, err = SchemaValidator(Options(), scope).validate_schema("x", Schema(type="mystery"))
    assert coerced == "x"
    assert isinstance(err, TypeMismatchError)


def test_custom_scope_changes_behaviour_without_touching_dispatch():
    class PermissiveString(UnspecifiedTypeValidator):
        pass

    scope = DEFAULT_SCOPE.derive("permissive", {ValidatorCategory.STRING: PermissiveString})
    assert validate(12, Schema(type="string"), validation_scope=scope) == 12
    with pytest.raises(TypeMismatchError):
        validate(12, Schema(type="string"))
