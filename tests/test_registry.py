"""Tests for validator scopes and the scope registry."""

import pytest

from schema_coercion import (
    Options,
    Schema,
    ScopeConfigurationError,
    ScopeRegistry,
    ValidatorCategory,
    ValidatorScope,
    validate,
)
from schema_coercion.validators import DEFAULT_SCOPE, BooleanValidator, IntegerValidator


class YesNoBooleanValidator(BooleanValidator):
    TRUE_VALUES = BooleanValidator.TRUE_VALUES + ("yes",)
    FALSE_VALUES = BooleanValidator.FALSE_VALUES + ("no",)


@pytest.fixture
def yes_no_scope():
    scope = DEFAULT_SCOPE.derive("yes_no", {ValidatorCategory.BOOLEAN: YesNoBooleanValidator})
    ScopeRegistry.register(scope)
    yield scope
    ScopeRegistry.unregister("yes_no")


def test_default_scope_covers_every_category():
    assert set(DEFAULT_SCOPE.validators) == set(ValidatorCategory)
    assert ScopeRegistry.get("default") is DEFAULT_SCOPE


def test_registered_scope_is_used_by_name(yes_no_scope):
    assert "yes_no" in ScopeRegistry.names()
    assert validate("yes", Schema(type="boolean"), Options(coerce_value=True), "yes_no") is True
    assert validate("no", Schema(type="boolean"), Options(coerce_value=True), yes_no_scope) is False


def test_derived_scope_keeps_other_categories(yes_no_scope):
    assert yes_no_scope.get(ValidatorCategory.INTEGER) is IntegerValidator
    assert DEFAULT_SCOPE.get(ValidatorCategory.BOOLEAN) is BooleanValidator


def test_duplicate_registration_needs_replace(yes_no_scope):
    with pytest.raises(ScopeConfigurationError, match="already registered"):
        ScopeRegistry.register(yes_no_scope)
    assert ScopeRegistry.register(yes_no_scope, replace=True) is yes_no_scope


def test_default_scope_is_protected():
    with pytest.raises(ScopeConfigurationError):
        ScopeRegistry.register(DEFAULT_SCOPE.derive("default", {}), replace=True)
    with pytest.raises(ScopeConfigurationError):
        ScopeRegistry.unregister("default")


def test_incomplete_scope_is_rejected():
    with pytest.raises(ScopeConfigurationError, match="missing categories"):
        ValidatorScope(name="partial", validators={ValidatorCategory.STRING: BooleanValidator})


def test_scope_validators_must_be_validator_classes():
    with pytest.raises(ScopeConfigurationError, match="must subclass BaseValidator"):
        DEFAULT_SCOPE.derive("bad", {ValidatorCategory.STRING: str})


def test_scope_requires_name():
    with pytest.raises(ScopeConfigurationError):
        DEFAULT_SCOPE.derive("", {})


def test_unknown_scope():
    with pytest.raises(ScopeConfigurationError, match="Unknown validator scope"):
        ScopeRegistry.get("nope")


def test_registry_lookup(yes_no_scope):
    assert ScopeRegistry.get("yes_no") is yes_no_scope
    assert ScopeRegistry.resolve("yes_no") is yes_no_scope
    assert ScopeRegistry.resolve(yes_no_scope) is yes_no_scope
    assert ScopeRegistry.names() == ["default", "yes_no"]

    ScopeRegistry.unregister("yes_no")
    assert ScopeRegistry.names() == ["default"]
    with pytest.raises(ScopeConfigurationError):
        ScopeRegistry.resolve("yes_no")
