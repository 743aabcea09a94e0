"""Shared fixtures for schema_coercion tests."""

from pathlib import Path
from typing import Any, Dict

import pytest
import yaml

from schema_coercion import Options, Schema, SchemaValidator

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> Dict[str, Any]:
    with open(FIXTURES_DIR / name, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def pet_store_schema() -> Schema:
    """Order schema from fixtures/pet_store.yaml."""
    return Schema.from_dict(load_fixture("pet_store.yaml"))


@pytest.fixture
def shape_schemas() -> Dict[str, Schema]:
    """Named composition schemas from fixtures/shapes.yaml."""
    return {
        name: Schema.from_dict(data, reference=f"#/{name}")
        for name, data in load_fixture("shapes.yaml").items()
    }


@pytest.fixture
def coerce_options() -> Options:
    return Options(coerce_value=True)


@pytest.fixture
def strict_validator() -> SchemaValidator:
    return SchemaValidator(Options(coerce_value=False))


@pytest.fixture
def coercing_validator(coerce_options: Options) -> SchemaValidator:
    return SchemaValidator(coerce_options)
