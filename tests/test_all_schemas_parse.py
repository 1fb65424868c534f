"""Test that all JSON schemas in specs/ are valid Draft 2020-12 schemas."""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError
from jsonschema.validators import validator_for

SPECS_DIR = Path(__file__).parent.parent / "stager" / "specs"
EXPECTED_SCHEMA_URI = "https://json-schema.org/draft/2020-12/schema"


def discover_schema_files() -> list[Path]:
    """Discover all schema files in the specs directory."""
    return sorted(SPECS_DIR.glob("*.schema.json"))


@pytest.mark.parametrize(
    "schema_path",
    discover_schema_files(),
    ids=lambda p: p.name,
)
def test_schema_parses_as_draft202012(schema_path: Path) -> None:
    """Verify each schema file is a valid Draft 2020-12 JSON Schema."""
    try:
        schema = json.loads(schema_path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        pytest.fail(f"{schema_path.name}: cannot load: {e}")

    if schema.get("$schema") != EXPECTED_SCHEMA_URI:
        pytest.fail(
            f"{schema_path.name}: Expected $schema='{EXPECTED_SCHEMA_URI}', "
            f"got '{schema.get('$schema')}'"
        )

    validator_cls = validator_for(schema)
    if validator_cls is not Draft202012Validator:
        pytest.fail(
            f"{schema_path.name}: Expected Draft202012Validator, got {validator_cls.__name__}"
        )

    try:
        validator_cls.check_schema(schema)
    except SchemaError as e:
        pytest.fail(f"{schema_path.name}: Schema self-validation failed: {e}")


def test_at_least_one_schema_exists() -> None:
    """Ensure specs/ directory contains at least one schema file."""
    schema_files = discover_schema_files()
    assert len(schema_files) > 0, f"No *.schema.json files found in {SPECS_DIR}."
