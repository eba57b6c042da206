"""
Schema validation for gitwip.

Settings read from disk are checked against a bundled JSON Schema before
use. Every problem is reported at once, by setting name, so a bad
.gitwip.env can be fixed in one pass.
"""

import json
from pathlib import Path

import jsonschema
from jsonschema.validators import validator_for


class ValidationError(Exception):
    """Settings did not match their schema."""

    def __init__(self, schema_name: str, problems: list[str], source: str | None = None):
        self.schema_name = schema_name
        self.problems = problems
        self.source = source
        where = f" {source}:" if source else ""
        super().__init__(f"[{schema_name}]{where} " + "; ".join(problems))


# Cache loaded schemas
_schema_cache: dict[str, dict] = {}


def _get_schemas_dir() -> Path:
    return Path(__file__).parent.parent / "schemas"


def _load_schema(schema_name: str) -> dict:
    """Load schema by name, with caching."""
    if schema_name not in _schema_cache:
        schema_path = _get_schemas_dir() / f"{schema_name}.schema.json"
        if not schema_path.exists():
            raise ValidationError(schema_name, [f"Schema file not found: {schema_path}"])
        _schema_cache[schema_name] = json.loads(schema_path.read_text())
    return _schema_cache[schema_name]


def _describe(error: jsonschema.ValidationError, schema: dict) -> list[str]:
    """Turn one jsonschema error into messages keyed by setting name."""
    if error.validator == "additionalProperties":
        known = schema.get("properties", {})
        return [f"unknown setting {key}" for key in sorted(error.instance) if key not in known]
    if error.absolute_path:
        key = ".".join(str(p) for p in error.absolute_path)
        return [f"{key}: {error.message}"]
    return [error.message]


def validate(data: dict, schema_name: str, source: str | None = None) -> None:
    """
    Validate data against named schema.

    Args:
        data: Dictionary to validate
        schema_name: Schema name (e.g., "config")
        source: Where data came from, named in the error (e.g., a file path)

    Raises:
        ValidationError: If validation fails, listing every problem
    """
    schema = _load_schema(schema_name)
    validator_cls = validator_for(schema)
    errors = sorted(validator_cls(schema).iter_errors(data), key=lambda e: list(e.absolute_path))

    problems = []
    for error in errors:
        problems.extend(_describe(error, schema))
    if problems:
        raise ValidationError(schema_name, problems, source)
