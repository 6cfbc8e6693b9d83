"""
Schema Validation Utilities

Validates theme JSON data before it is turned into a Theme.

- JSON Schema definition for the theme file (`theme.schema.json`)
- `validate_theme()` fails fast on any schema violation
- Every error carries the dotted path of the offending value
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_theme(data: Any) -> None:
    """
    Validate theme data against the theme schema.

    Args:
        data: Parsed theme JSON

    Raises:
        ValidationError: If data is invalid. All schema errors are collected
            in ``errors``; ``path`` points at the first one.
    """
    schema = _load_schema("theme")
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not errors:
        return

    first = errors[0]
    raise ValidationError(
        f"Schema validation failed: {first.message}",
        path=".".join(str(p) for p in first.absolute_path),
        errors=[e.message for e in errors],
    )
