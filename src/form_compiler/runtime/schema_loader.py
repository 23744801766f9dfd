"""
Utility module for loading form schema files (YAML or JSON).

Expected structure:

    fields:
      name: {type: string, min_length: 2, messages: {min_length: error.name.min}}
      phoneNumber:
        type: string
        optional: true
        meta:
          showConditions: [{field: country, operator: equals, value: us}]
    rules:
      - {type: conditional_format, trigger: country, equals: us,
         target: phoneNumber, check: phone_number}
"""

from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from form_compiler.rules.cross_field import RuleSpecError, build_rule
from form_compiler.schemas.form_schema import FormSchema

UNSUPPORTED_TYPES = {"object", "array"}


class SchemaLoadError(Exception):
    """Raised when a schema file cannot be loaded or is invalid."""
    pass


def load_schema(file_path: str | Path) -> FormSchema:
    """
    Load and validate a form schema file.

    Args:
        file_path: Path to a YAML or JSON schema file

    Returns:
        Parsed FormSchema

    Raises:
        SchemaLoadError: If file cannot be loaded or doesn't have required structure
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise SchemaLoadError(f"Schema file not found: {file_path}")
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML/JSON in schema file: {e}")

    return parse_schema(data)


def parse_schema(data: Any) -> FormSchema:
    """
    Build a FormSchema from already-decoded data.

    Raises:
        SchemaLoadError: On missing keys, nested object fields, unknown rule
            types or any structural validation failure
    """
    if not isinstance(data, dict):
        raise SchemaLoadError("Schema must be a mapping")
    if "fields" not in data:
        raise SchemaLoadError("Schema must contain 'fields' key")
    if not isinstance(data["fields"], dict):
        raise SchemaLoadError("Schema 'fields' must be a mapping")

    fields = {name: _normalize_node(name, raw) for name, raw in data["fields"].items()}

    raw_rules = data.get("rules") or []
    if not isinstance(raw_rules, list):
        raise SchemaLoadError("Schema 'rules' must be a list")
    try:
        rules = [build_rule(entry) for entry in raw_rules]
    except RuleSpecError as e:
        raise SchemaLoadError(str(e)) from e

    try:
        return FormSchema(fields=fields, rules=rules)
    except ValidationError as e:
        raise SchemaLoadError(f"Invalid schema: {e}") from e


def _normalize_node(name: str, raw: Any) -> Dict[str, Any]:
    """Expand the ``optional: true`` shorthand into an optional wrapper node."""
    if not isinstance(raw, dict):
        raise SchemaLoadError(f"Field '{name}' must be a mapping")

    node = dict(raw)
    node_type = node.get("type")
    if node_type in UNSUPPORTED_TYPES:
        raise SchemaLoadError(
            f"Field '{name}' has type '{node_type}': nested fields are not supported, "
            "flatten them into top-level fields"
        )

    if node.pop("optional", False):
        if node_type == "optional":
            raise SchemaLoadError(f"Field '{name}' is already an optional wrapper")
        return {"type": "optional", "inner": node}
    return node
