from __future__ import annotations

from typing import Any

from vibes.skills.base import Schema

_JSON_TYPES = {
    "string": "string",
    "number": "number",
    "integer": "integer",
    "boolean": "boolean",
    "array": "array",
    "object": "object",
}


def to_json_schema(schema: Schema) -> dict[str, Any]:
    """Convert a skill argument schema into a JSON Schema object."""
    properties: dict[str, Any] = {}
    required: list[str] = []
    for name, field in schema.items():
        prop: dict[str, Any] = {"type": _JSON_TYPES.get(field.get("type", "string"), "string")}
        if field.get("description"):
            prop["description"] = field["description"]
        if field.get("enum"):
            prop["enum"] = list(field["enum"])
        properties[name] = prop
        if not field.get("optional", False):
            required.append(name)
    return {
        "type": "object",
        "properties": properties,
        "required": required,
        "additionalProperties": False,
    }


def tool_spec(skill_id: str, schema: Schema, description: str = "") -> dict[str, Any]:
    """Tool declaration for LLM function calling."""
    return {
        "name": skill_id,
        "description": description,
        "parameters": to_json_schema(schema),
    }
