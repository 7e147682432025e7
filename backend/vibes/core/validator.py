from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator

from vibes.skills.base import Schema
from vibes.skills.schema import to_json_schema


def validate_args(schema: Schema, args: Mapping[str, Any] | None) -> list[str]:
    """Check caller arguments against a skill schema; returns readable problems."""
    if args is None:
        args = {}
    if not isinstance(args, Mapping):
        return ["Arguments must be an object"]

    validator = Draft202012Validator(to_json_schema(schema))
    errors = sorted(validator.iter_errors(dict(args)), key=lambda e: [str(p) for p in e.path])
    messages = []
    for error in errors:
        field = ".".join(str(p) for p in error.path)
        messages.append(f"{field}: {error.message}" if field else error.message)
    return messages
