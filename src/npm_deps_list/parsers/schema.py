"""Shape validation for parsed lockfile documents."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from jsonschema import Draft202012Validator

from ..errors import LockfileMalformed


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_shape(document: Any, schema: Mapping[str, Any], source: str) -> None:
    """Raise LockfileMalformed when ``document`` does not match ``schema``."""
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: list(map(str, e.path)))
    if errors:
        raise LockfileMalformed(f"{source} has an unexpected shape:\n" + _format_errors(errors))
