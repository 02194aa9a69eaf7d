"""Parse npm package-lock.json and collect the resolved tarball URLs."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from ..errors import LockfileMalformed, LockfileUnreadable
from ..models.lockfile import NpmPackageRecord
from .schema import validate_shape


FILENAME = "package-lock.json"

SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "packages": {
            "type": ["object", "null"],
            "additionalProperties": {"$ref": "#/$defs/record"},
        },
        "dependencies": {"$ref": "#/$defs/dependencies"},
    },
    "$defs": {
        "record": {
            "type": "object",
            "properties": {
                "resolved": {"type": ["string", "null"]},
                "link": {"type": "boolean"},
            },
        },
        "dependencies": {
            "type": ["object", "null"],
            "additionalProperties": {
                "allOf": [
                    {"$ref": "#/$defs/record"},
                    {"properties": {"dependencies": {"$ref": "#/$defs/dependencies"}}},
                ]
            },
        },
    },
}


def load(path: Path) -> Any:
    """Read and decode a package-lock.json document."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LockfileUnreadable(f"Failed to read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise LockfileMalformed(f"{path} is not valid UTF-8: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise LockfileMalformed(f"Invalid JSON in {path}: {exc}") from exc


def _walk_v1(deps: Mapping[str, Any], prefix: str = "") -> Iterator[NpmPackageRecord]:
    for name, meta in deps.items():
        path = f"{prefix}node_modules/{name}"
        yield NpmPackageRecord.from_mapping(path, meta)
        nested = meta.get("dependencies")
        if nested:
            yield from _walk_v1(nested, prefix=f"{path}/")


def records(document: Any) -> list[NpmPackageRecord]:
    """Return package records in lockfile order.

    Supports npm v2+ ("packages" map) and falls back to the v1 "dependencies"
    tree when no "packages" map is present.
    """
    validate_shape(document, SCHEMA, FILENAME)

    packages = document.get("packages")
    if packages is not None:
        return [NpmPackageRecord.from_mapping(key, meta) for key, meta in packages.items()]

    # npm v1 format fallback
    deps = document.get("dependencies")
    if deps:
        return list(_walk_v1(deps))

    return []


def urls(document: Any) -> list[str]:
    """Return the ``resolved`` URL of every record that points at a tarball."""
    return [record.resolved for record in records(document) if record.has_archive]


def parse(path: Path) -> list[str]:
    return urls(load(path))
