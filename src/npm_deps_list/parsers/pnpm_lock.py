"""Parse pnpm-lock.yaml and synthesize registry tarball URLs from its keys."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..errors import LockfileMalformed, LockfileUnreadable
from ..registry import NPM_REGISTRY_URL, normalise_pnpm_key, synthesize_url
from .schema import validate_shape


FILENAME = "pnpm-lock.yaml"

SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "packages": {
            "type": ["object", "null"],
            "propertyNames": {"type": "string"},
        },
    },
}


def load(path: Path) -> Any:
    """Read and decode a pnpm-lock.yaml document; an empty file loads as ``{}``."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LockfileUnreadable(f"Failed to read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise LockfileMalformed(f"{path} is not valid UTF-8: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise LockfileMalformed(f"Invalid YAML in {path}: {exc}") from exc
    return {} if data is None else data


def keys(document: Any) -> list[str]:
    """Return the package keys in lockfile order; metadata values are ignored."""
    validate_shape(document, SCHEMA, FILENAME)
    pkgs = document.get("packages") or {}
    return list(pkgs.keys())


def urls(document: Any, *, registry: str = NPM_REGISTRY_URL) -> list[str]:
    # Keys look like "name@1.2.3", "@scope/name@1.2.3" or "/name@1.2.3(peer@1.0.0)"
    return [synthesize_url(normalise_pnpm_key(key), registry=registry) for key in keys(document)]


def parse(path: Path, *, registry: str = NPM_REGISTRY_URL) -> list[str]:
    return urls(load(path), registry=registry)
