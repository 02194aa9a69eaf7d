"""Dialect dispatch between lockfile loading and URL extraction."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .models.lockfile import DetectedLockfile, Dialect
from .parsers import package_lock, pnpm_lock
from .registry import NPM_REGISTRY_URL


def load_lockfile(lockfile: DetectedLockfile) -> Any:
    """Decode the lockfile with the parser matching its dialect."""
    if lockfile.dialect is Dialect.PNPM:
        return pnpm_lock.load(lockfile.path)
    return package_lock.load(lockfile.path)


def extract_urls(
    content: Mapping[str, Any],
    dialect: Dialect,
    *,
    registry: str = NPM_REGISTRY_URL,
) -> list[str]:
    """Return the archive URL of every package in a parsed lockfile.

    npm lockfiles already record the URL in each record's ``resolved`` field;
    pnpm lockfiles only carry ``name@version`` keys, so the URL is synthesized
    against ``registry``. Order follows the lockfile and duplicates are kept.

    Raises:
        LockfileMalformed: if the document does not have the dialect's shape.
        MalformedPackageIdentifier: if a pnpm key has no name@version split.
    """
    dialect = Dialect(dialect)
    if dialect is Dialect.PNPM:
        return pnpm_lock.urls(content, registry=registry)
    return package_lock.urls(content)
