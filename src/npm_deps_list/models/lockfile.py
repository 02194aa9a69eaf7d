"""Lockfile dialects and record models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class Dialect(str, Enum):
    """Supported lockfile dialects, in detection priority order."""

    PNPM = "pnpm"
    NPM = "npm"

    @property
    def lockfile_name(self) -> str:
        return _LOCKFILE_NAMES[self]


_LOCKFILE_NAMES = {
    Dialect.PNPM: "pnpm-lock.yaml",
    Dialect.NPM: "package-lock.json",
}


@dataclass(frozen=True)
class DetectedLockfile:
    """The lockfile found in a project directory."""

    dialect: Dialect
    path: Path


@dataclass(frozen=True)
class NpmPackageRecord:
    """One entry of a package-lock.json ``packages`` (or v1 ``dependencies``) map."""

    path: str
    resolved: str | None = None
    link: bool = False

    @property
    def has_archive(self) -> bool:
        """True when the record points at a downloadable tarball."""
        return bool(self.resolved) and not self.link

    @classmethod
    def from_mapping(cls, path: str, meta: Mapping[str, Any]) -> NpmPackageRecord:
        return cls(
            path=path,
            resolved=meta.get("resolved"),
            link=bool(meta.get("link", False)),
        )
