"""Errors raised while collecting dependency archive URLs."""

from __future__ import annotations


class DepsListError(RuntimeError):
    """Base error for every failure the CLI reports and exits on."""


class ConfigError(DepsListError):
    """Raised when the run configuration is invalid."""


class LockfileNotFound(DepsListError):
    """Raised when a directory has neither pnpm-lock.yaml nor package-lock.json."""


class LockfileUnreadable(DepsListError):
    """Raised when a lockfile exists but cannot be read."""


class LockfileMalformed(DepsListError):
    """Raised when lockfile content is not valid JSON/YAML or has the wrong shape."""


class ProjectFileUnreadable(DepsListError):
    """Raised when package.json is missing or cannot be read."""


class ProjectFileMalformed(DepsListError):
    """Raised when package.json is not a JSON object."""


class MalformedPackageIdentifier(DepsListError, ValueError):
    """Raised when a package identifier has no usable name@version split."""


class OutputWriteFailure(DepsListError):
    """Raised when the dependency list cannot be written."""
