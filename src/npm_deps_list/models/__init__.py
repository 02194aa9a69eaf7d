"""Data models for lockfile scanning."""

from __future__ import annotations

from .lockfile import DetectedLockfile, Dialect, NpmPackageRecord
from .package_identifier import PackageIdentifier

__all__ = [
    "DetectedLockfile",
    "Dialect",
    "NpmPackageRecord",
    "PackageIdentifier",
]
