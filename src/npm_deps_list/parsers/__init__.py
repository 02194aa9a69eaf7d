"""Lockfile and manifest parsers."""

from __future__ import annotations

from . import package_json, package_lock, pnpm_lock

__all__ = [
    "package_json",
    "package_lock",
    "pnpm_lock",
]
