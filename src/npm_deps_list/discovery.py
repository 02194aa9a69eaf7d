"""Lockfile discovery for a single project directory."""

from __future__ import annotations

from pathlib import Path

from .errors import LockfileNotFound
from .models.lockfile import DetectedLockfile, Dialect


def detect_dialect(directory: Path) -> DetectedLockfile:
    """Return the lockfile that governs ``directory``.

    pnpm-lock.yaml is probed before package-lock.json; when both exist the pnpm
    lockfile wins and the npm one is never looked at.

    Raises:
        LockfileNotFound: if neither lockfile exists in the directory.
    """
    for dialect in Dialect:
        candidate = directory / dialect.lockfile_name
        if candidate.is_file():
            return DetectedLockfile(dialect=dialect, path=candidate)

    names = " or ".join(d.lockfile_name for d in Dialect)
    raise LockfileNotFound(f"{names} not found in {directory}")
