"""Rendering and writing of the dependency URL list."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .errors import OutputWriteFailure


def render_deps_list(urls: Iterable[str]) -> str:
    """One URL per line, no trailing newline or header."""
    return "\n".join(urls)


def write_deps_list(path: Path, urls: Iterable[str]) -> Path:
    """Write the URL list to ``path`` and return it.

    Raises:
        OutputWriteFailure: if the file cannot be written.
    """
    content = render_deps_list(urls)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteFailure(f"Failed to write {path}: {exc}") from exc
    return path
