"""Core scanning entrypoints.

This module does no console or argument handling of its own so it can be driven
from the CLI or imported as a library. Status lines go through the ``echo``
callable supplied by the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from .config import ScanConfig
from .discovery import detect_dialect
from .extract import extract_urls, load_lockfile
from .parsers.package_json import project_name
from .registry import NPM_REGISTRY_URL


Echo = Callable[[str], None]


def _silent(_: str) -> None:
    return None


def scan_directory(
    directory: Path,
    registry: str = NPM_REGISTRY_URL,
    echo: Echo = _silent,
) -> list[str]:
    """Return the archive URLs for one project directory, in lockfile order.

    Raises:
        ProjectFileUnreadable, ProjectFileMalformed: package.json problems.
        LockfileNotFound: no supported lockfile in ``directory``.
        LockfileUnreadable, LockfileMalformed: the lockfile cannot be used.
        MalformedPackageIdentifier: a pnpm key cannot be turned into a URL.
    """
    name = project_name(directory)
    lockfile = detect_dialect(directory)

    echo(f"Project: {name} ({directory})")
    echo(f"Lockfile: {lockfile.dialect.value.upper()}")

    content = load_lockfile(lockfile)
    return extract_urls(content, lockfile.dialect, registry=registry)


def dedupe(urls: Iterable[str]) -> list[str]:
    """Drop repeated URLs, keeping the first occurrence of each."""
    return list(dict.fromkeys(urls))


def scan(config: ScanConfig, echo: Echo = _silent) -> list[str]:
    """Scan every configured directory and return the combined unique URL list.

    Directories are processed one after another; the first failure aborts the
    whole scan and nothing is returned for the directories already done.
    """
    collected: list[str] = []
    for directory in config.directories():
        collected.extend(scan_directory(directory, registry=config.registry, echo=echo))
    return dedupe(collected)
