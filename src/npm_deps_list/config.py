"""Run configuration for a dependency-list scan.

The scanner never reads process state itself: the working directory, the
directories to scan and the output location are resolved once here and passed
in as a ``ScanConfig``.

The output path and registry base can be overridden through environment
variables:

- ``NPM_DEPS_LIST_OUTPUT``: where the URL list is written (default
  ``deps-list.txt`` in the working directory)
- ``NPM_DEPS_LIST_REGISTRY``: registry base used for pnpm URL synthesis
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError
from .registry import NPM_REGISTRY_URL


DEFAULT_OUTPUT_NAME = "deps-list.txt"
OUTPUT_ENV_VAR = "NPM_DEPS_LIST_OUTPUT"
REGISTRY_ENV_VAR = "NPM_DEPS_LIST_REGISTRY"


@dataclass(slots=True, frozen=True)
class ScanConfig:
    """Everything a scan needs to know about its environment."""

    working_directory: Path
    output_path: Path
    target_directories: tuple[Path, ...] = field(default_factory=tuple)
    registry: str = NPM_REGISTRY_URL

    def directories(self) -> list[Path]:
        """Return absolute directories to scan; the working directory when none were given."""
        if not self.target_directories:
            return [self.working_directory]
        return [self.working_directory / target for target in self.target_directories]


def _resolve_output_path(working_directory: Path, output: Path | str | None) -> Path:
    """Resolve the output file path.

    Priority:
    1. Explicit output argument
    2. NPM_DEPS_LIST_OUTPUT environment variable
    3. deps-list.txt in the working directory
    """
    if output is None:
        output = os.environ.get(OUTPUT_ENV_VAR) or None
    if output is None:
        return working_directory / DEFAULT_OUTPUT_NAME
    return working_directory / Path(output)


def _resolve_registry() -> str:
    registry = os.environ.get(REGISTRY_ENV_VAR, "").strip()
    if not registry:
        return NPM_REGISTRY_URL
    if not registry.startswith(("http://", "https://")):
        raise ConfigError(f"{REGISTRY_ENV_VAR} must be an http(s) URL, got {registry!r}")
    return registry.rstrip("/")


def load_config(
    directories: Iterable[Path | str] = (),
    working_directory: Path | str | None = None,
    output: Path | str | None = None,
) -> ScanConfig:
    """Build a ScanConfig from CLI arguments and the environment.

    Raises:
        ConfigError: if an environment override is invalid.
    """
    cwd = Path(working_directory) if working_directory is not None else Path.cwd()
    cwd = cwd.resolve()
    return ScanConfig(
        working_directory=cwd,
        output_path=_resolve_output_path(cwd, output),
        target_directories=tuple(Path(d) for d in directories),
        registry=_resolve_registry(),
    )
