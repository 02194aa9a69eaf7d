"""Read the project name from package.json."""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import ProjectFileMalformed, ProjectFileUnreadable


FILENAME = "package.json"


def project_name(directory: Path) -> str:
    """Return the ``name`` field of ``directory/package.json``.

    The name is only used for status output, so a manifest without one falls
    back to the directory name. A missing, unreadable or non-JSON manifest is
    still an error.
    """
    path = directory / FILENAME
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ProjectFileUnreadable(f"Failed to read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ProjectFileMalformed(f"{path} is not valid UTF-8: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ProjectFileMalformed(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ProjectFileMalformed(f"{path} must contain a JSON object")

    name = data.get("name")
    if isinstance(name, str) and name:
        return name
    return directory.resolve().name
