"""Shared fixtures for building throwaway npm/pnpm projects."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def make_project(tmp_path):
    """Return a factory that lays out package.json plus an optional lockfile."""

    def _make(
        name="demo",
        npm_lock=None,
        pnpm_lock=None,
        manifest=None,
        subdir=None,
    ) -> Path:
        root = tmp_path / (subdir or name)
        root.mkdir(parents=True, exist_ok=True)
        if manifest is None:
            manifest = json.dumps({"name": name, "version": "1.0.0"})
        if manifest is not False:
            (root / "package.json").write_text(manifest, encoding="utf-8")
        if npm_lock is not None:
            text = npm_lock if isinstance(npm_lock, str) else json.dumps(npm_lock)
            (root / "package-lock.json").write_text(text, encoding="utf-8")
        if pnpm_lock is not None:
            (root / "pnpm-lock.yaml").write_text(pnpm_lock, encoding="utf-8")
        return root

    return _make


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer environment overrides out of the tests."""
    monkeypatch.delenv("NPM_DEPS_LIST_OUTPUT", raising=False)
    monkeypatch.delenv("NPM_DEPS_LIST_REGISTRY", raising=False)
