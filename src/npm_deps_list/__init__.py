"""npm-deps-list core package.

Collects the registry archive URL of every package pinned in an npm or pnpm
lockfile so the tarballs can be mirrored or downloaded offline.
"""

__all__ = [
    "cli",
    "core",
    "registry",
]
