"""Package identifier model."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import MalformedPackageIdentifier


@dataclass(frozen=True)
class PackageIdentifier:
    """A published package release, e.g. ``lodash@4.17.21`` or ``@scope/name@1.0.0``."""

    name: str
    version: str

    def __post_init__(self) -> None:
        if not self.name:
            raise MalformedPackageIdentifier("Package name must be non-empty")
        if not self.version:
            raise MalformedPackageIdentifier(f"Package {self.name!r} has no version")
        if self.name.startswith("@"):
            scope, sep, bare = self.name[1:].partition("/")
            if not sep or not scope or not bare:
                raise MalformedPackageIdentifier(
                    f"Scoped package name must look like @scope/name: {self.name!r}"
                )

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"

    @property
    def scope(self) -> str | None:
        if not self.name.startswith("@"):
            return None
        return self.name.split("/", 1)[0]

    @property
    def bare_name(self) -> str:
        """Name without the ``@scope/`` prefix."""
        if self.scope is None:
            return self.name
        return self.name.split("/", 1)[1]

    @classmethod
    def from_string(cls, identifier: str) -> PackageIdentifier:
        # The separator is the first "@" that is not the scope marker.
        start = 1 if identifier.startswith("@") else 0
        idx = identifier.find("@", start)
        if idx == -1:
            raise MalformedPackageIdentifier(
                f"Package identifier has no version separator: {identifier!r}"
            )
        return cls(name=identifier[:idx], version=identifier[idx + 1 :])
