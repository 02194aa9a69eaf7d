"""Archive URL synthesis for packages published on the npm registry."""

from __future__ import annotations

from .models.package_identifier import PackageIdentifier


NPM_REGISTRY_URL = "https://registry.npmjs.org"


def parse_identifier(identifier: str) -> PackageIdentifier:
    """Split ``name@version`` (optionally ``@scope/name@version``) into its parts.

    Raises:
        MalformedPackageIdentifier: if the name or version cannot be recovered.
    """
    return PackageIdentifier.from_string(identifier)


def tarball_name(package: PackageIdentifier) -> str:
    # The archive filename never carries the scope.
    return f"{package.bare_name}-{package.version}.tgz"


def synthesize_url(identifier: str, *, registry: str = NPM_REGISTRY_URL) -> str:
    """Return the registry tarball URL for a package identifier.

    ``lodash@4.17.21`` -> ``https://registry.npmjs.org/lodash/-/lodash-4.17.21.tgz``
    ``@scope/name@1.0.0`` -> ``https://registry.npmjs.org/@scope/name/-/name-1.0.0.tgz``
    """
    package = parse_identifier(identifier)
    return f"{registry.rstrip('/')}/{package.name}/-/{tarball_name(package)}"


def normalise_pnpm_key(key: str) -> str:
    """Strip pnpm key decorations, leaving a plain ``name@version``.

    pnpm v6 prefixes keys with "/" and newer releases append the resolved peer
    set, e.g. ``/react-dom@18.2.0(react@18.2.0)``.
    """
    ref = key[1:] if key.startswith("/") else key
    paren = ref.find("(")
    if paren != -1:
        ref = ref[:paren]
    return ref
