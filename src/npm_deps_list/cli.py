"""CLI entrypoint: write the archive URL of every locked dependency to a file.

Usage:
  npm-deps-list [DIR ...] [--output PATH]

With no directories the current directory is scanned.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_config
from .core import scan
from .errors import DepsListError
from .report import write_deps_list


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="npm-deps-list",
        description="Collect registry tarball URLs from package-lock.json or pnpm-lock.yaml.",
    )
    parser.add_argument(
        "directories",
        nargs="*",
        type=Path,
        help="Project directories to scan (default: current directory)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the URL list (default: ./deps-list.txt)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(args.directories, output=args.output)
        urls = scan(config, echo=print)
        output_path = write_deps_list(config.output_path, urls)
    except DepsListError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"Dependency list saved to: {output_path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
