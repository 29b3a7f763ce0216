"""Command line entrypoint: print the package manifests of a workspace."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import load_settings
from .core import resolve_package_paths
from .errors import WorkspacePathsError
from .logging import configure_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="workspace-paths", description=__doc__)
    parser.add_argument(
        "--cwd",
        type=Path,
        default=Path("."),
        help="Workspace root holding the root manifest (default: current directory)",
    )
    parser.add_argument(
        "--ignore",
        dest="ignore_packages",
        action="append",
        default=None,
        metavar="PACKAGE",
        help="Package glob to exclude; may be repeated",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON settings file (default: $WORKSPACE_PATHS_CONFIG)",
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON array")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        settings = load_settings(args.config)
        paths = resolve_package_paths(args.cwd, args.ignore_packages, settings=settings)
    except WorkspacePathsError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(paths, indent=2))
    else:
        for path in paths:
            print(path)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
