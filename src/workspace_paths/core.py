"""Workspace package path resolution.

This is the library entrypoint used by the CLI: given a working directory it
returns the manifest file of every member package in the workspace.
"""

from __future__ import annotations

import glob
import os
from collections.abc import Sequence
from pathlib import Path

from .config import Settings, load_settings
from .discovery import detect_workspace
from .errors import EmptyWorkspaceError
from .globbing import NEGATION_PREFIX, expand
from .logging import get_logger
from .models.manifest import Manifest
from .models.workspace import ROOT_TOOL, WorkspaceDescription, WorkspaceRoot
from .parsers.manifest import load_manifest

logger = get_logger(__name__)


def _list_subdirectories(source: Path) -> list[str]:
    """Return the first-level subdirectories of ``source``, sorted by name."""
    if not os.path.isdir(source):
        logger.warning("rootDir %s is not a directory; no packages to scan", source)
        return []
    try:
        with os.scandir(source) as entries:
            names = sorted(entry.name for entry in entries if entry.is_dir(follow_symlinks=False))
    except OSError as exc:
        logger.warning("rootDir %s cannot be listed (%s); no packages to scan", source, exc)
        return []
    return [str(source / name) for name in names]


def _candidate_dirs(workspace: WorkspaceDescription, manifest: Manifest) -> list[str]:
    if manifest.root_dir is not None:
        return _list_subdirectories(Path(workspace.root.dir) / manifest.root_dir)
    return list(workspace.packages)


def build_patterns(
    package_dirs: Sequence[str],
    *,
    cwd: str | Path,
    search_file: str,
    ignore_packages: Sequence[str] | None = None,
) -> list[str]:
    """Turn member directories and CLI exclusions into glob patterns.

    Directories become ``<dir relative to cwd>/<search_file>``. Each entry of
    ``ignore_packages`` is added as a ``!`` exclusion; entries ending in ``/``
    also get ``search_file`` appended. A single string counts as one entry.
    """
    if isinstance(ignore_packages, str):
        ignore_packages = [ignore_packages]

    base = os.path.abspath(cwd)
    patterns = [
        glob.escape(Path(os.path.relpath(package_dir, base)).as_posix()) + "/"
        for package_dir in package_dirs
    ]

    if ignore_packages is not None:
        patterns.extend(f"{NEGATION_PREFIX}{p}" for p in ignore_packages)

    return [p[:-1] + "/" + search_file if p.endswith("/") else p for p in patterns]


def resolve_package_paths(
    cwd: str | Path,
    ignore_packages: Sequence[str] | None = None,
    *,
    settings: Settings | None = None,
) -> list[str]:
    """Return absolute paths to the manifest of every workspace package.

    Params:
        cwd: directory holding the root manifest
        ignore_packages: optional package globs to exclude, layered on top of
            the packages the workspace declares

    Raises:
        ManifestError: (any subclass) when the root manifest is invalid
        EmptyWorkspaceError: when no package manifest matches
    """
    settings = settings or load_settings()
    base = os.path.abspath(cwd)

    workspace = detect_workspace(base)
    if workspace is None:
        workspace = WorkspaceDescription(tool=ROOT_TOOL, root=WorkspaceRoot(dir=base))

    manifest_path = Path(workspace.root.dir) / settings.manifest_filename
    manifest = load_manifest(manifest_path)
    workspace.root.package_json = manifest

    if workspace.is_single_package:
        workspace.packages = []

    package_dirs = _candidate_dirs(workspace, manifest)
    logger.debug(
        "Workspace %s (%s): %d candidate package dir(s)",
        workspace.root.dir,
        workspace.tool,
        len(package_dirs),
    )

    patterns = build_patterns(
        package_dirs,
        cwd=base,
        search_file=manifest.search_file or settings.default_search_file,
        ignore_packages=ignore_packages,
    )
    paths = expand(patterns, cwd=base, absolute=True, gitignore=settings.gitignore)

    if not paths:
        raise EmptyWorkspaceError(manifest_path)

    return paths
