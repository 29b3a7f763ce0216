"""Workspace topology detection.

Recognises the common JavaScript monorepo conventions (pnpm, npm/yarn
workspaces, lerna and bolt) and lists the member package directories they
declare. Detection never raises: anything unrecognised or malformed yields
``None`` so callers can fall back to treating the directory as a single
package.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .globbing import NEGATION_PREFIX, expand
from .logging import get_logger
from .models.workspace import WorkspaceDescription, WorkspaceRoot, WorkspaceTool

logger = get_logger(__name__)

PACKAGE_JSON = "package.json"
PNPM_WORKSPACE = "pnpm-workspace.yaml"
LERNA_JSON = "lerna.json"
YARN_LOCK = "yarn.lock"
LERNA_DEFAULT_PACKAGES = ["packages/*"]

EXCLUDES = {"node_modules", ".git"}


class _DetectionError(Exception):
    """Internal signal that a workspace file exists but cannot be used."""


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise _DetectionError(f"{path}: {exc}") from exc


def _load_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError, RecursionError) as exc:
        raise _DetectionError(f"{path}: {exc}") from exc


def _string_list(value: Any) -> list[str] | None:
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    return None


def _package_patterns(root: Path) -> tuple[WorkspaceTool, list[str]] | None:
    """Return the detected tool and its declared package globs."""
    pnpm_file = root / PNPM_WORKSPACE
    if os.path.isfile(pnpm_file):
        data = _load_yaml(pnpm_file) or {}
        if isinstance(data, Mapping):
            patterns = _string_list(data.get("packages"))
            if patterns is not None:
                return "pnpm", patterns

    package_json: Any = {}
    package_file = root / PACKAGE_JSON
    if os.path.isfile(package_file):
        package_json = _load_json(package_file)
    if not isinstance(package_json, Mapping):
        raise _DetectionError(f"{package_file}: not an object")

    workspaces = package_json.get("workspaces")
    if isinstance(workspaces, Mapping):
        workspaces = workspaces.get("packages")
    patterns = _string_list(workspaces)
    if patterns is not None:
        tool: WorkspaceTool = "yarn" if os.path.isfile(root / YARN_LOCK) else "npm"
        return tool, patterns

    lerna_file = root / LERNA_JSON
    if os.path.isfile(lerna_file):
        data = _load_json(lerna_file)
        if isinstance(data, Mapping):
            return "lerna", _string_list(data.get("packages")) or LERNA_DEFAULT_PACKAGES

    bolt = package_json.get("bolt")
    if isinstance(bolt, Mapping):
        patterns = _string_list(bolt.get("workspaces"))
        if patterns is not None:
            return "bolt", patterns

    return None


def find_package_dirs(root: Path, patterns: list[str]) -> list[str]:
    """Return sorted absolute directories matching ``patterns`` that hold a package.json."""
    globs: list[str] = []
    for pattern in patterns:
        if pattern.startswith(NEGATION_PREFIX):
            globs.append(pattern)
        else:
            globs.append(f"{pattern.rstrip('/')}/{PACKAGE_JSON}")
    globs.extend(f"{NEGATION_PREFIX}{name}" for name in sorted(EXCLUDES))

    manifests = expand(globs, cwd=root, absolute=True, gitignore=False)
    return sorted({os.path.dirname(path) for path in manifests})


def detect_workspace(directory: str | Path) -> WorkspaceDescription | None:
    """Describe the workspace rooted at ``directory``, or ``None`` if there is none."""
    root = Path(os.path.abspath(directory))
    if not os.path.isdir(root):
        logger.debug("No workspace at %s: not a directory", root)
        return None

    try:
        detected = _package_patterns(root)
        if detected is None:
            logger.debug("No multi-package tool detected at %s", root)
            return None
        tool, patterns = detected
        packages = find_package_dirs(root, patterns)
    except (_DetectionError, OSError) as exc:
        logger.debug("Workspace detection failed: %s", exc)
        return None

    logger.debug("Detected %s workspace at %s with %d package(s)", tool, root, len(packages))
    return WorkspaceDescription(tool=tool, root=WorkspaceRoot(dir=str(root)), packages=packages)
