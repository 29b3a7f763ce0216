"""workspace-paths core package.

Resolves the package manifest files that make up a monorepo workspace. The
same entrypoints back the ``workspace-paths`` CLI and library callers.
"""

from .config import Settings, load_settings
from .core import resolve_package_paths
from .discovery import detect_workspace
from .errors import (
    ConfigError,
    EmptyWorkspaceError,
    ManifestError,
    ManifestFieldError,
    ManifestMissingNameError,
    ManifestNotAFileError,
    ManifestNotAnObjectError,
    ManifestNotFoundError,
    ManifestParseError,
    ManifestUnreadableError,
    WorkspaceError,
    WorkspacePathsError,
)
from .globbing import expand
from .models import Manifest, WorkspaceDescription, WorkspaceRoot
from .parsers import load_manifest

__all__ = [
    # Entrypoints
    "resolve_package_paths",
    "load_manifest",
    "detect_workspace",
    "expand",
    # Models
    "Manifest",
    "WorkspaceDescription",
    "WorkspaceRoot",
    # Configuration
    "Settings",
    "load_settings",
    # Errors
    "ConfigError",
    "EmptyWorkspaceError",
    "ManifestError",
    "ManifestFieldError",
    "ManifestMissingNameError",
    "ManifestNotAFileError",
    "ManifestNotAnObjectError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "ManifestUnreadableError",
    "WorkspaceError",
    "WorkspacePathsError",
]
