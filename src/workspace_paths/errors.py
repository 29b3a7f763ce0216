"""Error types raised while loading manifests and resolving workspaces."""

from __future__ import annotations

from pathlib import Path


class WorkspacePathsError(RuntimeError):
    """Base error for every failure surfaced by workspace_paths."""


class ManifestError(WorkspacePathsError):
    """Raised when a manifest file cannot be loaded or validated.

    ``path`` is the offending file and ``reason`` a short description; the
    message names both so the CLI can print it verbatim.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f'{Path(path).name} {reason}: "{path}"')


class ManifestNotFoundError(ManifestError):
    """Raised when the manifest path does not exist."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "file not found")


class ManifestUnreadableError(ManifestError):
    """Raised when the manifest exists but cannot be stat'd or read."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "cannot be read")


class ManifestNotAFileError(ManifestError):
    """Raised when the manifest path is a directory or special file."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "is not a file")


class ManifestParseError(ManifestError):
    """Raised when no parser strategy could decode the manifest."""

    def __init__(self, path: str | Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path, f"could not be parsed ({detail})")


class ManifestNotAnObjectError(ManifestError):
    """Raised when the decoded manifest is not a mapping."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "was not an object")


class ManifestMissingNameError(ManifestError):
    """Raised when the manifest has no non-empty string ``name``."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "package name must be non-empty string")


class ManifestFieldError(ManifestError):
    """Raised when a recognised manifest field has the wrong type."""

    def __init__(self, path: str | Path, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(path, f"field '{field_name}' must be a string")


class WorkspaceError(WorkspacePathsError):
    """Base error for workspace resolution failures."""


class EmptyWorkspaceError(WorkspaceError):
    """Raised when a workspace resolves to zero member manifests."""

    def __init__(self, manifest_path: str | Path) -> None:
        self.manifest_path = str(manifest_path)
        super().__init__(
            f"{Path(manifest_path).name}: Project must contain one or more "
            f'workspace-packages: "{manifest_path}"'
        )


class ConfigError(WorkspacePathsError):
    """Raised when the settings file cannot be loaded or is invalid."""
