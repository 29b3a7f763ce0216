"""Workspace topology model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from .manifest import Manifest

WorkspaceTool = Literal["root", "npm", "yarn", "pnpm", "lerna", "bolt"]

ROOT_TOOL: WorkspaceTool = "root"


@dataclass(slots=True)
class WorkspaceRoot:
    """Root directory of a workspace and its manifest once loaded."""

    dir: str
    package_json: Manifest | None = None


@dataclass(slots=True)
class WorkspaceDescription:
    """How a root directory relates to its member packages.

    ``tool`` is the detected multi-package convention, or ``"root"`` when the
    directory is a single standalone package.
    """

    tool: WorkspaceTool
    root: WorkspaceRoot
    packages: list[str] = field(default_factory=list)

    @property
    def is_single_package(self) -> bool:
        return self.tool == ROOT_TOOL
