"""Data models for manifests and workspace topology."""

from __future__ import annotations

from .manifest import Manifest
from .workspace import ROOT_TOOL, WorkspaceDescription, WorkspaceRoot, WorkspaceTool

__all__ = [
    "Manifest",
    "ROOT_TOOL",
    "WorkspaceDescription",
    "WorkspaceRoot",
    "WorkspaceTool",
]
