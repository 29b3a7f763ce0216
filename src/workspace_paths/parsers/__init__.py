"""Manifest parsers."""

from __future__ import annotations

from .manifest import PARSERS, ParseResult, load_manifest, read_manifest

__all__ = [
    "PARSERS",
    "ParseResult",
    "load_manifest",
    "read_manifest",
]
