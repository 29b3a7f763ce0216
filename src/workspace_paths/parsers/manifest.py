"""Load a package manifest from disk, tolerating JSON or YAML syntax."""

from __future__ import annotations

import json
import os
import stat
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeAlias

import yaml

from ..errors import (
    ManifestNotAFileError,
    ManifestNotFoundError,
    ManifestParseError,
    ManifestUnreadableError,
)
from ..logging import get_logger
from ..models.manifest import Manifest

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class ParseResult:
    """Outcome of a single parser strategy: a value or the error it hit."""

    value: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


ParseFunction: TypeAlias = Callable[[str], ParseResult]


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def _parse_json(text: str) -> ParseResult:
    try:
        return ParseResult(value=json.loads(text, parse_constant=_reject_constant))
    except (ValueError, RecursionError) as exc:
        return ParseResult(error=exc)


def _parse_yaml(text: str) -> ParseResult:
    try:
        return ParseResult(value=yaml.safe_load(text))
    except (yaml.YAMLError, RecursionError) as exc:
        return ParseResult(error=exc)


# Tried in order; strict syntax first.
PARSERS: tuple[tuple[str, ParseFunction], ...] = (
    ("json", _parse_json),
    ("yaml", _parse_yaml),
)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestUnreadableError(path) from exc


def read_manifest(path: str | Path) -> str:
    """Return the text of the manifest at ``path`` after checking it is a file."""
    path = Path(path)
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise ManifestNotFoundError(path) from exc
    except OSError as exc:
        raise ManifestUnreadableError(path) from exc

    try:
        st = path.lstat()
    except OSError as exc:
        raise ManifestUnreadableError(path) from exc

    if not stat.S_ISREG(st.st_mode):
        raise ManifestNotAFileError(path)

    return _read_text(path)


def load_manifest(path: str | Path) -> Manifest:
    """Read, parse and validate the manifest at ``path``.

    Raises:
        ManifestNotFoundError, ManifestUnreadableError, ManifestNotAFileError:
            when the file cannot be read.
        ManifestParseError: when neither JSON nor YAML can decode it.
        ManifestNotAnObjectError, ManifestMissingNameError,
        ManifestFieldError: when the decoded value has the wrong shape.
    """
    path = Path(path)
    contents = read_manifest(path)

    result = ParseResult()
    for index, (label, parser) in enumerate(PARSERS):
        if index:
            contents = _read_text(path)
        result = parser(contents)
        if result.ok:
            logger.debug("Parsed %s as %s", path, label)
            break
        logger.debug("Parsing %s as %s failed: %s", path, label, result.error)
    else:
        raise ManifestParseError(path, str(result.error)) from result.error

    return Manifest.from_data(result.value, path=str(path), contents=contents)
