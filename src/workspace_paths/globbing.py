"""Gitignore-aware glob expansion.

Patterns follow the usual monorepo convention: plain patterns select files,
patterns prefixed with ``!`` exclude them. Exclusions use gitignore wildmatch
rules, so ``!pkgA`` drops any path with a ``pkgA`` component no matter where
it appears in the pattern list.
"""

from __future__ import annotations

import glob
import os
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from pathspec import GitIgnoreSpec

from .logging import get_logger

logger = get_logger(__name__)

NEGATION_PREFIX = "!"
GITIGNORE_FILENAME = ".gitignore"


def split_patterns(patterns: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split ``patterns`` into (includes, excludes) with the ``!`` stripped."""
    includes: list[str] = []
    excludes: list[str] = []
    for pattern in patterns:
        if pattern.startswith(NEGATION_PREFIX):
            stripped = pattern[len(NEGATION_PREFIX) :]
            if stripped:
                excludes.append(stripped)
        elif pattern:
            includes.append(pattern)
    return includes, excludes


class _GitignoreRules:
    """``.gitignore`` files between ``cwd`` and a match, read once per expansion."""

    def __init__(self, cwd: Path) -> None:
        self._cwd = cwd
        self._specs: dict[str, GitIgnoreSpec | None] = {}

    def _spec_for(self, rel_dir: str) -> GitIgnoreSpec | None:
        if rel_dir not in self._specs:
            path = self._cwd / rel_dir / GITIGNORE_FILENAME
            spec = None
            try:
                lines = path.read_text(encoding="utf-8").splitlines()
            except (FileNotFoundError, NotADirectoryError):
                pass
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Ignoring unreadable %s: %s", path, exc)
            else:
                spec = GitIgnoreSpec.from_lines(lines)
            self._specs[rel_dir] = spec
        return self._specs[rel_dir]

    def is_ignored(self, rel_path: str) -> bool:
        """Return whether ``rel_path`` is ignored; deeper files override shallower ones."""
        pure = PurePosixPath(rel_path)
        if pure.parts and pure.parts[0] == "..":
            return False

        parents = [PurePosixPath(".")]
        for part in pure.parts[:-1]:
            parents.append(parents[-1] / part)

        ignored = False
        for parent in parents:
            spec = self._spec_for(parent.as_posix())
            if spec is None:
                continue
            result = spec.check_file(pure.relative_to(parent).as_posix())
            if result.include is not None:
                ignored = result.include
        return ignored


def expand(
    patterns: Iterable[str],
    *,
    cwd: str | Path,
    absolute: bool = True,
    gitignore: bool = True,
) -> list[str]:
    """Expand glob ``patterns`` relative to ``cwd`` into matching file paths.

    Matches of each pattern are sorted; the overall order follows the pattern
    order and duplicates keep their first position.
    """
    base = Path(os.path.abspath(cwd))
    includes, excludes = split_patterns(patterns)
    exclude_spec = GitIgnoreSpec.from_lines(excludes) if excludes else None
    ignore_rules = _GitignoreRules(base) if gitignore else None

    found: dict[str, None] = {}
    for pattern in includes:
        for match in sorted(glob.glob(pattern, root_dir=base, recursive=True)):
            rel_path = Path(os.path.normpath(match)).as_posix()
            if not os.path.isfile(base / match):
                continue
            if exclude_spec is not None and exclude_spec.match_file(rel_path):
                continue
            if ignore_rules is not None and ignore_rules.is_ignored(rel_path):
                logger.debug("Skipping %s (gitignored)", rel_path)
                continue
            found.setdefault(rel_path, None)

    if not absolute:
        return list(found)
    return [os.path.normpath(base / rel_path) for rel_path in found]
