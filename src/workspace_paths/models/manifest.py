"""Parsed package manifest model."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..errors import (
    ManifestFieldError,
    ManifestMissingNameError,
    ManifestNotAnObjectError,
)

NAME_KEY = "name"
ROOT_DIR_KEY = "rootDir"
SEARCH_FILE_KEY = "searchFile"


def _freeze(value: Any) -> Any:
    """Return a read-only copy: mappings become proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


@dataclass(frozen=True)
class Manifest:
    """A package descriptor read from disk.

    ``extra`` holds every key other than the recognised ones. ``contents`` is
    the raw text the manifest was parsed from; it is kept out of ``repr``,
    equality and :meth:`to_dict` so re-serialising a manifest never embeds a
    copy of its own source.
    """

    name: str
    path: str
    root_dir: str | None = None
    search_file: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)
    contents: str = field(default="", repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ManifestMissingNameError(self.path)
        object.__setattr__(self, "extra", _freeze(self.extra))

    @classmethod
    def from_data(cls, data: Any, *, path: str, contents: str = "") -> Manifest:
        """Validate decoded manifest data and build a :class:`Manifest`."""
        if not isinstance(data, Mapping):
            raise ManifestNotAnObjectError(path)

        name = data.get(NAME_KEY)
        if not isinstance(name, str) or not name:
            raise ManifestMissingNameError(path)

        for key in (ROOT_DIR_KEY, SEARCH_FILE_KEY):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ManifestFieldError(path, key)

        recognised = {NAME_KEY, ROOT_DIR_KEY, SEARCH_FILE_KEY}
        return cls(
            name=name,
            path=path,
            root_dir=data.get(ROOT_DIR_KEY),
            search_file=data.get(SEARCH_FILE_KEY),
            extra={str(k): v for k, v in data.items() if k not in recognised},
            contents=contents,
        )

    def get(self, key: str, default: Any = None) -> Any:
        return self.to_dict().get(key, default)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {NAME_KEY: self.name}
        if self.root_dir is not None:
            data[ROOT_DIR_KEY] = self.root_dir
        if self.search_file is not None:
            data[SEARCH_FILE_KEY] = self.search_file
        data.update(_thaw(self.extra))
        return data

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
