"""Settings loader for workspace resolution.

Settings come from a JSON file named explicitly, or through the
``WORKSPACE_PATHS_CONFIG`` environment variable. Without either, built-in
defaults apply. The file is validated against :data:`SETTINGS_SCHEMA`.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .errors import ConfigError

CONFIG_PATH_ENV_VAR = "WORKSPACE_PATHS_CONFIG"

DEFAULT_MANIFEST_FILENAME = "package.json"
DEFAULT_SEARCH_FILE = "Chart.yaml"

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "manifestFilename": {"type": "string", "minLength": 1},
        "defaultSearchFile": {"type": "string", "minLength": 1},
        "gitignore": {"type": "boolean"},
    },
}


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolver settings."""

    manifest_filename: str = DEFAULT_MANIFEST_FILENAME
    default_search_file: str = DEFAULT_SEARCH_FILE
    gitignore: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        validator = Draft202012Validator(SETTINGS_SCHEMA)
        errors = sorted(validator.iter_errors(data), key=lambda e: e.path)
        if errors:
            messages = []
            for error in errors:
                pointer = "/".join(str(p) for p in error.path)
                messages.append(f"{pointer or '<root>'}: {error.message}")
            raise ConfigError("Invalid settings: " + "; ".join(messages))

        return cls(
            manifest_filename=data.get("manifestFilename", DEFAULT_MANIFEST_FILENAME),
            default_search_file=data.get("defaultSearchFile", DEFAULT_SEARCH_FILE),
            gitignore=data.get("gitignore", True),
        )


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the settings file path.

    Priority:
    1. Explicit path argument
    2. WORKSPACE_PATHS_CONFIG environment variable
    3. None (built-in defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Raises:
        ConfigError: If a named file is missing, unreadable or invalid.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return Settings()

    if not config_path.is_file():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    return Settings.from_dict(data)
