#!/usr/bin/env python3
"""
windows_error/config.py

JSON configuration store for windows-error.

Rules:
- Missing file means defaults; nothing is written until save().
- Precedence: CLI flags > config file > defaults (merging happens in cli.py).
- validate() raises ConfigError carrying a StatusCode; it never exits.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from windows_error.status_codes import StatusCode

logger = logging.getLogger(__name__)

ENV_CONFIG_PATH = "WINDOWS_ERROR_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".windows_error" / "config.json"

TABLE_CHOICES = ("hresult", "win32", "ntstatus", "all")
FORMAT_CHOICES = ("text", "json")

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "output": {
        "format": "text",
        "uppercase_hex": True,
    },
    "lookup": {
        "default_table": "hresult",
    },
    "logging": {
        "verbose": False,
        "json_logs": False,
    },
    "audit": {
        "show_progress": True,
    },
}


class ConfigError(Exception):
    def __init__(self, message: str, status_code: StatusCode):
        super().__init__(message)
        self.status_code = status_code


def resolve_path(path: Optional[Path] = None) -> Path:
    """
    Explicit path wins, then WINDOWS_ERROR_CONFIG, then
    ~/.windows_error/config.json.
    """
    if path is not None:
        return Path(path)

    env = os.environ.get(ENV_CONFIG_PATH)
    if env is not None:
        if not env.strip():
            raise ConfigError(
                f"{ENV_CONFIG_PATH} is set but empty",
                StatusCode.CONFIG_ENV_INVALID,
            )
        return Path(env).expanduser()

    return DEFAULT_CONFIG_PATH


class Config:
    def __init__(self, path: Optional[Path] = None):
        self.path = resolve_path(path)
        self._data: Dict[str, Dict[str, Any]] = copy.deepcopy(DEFAULTS)

    # --------------------------------------------------------
    # Persistence
    # --------------------------------------------------------
    def load(self) -> "Config":
        self._data = copy.deepcopy(DEFAULTS)

        if not self.path.exists():
            logger.debug("CONFIG_DEFAULTS path=%s", self.path)
            return self

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ConfigError(
                f"Unable to read config {self.path}: {e}",
                StatusCode.CONFIG_UNREADABLE,
            ) from e

        if not isinstance(raw, dict):
            raise ConfigError(
                f"Config root must be a JSON object: {self.path}",
                StatusCode.CONFIG_INVALID,
            )

        for section, values in raw.items():
            if not isinstance(values, dict):
                raise ConfigError(
                    f"Config section '{section}' must be an object",
                    StatusCode.CONFIG_INVALID,
                )
            self._data.setdefault(section, {}).update(values)

        logger.debug("CONFIG_LOADED path=%s", self.path)
        return self

    def save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(self._data, indent=2, sort_keys=True) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigError(
                f"Unable to write config {self.path}: {e}",
                StatusCode.CONFIG_WRITE_FAILED,
            ) from e
        logger.debug("CONFIG_SAVED path=%s", self.path)

    # --------------------------------------------------------
    # Access
    # --------------------------------------------------------
    def get(self, section: str, key: str, default: Any = None) -> Any:
        return self._data.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        self._data.setdefault(section, {})[key] = value

    def reset(self) -> None:
        self._data = copy.deepcopy(DEFAULTS)

    def as_dict(self) -> Dict[str, Dict[str, Any]]:
        return copy.deepcopy(self._data)

    # --------------------------------------------------------
    # Validation
    # --------------------------------------------------------
    def validate(self) -> None:
        unknown = sorted(set(self._data) - set(DEFAULTS))
        if unknown:
            raise ConfigError(
                f"Unknown config section(s): {', '.join(unknown)}",
                StatusCode.CONFIG_UNSUPPORTED,
            )

        fmt = self.get("output", "format")
        if fmt not in FORMAT_CHOICES:
            raise ConfigError(
                f"output.format must be one of {FORMAT_CHOICES}, got {fmt!r}",
                StatusCode.CONFIG_INVALID,
            )

        table = self.get("lookup", "default_table")
        if table not in TABLE_CHOICES:
            raise ConfigError(
                f"lookup.default_table must be one of {TABLE_CHOICES}, got {table!r}",
                StatusCode.CONFIG_INVALID,
            )

        for section, key in (
            ("output", "uppercase_hex"),
            ("logging", "verbose"),
            ("logging", "json_logs"),
            ("audit", "show_progress"),
        ):
            if not isinstance(self.get(section, key), bool):
                raise ConfigError(
                    f"{section}.{key} must be true or false",
                    StatusCode.CONFIG_INVALID,
                )
