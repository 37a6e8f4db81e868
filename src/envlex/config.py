""".envlex.toml configuration loading.

Searches upward from cwd for ``.envlex.toml``; values there are the defaults
the SDK and CLI fall back to after explicit arguments and ``ENVLEX_*``
environment variables.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILE_NAME = ".envlex.toml"
OUTPUT_FORMATS = ("dotenv", "json", "yaml", "table")


@dataclass
class EnvlexConfig:
    """Resolved configuration for the current invocation."""

    env_file: str = ".env"
    encoding: str = "utf-8"
    format: str = "dotenv"
    config_path: Path | None = None

    def resolve_env_file(self, path: str | Path | None = None) -> Path:
        """Return *path*, else ``ENVLEX_ENV_FILE``, else the configured file."""
        if path is not None:
            return Path(path)
        return Path(os.environ.get("ENVLEX_ENV_FILE") or self.env_file)

    def resolve_encoding(self, encoding: str | None = None) -> str:
        """Return *encoding*, else ``ENVLEX_ENCODING``, else the configured one."""
        return encoding or os.environ.get("ENVLEX_ENCODING") or self.encoding


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.envlex.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> EnvlexConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return EnvlexConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("envlex", {})

    fmt = section.get("format", "dotenv")
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(
            f"Invalid format {fmt!r} in {path}. Choose from: {', '.join(OUTPUT_FORMATS)}"
        )

    return EnvlexConfig(
        env_file=section.get("env_file", ".env"),
        encoding=section.get("encoding", "utf-8"),
        format=fmt,
        config_path=path,
    )
