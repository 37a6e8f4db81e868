"""SDK for loading .env files into the environment (python-dotenv style)."""

from __future__ import annotations

import os
from pathlib import Path

from envlex.config import load_config
from envlex.env_file import parse_env_file


def dotenv_values(
    path: str | Path | None = None,
    encoding: str | None = None,
) -> dict[str, str]:
    """Return the variables of a .env file as a dict without modifying os.environ.

    Parameters
    ----------
    path : str or Path, optional
        File to read. Defaults from ENVLEX_ENV_FILE, then ``env_file`` in
        ``.envlex.toml``, then ``".env"``.
    encoding : str, optional
        File encoding. Defaults from ENVLEX_ENCODING or config, else ``"utf-8"``.

    Returns
    -------
    dict[str, str]
        Mapping in file order. Empty when the file does not exist.

    Raises
    ------
    envlex.errors.ParseError
        When the file exists but is not valid .env syntax.
    """
    cfg = load_config()
    resolved = cfg.resolve_env_file(path)
    if not resolved.is_file():
        return {}
    return parse_env_file(resolved, encoding=cfg.resolve_encoding(encoding))


def load_dotenv(
    path: str | Path | None = None,
    override: bool = True,
    encoding: str | None = None,
) -> bool:
    """Load a .env file into os.environ.

    Same path/encoding resolution as :func:`dotenv_values`.

    Parameters
    ----------
    override : bool, default True
        If True, overwrite existing keys in os.environ. If False, only set
        keys that are not already set.

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.

    Examples
    --------
    >>> from envlex import load_dotenv
    >>> load_dotenv()  # ENVLEX_ENV_FILE, config, or ./.env
    True
    >>> load_dotenv(".env.local", override=False)
    False
    """
    values = dotenv_values(path, encoding=encoding)
    count = 0
    for key, value in values.items():
        if key in os.environ and not override:
            continue
        os.environ[key] = value
        count += 1
    return count > 0
