"""Parse .env text and files into key-value dicts.

Handles:
  - ``KEY=VALUE`` lines, value ending at the first whitespace
  - blank lines and leading whitespace
  - ``#`` comments, on their own line or after a value

Quoting, escapes, ``export`` prefixes and multi-line values are not part of
the format; such input raises :class:`~envlex.errors.ParseError` or parses
literally.
"""

from __future__ import annotations

from pathlib import Path

from envlex.lexer import lex
from envlex.parser import parse


def parse_env_string(text: str) -> dict[str, str]:
    """Parse .env *text* and return an ordered dict of key-value pairs."""
    return parse(lex(text))


def parse_env_file(path: str | Path, encoding: str = "utf-8") -> dict[str, str]:
    """Read a .env file and return an ordered dict of key-value pairs."""
    return parse_env_string(Path(path).read_text(encoding=encoding))
