# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envlex -- a small lexer and parser for .env files."""

from envlex.env_file import parse_env_file, parse_env_string
from envlex.errors import (
    EnvlexError,
    MalformedKeyError,
    MissingValueError,
    ParseError,
    UnexpectedTokenError,
)
from envlex.lexer import lex
from envlex.parser import ParseState, parse
from envlex.sdk import dotenv_values, load_dotenv
from envlex.tokens import Token, TokenKind

__all__ = [
    "__version__",
    "EnvlexError",
    "MalformedKeyError",
    "MissingValueError",
    "ParseError",
    "ParseState",
    "Token",
    "TokenKind",
    "UnexpectedTokenError",
    "dotenv_values",
    "lex",
    "load_dotenv",
    "parse",
    "parse_env_file",
    "parse_env_string",
]
__version__ = "0.1.0"
