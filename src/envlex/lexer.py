# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Split .env text into tokens.

The lexer never fails: anything that is not ``=``, ``#``, a line terminator
or whitespace becomes a ``CHAR`` token. Grammar checks are left to
:mod:`envlex.parser`.
"""

from __future__ import annotations

from envlex.tokens import Token, TokenKind

_NEWLINE_CHARS = "\r\n"


def lex(source: str) -> tuple[Token, ...]:
    """Return the tokens of *source*, always ending with one ``END_OF_INPUT``."""
    tokens: list[Token] = []
    index = 0
    length = len(source)
    line = 1
    line_start = 0

    while index < length:
        char = source[index]
        column = index - line_start + 1

        if char in _NEWLINE_CHARS:
            end = index + 2 if source.startswith("\r\n", index) else index + 1
            tokens.append(Token(TokenKind.NEWLINE, source[index:end], index, line, column))
            index = end
            line += 1
            line_start = index
            continue

        if char == "#":
            end = _skip_to_line_end(source, index)
            tokens.append(Token(TokenKind.COMMENT, source[index:end], index, line, column))
            index = end
            continue

        if char == "=":
            kind = TokenKind.ASSIGN
        elif char.isspace():
            kind = TokenKind.WHITESPACE
        else:
            kind = TokenKind.CHAR
        tokens.append(Token(kind, char, index, line, column))
        index += 1

    tokens.append(Token(TokenKind.END_OF_INPUT, "", length, line, length - line_start + 1))
    return tuple(tokens)


def _skip_to_line_end(source: str, index: int) -> int:
    while index < len(source) and source[index] not in _NEWLINE_CHARS:
        index += 1
    return index
