# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Token types produced by :func:`envlex.lexer.lex`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Closed set of token kinds."""

    CHAR = "char"
    ASSIGN = "assign"
    NEWLINE = "newline"
    WHITESPACE = "whitespace"
    COMMENT = "comment"
    END_OF_INPUT = "end of input"


@dataclass(frozen=True)
class Token:
    """One classified unit of input.

    ``text`` is the source text the token covers: the character itself for
    ``CHAR``, ``ASSIGN`` and ``WHITESPACE``, the terminator for ``NEWLINE``
    (``"\\r\\n"`` is one token), the whole comment including ``#`` for
    ``COMMENT``, and ``""`` for ``END_OF_INPUT``.

    ``offset`` is the 0-based character offset of the token's first
    character; ``line`` and ``column`` are 1-based.
    """

    kind: TokenKind
    text: str
    offset: int
    line: int
    column: int

    def describe(self) -> str:
        """Short human-readable form used in error messages."""
        if self.kind is TokenKind.CHAR:
            return f"character {self.text!r}"
        if self.kind is TokenKind.ASSIGN:
            return "'='"
        if self.kind is TokenKind.WHITESPACE:
            return f"whitespace {self.text!r}"
        return self.kind.value
