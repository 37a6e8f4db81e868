# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exceptions raised by envlex."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from envlex.parser import ParseState
    from envlex.tokens import Token


class EnvlexError(Exception):
    """Base class for all envlex errors."""


class ParseError(EnvlexError, ValueError):
    """The token sequence does not match the line grammar.

    Carries the offending token, its position, and the parser state it
    arrived in. ``str(error)`` gives a one-line message prefixed with the
    1-based line and column.
    """

    kind: ClassVar[str] = "parse_error"
    reason: ClassVar[str] = "invalid input"

    def __init__(self, token: Token, state: ParseState) -> None:
        self.token = token
        self.state = state
        self.offset = token.offset
        self.line = token.line
        self.column = token.column
        self.detail = f"{self.reason} (found {token.describe()} in {state.name})"
        super().__init__(f"line {self.line}, column {self.column}: {self.detail}")


class MalformedKeyError(ParseError):
    """A key was interrupted by something other than ``=``."""

    kind = "malformed_key"
    reason = "malformed key, expected '='"


class MissingValueError(ParseError):
    """``=`` was not followed by a value."""

    kind = "missing_value"
    reason = "missing value after '='"


class UnexpectedTokenError(ParseError):
    """Any other token the grammar does not allow at this point."""

    kind = "unexpected_token"
    reason = "unexpected token"


class TruncatedInputError(UnexpectedTokenError):
    """The token sequence stopped before its ``END_OF_INPUT`` marker.

    Only hand-built sequences can trigger this. The position is that of the
    last token received, or the start of input when there was none, in which
    case ``token`` is None.
    """

    reason = "token sequence ended without end of input"

    def __init__(self, token: Token | None, state: ParseState) -> None:
        if token is not None:
            super().__init__(token, state)
            self.detail = f"{self.reason} (last token {token.describe()} in {state.name})"
        else:
            self.token = None
            self.state = state
            self.offset = 0
            self.line = 1
            self.column = 1
            self.detail = f"{self.reason} (no tokens)"
        self.args = (f"line {self.line}, column {self.column}: {self.detail}",)
