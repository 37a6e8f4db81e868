# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Assemble a token sequence into key-value pairs.

Grammar, one line at a time::

    line    := ws* (pair | comment)? newline
    pair    := CHAR+ '=' CHAR+ (ws+ comment?)?
    comment := '#' ...

The parser is a table-driven state machine. :data:`TRANSITIONS` lists every
allowed ``(state, token kind)`` pair; any pair missing from it raises the
error class :data:`FAILURES` names for that state, falling back to
:class:`~envlex.errors.UnexpectedTokenError`.

A repeated key keeps its first position in the mapping and takes the value
of its last occurrence.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from envlex.errors import (
    MalformedKeyError,
    MissingValueError,
    ParseError,
    TruncatedInputError,
    UnexpectedTokenError,
)
from envlex.tokens import Token, TokenKind


class ParseState(Enum):
    """Position of the parser within the current line."""

    LINE_START = "line start"
    IN_KEY = "in key"
    AFTER_ASSIGN = "after assign"
    IN_VALUE = "in value"
    IN_COMMENT = "in comment"


class Action(Enum):
    """What to do with the token that triggered a transition."""

    SKIP = "skip"
    PUSH_KEY = "push key"
    FREEZE_KEY = "freeze key"
    PUSH_VALUE = "push value"
    COMMIT = "commit"


@dataclass(frozen=True)
class Transition:
    """One row of the transition table. ``next_state`` is None when parsing ends."""

    action: Action
    next_state: ParseState | None


_S = ParseState
_T = TokenKind

TRANSITIONS: dict[tuple[ParseState, TokenKind], Transition] = {
    (_S.LINE_START, _T.CHAR): Transition(Action.PUSH_KEY, _S.IN_KEY),
    (_S.LINE_START, _T.NEWLINE): Transition(Action.SKIP, _S.LINE_START),
    (_S.LINE_START, _T.WHITESPACE): Transition(Action.SKIP, _S.LINE_START),
    (_S.LINE_START, _T.COMMENT): Transition(Action.SKIP, _S.IN_COMMENT),
    (_S.LINE_START, _T.END_OF_INPUT): Transition(Action.SKIP, None),
    (_S.IN_KEY, _T.CHAR): Transition(Action.PUSH_KEY, _S.IN_KEY),
    (_S.IN_KEY, _T.ASSIGN): Transition(Action.FREEZE_KEY, _S.AFTER_ASSIGN),
    (_S.AFTER_ASSIGN, _T.CHAR): Transition(Action.PUSH_VALUE, _S.IN_VALUE),
    (_S.IN_VALUE, _T.CHAR): Transition(Action.PUSH_VALUE, _S.IN_VALUE),
    (_S.IN_VALUE, _T.NEWLINE): Transition(Action.COMMIT, _S.LINE_START),
    (_S.IN_VALUE, _T.COMMENT): Transition(Action.COMMIT, _S.IN_COMMENT),
    (_S.IN_VALUE, _T.WHITESPACE): Transition(Action.COMMIT, _S.LINE_START),
    (_S.IN_VALUE, _T.END_OF_INPUT): Transition(Action.COMMIT, None),
    (_S.IN_COMMENT, _T.NEWLINE): Transition(Action.SKIP, _S.LINE_START),
    (_S.IN_COMMENT, _T.END_OF_INPUT): Transition(Action.SKIP, None),
    # The lexer folds the rest of a comment line into one COMMENT token, so
    # these only occur with hand-built token sequences.
    (_S.IN_COMMENT, _T.CHAR): Transition(Action.SKIP, _S.IN_COMMENT),
    (_S.IN_COMMENT, _T.ASSIGN): Transition(Action.SKIP, _S.IN_COMMENT),
    (_S.IN_COMMENT, _T.WHITESPACE): Transition(Action.SKIP, _S.IN_COMMENT),
    (_S.IN_COMMENT, _T.COMMENT): Transition(Action.SKIP, _S.IN_COMMENT),
}

FAILURES: dict[ParseState, type[ParseError]] = {
    _S.IN_KEY: MalformedKeyError,
    _S.AFTER_ASSIGN: MissingValueError,
}


def parse(tokens: Iterable[Token]) -> dict[str, str]:
    """Return the key-value pairs described by *tokens*.

    Raises a :class:`~envlex.errors.ParseError` subclass at the first token
    the grammar does not allow; no partial result is returned. Tokens after
    ``END_OF_INPUT`` are not read.
    """
    result: dict[str, str] = {}
    state = ParseState.LINE_START
    key_chars: list[str] = []
    value_chars: list[str] = []
    last: Token | None = None

    for token in tokens:
        transition = TRANSITIONS.get((state, token.kind))
        if transition is None:
            raise FAILURES.get(state, UnexpectedTokenError)(token, state)

        if transition.action is Action.PUSH_KEY:
            key_chars.append(token.text)
        elif transition.action is Action.PUSH_VALUE:
            value_chars.append(token.text)
        elif transition.action is Action.COMMIT:
            result["".join(key_chars)] = "".join(value_chars)
            key_chars.clear()
            value_chars.clear()

        if transition.next_state is None:
            return result
        state = transition.next_state
        last = token

    raise TruncatedInputError(last, state)
