# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envlex tokens`` -- show the lexer output for a file."""

from __future__ import annotations

import sys

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from envlex.cli import _read_text, _resolve_file, _verbose, cli
from envlex.lexer import lex


@cli.command()
@click.argument("file", required=False, type=click.Path(exists=False))
@click.pass_context
def tokens(ctx: click.Context, file: str | None) -> None:
    """Print the token stream of FILE as a table."""
    path = _resolve_file(ctx, file)
    toks = lex(_read_text(ctx, path))
    _verbose(ctx, f"Lexed {len(toks)} token(s)")

    table = Table(title=Text(f"Tokens ({path})"))
    table.add_column("Line", justify="right", style="cyan")
    table.add_column("Col", justify="right", style="cyan")
    table.add_column("Kind", style="white")
    table.add_column("Text", style="dim")
    for tok in toks:
        table.add_row(str(tok.line), str(tok.column), tok.kind.name, repr(tok.text))

    out = Console(file=sys.stdout, highlight=False, markup=False)
    out.print(table)
