# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envlex check`` -- validate one or more .env files."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from envlex.cli import _format_parse_error, _resolve_file, _verbose, cli, console
from envlex.errors import ParseError
from envlex.lexer import lex
from envlex.parser import parse


@cli.command()
@click.argument("files", nargs=-1, type=click.Path(exists=False))
@click.pass_context
def check(ctx: click.Context, files: tuple[str, ...]) -> None:
    """Validate FILES (default: configured env file).

    Every file is checked even after a failure; the exit code is 1 when any
    file is invalid.
    """
    paths: list[Path] = [_resolve_file(ctx, f) for f in files] or [_resolve_file(ctx, None)]

    encoding = ctx.obj["encoding"]
    failed = 0
    for path in paths:
        _verbose(ctx, f"Reading {path} ({encoding})")
        try:
            pairs = parse(lex(path.read_text(encoding=encoding)))
        except UnicodeDecodeError:
            failed += 1
            console.print(
                f"[red]FAIL[/red] {escape(str(path))}: cannot decode as {escape(encoding)}",
                highlight=False, soft_wrap=True,
            )
            continue
        except ParseError as e:
            failed += 1
            console.print(f"[red]FAIL[/red] {escape(_format_parse_error(path, e))}", highlight=False, soft_wrap=True)
            continue
        console.print(f"[green]OK[/green] {escape(str(path))} ({len(pairs)} variable(s))", highlight=False, soft_wrap=True)

    if failed:
        console.print(f"[red]{failed} of {len(paths)} file(s) invalid[/red]")
        ctx.exit(1)
