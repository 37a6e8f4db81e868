# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envlex parse`` -- print the variables of a .env file."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from envlex.cli import _load_pairs, _resolve_file, cli, console
from envlex.config import OUTPUT_FORMATS


@cli.command("parse")
@click.argument("file", required=False, type=click.Path(exists=False))
@click.option(
    "--format", "fmt",
    type=click.Choice(list(OUTPUT_FORMATS)),
    default=None,
    help="Output format: dotenv (KEY=value), json, yaml, table. Default: config, else dotenv.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@click.pass_context
def parse_file(ctx: click.Context, file: str | None, fmt: str | None, output: str | None) -> None:
    """Parse FILE (default: configured env file) and print its variables in file order."""
    fmt = fmt or ctx.obj["config"].format
    path = _resolve_file(ctx, file)
    pairs = _load_pairs(ctx, path)

    if not pairs:
        console.print(f"[yellow]No variables found in {escape(str(path))}[/yellow]", soft_wrap=True)

    if output:
        out_path = Path(output)
        with out_path.open("w") as f:
            _write_pairs(pairs, fmt, f, title=str(path))
        console.print(f"[green]Wrote {len(pairs)} variable(s) to {escape(output)}[/green]", soft_wrap=True)
    else:
        _write_pairs(pairs, fmt, sys.stdout, title=str(path))


def _write_pairs(pairs: dict[str, str], fmt: str, stream: TextIO, title: str) -> None:
    if fmt == "json":
        stream.write(json.dumps(pairs, indent=2))
        stream.write("\n")
    elif fmt == "yaml":
        if pairs:
            yaml.safe_dump(pairs, stream, default_flow_style=False, sort_keys=False)
    elif fmt == "table":
        table = Table(title=Text(f"Variables ({title})"))
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="white")
        for key, value in pairs.items():
            table.add_row(key, value)
        Console(file=stream, highlight=False, markup=False).print(table)
    else:
        for line in _format_dotenv_lines(pairs):
            stream.write(line + "\n")


def _format_dotenv_lines(pairs: dict[str, str]) -> list[str]:
    return [f"{key}={value}" for key, value in pairs.items()]
