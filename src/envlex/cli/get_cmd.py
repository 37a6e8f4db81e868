# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``envlex get`` command."""

from __future__ import annotations

import click

from envlex.cli import _load_pairs, _resolve_file, cli


@cli.command()
@click.argument("key")
@click.argument("file", required=False, type=click.Path(exists=False))
@click.pass_context
def get(ctx: click.Context, key: str, file: str | None) -> None:
    """Print the value of KEY from FILE (default: configured env file)."""
    path = _resolve_file(ctx, file)
    pairs = _load_pairs(ctx, path)
    if key not in pairs:
        raise click.ClickException(f"Key '{key}' not found in {path}.")
    click.echo(pairs[key])
