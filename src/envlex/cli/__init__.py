# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""envlex CLI -- inspect and validate .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``_resolve_file``,
``_load_pairs``, etc.) live here so every command module can import them.
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from envlex import __version__
from envlex.config import load_config
from envlex.env_file import parse_env_file
from envlex.errors import ParseError

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _verbose(ctx: click.Context, message: str) -> None:
    if ctx.obj["verbose"]:
        console.print(f"[dim]{escape(message)}[/dim]", highlight=False, soft_wrap=True)


def _resolve_file(ctx: click.Context, file: str | None) -> Path:
    """Return FILE, or the configured env file when it was omitted."""
    path = ctx.obj["config"].resolve_env_file(file)
    if not path.is_file():
        raise click.BadParameter(f"File not found: {path}", param_hint="FILE")
    return path


def _read_text(ctx: click.Context, path: Path) -> str:
    encoding = ctx.obj["encoding"]
    _verbose(ctx, f"Reading {path} ({encoding})")
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Cannot decode {path} as {encoding}: {e}")


def _format_parse_error(path: Path, error: ParseError) -> str:
    return f"{path}:{error.line}:{error.column}: {error.detail}"


def _load_pairs(ctx: click.Context, path: Path) -> dict[str, str]:
    """Parse *path*, turning grammar errors into a click error."""
    encoding = ctx.obj["encoding"]
    _verbose(ctx, f"Parsing {path} ({encoding})")
    try:
        pairs = parse_env_file(path, encoding=encoding)
    except ParseError as e:
        raise click.ClickException(_format_parse_error(path, e))
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Cannot decode {path} as {encoding}: {e}")
    _verbose(ctx, f"Parsed {len(pairs)} variable(s)")
    return pairs


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to .envlex.toml (default: search upward from the current directory).",
)
@click.option("--encoding", default=None, help="File encoding (default: ENVLEX_ENCODING or config, else utf-8).")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    encoding: str | None,
    verbose: bool,
) -> None:
    """Inspect and validate .env files."""
    try:
        cfg = load_config(config_path)
    except ValueError as e:
        raise click.ClickException(f"Invalid config: {e}")
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["encoding"] = cfg.resolve_encoding(encoding)
    ctx.obj["verbose"] = verbose
    if cfg.config_path is not None:
        _verbose(ctx, f"Using config {cfg.config_path}")


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from envlex.cli import (  # noqa: E402, F401
    check_cmd,
    get_cmd,
    parse_cmd,
    tokens_cmd,
)
