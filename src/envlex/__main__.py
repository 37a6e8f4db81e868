# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the envlex CLI (run via ``envlex`` or ``python -m envlex``)."""

from __future__ import annotations

import sys


def main() -> None:
    """Run the CLI."""
    try:
        from envlex.cli import cli
    except ImportError:
        sys.stderr.write("envlex CLI dependencies missing. Install with: pip install envlex\n")
        sys.exit(1)
    cli()


if __name__ == "__main__":
    main()
