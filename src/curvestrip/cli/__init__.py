"""Command-line interface for curvestrip.

This module provides the CLI using Typer with rich output on stderr,
leaving stdout free for the encoded image.

Key features:
- JSON/TOML input from stdin or a file
- PNG/WebP/JSON output to stdout or a file
- One exit code per failing stage
"""

from curvestrip.cli.app import cli, main

__all__ = ["cli", "main"]
