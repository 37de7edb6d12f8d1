"""CLI package for pathtree.

This package contains the Typer application and all subcommands.
"""

from pathtree.cli.main import app

__all__ = ["app"]
