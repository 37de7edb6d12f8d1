"""CLI commands for pathtree.

This package contains all subcommand implementations.
"""

from pathtree.cli.commands import config, paths, show

__all__ = ["config", "paths", "show"]
