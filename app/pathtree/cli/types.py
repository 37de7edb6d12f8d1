"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

import logging
from enum import Enum
from pathlib import Path

import typer

from pathtree.core.config import ConfigError, PathTreeConfig, load_config
from pathtree.tree.errors import PathTreeError
from pathtree.tree.models import Tree
from pathtree.tree.service import create_file_tree_sync
from pathtree.utils.formatting import print_error

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output format options for path listings."""

    TEXT = "text"
    JSON = "json"


def get_config(ctx: typer.Context) -> PathTreeConfig:
    """Load the configuration selected by the global --config option.

    Exits with code 1 if the configuration cannot be loaded.
    """
    obj = ctx.obj or {}
    config_path: Path | None = obj.get("config_path")
    try:
        return load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def build_tree_or_exit(path: Path, use_git_ignore: bool) -> Tree:
    """Build the tree for a path, exiting with code 1 on failure.

    Args:
        path: File or directory to build the tree for.
        use_git_ignore: Passed through to create_file_tree (no effect yet).

    Returns:
        The constructed tree.
    """
    try:
        return create_file_tree_sync(path, use_git_ignore)
    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except PathTreeError as e:
        logger.debug("Tree construction failed", exc_info=True)
        print_error(str(e))
        raise typer.Exit(code=1) from e
