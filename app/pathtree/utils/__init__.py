"""Utility modules for pathtree.

This module exports commonly used utility functions.
"""

from pathtree.utils.formatting import (
    console,
    count_entries,
    err_console,
    print_error,
    print_info,
    print_success,
    render_tree,
)

__all__ = [
    "console",
    "count_entries",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "render_tree",
]
