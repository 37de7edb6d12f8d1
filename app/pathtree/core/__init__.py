"""Core infrastructure for pathtree.

This package holds configuration, path management, theming, and
logging setup shared by the library and the CLI.
"""
