"""
Command line interface for autodoc.
"""

from autodoc.cli.cli import build_parser, main

__all__ = ["build_parser", "main"]
