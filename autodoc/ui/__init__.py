"""
Terminal output for the autodoc CLI.
"""

from .console import Console, should_use_color

__all__ = ["Console", "should_use_color"]
