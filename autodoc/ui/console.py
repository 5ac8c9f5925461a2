"""
Console wrapper for CLI status and error output.

Wraps rich with automatic color detection so that output stays plain when
piped, in CI logs, or when NO_COLOR is set.
"""

from __future__ import annotations

import os
import sys
from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme


def should_use_color(file: Any) -> bool:
    """Determine if color output should be used."""
    # Respect NO_COLOR environment variable (https://no-color.org/)
    if os.environ.get("NO_COLOR"):
        return False

    # Respect FORCE_COLOR for CI environments that support color
    if os.environ.get("FORCE_COLOR"):
        return True

    return hasattr(file, "isatty") and file.isatty()


AUTODOC_THEME = {
    "info": "cyan",
    "warning": "yellow",
    "error": "red bold",
    "success": "green",
    "muted": "dim",
    "path": "bold blue",
}


class Console:
    """
    Console with themed status helpers.

    Example:
        console = Console()
        console.print_success("Updated README.md")
        console.print_error("unknown input column: 'Bogus'")
    """

    def __init__(
        self,
        *,
        no_color: bool | None = None,
        quiet: bool = False,
        file: Any = None,
    ):
        """
        Initialize the console.

        Args:
            no_color: Disable color output (True/False) or auto-detect (None)
            quiet: Suppress non-essential output
            file: Output file (default: sys.stdout)
        """
        self._quiet = quiet
        self._file = file or sys.stdout

        if no_color is None:
            no_color = not should_use_color(self._file)
        self._no_color = no_color

        self._rich_console = RichConsole(
            file=self._file,
            no_color=no_color,
            highlight=False,
            theme=Theme(AUTODOC_THEME),
            force_terminal=False if no_color else None,
            soft_wrap=True,
        )

    @property
    def quiet(self) -> bool:
        """Check if quiet mode is enabled."""
        return self._quiet

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to the console, honoring quiet mode."""
        if self._quiet:
            return
        self._rich_console.print(*args, **kwargs)

    def print_success(self, message: str) -> None:
        """Print a success message."""
        self.print(f"[success]{escape(message)}[/success]")

    def print_error(self, message: str) -> None:
        """Print an error message; shown even in quiet mode."""
        self._rich_console.print(f"[error]Error:[/error] {escape(message)}")
