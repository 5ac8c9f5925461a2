"""
Exception hierarchy for autodoc.

Every error raised by the package derives from AutoDocError so callers can
catch the whole family with a single except clause.
"""

from collections.abc import Sequence
from typing import Any


class AutoDocError(Exception):
    """
    Base exception for all autodoc errors.

    Example:
        try:
            generator.run()
        except AutoDocError as e:
            lg.error(f"generation failed: {e}")
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class DocumentIOError(AutoDocError):
    """
    The definition file or the target document could not be read or written.

    The underlying OSError is chained as __cause__.
    """

    pass


class ParseError(AutoDocError):
    """
    The action definition could not be deserialized.

    Examples:
        - Invalid YAML syntax
        - Top-level document is not a mapping
        - inputs/outputs is not a mapping
        - required is not a boolean
    """

    pass


class ConfigError(AutoDocError):
    """
    Invalid configuration value.

    Examples:
        - Column width or word count is not an integer
        - Unknown log level name
    """

    pass


class UnknownColumnError(AutoDocError):
    """Raised when a table column identifier is not recognized."""

    def __init__(self, column: str, valid: Sequence[str], table: str) -> None:
        self.column = column
        self.valid = tuple(valid)
        self.table = table
        super().__init__(
            f"unknown {table} column: '{column}'. "
            f"Please specify any of the following columns: {', '.join(self.valid)}"
        )
