"""
Utility functions for parsing numeric settings.
"""

from typing import Any

from .exceptions import ConfigError


def is_int(n: Any) -> bool:
    """
    Check if a value can be converted to an integer.

    Args:
        n: Value to check

    Returns:
        bool: True if the value can be converted to an integer
    """
    try:
        int(n)
        return True
    except (ValueError, TypeError, OverflowError):
        pass
    return False


def parse_int(value: Any, name: str) -> int:
    """
    Parse a configuration value as an integer.

    Booleans and floats are rejected even though int() accepts them.

    Args:
        value: Text (or int) to parse
        name: Setting name, used in the error message

    Returns:
        Parsed integer

    Raises:
        ConfigError: If the value is not a valid integer
    """
    if isinstance(value, (bool, float)) or not is_int(value):
        raise ConfigError(f"{name} must be an integer", value=repr(value))
    return int(value)
