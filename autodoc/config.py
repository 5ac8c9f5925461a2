"""
Configuration for a documentation run.

Settings holds the raw values as given on the command line or in the
environment; width and word counts stay text until render_config() parses
them, so a bad value is reported before any rendering starts.

Environment overrides use the AUTODOC_ prefix:
    AUTODOC_ACTION, AUTODOC_OUTPUT, AUTODOC_COL_MAX_WIDTH,
    AUTODOC_COL_MAX_WORDS, AUTODOC_INPUT_COLUMNS, AUTODOC_OUTPUT_COLUMNS,
    AUTODOC_LOG_LEVEL
"""

import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from .constants import (
    DEFAULT_ACTION_FILE,
    DEFAULT_COL_MAX_WIDTH,
    DEFAULT_COL_MAX_WORDS,
    DEFAULT_INPUT_COLUMNS,
    DEFAULT_OUTPUT_COLUMNS,
    DEFAULT_OUTPUT_FILE,
)
from .utils import parse_int

ENV_PREFIX = "AUTODOC_"

_LIST_FIELDS = ("input_columns", "output_columns")


@dataclass(frozen=True)
class RenderConfig:
    """Validated table layout for both tables."""

    input_columns: tuple[str, ...] = DEFAULT_INPUT_COLUMNS
    output_columns: tuple[str, ...] = DEFAULT_OUTPUT_COLUMNS
    max_width: int = int(DEFAULT_COL_MAX_WIDTH)
    max_words: int = int(DEFAULT_COL_MAX_WORDS)


def split_columns(values: str | Sequence[str] | None) -> tuple[str, ...]:
    """
    Normalize a column list given as comma separated text or a sequence.

    Entries are stripped and empty entries dropped, so "Input, Type," and
    ["Input", "Type"] are equivalent.
    """
    if values is None:
        return ()
    if isinstance(values, str):
        values = [values]
    columns: list[str] = []
    for value in values:
        columns.extend(part.strip() for part in value.split(",") if part.strip())
    return tuple(columns)


@dataclass(frozen=True)
class Settings:
    """
    Raw settings for one run.

    Example:
        settings = Settings.from_env().merge(action="action.yml")
        render = settings.render_config()
    """

    action: Path = Path(DEFAULT_ACTION_FILE)
    output: Path = Path(DEFAULT_OUTPUT_FILE)
    col_max_width: str = DEFAULT_COL_MAX_WIDTH
    col_max_words: str = DEFAULT_COL_MAX_WORDS
    input_columns: tuple[str, ...] = DEFAULT_INPUT_COLUMNS
    output_columns: tuple[str, ...] = DEFAULT_OUTPUT_COLUMNS
    log_level: str = "warning"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from defaults overridden by AUTODOC_* variables.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            Settings with environment overrides applied
        """
        environ = os.environ if environ is None else environ
        return cls().merge(**cls._collect_env_vars(environ))

    @staticmethod
    def _collect_env_vars(environ: Mapping[str, str]) -> dict[str, str]:
        """Map AUTODOC_* variables to field names; unknown names are ignored."""
        names = {f.name for f in fields(Settings)}
        overrides = {}
        for key, value in environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            name = key[len(ENV_PREFIX) :].lower()
            if name in names:
                overrides[name] = value
        return overrides

    def merge(self, **overrides: Any) -> "Settings":
        """
        Return a copy with the given fields replaced.

        None values are skipped so unset CLI flags keep the current value;
        column lists may be comma separated text or sequences, and an empty
        column list keeps the current one.
        """
        changes: dict[str, Any] = {}
        for name, value in overrides.items():
            if value is None:
                continue
            if name in _LIST_FIELDS:
                value = split_columns(value)
                if not value:
                    continue
            elif name in ("action", "output"):
                value = Path(value)
            else:
                value = str(value)
            changes[name] = value
        return replace(self, **changes)

    def render_config(self) -> RenderConfig:
        """
        Validate and convert the table layout settings.

        Raises:
            ConfigError: If the width or word count is not an integer
        """
        return RenderConfig(
            input_columns=self.input_columns,
            output_columns=self.output_columns,
            max_width=parse_int(self.col_max_width, "colMaxWidth"),
            max_words=parse_int(self.col_max_words, "colMaxWords"),
        )
