"""
YAML loading for action definitions.

This module provides a Loader that extends yaml.SafeLoader to:
1. Keep numeric and date scalars as their source text
2. Resolve only true/false as booleans (yes/no/on/off stay strings)
3. Convert boolean mapping keys to strings

and the functions that turn the loaded document into a Definition.
"""

import re
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from ..exceptions import DocumentIOError, ParseError
from .types import Definition, InputSpec, OutputSpec

BOOL_TAG = "tag:yaml.org,2002:bool"
_RAW_TEXT_TAGS = (
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
)
_BOOL_PATTERN = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")


class Loader(yaml.SafeLoader):
    """
    Safe YAML loader that preserves scalar spelling.

    Action metadata declares every input and output as a string, so a default
    written as `1.10` must be documented as `1.10`, not `1.1`.

    Example:
        with open("action.yml") as f:
            data = yaml.load(f, Loader=Loader)
    """

    def construct_raw_text(self, node: yaml.ScalarNode) -> str:
        """Construct a scalar as the exact text it was written with."""
        return str(self.construct_scalar(node))

    def _convert_key_to_string(self, key: Any) -> Any:
        """
        Convert boolean keys to their lowercase text.

        Args:
            key: Key to convert

        Returns:
            Converted key (string if boolean, otherwise unchanged)
        """
        if isinstance(key, bool):
            return str(key).lower()
        return key

    def construct_mapping(self, node: Any, deep: bool = False) -> dict:
        """Construct a mapping with boolean keys converted to strings."""
        mapping = super().construct_mapping(node, deep=deep)
        for key in list(mapping.keys()):
            converted_key = self._convert_key_to_string(key)
            if converted_key != key:
                mapping[converted_key] = mapping.pop(key)
        return mapping


# Restrict boolean resolution to the YAML 1.2 core schema spellings
Loader.yaml_implicit_resolvers = {
    first: [entry for entry in resolvers if entry[0] != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
Loader.add_implicit_resolver(BOOL_TAG, _BOOL_PATTERN, list("tTfF"))

for _tag in _RAW_TEXT_TAGS:
    Loader.add_constructor(_tag, Loader.construct_raw_text)


def _as_text(value: Any, field_name: str, entry: str) -> str:
    """Coerce a scalar field value to text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (dict, list)):
        raise ParseError(
            f"field '{field_name}' must be a scalar",
            entry=entry,
            type=type(value).__name__,
        )
    return str(value)


def _as_bool(value: Any, entry: str) -> bool:
    """Coerce the required field of an input entry."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise ParseError(
        "field 'required' must be a boolean", entry=entry, value=repr(value)
    )


def _entries(data: dict[str, Any], section: str) -> dict[str, dict[str, Any]]:
    """Return a section's entries, each normalized to a mapping."""
    raw = data.get(section)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ParseError(f"'{section}' must be a mapping", type=type(raw).__name__)

    entries: dict[str, dict[str, Any]] = {}
    for name, body in raw.items():
        name = str(name)
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise ParseError(
                f"entry of '{section}' must be a mapping",
                entry=name,
                type=type(body).__name__,
            )
        entries[name] = body
    return entries


def _build_input(name: str, body: dict[str, Any]) -> InputSpec:
    return InputSpec(
        description=_as_text(body.get("description"), "description", name),
        required=_as_bool(body.get("required"), name),
        default=_as_text(body.get("default"), "default", name),
    )


def _build_output(name: str, body: dict[str, Any]) -> OutputSpec:
    # Composite actions declare the value under "value" instead of "default"
    value = body.get("default")
    if value is None:
        value = body.get("value")
    return OutputSpec(
        description=_as_text(body.get("description"), "description", name),
        value=_as_text(value, "default", name),
    )


def parse_definition(source: Any, *, path: Path | None = None) -> Definition:
    """
    Parse an action definition from YAML text or a stream.

    Args:
        source: YAML text or a readable stream
        path: Originating file, used in error context only

    Returns:
        Parsed Definition

    Raises:
        ParseError: If the YAML is invalid or has the wrong shape
    """
    try:
        data = yaml.load(source, Loader=Loader)
    except yaml.YAMLError as e:
        raise ParseError(f"invalid YAML: {e}", path=path) from e

    if data is None:
        return Definition()
    if not isinstance(data, dict):
        raise ParseError(
            "action definition must be a mapping", path=path, type=type(data).__name__
        )

    inputs = {
        name: _build_input(name, body)
        for name, body in _entries(data, "inputs").items()
    }
    outputs = {
        name: _build_output(name, body)
        for name, body in _entries(data, "outputs").items()
    }
    return Definition(inputs=inputs, outputs=outputs)


def load_definition(path: str | Path) -> Definition:
    """
    Load an action definition file.

    Args:
        path: Path to the action.yml file

    Returns:
        Parsed Definition

    Raises:
        DocumentIOError: If the file cannot be read
        ParseError: If the file cannot be parsed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentIOError(
            f"cannot read action file: {e.strerror}", path=path
        ) from e
    except UnicodeDecodeError as e:
        raise ParseError(
            f"action file is not valid UTF-8: {e.reason}", path=path
        ) from e
    return parse_definition(text, path=path)
