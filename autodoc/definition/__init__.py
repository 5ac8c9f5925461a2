"""
Action definition model and loader.

Public API:
    load_definition: Load and parse an action.yml file
    parse_definition: Parse action YAML from text or a stream
    Loader: YAML loader preserving scalar spelling
    Definition, InputSpec, OutputSpec: The in-memory model
"""

from .loader import Loader, load_definition, parse_definition
from .types import Definition, InputSpec, OutputSpec

__all__ = [
    "Definition",
    "InputSpec",
    "OutputSpec",
    "Loader",
    "load_definition",
    "parse_definition",
]
