"""
In-memory model of an action definition.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InputSpec:
    """A single entry of the definition's inputs mapping."""

    description: str = ""
    required: bool = False
    default: str = ""


@dataclass(frozen=True)
class OutputSpec:
    """A single entry of the definition's outputs mapping."""

    description: str = ""
    value: str = ""


@dataclass(frozen=True)
class Definition:
    """
    Parsed action definition.

    Only the inputs and outputs collections are modeled; everything else in
    the source file is ignored.
    """

    inputs: dict[str, InputSpec] = field(default_factory=dict)
    outputs: dict[str, OutputSpec] = field(default_factory=dict)
