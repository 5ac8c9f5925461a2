"""
Rendering of an action's inputs and outputs as sentinel-delimited tables.

The input and output tables are rendered by separate functions; a bad column
list for one of them does not affect the other.
"""

from collections.abc import Callable, Mapping, Sequence

from ..constants import (
    INPUT_AUTODOC_END,
    INPUT_AUTODOC_START,
    OUTPUT_AUTODOC_END,
    OUTPUT_AUTODOC_START,
    TYPE_STRING,
)
from ..definition import InputSpec, OutputSpec
from ..exceptions import UnknownColumnError
from .defaults import format_default
from .table import TableWriter
from .wrap import wrap

# Cell rule signature: (key, record, max_words) -> cell text
InputCell = Callable[[str, InputSpec, int], str]
OutputCell = Callable[[str, OutputSpec, int], str]

INPUT_COLUMNS: dict[str, InputCell] = {
    "Input": lambda key, spec, max_words: key,
    "Type": lambda key, spec, max_words: TYPE_STRING,
    "Required": lambda key, spec, max_words: "true" if spec.required else "false",
    "Default": lambda key, spec, max_words: format_default(spec.default),
    "Description": lambda key, spec, max_words: wrap(spec.description, max_words),
}

OUTPUT_COLUMNS: dict[str, OutputCell] = {
    "Output": lambda key, spec, max_words: key,
    "Type": lambda key, spec, max_words: TYPE_STRING,
    "Description": lambda key, spec, max_words: wrap(spec.description, max_words),
}


# Sentinels that must not appear verbatim inside a cell
_SENTINELS = (
    INPUT_AUTODOC_START,
    INPUT_AUTODOC_END,
    OUTPUT_AUTODOC_START,
    OUTPUT_AUTODOC_END,
)


def escape_sentinels(cell: str) -> str:
    """
    Escape sentinel literals in cell text.

    The leading "<" becomes "&lt;", which markdown displays the same way but
    which no longer matches when the block is searched for on the next run.
    """
    for sentinel in _SENTINELS:
        cell = cell.replace(sentinel, "&lt;" + sentinel[1:])
    return cell


def _enclose(start: str, table: str, end: str) -> str:
    """Surround a rendered table with its sentinels and blank lines."""
    return f"{start}\n\n{table}\n{end}"


def render_input_table(
    inputs: Mapping[str, InputSpec],
    columns: Sequence[str],
    max_width: int,
    max_words: int,
) -> str:
    """
    Render the inputs table block.

    Args:
        inputs: Input records keyed by name
        columns: Column identifiers, in display order
        max_width: Maximum cell width before wrapping
        max_words: Maximum words per description line

    Returns:
        Sentinel-delimited block, or "" when there are no inputs

    Raises:
        UnknownColumnError: If a column identifier is not an input column
    """
    if not inputs:
        return ""

    rules: list[InputCell] = []
    for col in columns:
        if col not in INPUT_COLUMNS:
            raise UnknownColumnError(col, list(INPUT_COLUMNS), "input")
        rules.append(INPUT_COLUMNS[col])

    table = TableWriter(columns, max_width=max_width)
    for key in sorted(inputs):
        spec = inputs[key]
        row = [rule(key, spec, max_words) for rule in rules]
        table.append([escape_sentinels(cell) for cell in row])

    return _enclose(INPUT_AUTODOC_START, table.render(), INPUT_AUTODOC_END)


def render_output_table(
    outputs: Mapping[str, OutputSpec],
    columns: Sequence[str],
    max_width: int,
    max_words: int,
) -> str:
    """
    Render the outputs table block.

    Same contract as render_input_table, with the output column set.
    """
    if not outputs:
        return ""

    rules: list[OutputCell] = []
    for col in columns:
        if col not in OUTPUT_COLUMNS:
            raise UnknownColumnError(col, list(OUTPUT_COLUMNS), "output")
        rules.append(OUTPUT_COLUMNS[col])

    table = TableWriter(columns, max_width=max_width)
    for key in sorted(outputs):
        spec = outputs[key]
        row = [rule(key, spec, max_words) for rule in rules]
        table.append([escape_sentinels(cell) for cell in row])

    return _enclose(OUTPUT_AUTODOC_START, table.render(), OUTPUT_AUTODOC_END)
