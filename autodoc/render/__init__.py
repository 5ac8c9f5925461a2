"""
Table rendering for action documentation.

Public API:
    render_input_table: Render the inputs block
    render_output_table: Render the outputs block
    format_default: Display-safe formatting of input defaults
    wrap: Word wrapping for description cells
    TableWriter: Bordered, center-aligned table writer
"""

from .action import (
    INPUT_COLUMNS,
    OUTPUT_COLUMNS,
    escape_sentinels,
    render_input_table,
    render_output_table,
)
from .defaults import format_default, go_quote
from .table import TableWriter, display_width
from .wrap import wrap

__all__ = [
    "INPUT_COLUMNS",
    "OUTPUT_COLUMNS",
    "render_input_table",
    "render_output_table",
    "escape_sentinels",
    "format_default",
    "go_quote",
    "wrap",
    "TableWriter",
    "display_width",
]
