"""
Constants shared by the renderers and the document splicer.

Headers and sentinels are the exact literals searched for in the target
document, so changing any of them orphans blocks written by earlier runs.
"""

# Section headings used as insertion anchors
INPUTS_HEADER: str = "## Inputs"
OUTPUTS_HEADER: str = "## Outputs"

# Generated block boundaries
INPUT_AUTODOC_START: str = (
    "<!-- AUTO-DOC-INPUT:START - Do not remove or modify this section -->"
)
INPUT_AUTODOC_END: str = "<!-- AUTO-DOC-INPUT:END -->"
OUTPUT_AUTODOC_START: str = (
    "<!-- AUTO-DOC-OUTPUT:START - Do not remove or modify this section -->"
)
OUTPUT_AUTODOC_END: str = "<!-- AUTO-DOC-OUTPUT:END -->"

# Inserted between the header anchor and a freshly inserted block
BLOCK_SEPARATOR: str = "\n\n"

PIPE_SEPARATOR: str = "|"
NEWLINE_SEPARATOR: str = "\n"

# Intra-cell line break understood by markdown renderers
LINE_BREAK: str = "<br>"

# Joins the lines of a word-wrapped description
WORD_BREAK: str = " " + LINE_BREAK

# Constant type cell; action inputs and outputs are always strings
TYPE_STRING: str = "string"

DEFAULT_INPUT_COLUMNS: tuple[str, ...] = (
    "Input",
    "Type",
    "Required",
    "Default",
    "Description",
)
DEFAULT_OUTPUT_COLUMNS: tuple[str, ...] = ("Output", "Type", "Description")

DEFAULT_ACTION_FILE: str = "action.yml"
DEFAULT_OUTPUT_FILE: str = "README.md"
DEFAULT_COL_MAX_WIDTH: str = "1000"
DEFAULT_COL_MAX_WORDS: str = "6"

# Mode for newly written documents (umask still applies)
OUTPUT_FILE_MODE: int = 0o666
