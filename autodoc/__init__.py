from importlib.metadata import PackageNotFoundError, version

from .config import RenderConfig, Settings
from .definition import (
    Definition,
    InputSpec,
    OutputSpec,
    load_definition,
    parse_definition,
)
from .exceptions import (
    AutoDocError,
    ConfigError,
    DocumentIOError,
    ParseError,
    UnknownColumnError,
)
from .generator import DocGenerator, RunResult
from .render import format_default, render_input_table, render_output_table, wrap
from .splice import SpliceResult, splice_block

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("action-autodoc")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.3.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Model
    "Definition",
    "InputSpec",
    "OutputSpec",
    "load_definition",
    "parse_definition",
    # Configuration
    "RenderConfig",
    "Settings",
    # Rendering
    "render_input_table",
    "render_output_table",
    "format_default",
    "wrap",
    # Splicing
    "splice_block",
    "SpliceResult",
    # Pipeline
    "DocGenerator",
    "RunResult",
    # Exceptions
    "AutoDocError",
    "ConfigError",
    "DocumentIOError",
    "ParseError",
    "UnknownColumnError",
]
