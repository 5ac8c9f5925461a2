"""
Documentation generator for action definitions.

Runs the whole pipeline in a single synchronous pass:

    load action.yml -> render both tables -> read target -> splice -> write

Any failure aborts the run before the target document is written.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .config import RenderConfig, Settings
from .constants import (
    BLOCK_SEPARATOR,
    INPUT_AUTODOC_END,
    INPUT_AUTODOC_START,
    INPUTS_HEADER,
    OUTPUT_AUTODOC_END,
    OUTPUT_AUTODOC_START,
    OUTPUT_FILE_MODE,
    OUTPUTS_HEADER,
)
from .definition import Definition, load_definition
from .exceptions import DocumentIOError
from .render import render_input_table, render_output_table
from .splice import SpliceResult, locate_block


@dataclass(frozen=True)
class RenderedTables:
    """Rendered blocks for one definition; an empty string means no table."""

    inputs: str
    outputs: str


@dataclass(frozen=True)
class RunResult:
    """Outcome of a generator run."""

    inputs: SpliceResult | None
    outputs: SpliceResult | None
    written: bool


class DocGenerator:
    """
    Generate input/output tables and splice them into a document.

    Example:
        settings = Settings(action=Path("action.yml"), output=Path("README.md"))
        generator = DocGenerator(settings, lg=create_logger("autodoc", "info"))
        result = generator.run()
    """

    def __init__(self, settings: Settings, *, lg: logging.Logger | None = None):
        """
        Initialize the generator.

        Args:
            settings: Run settings
            lg: Logger for progress messages (defaults to the "autodoc" logger)
        """
        self.settings = settings
        self.lg = lg if lg is not None else logging.getLogger("autodoc")

    def render(self, definition: Definition, config: RenderConfig) -> RenderedTables:
        """
        Render both tables.

        Raises:
            UnknownColumnError: If a column list holds an unknown identifier
        """
        inputs = render_input_table(
            definition.inputs, config.input_columns, config.max_width, config.max_words
        )
        outputs = render_output_table(
            definition.outputs,
            config.output_columns,
            config.max_width,
            config.max_words,
        )
        return RenderedTables(inputs=inputs, outputs=outputs)

    def _splice_one(
        self,
        document: bytes,
        table: str,
        block: str,
        start: str,
        end: str,
        header: str,
    ) -> tuple[bytes, SpliceResult | None]:
        if not block:
            self.lg.debug("nothing to splice", extra={"table": table})
            return document, None

        document, result = locate_block(
            document,
            start.encode(),
            end.encode(),
            block.encode(),
            header.encode(),
            separator=BLOCK_SEPARATOR.encode(),
        )
        if result is SpliceResult.UNCHANGED:
            self.lg.info(
                "no block or header found", extra={"table": table, "header": header}
            )
        else:
            self.lg.info(
                "spliced table", extra={"table": table, "result": result.value}
            )
        return document, result

    def splice(
        self, document: bytes, tables: RenderedTables
    ) -> tuple[bytes, SpliceResult | None, SpliceResult | None]:
        """
        Splice the inputs block, then the outputs block into document.

        Returns:
            Tuple of (new document, inputs outcome, outputs outcome); an
            outcome is None when the table was empty and nothing was spliced
        """
        document, inputs = self._splice_one(
            document,
            "inputs",
            tables.inputs,
            INPUT_AUTODOC_START,
            INPUT_AUTODOC_END,
            INPUTS_HEADER,
        )
        document, outputs = self._splice_one(
            document,
            "outputs",
            tables.outputs,
            OUTPUT_AUTODOC_START,
            OUTPUT_AUTODOC_END,
            OUTPUTS_HEADER,
        )
        return document, inputs, outputs

    def run(self) -> RunResult:
        """
        Run the full pipeline.

        Raises:
            ConfigError: If the width or word count is not an integer
            DocumentIOError: If a file cannot be read or written
            ParseError: If the action definition is invalid
            UnknownColumnError: If a column identifier is unknown
        """
        config = self.settings.render_config()
        definition = load_definition(self.settings.action)
        self.lg.debug(
            "loaded action definition",
            extra={
                "path": self.settings.action,
                "inputs": len(definition.inputs),
                "outputs": len(definition.outputs),
            },
        )
        tables = self.render(definition, config)

        document = read_document(self.settings.output)
        document, inputs, outputs = self.splice(document, tables)

        if not document:
            self.lg.debug(
                "empty document, skipping write", extra={"path": self.settings.output}
            )
            return RunResult(inputs=inputs, outputs=outputs, written=False)

        write_document(self.settings.output, document)
        self.lg.info("wrote document", extra={"path": self.settings.output})
        return RunResult(inputs=inputs, outputs=outputs, written=True)


def read_document(path: Path) -> bytes:
    """
    Read the target document.

    Raises:
        DocumentIOError: If the file cannot be read
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise DocumentIOError(
            f"cannot read output file: {e.strerror}", path=path
        ) from e


def write_document(path: Path, data: bytes) -> None:
    """
    Rewrite the target document in full.

    New files are created with OUTPUT_FILE_MODE, subject to the umask;
    existing files keep their mode.

    Raises:
        DocumentIOError: If the file cannot be written
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, OUTPUT_FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        raise DocumentIOError(
            f"cannot write output file: {e.strerror}", path=path
        ) from e
