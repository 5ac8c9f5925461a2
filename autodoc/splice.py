"""
Splicing of generated blocks into a target document.

A block is delimited by a start and an end sentinel. When a previous block
exists it is replaced in place; otherwise the new block is inserted after the
section header. Documents with neither are left untouched.
"""

from dataclasses import dataclass
from enum import Enum


class SpliceResult(Enum):
    """Outcome of splicing one block into a document."""

    REPLACED = "replaced"
    INSERTED = "inserted"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class BlockLocation:
    """Byte span of an existing block, end exclusive."""

    start: int
    end: int


def find_block(
    document: bytes, start_marker: bytes, end_marker: bytes
) -> BlockLocation | None:
    """
    Locate the first start marker and the first end marker following it.

    Args:
        document: Document contents
        start_marker: Start sentinel
        end_marker: End sentinel

    Returns:
        Span covering both markers, or None if the pair is not present
    """
    start = document.find(start_marker)
    if start < 0:
        return None
    end = document.find(end_marker, start + len(start_marker))
    if end < 0:
        return None
    return BlockLocation(start, end + len(end_marker))


def locate_block(
    document: bytes,
    start_marker: bytes,
    end_marker: bytes,
    block: bytes,
    header: bytes,
    *,
    separator: bytes = b"",
) -> tuple[bytes, SpliceResult]:
    """
    Splice block into document and report what happened.

    Args:
        document: Document contents
        start_marker: Start sentinel of the block kind
        end_marker: End sentinel of the block kind
        block: Freshly rendered block, sentinels included
        header: Section header used as insertion anchor
        separator: Bytes placed between the header and an inserted block

    Returns:
        Tuple of (new document, outcome)
    """
    location = find_block(document, start_marker, end_marker)
    if location is not None:
        spliced = document[: location.start] + block + document[location.end :]
        return spliced, SpliceResult.REPLACED

    if header and header in document:
        spliced = document.replace(header, header + separator + block, 1)
        return spliced, SpliceResult.INSERTED

    return document, SpliceResult.UNCHANGED


def splice_block(
    document: bytes,
    start_marker: bytes,
    end_marker: bytes,
    block: bytes,
    header: bytes,
    *,
    separator: bytes = b"",
) -> bytes:
    """
    Replace the existing block or insert a new one after the header.

    See locate_block for the arguments; only the new document is returned.
    """
    spliced, _ = locate_block(
        document, start_marker, end_marker, block, header, separator=separator
    )
    return spliced
