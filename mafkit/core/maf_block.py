#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Block model for mafkit.

A MafBlock is either the header section of a MAF stream or one alignment
block. It owns its lines in file order and keeps its line and sequence
counts in step with them; append_line is the only mutation.
"""

import logging
from typing import List

from .maf_line import MafLine, LineKind
from ..config.exceptions import BlockStructureError

logger = logging.getLogger(__name__)


class MafBlock:
    """
    Ordered collection of MafLine records.

    Attributes:
        lines: Tuple of the block's lines in file order
        start_line_number: Line number of the first line (0 while empty)
        sequence_count: Number of sequence ('s') lines
        line_count: Total number of lines

    Example:
        >>> block = MafBlock()
        >>> block.append_line(LineParser.parse("a score=0", 2))
        >>> block.line_count, block.sequence_count
        (1, 0)
    """

    def __init__(self, lines=None):
        """
        Initialize a block, optionally seeded with lines.

        Args:
            lines: Iterable of MafLine records in file order
        """
        self._lines: List[MafLine] = []
        self._sequence_count = 0

        for line in lines or ():
            self.append_line(line)

    @property
    def lines(self):
        return tuple(self._lines)

    @property
    def start_line_number(self) -> int:
        if self._lines:
            return self._lines[0].line_number
        return 0

    @property
    def sequence_count(self) -> int:
        return self._sequence_count

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def is_header(self) -> bool:
        return bool(self._lines) and all(line.kind == LineKind.HEADER for line in self._lines)

    def append_line(self, line: MafLine) -> None:
        """
        Append a line to the end of the block.

        Args:
            line: MafLine record

        Raises:
            BlockStructureError: If the line number does not follow the last line's
        """
        if self._lines and line.line_number <= self._lines[-1].line_number:
            error_msg = (f"Line {line.line_number} cannot follow line "
                         f"{self._lines[-1].line_number} in a block")
            logger.error(error_msg)
            raise BlockStructureError(error_msg)

        self._lines.append(line)
        if line.kind == LineKind.SEQUENCE:
            self._sequence_count += 1

    def contains_sequence(self) -> bool:
        return self._sequence_count > 0

    def sequence_lines(self) -> List[MafLine]:
        """Return a new list of the block's sequence lines in order."""
        return [line for line in self._lines if line.kind == LineKind.SEQUENCE]

    def to_text(self, line_terminator="\n") -> str:
        """Render the block as MAF text, followed by one blank line."""
        return "".join(line.raw_text + line_terminator for line in self._lines) + line_terminator

    def __len__(self):
        return len(self._lines)

    def __iter__(self):
        return iter(self._lines)

    def __getitem__(self, index):
        return self._lines[index]

    def __repr__(self):
        return (f"MafBlock(start_line_number={self.start_line_number}, "
                f"line_count={self.line_count}, sequence_count={self.sequence_count})")


def count_blocks(blocks) -> int:
    """Return the number of blocks in a block list or iterable."""
    return sum(1 for _ in blocks)
