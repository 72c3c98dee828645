#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Derived views of MAF blocks.

Contains functionality for:
1. Alignment matrices built from the sequence fields of a block
2. Per-sequence arrays of strands, starts, lengths and species names
3. Forward-strand coordinate conversion for '-' strand lines

Nothing here is cached: every call scans the block's lines again and
returns a new object that the caller owns. Numeric arrays are numpy
int64 arrays in sequence-line order.
"""

import logging
from typing import List, Optional

import numpy as np

from .maf_block import MafBlock
from .maf_line import MafLine, Strand
from ..config import Config
from ..config.exceptions import BlockViewError

# Set up module logger
logger = logging.getLogger(__name__)


class BlockViews:
    """
    Builders for arrays and matrices derived from a block's sequence lines.

    Example:
        >>> BlockViews.strand_array(block)
        '++'
        >>> BlockViews.positive_start_array(block).tolist()
        [27578828, 28741140]
    """

    @staticmethod
    def sequence_lines(block: MafBlock) -> List[MafLine]:
        """Return a new list of the block's sequence lines in order."""
        return block.sequence_lines()

    @staticmethod
    def longest_sequence_field(block: MafBlock) -> int:
        """
        Length of the longest sequence field in the block.

        Returns:
            Maximum sequence field length, 0 if the block has no sequence lines
        """
        return max((len(line.sequence) for line in block.sequence_lines()), default=0)

    @staticmethod
    def sequence_matrix(block: MafBlock, row_count: Optional[int] = None,
                        col_width: Optional[int] = None,
                        pad_char: Optional[str] = None) -> List[str]:
        """
        Build the alignment matrix of a block, one row per sequence line.

        Rows longer than col_width are cut; shorter rows are padded with
        pad_char.

        Args:
            block: Source block
            row_count: Number of rows (defaults to the block's sequence count)
            col_width: Row width (defaults to the longest sequence field)
            pad_char: Fill character (defaults to Config.MATRIX_PAD_CHAR)

        Returns:
            List of row strings

        Raises:
            BlockViewError: If row_count exceeds the number of sequence lines,
                a size argument is negative, or pad_char is not one character
        """
        lines = block.sequence_lines()

        if row_count is None:
            row_count = len(lines)
        if col_width is None:
            col_width = BlockViews.longest_sequence_field(block)
        if pad_char is None:
            pad_char = Config.MATRIX_PAD_CHAR

        if row_count < 0 or col_width < 0:
            error_msg = f"Matrix dimensions must be non-negative, got {row_count}x{col_width}"
            logger.error(error_msg)
            raise BlockViewError(error_msg)

        if not isinstance(pad_char, str) or len(pad_char) != 1:
            error_msg = f"Pad character must be a single character, got {pad_char!r}"
            logger.error(error_msg)
            raise BlockViewError(error_msg)

        if row_count > len(lines):
            error_msg = (f"Block at line {block.start_line_number} has {len(lines)} "
                         f"sequences, cannot build {row_count} matrix rows")
            logger.error(error_msg)
            raise BlockViewError(error_msg)

        matrix = [line.sequence[:col_width].ljust(col_width, pad_char)
                  for line in lines[:row_count]]

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Built {row_count}x{col_width} matrix for block at line {block.start_line_number}")

        return matrix

    @staticmethod
    def alignment_array(block: MafBlock, pad_char: Optional[str] = None) -> np.ndarray:
        """
        Alignment matrix as a 2-D numpy array of single characters.

        Returns:
            Array of shape (sequence_count, longest_sequence_field), dtype '<U1'
        """
        rows = BlockViews.sequence_matrix(block, pad_char=pad_char)
        width = BlockViews.longest_sequence_field(block)
        if not rows:
            return np.empty((0, width), dtype='<U1')
        return np.array([list(row) for row in rows], dtype='<U1').reshape(len(rows), width)

    @staticmethod
    def strand_array(block: MafBlock) -> str:
        """Strands of the sequence lines as a string of '+'/'-' characters."""
        return "".join(line.strand for line in block.sequence_lines())

    @staticmethod
    def strand_sign_array(block: MafBlock) -> np.ndarray:
        """Strands of the sequence lines as +1/-1."""
        return np.array([1 if line.strand == Strand.PLUS else -1
                         for line in block.sequence_lines()], dtype=np.int64)

    @staticmethod
    def start_array(block: MafBlock) -> np.ndarray:
        return np.array([line.start for line in block.sequence_lines()], dtype=np.int64)

    @staticmethod
    def source_length_array(block: MafBlock) -> np.ndarray:
        return np.array([line.source_length for line in block.sequence_lines()], dtype=np.int64)

    @staticmethod
    def aligned_length_array(block: MafBlock) -> np.ndarray:
        return np.array([line.length for line in block.sequence_lines()], dtype=np.int64)

    @staticmethod
    def species_array(block: MafBlock) -> List[str]:
        return [str(line.species) for line in block.sequence_lines()]

    @staticmethod
    def positive_start_array(block: MafBlock) -> np.ndarray:
        """
        Start positions in forward-strand coordinates.

        '+' lines keep their start; '-' lines become
        source_length - start - 1, the right-most aligned position.
        """
        return np.array([line.positive_start for line in block.sequence_lines()], dtype=np.int64)

    @staticmethod
    def positive_left_array(block: MafBlock) -> np.ndarray:
        """
        Left-most forward-strand coordinate of each aligned segment.

        '+' lines keep their start; '-' lines become
        source_length - (start + length).
        """
        return np.array([line.positive_left for line in block.sequence_lines()], dtype=np.int64)
