#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MAF writer module for mafkit.

Writes blocks back out using each line's original text. Every block is
followed by one blank line, and write_all adds one trailing blank line
before closing the writer.
"""

import os
import logging
from typing import Iterable

from .maf_block import MafBlock
from ..config import Config
from ..config.exceptions import FileError, WriterClosedError
from ..utils.file_io import open_text

# Set up module logger
logger = logging.getLogger(__name__)


class MafWriter:
    """
    Sequential MAF writer.

    Owns the file it opens from a path. A handle passed in by the caller
    is flushed but left open when the writer closes.

    Example:
        >>> blocks = read_maf("in.maf")
        >>> MafWriter("out.maf").write_all(blocks)
    """

    def __init__(self, target, mode: str = "w"):
        """
        Initialize the writer.

        Args:
            target: Output path (plain or gzip) or an open text handle
            mode: "w" to truncate or "a" to append when opening a path

        Raises:
            FileError: If the file cannot be opened
        """
        if hasattr(target, "write"):
            self._handle = target
            self._owns_handle = False
            self.filename = getattr(target, "name", "<stream>")
        else:
            self._handle = open_text(target, mode)
            self._owns_handle = True
            self.filename = os.fspath(target)

        self.line_number = 0
        # Blank delimiter lines copy the carriage return of the line before them
        self._blank_line = ""

    @property
    def closed(self) -> bool:
        return self._handle is None

    def _write_line(self, text: str) -> None:
        if self._handle is None:
            error_msg = f"MAF writer for {self.filename} is already closed"
            logger.error(error_msg)
            raise WriterClosedError(error_msg)

        try:
            self._handle.write(text + Config.LINE_TERMINATOR)
        except (OSError, ValueError) as e:
            error_msg = f"Failed to write to {self.filename} at line {self.line_number + 1}"
            logger.error(error_msg)
            logger.debug(f"Error details: {str(e)}", exc_info=True)
            raise FileError(error_msg) from e
        self.line_number += 1

    def write_block(self, block: MafBlock) -> None:
        """
        Write one block followed by a blank delimiter line.

        Args:
            block: Block to write

        Raises:
            WriterClosedError: If the writer has been closed
            FileError: On an I/O error
        """
        for line in block:
            self._write_line(line.raw_text)
        if block.line_count:
            self._blank_line = "\r" if block[-1].raw_text.endswith("\r") else ""
        self._write_line(self._blank_line)

    def write_all(self, blocks: Iterable[MafBlock]) -> None:
        """
        Write every block, a trailing blank line, then close the writer.

        Args:
            blocks: Blocks in stream order, header first

        Raises:
            WriterClosedError: If the writer has been closed
            FileError: On an I/O error
        """
        try:
            count = 0
            for block in blocks:
                self.write_block(block)
                count += 1
            self._write_line(self._blank_line)
            logger.debug(f"Wrote {count} blocks ({self.line_number} lines) to {self.filename}")
        finally:
            self.close()

    def close(self) -> None:
        """Flush and release the output; later writes raise WriterClosedError."""
        if self._handle is None:
            return
        if self._owns_handle:
            self._handle.close()
        elif not getattr(self._handle, "closed", False):
            self._handle.flush()
        self._handle = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


def write_maf(target, blocks: Iterable[MafBlock]) -> None:
    """Write a list of blocks to a MAF file and close it."""
    MafWriter(target).write_all(blocks)
