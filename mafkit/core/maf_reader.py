#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MAF reader module for mafkit.

Contains functionality for:
1. Header detection with a small state machine ('track' / '##maf' lines)
2. Reading alignment blocks between blank-line delimiters
3. Block-by-block and whole-file reading with an optional skip policy

A stream must start with a 'track' line, a '##maf' line, or both. The
header ends at the first blank line or the first 'a' line; in the latter
case the 'a' line is handed on to the first alignment block.
"""

import logging
from typing import List, Optional, Tuple

from tqdm import tqdm

from .maf_block import MafBlock
from .line_parser import LineParser, is_blank_line
from ..config import Config
from ..config.exceptions import (HeaderFormatError, IncompleteStreamError,
                                 SequenceFieldError, InvalidStrandError)
from ..utils.file_io import LineSource

# Set up module logger
logger = logging.getLogger(__name__)

# Raw line text and its line number, carried from the header to the first block
PendingLine = Tuple[str, int]

# Errors that only spoil the block they occur in
BLOCK_ERRORS = (SequenceFieldError, InvalidStrandError)


class HeaderReader:
    """
    State machine consuming the header section of a MAF stream.

    States run EXPECT_TRACK -> EXPECT_MAF_DIRECTIVE -> CONSUME_HEADER_METADATA
    -> DONE. The reader stops on the first blank or 'a' line; an 'a' line
    is returned as pending rather than stored in the header block.
    """

    EXPECT_TRACK = "expect_track"
    EXPECT_MAF_DIRECTIVE = "expect_maf_directive"
    CONSUME_HEADER_METADATA = "consume_header_metadata"
    DONE = "done"

    def __init__(self, source: LineSource):
        self.source = source
        self.state = self.EXPECT_TRACK

    def _next_line(self) -> str:
        line = self.source.read_line()
        if line is None:
            error_msg = f"Premature end of MAF file {self.source.filename} while reading header"
            logger.error(error_msg)
            raise IncompleteStreamError(error_msg)
        return line

    def _accept(self, header: MafBlock, line: str) -> None:
        header.append_line(LineParser.parse(line, self.source.line_number, header=True))

    def read(self) -> Tuple[MafBlock, Optional[PendingLine]]:
        """
        Read the header block.

        Returns:
            Tuple of (header block, pending 'a' line or None)

        Raises:
            HeaderFormatError: If neither a 'track' nor a '##maf' line starts the stream
            IncompleteStreamError: If the stream ends inside the header
        """
        header = MafBlock()
        valid_header = False

        self.state = self.EXPECT_TRACK
        line = self._next_line()
        if line.startswith("track"):
            self._accept(header, line)
            valid_header = True
            line = self._next_line()

        self.state = self.EXPECT_MAF_DIRECTIVE
        if line.startswith("##maf"):
            self._accept(header, line)
            valid_header = True
            line = self._next_line()

        if not valid_header:
            error_msg = f"MAF file {self.source.filename} does not contain a valid header"
            logger.error(error_msg)
            raise HeaderFormatError(error_msg)

        self.state = self.CONSUME_HEADER_METADATA
        while not line.startswith("a") and not is_blank_line(line):
            self._accept(header, line)
            line = self._next_line()

        self.state = self.DONE
        pending = None
        if line.startswith("a"):
            pending = (line, self.source.line_number)

        logger.debug(f"Read header of {header.line_count} lines from {self.source.filename}")
        return header, pending


class BlockBodyReader:
    """
    Reads one alignment block: the lines up to the next blank line or EOF.

    Leading blank lines are skipped. If a line fails to parse, the rest of
    the block is consumed before the error is raised, leaving the source at
    the next block boundary.
    """

    def __init__(self, source: LineSource):
        self.source = source

    def read(self, pending: Optional[PendingLine] = None) -> MafBlock:
        """
        Read the next alignment block.

        Args:
            pending: Raw line and line number to seed the block with

        Returns:
            MafBlock, empty if the stream ended before any content

        Raises:
            SequenceFieldError: If a sequence line lacks a field
            InvalidStrandError: If a sequence line has a bad strand
        """
        block = MafBlock()
        malformed = None

        if pending is not None:
            text, line_number = pending
            try:
                block.append_line(LineParser.parse(text, line_number))
            except BLOCK_ERRORS as e:
                malformed = e

        while True:
            line = self.source.read_line()
            if line is None:
                break

            if is_blank_line(line):
                if block.is_empty and malformed is None:
                    continue
                break

            if malformed is not None:
                continue

            try:
                block.append_line(LineParser.parse(line, self.source.line_number))
            except BLOCK_ERRORS as e:
                malformed = e

        if malformed is not None:
            logger.debug(f"Consumed malformed block up to line {self.source.line_number}")
            raise malformed

        return block


class MafReader:
    """
    Incremental MAF reader.

    The first call to read_next_block returns the header; each later call
    returns the next alignment block, or None at end of stream.

    Example:
        >>> with MafReader("alignments.maf") as reader:
        ...     header = reader.read_next_block()
        ...     for block in reader:
        ...         print(block.sequence_count)
    """

    def __init__(self, source):
        """
        Initialize the reader.

        Args:
            source: Path to a MAF file (plain or gzip) or an open text handle

        Raises:
            FileError: If the file cannot be opened
        """
        self._source = LineSource(source)
        self._header_reader = HeaderReader(self._source)
        self._body_reader = BlockBodyReader(self._source)
        self._header_done = False
        self._header_error = None
        self._pending: Optional[PendingLine] = None

    @property
    def filename(self) -> str:
        return self._source.filename

    @property
    def line_number(self) -> int:
        """Number of the last line read."""
        return self._source.line_number

    def read_next_block(self) -> Optional[MafBlock]:
        """
        Read the next block of the stream.

        Returns:
            The header block on the first call, then alignment blocks,
            then None once the stream is exhausted

        Raises:
            HeaderFormatError: If the stream has no valid header
            IncompleteStreamError: If the stream ends inside the header
            SequenceFieldError: If a sequence line lacks a field
            InvalidStrandError: If a sequence line has a bad strand
        """
        if self._header_error is not None:
            raise self._header_error

        if not self._header_done:
            try:
                block, self._pending = self._header_reader.read()
            except (HeaderFormatError, IncompleteStreamError) as e:
                self._header_error = e
                raise
            self._header_done = True
        else:
            pending, self._pending = self._pending, None
            block = self._body_reader.read(pending)

        if block.is_empty:
            return None
        return block

    def read_all(self, skip_malformed: Optional[bool] = None) -> List[MafBlock]:
        """
        Read every remaining block of the stream.

        Args:
            skip_malformed: Skip blocks with bad sequence lines instead of
                raising (defaults to Config.SKIP_MALFORMED_BLOCKS)

        Returns:
            List of blocks, header first

        Raises:
            HeaderFormatError: If the stream has no valid header
            IncompleteStreamError: If the stream ends inside the header
            SequenceFieldError: If a sequence line lacks a field and skipping is off
            InvalidStrandError: If a sequence line has a bad strand and skipping is off
        """
        if skip_malformed is None:
            skip_malformed = Config.SKIP_MALFORMED_BLOCKS

        logger.debug(f"Reading all blocks from {self.filename}")
        blocks = []
        skipped = 0

        with tqdm(desc=f"Reading {self.filename}", unit=" blocks",
                  disable=not Config.SHOW_PROGRESS) as progress:
            while True:
                try:
                    block = self.read_next_block()
                except BLOCK_ERRORS as e:
                    if not skip_malformed:
                        raise
                    skipped += 1
                    logger.warning(f"Skipping malformed block in {self.filename}: {str(e)}")
                    continue

                if block is None:
                    break
                blocks.append(block)
                progress.update(1)

        if skipped:
            logger.info(f"Skipped {skipped} malformed blocks in {self.filename}")
        logger.debug(f"Read {len(blocks)} blocks ({self.line_number} lines) from {self.filename}")
        return blocks

    def close(self):
        self._source.close()

    def __iter__(self):
        while True:
            block = self.read_next_block()
            if block is None:
                return
            yield block

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False


def read_maf(source, skip_malformed: Optional[bool] = None) -> List[MafBlock]:
    """
    Read a whole MAF file into a list of blocks, header first.

    Args:
        source: Path to a MAF file or an open text handle
        skip_malformed: See MafReader.read_all

    Returns:
        List of MafBlock objects owned by the caller
    """
    with MafReader(source) as reader:
        return reader.read_all(skip_malformed=skip_malformed)


def iter_maf(source):
    """Yield the blocks of a MAF file one at a time, header first."""
    with MafReader(source) as reader:
        yield from reader
