#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File I/O module for mafkit.

Contains functionality for:
1. Opening plain and gzip-compressed MAF files for reading or writing
2. A line source that hands out one raw line at a time with its line number

The line source has no fixed line-length limit. It only fails on genuine
I/O errors, which are re-raised as FileError.
"""

import os
import gzip
import logging
from typing import Optional

from ..config import Config, FileError

# Set up module logger
logger = logging.getLogger(__name__)


def is_gzip_path(path) -> bool:
    """Return True if the path carries one of the configured gzip suffixes."""
    return str(path).lower().endswith(tuple(Config.GZIP_SUFFIXES))


def open_text(path, mode: str = "r"):
    """
    Open a MAF file in text mode, transparently handling gzip.

    Args:
        path: File path
        mode: "r", "w" or "a"

    Returns:
        Text file handle

    Raises:
        FileError: If the file cannot be opened
    """
    path = os.fspath(path)
    logger.debug(f"Opening {path} with mode {mode}")

    try:
        if is_gzip_path(path):
            return gzip.open(path, mode + "t", encoding=Config.FILE_ENCODING, newline="")
        return open(path, mode, encoding=Config.FILE_ENCODING, newline="")
    except OSError as e:
        error_msg = f"Failed to open {path}: {str(e)}"
        logger.error(error_msg)
        logger.debug(f"Error details: {str(e)}", exc_info=True)
        raise FileError(error_msg) from e


def strip_line_terminator(line: str) -> str:
    """
    Remove the trailing "\\n" from a raw line.

    A carriage return before it stays part of the line, so lines of a CRLF
    file are written back byte for byte.
    """
    if line.endswith("\n"):
        return line[:-1]
    return line


class LineSource:
    """
    Sequential reader handing out one raw line at a time.

    Wraps either a path (opened and owned by the source) or an already
    open text handle (owned by the caller). Lines are returned without
    their terminator; None signals end of stream.

    Example:
        >>> with LineSource("alignments.maf") as source:
        ...     line = source.read_line()
        ...     print(source.line_number, line)
    """

    def __init__(self, source):
        """
        Initialize the line source.

        Args:
            source: Path to a MAF file or an open text handle

        Raises:
            FileError: If a path is given and cannot be opened
        """
        if hasattr(source, "readline"):
            self._handle = source
            self._owns_handle = False
            self.filename = getattr(source, "name", "<stream>")
        else:
            self._handle = open_text(source, "r")
            self._owns_handle = True
            self.filename = os.fspath(source)

        self.line_number = 0
        self._exhausted = False

    def read_line(self) -> Optional[str]:
        """
        Read the next raw line.

        Returns:
            The line without its terminator, or None at end of stream

        Raises:
            FileError: On an I/O error from the underlying handle
        """
        if self._exhausted:
            return None

        try:
            line = self._handle.readline()
        except (OSError, ValueError) as e:
            error_msg = f"Failed to read from {self.filename} after line {self.line_number}"
            logger.error(error_msg)
            logger.debug(f"Error details: {str(e)}", exc_info=True)
            raise FileError(error_msg) from e

        if line == "":
            self._exhausted = True
            return None

        self.line_number += 1
        return strip_line_terminator(line)

    @property
    def closed(self) -> bool:
        return self._handle is None

    def close(self):
        """Release the handle if this source opened it."""
        if self._handle is not None and self._owns_handle:
            self._handle.close()
            logger.debug(f"Closed {self.filename} after {self.line_number} lines")
        self._handle = None
        self._exhausted = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False
