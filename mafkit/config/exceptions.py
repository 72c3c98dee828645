#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Custom exceptions for mafkit.

This module defines exception classes used throughout mafkit to provide
specific error information for MAF reading, writing and block views.
"""


class MAFError(Exception):
    """Base exception class for all mafkit-specific errors."""
    pass


class FileError(MAFError):
    """Base class for file-related errors."""
    pass


class FileFormatError(FileError):
    """Error with file formatting or parsing."""
    pass


class HeaderFormatError(FileFormatError):
    """The stream does not start with a 'track' or '##maf' line."""
    pass


class IncompleteStreamError(FileError):
    """End of stream reached while more header or body content was expected."""
    pass


class WriterClosedError(FileError):
    """Write attempted on a MAF writer that has already been closed."""
    pass


class SequenceFieldError(FileFormatError):
    """A sequence line is missing a field or holds an unparseable value."""

    def __init__(self, message, field_name=None, line_number=None):
        """
        Initialize with the offending field and line.

        Args:
            message (str): Error message
            field_name (str, optional): Name of the missing or invalid field
            line_number (int, optional): Line number in the source stream
        """
        self.field_name = field_name
        self.line_number = line_number

        detailed_message = message
        if line_number is not None:
            detailed_message = f"line {line_number}: {message}"

        super().__init__(detailed_message)


class InvalidStrandError(FileFormatError):
    """The strand field of a sequence line is neither '+' nor '-'."""

    def __init__(self, message, strand=None, line_number=None):
        self.strand = strand
        self.line_number = line_number

        detailed_message = message
        if line_number is not None:
            detailed_message = f"line {line_number}: {message}"

        super().__init__(detailed_message)


class BlockStructureError(MAFError):
    """A line could not be added to a block without breaking its ordering."""
    pass


class BlockViewError(MAFError):
    """Error while building a derived view of a block."""
    pass


class ConfigError(MAFError):
    """Error with configuration parameters."""
    pass
