#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Line parser module for mafkit.

Contains functionality for:
1. Classifying raw MAF lines by their first character
2. Splitting sequence ('s') lines into typed fields
3. Reporting malformed sequence lines with the field and line number

Only sequence lines are decomposed. Every other line is kept as raw text
with its kind code.
"""

import re
import logging

from .maf_line import MafLine, LineKind, Strand
from ..config.exceptions import SequenceFieldError, InvalidStrandError

# Set up module logger
logger = logging.getLogger(__name__)

_FIELD_SPLIT = re.compile(r"[ \t]+")

# Field names in the order they follow the leading 's' token
SEQUENCE_FIELDS = ("species", "start", "length", "strand", "source_length", "sequence")


def is_blank_line(text) -> bool:
    """Return True if the line is empty or holds only whitespace."""
    return not text or text.isspace()


class LineParser:
    """
    Converts raw MAF text lines into MafLine records.

    Example:
        >>> line = LineParser.parse("s panTro1.chr6 28741140 38 + 161576975 AAA-GGG", 4)
        >>> line.strand, line.source_length
        ('+', 161576975)
        >>> LineParser.parse("##maf version=1", 1, header=True).kind
        'h'
    """

    @staticmethod
    def classify(text, header=False) -> str:
        """
        Determine the LineKind code of a raw line.

        Args:
            text: Raw line without terminator
            header: True while reading the header section

        Returns:
            LineKind code
        """
        if is_blank_line(text):
            return LineKind.EMPTY
        if header:
            return LineKind.HEADER

        first = text[0]
        if first in LineKind.BODY_KINDS:
            return first
        return LineKind.OTHER

    @staticmethod
    def parse(text, line_number, header=False) -> MafLine:
        """
        Parse one raw line into a MafLine.

        Args:
            text: Raw line without terminator
            line_number: 1-based line number in the source stream
            header: True while reading the header section

        Returns:
            MafLine record

        Raises:
            SequenceFieldError: If a sequence line lacks a field or has a bad number
            InvalidStrandError: If a sequence line's strand is not '+' or '-'
        """
        kind = LineParser.classify(text, header=header)

        if kind != LineKind.SEQUENCE:
            return MafLine(text, line_number, kind)

        return LineParser._parse_sequence_line(text, line_number)

    @staticmethod
    def _parse_sequence_line(text, line_number) -> MafLine:
        tokens = [token for token in _FIELD_SPLIT.split(text.strip()) if token]
        # Drop the leading 's' token
        fields = tokens[1:]

        if len(fields) < len(SEQUENCE_FIELDS):
            missing = SEQUENCE_FIELDS[len(fields)]
            error_msg = f"Unable to separate line on tabs and spaces at {missing} field"
            logger.error(f"Malformed sequence line {line_number}: missing {missing} field")
            raise SequenceFieldError(error_msg, field_name=missing, line_number=line_number)

        species, start, length, strand, source_length, sequence = fields[:len(SEQUENCE_FIELDS)]

        if strand not in Strand.VALID:
            error_msg = f"Strand must be either + or -, not {strand!r}"
            logger.error(f"Malformed sequence line {line_number}: {error_msg}")
            raise InvalidStrandError(error_msg, strand=strand, line_number=line_number)

        return MafLine(
            text,
            line_number,
            LineKind.SEQUENCE,
            species=species,
            start=LineParser._parse_count(start, "start", line_number),
            length=LineParser._parse_count(length, "length", line_number),
            strand=strand,
            source_length=LineParser._parse_count(source_length, "source_length", line_number),
            sequence=sequence,
        )

    @staticmethod
    def _parse_count(token, field_name, line_number) -> int:
        """Parse a non-negative decimal integer field."""
        if not (token.isascii() and token.isdigit()):
            error_msg = f"{field_name} field must be a non-negative integer, not {token!r}"
            logger.error(f"Malformed sequence line {line_number}: {error_msg}")
            raise SequenceFieldError(error_msg, field_name=field_name, line_number=line_number)
        return int(token)
