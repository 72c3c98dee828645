#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Line record model for mafkit.

A MafLine is one physical line of a MAF stream. Every line keeps its
original text so that it can be written back unchanged; sequence ('s')
lines additionally carry their decomposed fields.
"""


class LineKind:
    """
    Line kind codes, taken from the first character of a MAF line.

    HEADER is an internal code: header lines keep whatever text they had.
    """

    HEADER = 'h'
    ALIGNMENT_START = 'a'
    SEQUENCE = 's'
    INFORMATION = 'i'
    QUALITY = 'q'
    ALIGNMENT_INFO = 'e'
    EMPTY = ''
    OTHER = '?'

    BODY_KINDS = (ALIGNMENT_START, SEQUENCE, INFORMATION, QUALITY, ALIGNMENT_INFO)


class Strand:
    """Strand codes allowed in the strand field of a sequence line."""

    PLUS = '+'
    MINUS = '-'

    VALID = (PLUS, MINUS)


class MafLine:
    """
    A single line of a MAF block.

    Attributes:
        raw_text: Original line content without its terminator
        line_number: 1-based position in the source stream
        kind: One of the LineKind codes
        species: Source name (sequence lines only)
        start: 0-based start on the strand given by `strand`
        length: Number of aligned residues, gaps excluded
        strand: '+' or '-'
        source_length: Total length of the unaligned source sequence
        sequence: Aligned text, possibly containing gaps

    Example:
        >>> line = LineParser.parse("s hg18.chr7 27578828 38 + 158545518 AAA-GGG", 3)
        >>> line.species, line.positive_start
        ('hg18.chr7', 27578828)
    """

    __slots__ = ('raw_text', 'line_number', 'kind', 'species', 'start',
                 'length', 'strand', 'source_length', 'sequence')

    def __init__(self, raw_text, line_number, kind, species=None, start=0,
                 length=0, strand=None, source_length=0, sequence=None):
        self.raw_text = raw_text
        self.line_number = line_number
        self.kind = kind
        self.species = species
        self.start = start
        self.length = length
        self.strand = strand
        self.source_length = source_length
        self.sequence = sequence

    @property
    def is_sequence(self) -> bool:
        return self.kind == LineKind.SEQUENCE

    @property
    def positive_start(self) -> int:
        """
        Start coordinate on the forward strand.

        For '-' lines this is the right-most position of the aligned
        segment, not its left edge; use positive_left for that.
        """
        if self.strand == Strand.PLUS:
            return self.start
        return self.source_length - self.start - 1

    @property
    def positive_left(self) -> int:
        """Left-most forward-strand coordinate spanned by the aligned segment."""
        if self.strand == Strand.PLUS:
            return self.start
        return self.source_length - (self.start + self.length)

    def __str__(self):
        return self.raw_text

    def __repr__(self):
        return f"MafLine(line_number={self.line_number}, kind={self.kind!r}, raw_text={self.raw_text!r})"

    def __eq__(self, other):
        if not isinstance(other, MafLine):
            return NotImplemented
        return (self.raw_text, self.line_number, self.kind) == \
            (other.raw_text, other.line_number, other.kind)

    def __hash__(self):
        return hash((self.raw_text, self.line_number, self.kind))
