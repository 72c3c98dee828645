"""
mafkit: reading, writing and analysing MAF multiple alignment files.

Example:
    >>> from mafkit import read_maf, BlockViews
    >>> header, *blocks = read_maf("alignments.maf")
    >>> BlockViews.strand_array(blocks[0])
    '++'
"""

__version__ = "0.1.0"

from .config import (Config, setup_logging, MAFError, HeaderFormatError,
                     IncompleteStreamError, SequenceFieldError, InvalidStrandError)
from .core import (MafLine, LineKind, Strand, MafBlock, LineParser, MafReader,
                   MafWriter, BlockViews, read_maf, iter_maf, write_maf, count_blocks)
from .utils import block_to_alignment, block_to_dataframe, chain_summary

__all__ = [
    'Config',
    'setup_logging',
    'MAFError',
    'HeaderFormatError',
    'IncompleteStreamError',
    'SequenceFieldError',
    'InvalidStrandError',
    'MafLine',
    'LineKind',
    'Strand',
    'MafBlock',
    'LineParser',
    'MafReader',
    'MafWriter',
    'BlockViews',
    'read_maf',
    'iter_maf',
    'write_maf',
    'count_blocks',
    'block_to_alignment',
    'block_to_dataframe',
    'chain_summary',
]
