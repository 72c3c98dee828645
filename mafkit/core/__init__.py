"""
Core MAF model, reader, writer and block views.
"""

from .maf_line import MafLine, LineKind, Strand
from .maf_block import MafBlock, count_blocks
from .line_parser import LineParser, is_blank_line
from .maf_reader import MafReader, HeaderReader, BlockBodyReader, read_maf, iter_maf
from .maf_writer import MafWriter, write_maf
from .block_views import BlockViews

__all__ = [
    'MafLine',
    'LineKind',
    'Strand',
    'MafBlock',
    'count_blocks',
    'LineParser',
    'is_blank_line',
    'MafReader',
    'HeaderReader',
    'BlockBodyReader',
    'read_maf',
    'iter_maf',
    'MafWriter',
    'write_maf',
    'BlockViews',
]
