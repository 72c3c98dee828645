"""
Utility modules for mafkit.

This subpackage contains utility functions:
- file_io: Plain/gzip file opening and the line source used by the reader
- exporters: Biopython and pandas conversions of blocks
"""

from .file_io import LineSource, open_text, is_gzip_path
from .exporters import block_to_alignment, block_to_dataframe, chain_summary

__all__ = [
    'LineSource',
    'open_text',
    'is_gzip_path',
    'block_to_alignment',
    'block_to_dataframe',
    'chain_summary',
]
