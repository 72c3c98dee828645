#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Export helpers for mafkit.

Contains functionality for:
1. Converting an alignment block to a Biopython MultipleSeqAlignment
2. Tabulating a block's sequence lines as a pandas DataFrame
3. Summarizing a whole block list as a pandas DataFrame
"""

import logging

import pandas as pd
from Bio.Align import MultipleSeqAlignment
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from ..config import Config
from ..config.exceptions import BlockViewError
from ..core.block_views import BlockViews
from ..core.maf_line import Strand

# Set up module logger
logger = logging.getLogger(__name__)

SEQUENCE_COLUMNS = [
    "species", "start", "length", "strand", "source_length",
    "positive_start", "positive_left", "line_number",
]

SUMMARY_COLUMNS = ["start_line_number", "line_count", "sequence_count", "is_header"]


def block_to_alignment(block) -> MultipleSeqAlignment:
    """
    Convert an alignment block to a Biopython MultipleSeqAlignment.

    Rows shorter than the longest sequence field are padded with
    Config.GAP_CHAR so that all records have equal length.

    Args:
        block: MafBlock with at least one sequence line

    Returns:
        MultipleSeqAlignment with one SeqRecord per sequence line

    Raises:
        BlockViewError: If the block has no sequence lines
    """
    if not block.contains_sequence():
        error_msg = f"Block at line {block.start_line_number} has no sequence lines"
        logger.error(error_msg)
        raise BlockViewError(error_msg)

    rows = BlockViews.sequence_matrix(block, pad_char=Config.GAP_CHAR)
    records = []
    for line, row in zip(block.sequence_lines(), rows):
        records.append(SeqRecord(
            Seq(row),
            id=line.species,
            description="",
            annotations={
                "start": line.start,
                "size": line.length,
                "strand": 1 if line.strand == Strand.PLUS else -1,
                "srcSize": line.source_length,
            },
        ))

    logger.debug(f"Converted block at line {block.start_line_number} to alignment of {len(records)} records")
    return MultipleSeqAlignment(records)


def block_to_dataframe(block) -> pd.DataFrame:
    """
    Tabulate a block's sequence lines.

    Returns:
        DataFrame with one row per sequence line and SEQUENCE_COLUMNS columns
    """
    rows = [{
        "species": line.species,
        "start": line.start,
        "length": line.length,
        "strand": line.strand,
        "source_length": line.source_length,
        "positive_start": line.positive_start,
        "positive_left": line.positive_left,
        "line_number": line.line_number,
    } for line in block.sequence_lines()]

    return pd.DataFrame(rows, columns=SEQUENCE_COLUMNS)


def chain_summary(blocks) -> pd.DataFrame:
    """
    Summarize a list of blocks, one row per block.

    Returns:
        DataFrame with SUMMARY_COLUMNS columns
    """
    rows = [{
        "start_line_number": block.start_line_number,
        "line_count": block.line_count,
        "sequence_count": block.sequence_count,
        "is_header": block.is_header,
    } for block in blocks]

    summary = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    logger.debug(f"Summarized {len(summary)} blocks")
    return summary
