#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Core I/O module for ContigWeaver.

Consolidated module containing:
- File opening with automatic gzip detection
- FASTA reading into Contig objects (parsing delegated to Biopython)
- Writing per-contig metric rows as CSV or JSON
"""

# =============================================================================
# SECTION 1: IMPORTS AND DEPENDENCIES
# =============================================================================

import csv
import gzip
import itertools
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, TextIO, Union

from Bio import SeqIO

from ..metrics.contig import Contig
from ..metrics.score import SCORE_FLOOR

logger = logging.getLogger(__name__)


# =============================================================================
# SECTION 2: FILE UTILITIES
# =============================================================================

def is_gzipped(filepath: Union[str, Path]) -> bool:
    """
    Check if file is gzip compressed.

    Args:
        filepath: Path to file

    Returns:
        True if file is gzipped
    """
    filepath = Path(filepath)
    return filepath.suffix in ('.gz', '.gzip')


def open_file(filepath: Union[str, Path], mode: str = 'r') -> TextIO:
    """
    Open file with automatic gzip detection.

    Args:
        filepath: Path to file
        mode: File mode ('r' or 'w')

    Returns:
        File handle
    """
    filepath = Path(filepath)

    if is_gzipped(filepath):
        if 'r' in mode:
            return gzip.open(filepath, 'rt')
        else:
            return gzip.open(filepath, 'wt')
    else:
        return open(filepath, mode, newline='' if 'w' in mode else None)


# =============================================================================
# SECTION 3: FASTA INPUT
# =============================================================================

def read_contigs(
    filepath: Union[str, Path],
    min_length: int = 0,
    score_floor: float = SCORE_FLOOR,
) -> Iterator[Contig]:
    """
    Read a FASTA file and yield Contig objects.

    Args:
        filepath: Path to FASTA file (can be gzipped)
        min_length: Minimum contig length (after normalisation)
        score_floor: Score floor passed to each Contig

    Yields:
        Contig objects; the parsed SeqRecord is discarded after each one
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"FASTA file not found: {filepath}")

    skipped = 0
    with open_file(filepath, 'r') as handle:
        for record in SeqIO.parse(handle, "fasta"):
            contig = Contig(record, score_floor=score_floor)
            if contig.length < min_length:
                skipped += 1
                continue
            yield contig

    if skipped:
        logger.info("Skipped %d contigs shorter than %d bp", skipped, min_length)


# =============================================================================
# SECTION 4: METRIC OUTPUT
# =============================================================================

def metrics_row(contig: Contig, extra_k: int = 6) -> Dict[str, Any]:
    """
    Flatten the three metric views of a contig into one row.

    Args:
        contig: Contig to report
        extra_k: Additional linguistic complexity column to include when
                 it differs from the k=6 column of the basic view

    Returns:
        Ordered dict: name, basic, read-based, then comparative fields
    """
    row: Dict[str, Any] = {'contig_name': contig.name}
    row.update(contig.basic_metrics())
    if extra_k != 6:
        row[f'linguistic_complexity_{extra_k}'] = contig.linguistic_complexity(extra_k)
    row.update(contig.read_metrics())
    row.update(contig.comparative_metrics())
    return row


def _json_value(value: Any) -> Any:
    """NaN is not valid JSON; report it as null."""
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def write_metrics(
    rows: Iterable[Dict[str, Any]],
    filepath: Union[str, Path],
    output_format: str = 'csv',
) -> int:
    """
    Write metric rows to file.

    Args:
        rows: Rows as produced by metrics_row()
        filepath: Output path (gzip when it ends in .gz)
        output_format: 'csv' or 'json'

    Returns:
        Number of rows written
    """
    if output_format not in ('csv', 'json'):
        raise ValueError(f"Unsupported output format: {output_format}")

    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open_file(filepath, 'w') as handle:
        if output_format == 'json':
            handle.write('[')
            for row in rows:
                handle.write(',\n' if count else '\n')
                json.dump({k: _json_value(v) for k, v in row.items()}, handle, indent=2)
                count += 1
            handle.write('\n]\n' if count else ']\n')
        else:
            # Header comes from the first row; the rest are streamed.
            rows = iter(rows)
            first = next(rows, None)
            if first is not None:
                writer = csv.DictWriter(handle, fieldnames=list(first.keys()))
                writer.writeheader()
                for row in itertools.chain([first], rows):
                    writer.writerow(row)
                    count += 1

    logger.info("Wrote metrics for %d contigs to %s", count, filepath)
    return count


__all__ = [
    'is_gzipped',
    'open_file',
    'read_contigs',
    'metrics_row',
    'write_metrics',
]
