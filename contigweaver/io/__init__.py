"""
Contig I/O module for ContigWeaver.

Reads assembled contigs from FASTA and writes per-contig metric tables.

CONSOLIDATED MODULES:
- fasta.py: gzip-aware file handling, FASTA -> Contig reading, CSV/JSON metric output
"""

from .fasta import (
    is_gzipped,
    open_file,
    read_contigs,
    metrics_row,
    write_metrics,
)

__all__ = [
    'is_gzipped',
    'open_file',
    'read_contigs',
    'metrics_row',
    'write_metrics',
]
