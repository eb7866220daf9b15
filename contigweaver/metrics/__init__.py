"""
Per-contig metric computation for ContigWeaver.

This package provides the metric engine for a single contig:
- Base and dibase composition counting
- Derived composition statistics (GC/AT skew, CpG ratio)
- Six-frame longest ORF search
- K-mer linguistic complexity
- Geometric-mean contig score
- The Contig facade exposing basic, read-based and comparative views
"""

from .composition import ALPHABET, DIBASES, Composition, count_composition
from .derived import (
    proportion,
    prop_gc,
    gc_skew,
    at_skew,
    cpg_count,
    cpg_ratio,
)
from .orf import START_CODONS, STOP_CODONS, longest_orf
from .complexity import kmer_count, linguistic_complexity
from .score import SCORE_FLOOR, contig_score
from .contig import NA, Contig, ReferenceHit

__all__ = [
    # Composition
    'ALPHABET',
    'DIBASES',
    'Composition',
    'count_composition',
    # Derived statistics
    'proportion',
    'prop_gc',
    'gc_skew',
    'at_skew',
    'cpg_count',
    'cpg_ratio',
    # ORF / complexity
    'START_CODONS',
    'STOP_CODONS',
    'longest_orf',
    'kmer_count',
    'linguistic_complexity',
    # Score
    'SCORE_FLOOR',
    'contig_score',
    # Facade
    'NA',
    'Contig',
    'ReferenceHit',
]
