"""
Utilities module for ContigWeaver.

This module provides sequence helpers used by the metric modules:
- Sequence normalisation (control character removal, upper-casing)
- Reverse complement
- K-mer window iteration
"""

from .sequence_utils import (
    normalize_sequence,
    reverse_complement,
    iter_kmers,
)

__all__ = [
    'normalize_sequence',
    'reverse_complement',
    'iter_kmers',
]
