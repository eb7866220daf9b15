#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigWeaver v0.1.0

K-mer linguistic complexity.

Linguistic complexity is the number of distinct k-mers observed on the
forward strand divided by 4**k, the number of possible k-mers over
{A, C, G, T}. Windows containing N are counted like any other window but N
does not widen the denominator.

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from ..utils.sequence_utils import iter_kmers


def _check_k(k: int) -> None:
    if k < 1:
        raise ValueError(f"k must be a positive integer, got {k}")


def kmer_count(sequence: str, k: int) -> int:
    """
    Number of distinct length-k substrings (case-insensitive).

    Example:
        >>> kmer_count("ACGTACGT", 4)
        4
    """
    _check_k(k)
    if len(sequence) < k:
        return 0
    return len(set(iter_kmers(sequence.upper(), k)))


def linguistic_complexity(sequence: str, k: int) -> float:
    """Distinct k-mers / 4**k; 0.0 when the sequence is shorter than k."""
    return kmer_count(sequence, k) / float(4 ** k)


__all__ = [
    "kmer_count",
    "linguistic_complexity",
]

# ContigWeaver v0.1.0
# Any usage is subject to this software's license.
