#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigWeaver v0.1.0

Longest open reading frame search.

Scans the three forward frames and the three frames of the reverse
complement codon by codon. A run opens at a start codon and closes at the
first in-frame stop codon; its length counts both codons. Each frame is
visited once, so the whole search is linear in contig length.

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import FrozenSet, Optional

from ..utils.sequence_utils import reverse_complement

START_CODONS: FrozenSet[str] = frozenset({'ATG'})
STOP_CODONS: FrozenSet[str] = frozenset({'TAA', 'TAG', 'TGA'})


def _longest_in_frame(sequence: str, frame: int) -> int:
    """Longest start->stop run (nt) in one frame of an upper-case strand."""
    longest = 0
    start: Optional[int] = None

    for i in range(frame, len(sequence) - 2, 3):
        codon = sequence[i:i + 3]
        if start is None:
            if codon in START_CODONS:
                start = i
        elif codon in STOP_CODONS:
            longest = max(longest, i + 3 - start)
            start = None

    return longest


def longest_orf(sequence: str) -> int:
    """
    Length in nucleotides of the longest ORF over all six frames.

    Args:
        sequence: Nucleotide string (any case)

    Returns:
        Longest start-to-stop run, inclusive of both codons; 0 when the
        sequence is shorter than one codon or holds no complete ORF.
    """
    if len(sequence) < 3:
        return 0

    forward = sequence.upper()
    reverse = reverse_complement(forward)

    return max(
        _longest_in_frame(strand, frame)
        for strand in (forward, reverse)
        for frame in range(3)
    )


__all__ = [
    "START_CODONS",
    "STOP_CODONS",
    "longest_orf",
]

# ContigWeaver v0.1.0
# Any usage is subject to this software's license.
