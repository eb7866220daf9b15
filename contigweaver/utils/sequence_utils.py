"""
ContigWeaver v0.1.0

Sequence utility functions for ContigWeaver.

Provides the small string helpers shared by the metric modules.
"""

import re
from typing import Iterator

# Null and other control characters, plus whitespace left over from
# wrapped FASTA lines.
_STRIP_PATTERN = re.compile(r'[\x00-\x20\x7f]+')

# Anything outside ASCII; replaced one-for-one before case folding.
_NON_ASCII_PATTERN = re.compile(r'[^\x00-\x7f]')

_COMPLEMENT = str.maketrans('ACGTNacgtn', 'TGCANtgcan')


def normalize_sequence(sequence: str) -> str:
    """
    Remove control characters and whitespace and upper-case a sequence.

    Non-ASCII symbols become N before upper-casing, so each input symbol
    yields exactly one output symbol.

    Args:
        sequence: Raw nucleotide string

    Returns:
        Cleaned, upper-case sequence

    Example:
        >>> normalize_sequence("acg\\x00t N")
        'ACGTN'
    """
    sequence = _NON_ASCII_PATTERN.sub('N', sequence)
    return _STRIP_PATTERN.sub('', sequence).upper()


def reverse_complement(sequence: str) -> str:
    """
    Generate reverse complement of DNA sequence.

    Symbols other than A, C, G, T and N are passed through unchanged.

    Args:
        sequence: DNA sequence string

    Returns:
        Reverse complement sequence

    Example:
        >>> reverse_complement("ATCG")
        'CGAT'
    """
    return sequence.translate(_COMPLEMENT)[::-1]


def iter_kmers(sequence: str, k: int) -> Iterator[str]:
    """
    Yield every length-k window of a sequence, left to right.

    Args:
        sequence: DNA sequence string
        k: K-mer size

    Yields:
        K-mer strings (nothing when k > len(sequence))

    Example:
        >>> list(iter_kmers("ATCGA", 3))
        ['ATC', 'TCG', 'CGA']
    """
    for i in range(len(sequence) - k + 1):
        yield sequence[i:i + k]


__all__ = [
    'normalize_sequence',
    'reverse_complement',
    'iter_kmers',
]
