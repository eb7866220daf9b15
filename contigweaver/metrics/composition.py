#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigWeaver v0.1.0

Base and dibase composition counting.

Counts the five symbols (A, C, G, T, N) and the 25 ordered adjacent symbol
pairs of a contig in a single vectorised pass. Symbols are matched
case-insensitively; anything outside {A, C, G, T, N} (IUPAC ambiguity codes,
'-', '*', ...) is counted as N.

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

import numpy as np

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Alphabet
# ---------------------------------------------------------------------------

ALPHABET: Tuple[str, ...] = ('a', 'c', 'g', 't', 'n')
DIBASES: Tuple[str, ...] = tuple(x + y for x in ALPHABET for y in ALPHABET)

_N_INDEX = ALPHABET.index('n')


def _build_lookup() -> np.ndarray:
    """Byte value -> alphabet index; unknown bytes map to N."""
    table = np.full(256, _N_INDEX, dtype=np.intp)
    for index, base in enumerate(ALPHABET):
        table[ord(base)] = index
        table[ord(base.upper())] = index
    return table


_LOOKUP = _build_lookup()


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Composition:
    """Symbol and ordered-pair counts for one sequence."""
    length: int
    bases: Mapping[str, int]      # 'a'..'n' -> count
    dibases: Mapping[str, int]    # 'aa'..'nn' -> count

    def base(self, symbol: str) -> int:
        """Count of a single symbol (case-insensitive)."""
        return self.bases[symbol.lower()]

    def dibase(self, pair: str) -> int:
        """Count of an ordered symbol pair (case-insensitive)."""
        return self.dibases[pair.lower()]


def count_composition(sequence: str) -> Composition:
    """
    Count bases and dibases of a sequence.

    Args:
        sequence: Nucleotide string (any case)

    Returns:
        Composition with read-only count mappings. Base counts sum to
        ``len(sequence)``; dibase counts sum to ``len(sequence) - 1``
        (zero for an empty sequence).
    """
    raw = sequence.encode('ascii', errors='replace')
    length = len(raw)

    if length == 0:
        base_counts = np.zeros(len(ALPHABET), dtype=np.int64)
        dibase_counts = np.zeros(len(DIBASES), dtype=np.int64)
    else:
        codes = _LOOKUP[np.frombuffer(raw, dtype=np.uint8)]
        base_counts = np.bincount(codes, minlength=len(ALPHABET))
        pairs = codes[:-1] * len(ALPHABET) + codes[1:]
        dibase_counts = np.bincount(pairs, minlength=len(DIBASES))

    logger.debug("Counted composition of %d symbols", length)

    return Composition(
        length=length,
        bases=MappingProxyType(
            {b: int(c) for b, c in zip(ALPHABET, base_counts)}
        ),
        dibases=MappingProxyType(
            {d: int(c) for d, c in zip(DIBASES, dibase_counts)}
        ),
    )


__all__ = [
    "ALPHABET",
    "DIBASES",
    "Composition",
    "count_composition",
]

# ContigWeaver v0.1.0
# Any usage is subject to this software's license.
