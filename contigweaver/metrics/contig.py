#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigWeaver v0.1.0

A contig in a transcriptome assembly and the metrics reported for it.

The contig owns its normalised sequence and lazily computes composition,
longest ORF and k-mer complexity on first access. Read-based and
reference-based measurements are written onto the instance by the alignment
and reference-search stages; the score is computed once from the read-based
fields the first time it is requested.

Three metric views are exposed:
  * basic_metrics()      : always available from the sequence alone
  * read_metrics()       : fields that need reads report NA until p_good is set
  * comparative_metrics(): reports NA unless the contig has a CRB hit

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
import math
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional

from Bio.Seq import Seq

from .complexity import linguistic_complexity as _linguistic_complexity
from .composition import Composition, count_composition
from .derived import (
    at_skew as _at_skew,
    cpg_count as _cpg_count,
    cpg_ratio as _cpg_ratio,
    gc_skew as _gc_skew,
    proportion,
)
from .orf import longest_orf
from .score import SCORE_FLOOR, contig_score
from ..utils.sequence_utils import normalize_sequence

logger = logging.getLogger(__name__)

# Marker for metrics that have not been supplied or cannot be computed yet.
NA = "NA"

# Attributes probed, in order, for a record identifier.
_ID_ATTRIBUTES = ('id', 'entry_id', 'name')


@dataclass
class ReferenceHit:
    """A reference-search hit for a contig."""
    target: str


def _extract_sequence(record: Any) -> str:
    """Pull the raw symbol string out of a str, Seq or record object."""
    if isinstance(record, (str, Seq)):
        return str(record)
    seq = getattr(record, 'seq', None)
    if seq is None:
        seq = getattr(record, 'sequence', None)
    if seq is None:
        raise ValueError(
            f"Cannot extract a sequence from {type(record).__name__}"
        )
    return str(seq)


def _extract_name(record: Any) -> Optional[str]:
    if isinstance(record, (str, Seq)):
        return None
    for attr in _ID_ATTRIBUTES:
        value = getattr(record, attr, None)
        # SeqRecord fills unset ids with '<unknown id>' placeholders
        if isinstance(value, str) and value and not value.startswith('<unknown'):
            return value
    return None


class Contig:
    """
    A contig in a transcriptome assembly.

    Args:
        record: Sequence string, ``Bio.Seq.Seq`` or any record exposing
            ``.seq`` (or ``.sequence``) and optionally an identifier
            (``.id``, ``.entry_id`` or ``.name``). Only the cleaned symbol
            string is kept; the record itself is not referenced afterwards.
        name: Name used when the record carries no identifier.
        score_floor: Lower bound for each score component and the score.

    Lazily cached values (composition, ORF length, per-k complexity and the
    score) are filled at most once per instance under an instance lock.
    """

    def __init__(
        self,
        record: Any,
        name: Optional[str] = None,
        *,
        score_floor: float = SCORE_FLOOR,
    ):
        self.seq: str = normalize_sequence(_extract_sequence(record))
        self.name: Optional[str] = _extract_name(record) or name
        self.score_floor = score_floor

        self._lock = threading.RLock()
        self._composition: Optional[Composition] = None
        self._orf_length: Optional[int] = None
        self._complexity: Dict[int, float] = {}
        self._score: Optional[float] = None

        # read-based metrics
        self.coverage: float = 0.0
        self._uncovered_bases: int = len(self.seq)
        self.p_uncovered_bases: float = 1.0
        self.p_seq_true: float = 0.0
        self.p_unique: float = 0.0
        self.low_uniqueness_bases: int = 0
        self.in_bridges: int = 0
        self.p_good: Optional[float] = None
        self.p_not_segmented: float = 1.0

        # reference-based metrics
        self.has_crb: bool = False
        self.reference_coverage: float = 0.0
        self.hits: List[Any] = []

    def __len__(self) -> int:
        return len(self.seq)

    @property
    def length(self) -> int:
        return len(self.seq)

    def __iter__(self) -> Iterator[str]:
        return iter(self.seq)

    def __repr__(self) -> str:
        return f"Contig(name={self.name!r}, length={self.length})"

    # -----------------------------------------------------------------
    # Metric views
    # -----------------------------------------------------------------

    def basic_metrics(self) -> Dict[str, Any]:
        """Sequence-only metrics."""
        return {
            'length': self.length,
            'prop_gc': self.prop_gc,
            'gc_skew': self.gc_skew,
            'at_skew': self.at_skew,
            'cpg_count': self.cpg_count,
            'cpg_ratio': self.cpg_ratio,
            'orf_length': self.orf_length,
            'linguistic_complexity_6': self.linguistic_complexity(6),
        }

    def read_metrics(self) -> Dict[str, Any]:
        """Read-based metrics; read-dependent fields are NA until p_good is set."""
        if self.p_good is not None:
            return {
                'in_bridges': self.in_bridges,
                'p_good': self.p_good,
                'p_bases_covered': self.p_bases_covered,
                'p_seq_true': self.p_seq_true,
                'score': self.score,
                'p_unique': self.p_unique,
                'p_not_segmented': self.p_not_segmented,
                'coverage': self.coverage,
            }
        return {
            'in_bridges': NA,
            'p_good': NA,
            'p_bases_covered': NA,
            'p_seq_true': NA,
            'score': NA,
            'p_unique': self.p_unique,
            'p_not_segmented': self.p_not_segmented,
            'coverage': self.coverage,
        }

    def comparative_metrics(self) -> Dict[str, Any]:
        """Reference-based metrics; NA unless the contig has a CRB hit."""
        if self.has_crb:
            targets = [str(hit.target) for hit in self.hits]
            return {
                'has_crb': True,
                'reference_coverage': self.reference_coverage,
                'hits': ';'.join(targets) if targets else NA,
            }
        return {
            'has_crb': False,
            'reference_coverage': NA,
            'hits': NA,
        }

    # -----------------------------------------------------------------
    # Composition
    # -----------------------------------------------------------------

    @property
    def composition(self) -> Composition:
        """Base and dibase counts, computed in one pass on first access."""
        if self._composition is None:
            with self._lock:
                if self._composition is None:
                    self._composition = count_composition(self.seq)
                    logger.debug("Composition cached for %s", self.name)
        return self._composition

    @property
    def base_composition(self) -> Mapping[str, int]:
        return self.composition.bases

    @property
    def dibase_composition(self) -> Mapping[str, int]:
        return self.composition.dibases

    @property
    def bases_a(self) -> int:
        return self.base_composition['a']

    @property
    def bases_c(self) -> int:
        return self.base_composition['c']

    @property
    def bases_g(self) -> int:
        return self.base_composition['g']

    @property
    def bases_t(self) -> int:
        return self.base_composition['t']

    @property
    def bases_n(self) -> int:
        return self.base_composition['n']

    @property
    def bases_gc(self) -> int:
        return self.bases_g + self.bases_c

    @property
    def prop_a(self) -> float:
        return proportion(self.composition, 'a')

    @property
    def prop_c(self) -> float:
        return proportion(self.composition, 'c')

    @property
    def prop_g(self) -> float:
        return proportion(self.composition, 'g')

    @property
    def prop_t(self) -> float:
        return proportion(self.composition, 't')

    @property
    def prop_n(self) -> float:
        return proportion(self.composition, 'n')

    @property
    def prop_gc(self) -> float:
        return self.prop_g + self.prop_c

    @property
    def gc_skew(self) -> float:
        return _gc_skew(self.composition)

    @property
    def at_skew(self) -> float:
        return _at_skew(self.composition)

    @property
    def cpg_count(self) -> int:
        return _cpg_count(self.composition)

    @property
    def cpg_ratio(self) -> float:
        """Observed-to-expected CpG ratio (NaN when C or G is absent)."""
        return _cpg_ratio(self.composition)

    # -----------------------------------------------------------------
    # ORF and complexity
    # -----------------------------------------------------------------

    @property
    def orf_length(self) -> int:
        """Longest six-frame ORF in nucleotides."""
        if self._orf_length is None:
            with self._lock:
                if self._orf_length is None:
                    self._orf_length = longest_orf(self.seq)
        return self._orf_length

    def linguistic_complexity(self, k: int) -> float:
        """Distinct k-mers / 4**k, cached per k."""
        if k not in self._complexity:
            with self._lock:
                if k not in self._complexity:
                    self._complexity[k] = _linguistic_complexity(self.seq, k)
        return self._complexity[k]

    # -----------------------------------------------------------------
    # Read-based metrics
    # -----------------------------------------------------------------

    @property
    def uncovered_bases(self) -> int:
        return self._uncovered_bases

    @uncovered_bases.setter
    def uncovered_bases(self, n: int) -> None:
        if not 0 <= n <= self.length:
            raise ValueError(
                f"uncovered_bases must be in [0, {self.length}], got {n}"
            )
        self._uncovered_bases = n
        self.p_uncovered_bases = n / self.length if self.length else 1.0

    @property
    def p_bases_covered(self) -> float:
        return 1 - self.p_uncovered_bases

    @property
    def p_unique_bases(self) -> float:
        """Proportion of bases not flagged as low-uniqueness."""
        if self.length == 0:
            return math.nan
        return (self.length - self.low_uniqueness_bases) / self.length

    @property
    def score(self) -> float:
        """
        Geometric mean of the five read-based sub-scores.

        Computed from the read-based fields the first time it is read and
        never recomputed, even if those fields change afterwards.
        """
        if self._score is None:
            with self._lock:
                if self._score is None:
                    self._score = contig_score(
                        self.p_bases_covered,
                        self.p_not_segmented,
                        self.p_good,
                        self.p_seq_true,
                        self.p_unique,
                        floor=self.score_floor,
                    )
                    logger.debug("Score for %s: %.4f", self.name, self._score)
        return self._score


__all__ = [
    "NA",
    "Contig",
    "ReferenceHit",
]

# ContigWeaver v0.1.0
# Any usage is subject to this software's license.
