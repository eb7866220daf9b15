#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigWeaver v0.1.0

Contig score: geometric mean of five read-based sub-scores.

Sub-scores:
  1. p_bases_covered : proportion of bases covered by reads
  2. p_not_segmented : probability the coverage has no changepoints
  3. p_good          : proportion of reads that mapped well
  4. p_seq_true      : scaled 1 - mean per-base edit distance
  5. p_unique        : proportion of reads with high mapping quality

Each sub-score is clamped into [floor, 1] before combining. The result is
floored again and any non-finite outcome falls back to the floor.

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
import math
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

SCORE_FLOOR = 0.01


def contig_score(
    p_bases_covered: Optional[float],
    p_not_segmented: Optional[float],
    p_good: Optional[float],
    p_seq_true: Optional[float],
    p_unique: Optional[float],
    *,
    floor: float = SCORE_FLOOR,
) -> float:
    """
    Combine the five sub-scores into one value in [floor, 1].

    Args:
        p_bases_covered: Proportion of bases covered.
        p_not_segmented: Probability of no coverage changepoints.
        p_good: Proportion of good read mappings (None if not supplied).
        p_seq_true: Sequence-trueness probability.
        p_unique: Uniqueness probability.
        floor: Lower bound applied to every sub-score and to the result.

    Returns:
        Geometric-mean score; exactly ``floor`` when every input is at or
        below the floor, unset or NaN.
    """
    if not 0.0 < floor <= 1.0:
        raise ValueError(f"floor must be in (0, 1], got {floor}")

    raw = [p_bases_covered, p_not_segmented, p_good, p_seq_true, p_unique]
    values = np.array(
        [np.nan if v is None else float(v) for v in raw], dtype=np.float64
    )
    values = np.clip(np.nan_to_num(values, nan=floor), floor, 1.0)

    # Geometric mean relative to the floor; all-floor inputs give
    # the floor exactly.
    score = floor * float(np.exp(np.mean(np.log(values / floor))))
    if not math.isfinite(score):
        logger.debug("Non-finite score from %s; using floor", raw)
        return floor
    return min(max(score, floor), 1.0)


__all__ = [
    "SCORE_FLOOR",
    "contig_score",
]

# ContigWeaver v0.1.0
# Any usage is subject to this software's license.
