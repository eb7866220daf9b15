#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigWeaver v0.1.0

Composition statistics derived from base and dibase counts.

All functions are pure and cheap. Undefined values (zero-length sequence,
zero skew or CpG denominators) are reported as ``math.nan`` rather than
raised, so one degenerate contig never stops a batch.

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import math

from .composition import Composition


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan
    return numerator / denominator


def proportion(comp: Composition, base: str) -> float:
    """Fraction of the sequence made of ``base``; NaN for an empty sequence."""
    return _ratio(comp.base(base), comp.length)


def prop_gc(comp: Composition) -> float:
    """GC proportion."""
    return proportion(comp, 'g') + proportion(comp, 'c')


def gc_skew(comp: Composition) -> float:
    """(G - C) / (G + C); NaN when the contig has no G or C."""
    g, c = comp.base('g'), comp.base('c')
    return _ratio(g - c, g + c)


def at_skew(comp: Composition) -> float:
    """(A - T) / (A + T); NaN when the contig has no A or T."""
    a, t = comp.base('a'), comp.base('t')
    return _ratio(a - t, a + t)


def cpg_count(comp: Composition) -> int:
    """Number of CG plus GC dinucleotides."""
    return comp.dibase('cg') + comp.dibase('gc')


def cpg_ratio(comp: Composition) -> float:
    """
    Observed-to-expected CpG ratio.

    ``cpg_count / (C * G) * (length - N)``; NaN when C or G is absent.
    """
    expected = comp.base('c') * comp.base('g')
    if expected == 0:
        return math.nan
    return cpg_count(comp) / expected * (comp.length - comp.base('n'))


__all__ = [
    "proportion",
    "prop_gc",
    "gc_skew",
    "at_skew",
    "cpg_count",
    "cpg_ratio",
]

# ContigWeaver v0.1.0
# Any usage is subject to this software's license.
