#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigWeaver v0.1.0

Tests for composition counting and derived composition statistics.

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import math

import pytest

from contigweaver.metrics.composition import (
    ALPHABET,
    DIBASES,
    count_composition,
)
from contigweaver.metrics.derived import (
    proportion,
    prop_gc,
    gc_skew,
    at_skew,
    cpg_count,
    cpg_ratio,
)


# ---------------------------------------------------------------------------
# Base / dibase counting
# ---------------------------------------------------------------------------

class TestCountComposition:
    """Single-pass base and dibase counting."""

    def test_alphabet_layout(self):
        assert ALPHABET == ('a', 'c', 'g', 't', 'n')
        assert len(DIBASES) == 25
        assert DIBASES[0] == 'aa' and DIBASES[-1] == 'nn'

    def test_known_sequence(self):
        """ACGTACGTN: two of each base and one N."""
        comp = count_composition("ACGTACGTN")

        assert dict(comp.bases) == {'a': 2, 'c': 2, 'g': 2, 't': 2, 'n': 1}
        assert comp.dibases['ac'] == 2
        assert comp.dibases['cg'] == 2
        assert comp.dibases['gt'] == 2
        assert comp.dibases['ta'] == 1
        assert comp.dibases['tn'] == 1
        assert sum(comp.dibases.values()) == 8

    @pytest.mark.parametrize("sequence", [
        "A",
        "ACGT",
        "NNNNN",
        "acgtnACGTN",
        "ATGCGCGATATTTACGGGCNNA" * 7,
    ])
    def test_counts_sum_to_length(self, sequence):
        comp = count_composition(sequence)

        assert sum(comp.bases.values()) == len(sequence)
        assert sum(comp.dibases.values()) == len(sequence) - 1

    def test_empty_sequence(self):
        comp = count_composition("")

        assert comp.length == 0
        assert all(v == 0 for v in comp.bases.values())
        assert all(v == 0 for v in comp.dibases.values())
        assert set(comp.dibases) == set(DIBASES)

    def test_single_base_has_no_dibases(self):
        comp = count_composition("G")

        assert comp.bases['g'] == 1
        assert sum(comp.dibases.values()) == 0

    def test_case_insensitive(self):
        lower, upper = count_composition("acgt"), count_composition("ACGT")

        assert dict(lower.bases) == dict(upper.bases)
        assert dict(lower.dibases) == dict(upper.dibases)

    def test_unknown_symbols_fold_into_n(self):
        """IUPAC codes and other symbols are counted as N."""
        comp = count_composition("acgRYk")

        assert dict(comp.bases) == {'a': 1, 'c': 1, 'g': 1, 't': 0, 'n': 3}
        assert comp.dibases['gn'] == 1
        assert comp.dibases['nn'] == 2
        assert sum(comp.dibases.values()) == 5

    def test_non_ascii_symbol_counts_once(self):
        comp = count_composition("AéC")

        assert comp.length == 3
        assert comp.bases['n'] == 1

    def test_mappings_are_read_only(self):
        comp = count_composition("ACGT")

        with pytest.raises(TypeError):
            comp.bases['a'] = 10
        with pytest.raises(TypeError):
            comp.dibases['ac'] = 10

    def test_accessors_case_insensitive(self):
        comp = count_composition("CCGG")

        assert comp.base('C') == 2
        assert comp.dibase('CG') == 1


# ---------------------------------------------------------------------------
# Derived statistics
# ---------------------------------------------------------------------------

class TestDerivedMetrics:
    """Proportions, skews and CpG statistics."""

    def test_proportions_sum_to_one(self):
        comp = count_composition("ACGTACGTNRA")
        total = sum(proportion(comp, b) for b in ALPHABET)

        assert total == pytest.approx(1.0)

    def test_prop_gc(self):
        comp = count_composition("ACGTACGTN")

        assert prop_gc(comp) == pytest.approx(4 / 9)

    def test_proportion_empty_is_nan(self):
        comp = count_composition("")

        assert math.isnan(proportion(comp, 'a'))
        assert math.isnan(prop_gc(comp))

    def test_gc_skew(self):
        comp = count_composition("GGGC")

        assert gc_skew(comp) == pytest.approx(0.5)

    def test_at_skew_all_a(self):
        """Ten A's: AT skew is 1, GC skew undefined."""
        comp = count_composition("A" * 10)

        assert at_skew(comp) == 1.0
        assert math.isnan(gc_skew(comp))

    def test_at_skew_undefined(self):
        comp = count_composition("GGCC")

        assert math.isnan(at_skew(comp))

    def test_cpg_count(self):
        comp = count_composition("ACGTACGTN")

        assert cpg_count(comp) == 2

    def test_cpg_count_includes_gc(self):
        comp = count_composition("CGC")

        assert cpg_count(comp) == 2

    def test_cpg_ratio(self):
        """2 CpG / (2 C * 2 G) * (9 - 1 N) = 4."""
        comp = count_composition("ACGTACGTN")

        assert cpg_ratio(comp) == pytest.approx(4.0)

    def test_cpg_ratio_undefined_without_c(self):
        comp = count_composition("GGGAAAT")

        assert math.isnan(cpg_ratio(comp))

    def test_empty_sequence_never_raises(self):
        comp = count_composition("")

        assert math.isnan(gc_skew(comp))
        assert math.isnan(at_skew(comp))
        assert cpg_count(comp) == 0
        assert math.isnan(cpg_ratio(comp))

# ContigWeaver v0.1.0
# Any usage is subject to this software's license.
