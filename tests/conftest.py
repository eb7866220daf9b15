#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigWeaver v0.1.0

Pytest configuration and shared fixtures.

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import gzip

import pytest
from pathlib import Path
import tempfile
import shutil


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="contigweaver_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def simple_fasta():
    """Small assembly: one ORF-bearing contig, one short, one all-N."""
    return (
        ">contig_1 length=18\n"
        "ATGAAACCCGGGTTTTAG\n"
        ">contig_2\n"
        "ACGT\n"
        ">contig_3\n"
        "NNNNNNNNNN\n"
    )


@pytest.fixture
def fasta_file(temp_output_dir, simple_fasta):
    """Write simple_fasta to disk."""
    path = temp_output_dir / "assembly.fa"
    path.write_text(simple_fasta)
    return path


@pytest.fixture
def gzipped_fasta_file(temp_output_dir, simple_fasta):
    """Write simple_fasta to a gzip-compressed file."""
    path = temp_output_dir / "assembly.fa.gz"
    with gzip.open(path, 'wt') as handle:
        handle.write(simple_fasta)
    return path

# ContigWeaver v0.1.0
# Any usage is subject to this software's license.
