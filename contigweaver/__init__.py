#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigWeaver v0.1.0

Package initialization and version metadata.

Author: ContigWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .version import __version__


class ContigWeaverError(Exception):
    """Base class for ContigWeaver errors."""
    pass


__all__ = ["__version__", "ContigWeaverError"]

# ContigWeaver v0.1.0
# Any usage is subject to this software's license.
