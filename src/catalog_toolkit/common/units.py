"""Unit conversion utilities for page coordinates.

Provides shared functions for converting physical page measurements (mm)
to raster pixels and PDF points, plus the half-up rounding used by the
layout engine.
"""

from __future__ import annotations

import math

from .thresholds import EXPORT_THRESHOLDS


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 rounding towards +infinity.

    Python's built-in ``round`` uses banker's rounding; the layout engine
    needs the arithmetic convention so that e.g. a 2.5 cell cut becomes 3.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(1.95)
        2
        >>> round_half_up(-0.5)
        0
    """
    return math.floor(value + 0.5)


def mm_to_px(value_mm: float, dpi: int) -> int:
    """Convert millimetres to whole pixels at the given resolution.

    Examples:
        >>> mm_to_px(210, 300)
        2480
        >>> mm_to_px(25.4, 72)
        72
    """
    return round_half_up(value_mm / EXPORT_THRESHOLDS.mm_per_inch * dpi)


def mm_to_pt(value_mm: float) -> float:
    """Convert millimetres to PDF points (1/72 inch)."""
    return value_mm / EXPORT_THRESHOLDS.mm_per_inch * EXPORT_THRESHOLDS.points_per_inch
