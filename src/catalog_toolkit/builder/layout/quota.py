"""
Module: builder.layout.quota

Purpose:
    Decide how many images a cluster page should hold.

Key Functions:
    - resolve_page_quota(): Tiles to request for the next page
    - default_target(): Automatic target for a grid resolution

Algorithm:
    1. Use the configured target, or max(round(cells / 6), 6) if unset
    2. Allow +2 slack so the splitter is not forced into cramped tiles
    3. Never more than the images left, never fewer than one page's worth
       of what is left, never more than the grid has cells

Used By:
    - builder.layout.paginator: Cluster pagination
"""

from __future__ import annotations

from typing import Optional

from catalog_toolkit.common.thresholds import LAYOUT_THRESHOLDS, LayoutThresholds
from catalog_toolkit.common.units import round_half_up


def default_target(
    columns: int,
    rows: int,
    thresholds: LayoutThresholds = LAYOUT_THRESHOLDS,
) -> int:
    """
    Automatic tiles-per-page target for a cluster grid.

    Example:
        >>> default_target(3, 18)
        9
        >>> default_target(2, 2)
        6
    """
    cells = max(1, columns) * max(1, rows)
    return max(
        round_half_up(cells / thresholds.auto_target_divisor),
        thresholds.auto_target_minimum,
    )


def resolve_page_quota(
    left: int,
    target: Optional[int],
    columns: int,
    rows: int,
    thresholds: LayoutThresholds = LAYOUT_THRESHOLDS,
) -> int:
    """
    Number of images the next cluster page will attempt to place.

    Args:
        left: Images not yet placed
        target: Configured tiles per page (None or 0 = automatic)
        columns: Cluster grid columns (coerced to >= 1)
        rows: Cluster grid rows (coerced to >= 1)
        thresholds: Heuristic constants

    Returns:
        Page quota K, clamped to the grid capacity

    Example:
        >>> resolve_page_quota(20, None, 3, 18)
        11
        >>> resolve_page_quota(5, 12, 3, 18)
        5
    """
    columns = max(1, columns)
    rows = max(1, rows)
    capacity = columns * rows

    effective = target if target else default_target(columns, rows, thresholds)
    quota = min(left, effective + thresholds.target_slack)
    if quota < 1:
        # Negative target: finish the remaining images on this page
        quota = left
    return min(quota, capacity)
