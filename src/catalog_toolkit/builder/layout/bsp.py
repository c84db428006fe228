"""
Module: builder.layout.bsp

Purpose:
    Binary space partitioning of a grid region into a requested number
    of tiles with controllable size variation.

Key Functions:
    - split_region(): Partition a region into (at most) K rectangles

Algorithm:
    Growth phase - worklist of rectangles, starting with the region:
    1. Take the largest rectangle (first one wins ties)
    2. Cut across its longer side (random axis for squares)
    3. Cut position = extent * (0.5 +/- spread/2), clamped to [1, extent-1]
    4. Nudge cuts that would leave a 1-cell sliver next to a long run
    5. Stop when K rectangles exist, a split fails, or 500 splits happened

    Shrink phase - while there are more than K rectangles, merge the
    smallest one into a neighbour sharing a full edge. If it has none the
    phase stops and the extra rectangle stays.

Determinism:
    All randomness comes from the ``rng`` argument. Two runs with equal
    inputs and equally seeded generators produce identical output.

Used By:
    - builder.layout.hero: Remainder regions
    - builder.layout.paginator: Cluster pages
"""

from __future__ import annotations

import logging
import math
import random
from typing import List, Optional, Tuple

from catalog_toolkit.common.thresholds import LAYOUT_THRESHOLDS, LayoutThresholds
from catalog_toolkit.common.units import round_half_up
from catalog_toolkit.core.models import GridRect

logger = logging.getLogger(__name__)


def split_region(
    region: GridRect,
    count: int,
    spread: float,
    rng: random.Random,
    thresholds: LayoutThresholds = LAYOUT_THRESHOLDS,
) -> List[GridRect]:
    """
    Partition ``region`` into ``count`` non-overlapping rectangles.

    The result covers every cell of the region exactly once. If the
    region cannot be split far enough (e.g. more tiles requested than it
    has cells) fewer rectangles are returned; this is not an error.

    Args:
        region: Region to split, in absolute page grid coordinates
        count: Requested number of rectangles (K)
        spread: Cut-ratio spread, see VariationLevel.spread()
        rng: Random source for cut positions and square-axis choice
        thresholds: Heuristic constants

    Returns:
        Rectangles in absolute page grid coordinates, in worklist order
        (callers sort them for reading order)

    Example:
        >>> rects = split_region(GridRect(0, 0, 3, 18), 11, 0.27, random.Random(1))
        >>> sum(r.area for r in rects)
        54
    """
    if count <= 0:
        return []
    if count == 1:
        return [region]

    # Work in coordinates relative to the region origin
    rects: List[GridRect] = [GridRect(0, 0, region.width, region.height)]

    splits = 0
    while len(rects) < count and splits < thresholds.max_split_iterations:
        index = _largest_index(rects)
        candidate = rects.pop(index)

        children = _split_rect(candidate, region, spread, rng, thresholds)
        if children is None:
            rects.append(candidate)
            logger.warning(
                f"Cannot split {candidate.width}x{candidate.height} rect; "
                f"stopping at {len(rects)} of {count} tiles"
            )
            break

        rects.extend(children)
        splits += 1

    while len(rects) > count:
        if not _merge_smallest(rects):
            logger.warning(f"No mergeable neighbour; keeping {len(rects)} tiles for {count} requested")
            break

    return [r.translated(region.row, region.col) for r in rects]


def _largest_index(rects: List[GridRect]) -> int:
    """Index of the largest rectangle; the first wins ties."""
    best_index = 0
    best_area = rects[0].area
    for i, rect in enumerate(rects[1:], start=1):
        if rect.area > best_area:
            best_index = i
            best_area = rect.area
    return best_index


def _split_rect(
    rect: GridRect,
    region: GridRect,
    spread: float,
    rng: random.Random,
    thresholds: LayoutThresholds,
) -> Optional[Tuple[GridRect, GridRect]]:
    """
    Split one rectangle across its longer side.

    Returns:
        The two children, or None if the rectangle cannot be split
    """
    if rect.width > rect.height:
        vertical = True
    elif rect.height > rect.width:
        vertical = False
    else:
        vertical = rng.random() < 0.5

    if vertical:
        cut = _choose_cut(rect.width, rect.height, region.height, spread, rng, thresholds)
        return rect.split_columns(cut) if cut is not None else None

    cut = _choose_cut(rect.height, rect.width, region.width, spread, rng, thresholds)
    return rect.split_rows(cut) if cut is not None else None


def _choose_cut(
    extent: int,
    run: int,
    region_run: int,
    spread: float,
    rng: random.Random,
    thresholds: LayoutThresholds,
) -> Optional[int]:
    """
    Pick a cut position along ``extent``.

    Args:
        extent: Length of the side being cut
        run: Length of the perpendicular side (the length of the cut line)
        region_run: Perpendicular side of the whole region being split
        spread: Cut-ratio spread
        rng: Random source
        thresholds: Heuristic constants

    Returns:
        Cells before the cut, in [1, extent - 1], or None if no cut fits
    """
    if extent < 2:
        return None

    cut = round_half_up(extent * (0.5 + (rng.random() - 0.5) * spread))
    cut = max(1, min(extent - 1, cut))

    # A 1-cell slice along a long run reads as a thin strip on the page
    long_run = run > math.ceil(region_run * thresholds.sliver_run_ratio)
    if long_run and cut == 1:
        cut = thresholds.min_slice
    if long_run and extent - cut == 1:
        cut = max(thresholds.min_slice, cut - 1)

    if cut >= extent:
        cut = extent - 1
    if cut < 1:
        return None
    return cut


def _merge_smallest(rects: List[GridRect]) -> bool:
    """
    Merge the smallest rectangle into its first full-edge neighbour.

    Mutates ``rects`` in place.

    Returns:
        False if the smallest rectangle has no mergeable neighbour
    """
    rects.sort(key=lambda r: r.area)
    smallest = rects.pop(0)

    for i, other in enumerate(rects):
        merged = smallest.merge(other)
        if merged is not None:
            del rects[i]
            rects.append(merged)
            return True

    rects.append(smallest)
    return False
