"""
Module: builder.layout.hero

Purpose:
    Hero page layout: one enlarged tile in the top-left corner, the other
    images packed into the L-shaped area around it.

Key Functions:
    - plan_hero(): Hero rectangle plus per-remainder image counts
    - allocate_hero(): Full rectangle set for a hero page

Algorithm:
    1. Hero = round(65%) of the columns x round(65%) of the rows, at (0, 0)
    2. Remainder "right": columns hero..C, all rows
       Remainder "below": rows hero..R, hero columns only
    3. N-1 images shared by area, round-half-up, at least one for every
       remainder but the last, which takes whatever is left
    4. Each remainder with a positive share goes to the BSP splitter

Used By:
    - builder.layout.paginator: Cluster pages in hero mode
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Tuple

from catalog_toolkit.common.thresholds import LAYOUT_THRESHOLDS, LayoutThresholds
from catalog_toolkit.common.units import round_half_up
from catalog_toolkit.core.models import GridRect

from .bsp import split_region

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeroPlan:
    """
    Deterministic part of a hero layout.

    Attributes:
        hero: The enlarged tile
        shares: (remainder region, image count) pairs, in allocation order;
            regions with zero area or a non-positive share are omitted

    Example:
        >>> plan = plan_hero(3, 18, 11)
        >>> plan.hero
        GridRect(row=0, col=0, width=2, height=12)
        >>> [count for _, count in plan.shares]
        [6, 4]
    """

    hero: GridRect
    shares: Tuple[Tuple[GridRect, int], ...]

    @property
    def assigned(self) -> int:
        """Images assigned to the remainder regions."""
        return sum(count for _, count in self.shares)


def plan_hero(
    columns: int,
    rows: int,
    count: int,
    thresholds: LayoutThresholds = LAYOUT_THRESHOLDS,
) -> HeroPlan:
    """
    Reserve the hero tile and share the other images between remainders.

    Args:
        columns: Cluster grid columns (>= 1)
        rows: Cluster grid rows (>= 1)
        count: Images on the page, hero included
        thresholds: Heuristic constants

    Returns:
        HeroPlan
    """
    hero_width = max(1, round_half_up(columns * thresholds.hero_fraction))
    hero_height = max(1, round_half_up(rows * thresholds.hero_fraction))
    hero = GridRect(0, 0, hero_width, hero_height)

    remainders: List[GridRect] = []
    if columns - hero_width > 0:
        remainders.append(GridRect(0, hero_width, columns - hero_width, rows))
    if rows - hero_height > 0:
        remainders.append(GridRect(hero_height, 0, hero_width, rows - hero_height))

    to_share = count - 1
    total_area = sum(r.area for r in remainders)

    shares: List[Tuple[GridRect, int]] = []
    assigned = 0
    for i, region in enumerate(remainders):
        if i == len(remainders) - 1:
            share = to_share - assigned
        else:
            proportion = region.area / total_area
            share = max(1, round_half_up(proportion * to_share))
        if share > 0:
            shares.append((region, share))
            assigned += share

    return HeroPlan(hero=hero, shares=tuple(shares))


def allocate_hero(
    columns: int,
    rows: int,
    count: int,
    spread: float,
    rng: random.Random,
    thresholds: LayoutThresholds = LAYOUT_THRESHOLDS,
) -> List[GridRect]:
    """
    Rectangles for a hero page: the hero first, then every sub-split.

    Args:
        columns: Cluster grid columns (>= 1)
        rows: Cluster grid rows (>= 1)
        count: Images on the page (>= 2), hero included
        spread: Cut-ratio spread for the remainder splits
        rng: Random source
        thresholds: Heuristic constants

    Returns:
        Rectangles in absolute page grid coordinates
    """
    plan = plan_hero(columns, rows, count, thresholds)
    rects = [plan.hero]

    for region, share in plan.shares:
        rects.extend(split_region(region, share, spread, rng, thresholds))

    if not plan.shares:
        logger.debug(f"Hero covers the whole {columns}x{rows} grid; no room for other tiles")
    return rects
