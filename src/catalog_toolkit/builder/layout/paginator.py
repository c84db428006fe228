"""
Module: builder.layout.paginator

Purpose:
    Arrange images onto pages. Two strategies:
    - GRID: uniform tiles, every page filled to capacity
    - CLUSTER: varied tile sizes from a binary space partition

Key Functions:
    - generate_layout(): Dispatch on settings.mode
    - generate_grid_layout(): Uniform grid pagination
    - generate_cluster_layout(): Collage pagination

Algorithm (cluster):
    Loop until all images are placed:
    1. Quota resolver picks K for this page
    2. Hero allocator (hero mode, K > 1) or BSP splitter on the full grid
    3. Rectangles sorted into reading order, mapped to mm, bound to images

Dependencies:
    - builder.layout.quota, bsp, hero, geometry
    - core.models: CatalogSettings, GridRect, ImageItem, Page

Used By:
    - builder.controller: Main build controller
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from catalog_toolkit.common.thresholds import LAYOUT_THRESHOLDS, LayoutThresholds
from catalog_toolkit.core.models import CatalogSettings, GridRect, ImageItem, LayoutMode, Page

from .bsp import split_region
from .geometry import CellMetrics, map_to_page
from .hero import allocate_hero
from .quota import resolve_page_quota

logger = logging.getLogger(__name__)


def generate_layout(
    items: Sequence[ImageItem],
    settings: CatalogSettings,
    rng: Optional[random.Random] = None,
) -> List[Page]:
    """
    Lay out ``items`` with the strategy selected by ``settings.mode``.

    Args:
        items: Images in input order
        settings: Catalog settings
        rng: Random source for cluster mode (ignored for grid mode)

    Returns:
        Pages in order
    """
    if settings.mode is LayoutMode.GRID:
        return generate_grid_layout(items, settings)
    return generate_cluster_layout(items, settings, rng)


def generate_grid_layout(
    items: Sequence[ImageItem],
    settings: CatalogSettings,
) -> List[Page]:
    """
    Place images on a uniform columns x rows grid.

    Images are consumed strictly in input order, filling each page
    row-major. Every page except possibly the last holds exactly
    columns * rows images; tile size is the same on every page.

    Args:
        items: Images in input order
        settings: Catalog settings (grid_columns, grid_rows, grid_gap)

    Returns:
        Pages in order (empty list for no images)

    Example:
        >>> settings = CatalogSettings(mode=LayoutMode.GRID, grid_columns=3, grid_rows=2)
        >>> [p.placement_count for p in generate_grid_layout(items[:10], settings)]
        [6, 4]
    """
    columns, rows = settings.grid_shape
    metrics = CellMetrics.for_grid(settings, columns, rows, settings.grid_gap)
    capacity = columns * rows

    pages: List[Page] = []
    for start in range(0, len(items), capacity):
        page_items = items[start:start + capacity]
        cells = [GridRect(i // columns, i % columns, 1, 1) for i in range(len(page_items))]
        placements = map_to_page(cells, metrics, page_items)
        pages.append(Page(
            width=settings.page_width,
            height=settings.page_height,
            placements=tuple(placements),
        ))

    logger.info(f"Grid layout: {len(items)} images on {len(pages)} pages ({columns}x{rows})")
    return pages


def generate_cluster_layout(
    items: Sequence[ImageItem],
    settings: CatalogSettings,
    rng: Optional[random.Random] = None,
    thresholds: LayoutThresholds = LAYOUT_THRESHOLDS,
) -> List[Page]:
    """
    Place images as a collage of varied tile sizes.

    A page may end up with fewer tiles than its quota (the partition could
    not be refined further) or, rarely, one more (an undersized rectangle
    had no neighbour to merge with). Extra tiles take the next images in
    the list; callers must not assume a fixed count per page.

    Args:
        items: Images in input order
        settings: Catalog settings (cluster_* fields, target_per_page,
            variation, hero_mode)
        rng: Random source; defaults to ``random.Random(settings.seed)``
        thresholds: Heuristic constants

    Returns:
        Pages in order (empty list for no images)
    """
    if rng is None:
        rng = random.Random(settings.seed)

    columns, rows = settings.cluster_shape
    metrics = CellMetrics.for_grid(settings, columns, rows, settings.cluster_gap)
    spread = settings.variation.spread(thresholds)
    full_grid = GridRect(0, 0, columns, rows)

    pages: List[Page] = []
    index = 0
    while index < len(items):
        left = len(items) - index
        quota = resolve_page_quota(left, settings.target_per_page, columns, rows, thresholds)
        page_count = min(quota, left)

        if settings.hero_mode and page_count > 1:
            rects = allocate_hero(columns, rows, page_count, spread, rng, thresholds)
        else:
            rects = split_region(full_grid, page_count, spread, rng, thresholds)

        placements = map_to_page(rects, metrics, items[index:index + len(rects)])
        index += len(placements)

        if len(placements) != page_count:
            logger.warning(
                f"Page {len(pages) + 1}: placed {len(placements)} tiles for quota {page_count}"
            )

        pages.append(Page(
            width=settings.page_width,
            height=settings.page_height,
            placements=tuple(placements),
        ))

    logger.info(
        f"Cluster layout: {len(items)} images on {len(pages)} pages "
        f"({columns}x{rows} grid, {settings.variation.value} variation"
        f"{', hero' if settings.hero_mode else ''})"
    )
    return pages
