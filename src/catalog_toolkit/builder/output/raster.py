"""
Module: builder.output.raster

Purpose:
    Rasterize pages to PNG at a fixed print resolution.
    Page size in mm is converted with pixels = mm / 25.4 * dpi, so the
    output prints at the page's physical size.

Key Functions:
    - render_page_image(): One page as a PIL image
    - export_pages_png(): Write every page to a PNG file

Dependencies:
    - PIL: Image composition
    - builder.images: ImageProvider, cover_crop

Used By:
    - builder.controller: Optional PNG output
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from PIL import Image

from catalog_toolkit.common.path_utils import page_image_filename
from catalog_toolkit.common.thresholds import EXPORT_THRESHOLDS
from catalog_toolkit.common.units import mm_to_px
from catalog_toolkit.core.models import Page
from catalog_toolkit.builder.images import ImageProvider, cover_crop

logger = logging.getLogger(__name__)

PAGE_BACKGROUND = "white"


def render_page_image(
    page: Page,
    provider: ImageProvider,
    *,
    dpi: int = EXPORT_THRESHOLDS.default_dpi,
) -> Image.Image:
    """
    Render one page to an RGB image.

    Tile edges are rounded to whole pixels independently, so adjacent
    tiles meet without gaps or overlaps introduced by rounding.

    Args:
        page: Page to render
        provider: Source of image pixels
        dpi: Output resolution

    Returns:
        RGB image of round(mm / 25.4 * dpi) pixels per side

    Raises:
        ImageNotFoundError: If a tile's image cannot be loaded
        ValueError: If the page size is not positive at this resolution
    """
    width_px = mm_to_px(page.width, dpi)
    height_px = mm_to_px(page.height, dpi)
    if width_px <= 0 or height_px <= 0:
        raise ValueError(f"Page size {page.width}x{page.height} mm is empty at {dpi} dpi")

    canvas = Image.new("RGB", (width_px, height_px), PAGE_BACKGROUND)

    for placement in page.placements:
        left = mm_to_px(placement.x, dpi)
        top = mm_to_px(placement.y, dpi)
        right = mm_to_px(placement.right, dpi)
        bottom = mm_to_px(placement.bottom, dpi)
        if right <= left or bottom <= top:
            logger.warning(f"Skipping {placement.item.name!r}: tile is empty at {dpi} dpi")
            continue

        tile = cover_crop(provider.get_image(placement.item), right - left, bottom - top)
        canvas.paste(tile, (left, top))

    return canvas


def export_pages_png(
    pages: Sequence[Page],
    provider: ImageProvider,
    output_dir: Path,
    *,
    dpi: int = EXPORT_THRESHOLDS.default_dpi,
) -> List[Path]:
    """
    Write every page as ``catalog-page-<n>-<dpi>ppi.png``.

    Args:
        pages: Pages to export
        provider: Source of image pixels
        output_dir: Destination folder (created if missing)
        dpi: Output resolution, also stored in the PNG metadata

    Returns:
        Paths written, in page order
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for number, page in enumerate(pages, start=1):
        path = output_dir / page_image_filename(number, dpi)
        image = render_page_image(page, provider, dpi=dpi)
        image.save(path, format="PNG", dpi=(dpi, dpi))
        written.append(path)
        logger.debug(f"Exported page {number} ({image.width}x{image.height}px) to {path}")

    logger.info(f"Exported {len(written)} pages at {dpi} ppi to {output_dir}")
    return written
