"""
Module: builder.output.renderer

Purpose:
    Render pages to a PDF using ReportLab.
    Each Page becomes one PDF page at its physical size, with every tile
    cover-cropped into its rectangle.

Key Functions:
    - render_to_pdf(): Main rendering function

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
    - builder.images: ImageProvider, cover_crop

Used By:
    - builder.controller: Optional PDF output
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from catalog_toolkit.common.thresholds import EXPORT_THRESHOLDS
from catalog_toolkit.common.units import mm_to_pt, mm_to_px
from catalog_toolkit.core.models import Page, PlacedRect
from catalog_toolkit.builder.images import ImageProvider, cover_crop

logger = logging.getLogger(__name__)


def render_to_pdf(
    pages: Sequence[Page],
    provider: ImageProvider,
    output_path: Path,
    *,
    dpi: int = EXPORT_THRESHOLDS.default_dpi,
) -> Path:
    """
    Render pages to a PDF file.

    Tile images are resampled to ``dpi`` at their printed size before
    embedding, which keeps file size proportional to the output rather
    than to the source photos.

    Args:
        pages: Pages to render
        provider: Source of image pixels
        output_path: Path to write PDF
        dpi: Resolution of embedded tile images

    Returns:
        The path written

    Raises:
        ImageNotFoundError: If a tile's image cannot be loaded
        IOError: If PDF cannot be written

    Example:
        >>> render_to_pdf(pages, FileImageProvider(), Path("out/catalog.pdf"))
    """
    if not pages:
        logger.warning("No pages, creating empty PDF")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    c = canvas.Canvas(str(output_path))
    for page in pages:
        page_width_pt = mm_to_pt(page.width)
        page_height_pt = mm_to_pt(page.height)
        c.setPageSize((page_width_pt, page_height_pt))

        for placement in page.placements:
            _draw_tile(c, placement, provider, dpi, page_height_pt)
        c.showPage()

    c.save()

    logger.info(f"Rendered {len(pages)} pages to {output_path}")
    return output_path


def _draw_tile(
    c: canvas.Canvas,
    placement: PlacedRect,
    provider: ImageProvider,
    dpi: int,
    page_height_pt: float,
) -> None:
    """
    Draw one tile.

    PDF y runs upwards from the bottom edge; page coordinates run
    downwards from the top, hence the flip.
    """
    width_px = mm_to_px(placement.width, dpi)
    height_px = mm_to_px(placement.height, dpi)
    if width_px <= 0 or height_px <= 0:
        logger.warning(f"Skipping {placement.item.name!r}: tile is empty at {dpi} dpi")
        return

    tile = cover_crop(provider.get_image(placement.item), width_px, height_px)

    x_pt = mm_to_pt(placement.x)
    y_pt = page_height_pt - mm_to_pt(placement.bottom)
    c.drawImage(
        ImageReader(tile),
        x_pt,
        y_pt,
        width=mm_to_pt(placement.width),
        height=mm_to_pt(placement.height),
    )
