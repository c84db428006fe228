"""
Module: builder.layout.geometry

Purpose:
    Convert grid rectangles into physical tile positions on a page and
    bind them to images.

Key Classes:
    - CellMetrics: Physical size of one grid cell plus the content origin

Key Functions:
    - reading_order(): Sort rectangles by row, then column
    - map_to_page(): Place and bind rectangles

Used By:
    - builder.layout.paginator: Grid and cluster pages
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from catalog_toolkit.core.models import CatalogSettings, GridRect, ImageItem, PlacedRect


@dataclass(frozen=True)
class CellMetrics:
    """
    Physical geometry of a page grid.

    Attributes:
        origin_x: Left edge of the content area (inner margin)
        origin_y: Top edge of the content area (top margin)
        cell_width: Width of one grid column
        cell_height: Height of one grid row
        gap: Space between neighbouring cells

    Example:
        >>> metrics = CellMetrics.for_grid(CatalogSettings(
        ...     page_width=100, page_height=100, margin_top=0, margin_bottom=0,
        ...     margin_inner=0, margin_outer=0), columns=4, rows=2, gap=0)
        >>> metrics.cell_width, metrics.cell_height
        (25.0, 50.0)
    """

    origin_x: float
    origin_y: float
    cell_width: float
    cell_height: float
    gap: float

    @classmethod
    def for_grid(
        cls,
        settings: CatalogSettings,
        columns: int,
        rows: int,
        gap: float,
    ) -> CellMetrics:
        """
        Divide the settings' content area into ``columns`` x ``rows`` cells.

        Gaps are subtracted before dividing, so ``columns`` cells and
        ``columns - 1`` gaps exactly span the content width.
        """
        return cls(
            origin_x=settings.margin_inner,
            origin_y=settings.margin_top,
            cell_width=(settings.content_width - (columns - 1) * gap) / columns,
            cell_height=(settings.content_height - (rows - 1) * gap) / rows,
            gap=gap,
        )

    def place(self, rect: GridRect) -> Tuple[float, float, float, float]:
        """
        Physical (x, y, width, height) of a grid rectangle.

        A rectangle spanning n cells also spans the n - 1 gaps between them.
        """
        x = self.origin_x + rect.col * (self.cell_width + self.gap)
        y = self.origin_y + rect.row * (self.cell_height + self.gap)
        width = rect.width * self.cell_width + (rect.width - 1) * self.gap
        height = rect.height * self.cell_height + (rect.height - 1) * self.gap
        return (x, y, width, height)


def reading_order(rects: Iterable[GridRect]) -> List[GridRect]:
    """Sort rectangles top to bottom, then left to right."""
    return sorted(rects, key=lambda r: (r.row, r.col))


def map_to_page(
    rects: Iterable[GridRect],
    metrics: CellMetrics,
    items: Sequence[ImageItem],
) -> List[PlacedRect]:
    """
    Place rectangles on the page and bind them to images.

    Rectangles are put in reading order first; the i-th rectangle gets
    the i-th item. Rectangles beyond the last item are left out.

    Args:
        rects: Grid rectangles (any order)
        metrics: Page grid geometry
        items: Images for this page, in input order

    Returns:
        Placed tiles, at most ``len(items)`` of them
    """
    placements: List[PlacedRect] = []
    for rect, item in zip(reading_order(rects), items):
        x, y, width, height = metrics.place(rect)
        placements.append(PlacedRect(x=x, y=y, width=width, height=height, item=item))
    return placements
