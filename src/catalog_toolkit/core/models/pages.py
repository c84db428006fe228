"""
Module: pages

Purpose:
    Page model produced by the layout engine. A page is immutable once
    generated; edits such as tile swaps create new Page values.

Key Classes:
    - Page: Physical page size plus ordered tile placements

Dependencies:
    - dataclasses (std)
    - core.models.rects: PlacedRect

Used By:
    - builder.layout.paginator: Creates Pages
    - builder.layout.editing: Tile swaps
    - builder.output: Raster/PDF export
    - core.utils.serialization: Project files
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from .items import ImageItem
from .rects import PlacedRect


@dataclass(frozen=True)
class Page:
    """
    Complete layout of a single page.

    Attributes:
        width: Page width (mm)
        height: Page height (mm)
        placements: Tiles in reading order (row, then column)

    Example:
        >>> page = Page(width=210, height=297, placements=(tile_a, tile_b))
        >>> page.placement_count
        2
    """

    width: float
    height: float
    placements: Tuple[PlacedRect, ...] = ()

    @property
    def placement_count(self) -> int:
        """Number of tiles on this page."""
        return len(self.placements)

    @property
    def items(self) -> Tuple[ImageItem, ...]:
        """Images on this page in placement order."""
        return tuple(p.item for p in self.placements)

    def relative_box(self, index: int) -> Tuple[float, float, float, float]:
        """
        Tile position as fractions of the page size.

        Viewers scale these to whatever on-screen size the page is shown at.

        Args:
            index: Placement index

        Returns:
            (left, top, width, height), each relative to page width/height
        """
        p = self.placements[index]
        return (
            p.x / self.width,
            p.y / self.height,
            p.width / self.width,
            p.height / self.height,
        )

    def with_placements(self, placements: Tuple[PlacedRect, ...]) -> Page:
        """Return a copy of the page holding ``placements``."""
        return replace(self, placements=tuple(placements))
