"""
Module: rects

Purpose:
    Provides the two rectangle types of the layout engine:
    GridRect - a region of the abstract cluster grid (integer cells)
    PlacedRect - a tile positioned on a physical page (mm) with its image

Key Functions:
    - GridRect.split_columns(cut) / split_rows(cut): Binary split
    - GridRect.merge(other): Join two rectangles sharing a full edge
    - GridRect.translated(rows, cols): Shift into another coordinate frame
    - PlacedRect.with_item(item): Copy bound to a different image

Dependencies:
    - dataclasses (std)
    - core.models.items: ImageItem

Used By:
    - builder.layout.bsp: Region splitting
    - builder.layout.hero: Hero allocation
    - builder.layout.geometry: Grid to page mapping
    - core.models.pages.Page
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Optional, Tuple

from .items import ImageItem


@dataclass(frozen=True, slots=True)
class GridRect:
    """
    Rectangle on the abstract layout grid, in whole cells.

    The region covers rows [row, row + height) and columns
    [col, col + width). Coordinates are either relative to a region
    being split or absolute on the page grid; the type does not care.

    Attributes:
        row: Top row index
        col: Left column index
        width: Number of columns spanned
        height: Number of rows spanned

    Invariants:
        - row >= 0, col >= 0
        - width >= 1, height >= 1

    Example:
        >>> rect = GridRect(row=0, col=0, width=3, height=2)
        >>> rect.area
        6
        >>> rect.split_columns(1)
        (GridRect(row=0, col=0, width=1, height=2), GridRect(row=0, col=1, width=2, height=2))
    """

    row: int
    col: int
    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate rectangle on construction."""
        if self.row < 0:
            raise ValueError(f"row must be >= 0: {self.row}")
        if self.col < 0:
            raise ValueError(f"col must be >= 0: {self.col}")
        if self.width < 1:
            raise ValueError(f"width must be >= 1: {self.width}")
        if self.height < 1:
            raise ValueError(f"height must be >= 1: {self.height}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def area(self) -> int:
        """Number of grid cells covered."""
        return self.width * self.height

    @property
    def bottom(self) -> int:
        """First row below the rectangle (exclusive)."""
        return self.row + self.height

    @property
    def right(self) -> int:
        """First column right of the rectangle (exclusive)."""
        return self.col + self.width

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield every (row, col) cell covered, row-major."""
        for r in range(self.row, self.bottom):
            for c in range(self.col, self.right):
                yield (r, c)

    # ─────────────────────────────────────────────────────────────────────────
    # Transformations
    # ─────────────────────────────────────────────────────────────────────────

    def translated(self, rows: int, cols: int) -> GridRect:
        """Return the same rectangle shifted by (rows, cols)."""
        return GridRect(self.row + rows, self.col + cols, self.width, self.height)

    def split_columns(self, cut: int) -> Tuple[GridRect, GridRect]:
        """
        Split with a vertical cut after ``cut`` columns.

        The left child keeps the origin; the right child starts at
        ``col + cut``.

        Raises:
            ValueError: If cut is not within [1, width - 1]
        """
        if not 1 <= cut < self.width:
            raise ValueError(f"cut {cut} outside [1, {self.width - 1}]")
        return (
            GridRect(self.row, self.col, cut, self.height),
            GridRect(self.row, self.col + cut, self.width - cut, self.height),
        )

    def split_rows(self, cut: int) -> Tuple[GridRect, GridRect]:
        """
        Split with a horizontal cut after ``cut`` rows.

        Raises:
            ValueError: If cut is not within [1, height - 1]
        """
        if not 1 <= cut < self.height:
            raise ValueError(f"cut {cut} outside [1, {self.height - 1}]")
        return (
            GridRect(self.row, self.col, self.width, cut),
            GridRect(self.row + cut, self.col, self.width, self.height - cut),
        )

    def merge(self, other: GridRect) -> Optional[GridRect]:
        """
        Merge with a neighbour that shares a full edge.

        Side-by-side neighbours must have identical row and height;
        stacked neighbours identical col and width.

        Returns:
            The spanning rectangle, or None if the two do not share a full edge
        """
        if (
            self.row == other.row
            and self.height == other.height
            and (self.right == other.col or other.right == self.col)
        ):
            return GridRect(self.row, min(self.col, other.col), self.width + other.width, self.height)
        if (
            self.col == other.col
            and self.width == other.width
            and (self.bottom == other.row or other.bottom == self.row)
        ):
            return GridRect(min(self.row, other.row), self.col, self.width, self.height + other.height)
        return None


@dataclass(frozen=True, slots=True)
class PlacedRect:
    """
    A tile positioned on a page in physical units (mm).

    Coordinates are measured from the page's top-left corner.
    No validation is performed: degenerate settings (margins larger than
    the page, NaN sizes) are carried through as-is.

    Attributes:
        x: Left edge
        y: Top edge
        width: Tile width
        height: Tile height
        item: Image bound to this tile
    """

    x: float
    y: float
    width: float
    height: float
    item: ImageItem

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def with_item(self, item: ImageItem) -> PlacedRect:
        """Return a copy with the same geometry bound to ``item``."""
        return replace(self, item=item)
