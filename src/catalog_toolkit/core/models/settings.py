"""
Module: settings

Purpose:
    Catalog settings - page geometry, layout mode and the per-mode
    options of the grid and cluster strategies.

Key Classes:
    - LayoutMode: GRID or CLUSTER
    - VariationLevel: Size variation of cluster tiles
    - CatalogSettings: Immutable settings consumed by the layout engine

Dependencies:
    - dataclasses (std)
    - enum (std)
    - common.thresholds: Spread per variation level

Used By:
    - builder.layout.paginator: Layout generation
    - core.utils.serialization: Project files
    - cli: Command line flags

Design Notes:
    Settings are NOT validated on construction. The layout engine coerces
    column/row counts below 1 and lets other pathological values flow into
    the geometry. Strict checks live in core.schemas.validator and are run
    wherever settings cross a boundary (file import, CLI).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from catalog_toolkit.common.thresholds import LAYOUT_THRESHOLDS, LayoutThresholds


class LayoutMode(Enum):
    """
    Layout strategy.

    Attributes:
        GRID: Uniform columns x rows tiles, strict capacity pagination
        CLUSTER: Collage of varied tile sizes from a fine grid
    """

    GRID = "grid"
    CLUSTER = "cluster"


class VariationLevel(Enum):
    """
    How far cluster cuts may stray from the middle of a rectangle.

    Example:
        >>> VariationLevel.MEDIUM.spread()
        0.27
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    def spread(self, thresholds: LayoutThresholds = LAYOUT_THRESHOLDS) -> float:
        """Cut-ratio spread for this level."""
        if self is VariationLevel.LOW:
            return thresholds.spread_low
        if self is VariationLevel.HIGH:
            return thresholds.spread_high
        return thresholds.spread_medium


@dataclass(frozen=True)
class CatalogSettings:
    """
    Settings for catalog generation (immutable).

    Lengths are in millimetres. Defaults describe an A4 portrait page
    with a medium-variation cluster layout.

    Attributes:
        page_width: Page width
        page_height: Page height
        margin_top: Top margin
        margin_bottom: Bottom margin
        margin_inner: Inner (left) margin, the x origin of the content area
        margin_outer: Outer (right) margin
        mode: Layout strategy
        grid_columns: Tiles per row in GRID mode
        grid_rows: Tile rows per page in GRID mode
        grid_gap: Gap between tiles in GRID mode
        cluster_columns: Columns of the fine grid in CLUSTER mode
        cluster_rows: Rows of the fine grid in CLUSTER mode
        cluster_gap: Gap between grid cells in CLUSTER mode
        target_per_page: Desired tiles per page (None = automatic)
        variation: Tile size variation in CLUSTER mode
        hero_mode: Enlarge the first tile of each cluster page
        seed: Random seed for reproducible cluster layouts (None = random)

    Example:
        >>> settings = CatalogSettings(page_width=100, page_height=100)
        >>> settings.content_width
        70
    """

    # Document
    page_width: float = 210
    page_height: float = 297
    margin_top: float = 15
    margin_bottom: float = 15
    margin_inner: float = 15
    margin_outer: float = 15

    # Mode
    mode: LayoutMode = LayoutMode.CLUSTER

    # Grid options
    grid_columns: int = 3
    grid_rows: int = 5
    grid_gap: float = 4

    # Cluster options
    cluster_columns: int = 3
    cluster_rows: int = 18
    cluster_gap: float = 6
    target_per_page: Optional[int] = 12
    variation: VariationLevel = VariationLevel.MEDIUM
    hero_mode: bool = False

    # Reproducibility
    seed: Optional[int] = None

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def content_width(self) -> float:
        """Width available for tiles (excluding margins)."""
        return self.page_width - self.margin_inner - self.margin_outer

    @property
    def content_height(self) -> float:
        """Height available for tiles (excluding margins)."""
        return self.page_height - self.margin_top - self.margin_bottom

    @property
    def grid_shape(self) -> Tuple[int, int]:
        """GRID mode (columns, rows), each coerced to at least 1."""
        return (max(1, self.grid_columns), max(1, self.grid_rows))

    @property
    def cluster_shape(self) -> Tuple[int, int]:
        """CLUSTER mode (columns, rows), each coerced to at least 1."""
        return (max(1, self.cluster_columns), max(1, self.cluster_rows))
