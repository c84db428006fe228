"""
Module: builder.layout

Purpose:
    Page layout for image catalogs.
    Converts an ordered list of images into positioned page layouts.

Key Functions:
    - generate_layout(): Main entry point, dispatches on settings.mode
    - generate_grid_layout(): Uniform grid pages
    - generate_cluster_layout(): Collage pages
    - split_region(): BSP partition of a grid region
    - allocate_hero(): Hero tile plus surrounding partitions
    - resolve_page_quota(): Images per cluster page
    - swap_items(): Exchange two tiles' images

Key Classes:
    - CellMetrics: Grid cell to page geometry
    - HeroPlan: Hero tile and remainder shares

Dependencies:
    - catalog_toolkit.core.models: CatalogSettings, GridRect, Page

Used By:
    - builder.controller: Main build controller
    - cli: Command line interface
"""

from .quota import resolve_page_quota, default_target
from .bsp import split_region
from .hero import HeroPlan, plan_hero, allocate_hero
from .geometry import CellMetrics, map_to_page, reading_order
from .paginator import generate_layout, generate_grid_layout, generate_cluster_layout
from .editing import swap_items

__all__ = [
    # Quota
    "resolve_page_quota",
    "default_target",
    # Partitioning
    "split_region",
    "HeroPlan",
    "plan_hero",
    "allocate_hero",
    # Geometry
    "CellMetrics",
    "map_to_page",
    "reading_order",
    # Pagination
    "generate_layout",
    "generate_grid_layout",
    "generate_cluster_layout",
    # Editing
    "swap_items",
]
