"""
Module: builder

Purpose:
    Catalog building pipeline: discovers images, lays them out on pages
    and exports the result.

Key Functions:
    - build_catalog(): Main entry point
    - generate_layout(): Layout only, no I/O

Key Classes:
    - BuildConfig: Configuration for building
    - BuildResult: Build output
    - BuildError: Pipeline failure

Dependencies:
    - PIL: Image loading and rasterization
    - reportlab: PDF output
"""

from .config import BuildConfig
from .layout import generate_layout, generate_grid_layout, generate_cluster_layout
from .controller import build_catalog, BuildResult, BuildError

__all__ = [
    # Config
    "BuildConfig",
    # Layout
    "generate_layout",
    "generate_grid_layout",
    "generate_cluster_layout",
    # Controller
    "build_catalog",
    "BuildResult",
    "BuildError",
]
