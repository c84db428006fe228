"""Centralized threshold and magic number configuration.

This module contains the heuristic constants used by the layout engine.
Keeping them in one place makes tuning easier and documents what each
value controls.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutThresholds:
    """Thresholds for cluster layout partitioning."""

    # Cut-ratio spread per variation level (fraction of the extent)
    spread_low: float = 0.12
    spread_medium: float = 0.27
    spread_high: float = 0.42

    # Sliver correction
    sliver_run_ratio: float = 0.6  # Perpendicular run (of region) that counts as "long"
    min_slice: int = 2  # Minimum slice width next to a long run

    # Growth phase guard
    max_split_iterations: int = 500

    # Hero tile
    hero_fraction: float = 0.65  # Share of columns/rows the hero occupies

    # Quota resolution
    auto_target_divisor: int = 6  # Grid cells per automatic tile
    auto_target_minimum: int = 6  # Floor for the automatic target
    target_slack: int = 2  # Extra tiles allowed over the target


@dataclass(frozen=True)
class ExportThresholds:
    """Thresholds for raster and PDF export."""

    default_dpi: int = 300
    mm_per_inch: float = 25.4
    points_per_inch: float = 72.0


# Global instances for easy import
LAYOUT_THRESHOLDS = LayoutThresholds()
EXPORT_THRESHOLDS = ExportThresholds()
