"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .thresholds import (
    LayoutThresholds,
    ExportThresholds,
    LAYOUT_THRESHOLDS,
    EXPORT_THRESHOLDS,
)
from .units import round_half_up, mm_to_px, mm_to_pt
from .path_utils import (
    is_supported_image,
    page_image_filename,
    project_filename,
    PROJECT_SUFFIX,
)

__all__ = [
    # thresholds
    "LayoutThresholds",
    "ExportThresholds",
    "LAYOUT_THRESHOLDS",
    "EXPORT_THRESHOLDS",
    # units
    "round_half_up",
    "mm_to_px",
    "mm_to_pt",
    # paths
    "is_supported_image",
    "page_image_filename",
    "project_filename",
    "PROJECT_SUFFIX",
]
