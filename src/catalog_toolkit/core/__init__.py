"""
Image Catalog Core Package

Shared data models, validation and serialization used by the layout
builder and the exporters.
"""

from .models import (
    ImageItem,
    GridRect,
    PlacedRect,
    Page,
    CatalogSettings,
    LayoutMode,
    VariationLevel,
    Project,
)

__all__ = [
    "ImageItem",
    "GridRect",
    "PlacedRect",
    "Page",
    "CatalogSettings",
    "LayoutMode",
    "VariationLevel",
    "Project",
]
