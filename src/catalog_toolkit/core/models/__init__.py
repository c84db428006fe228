"""
Core Models Package

Immutable data models shared by the layout engine, the exporters and
project persistence.

All models are frozen dataclasses. Any change (such as swapping two
tiles) creates new instances, so a generated layout can be handed to
several consumers without defensive copies.
"""

from .items import ImageItem
from .rects import GridRect, PlacedRect
from .pages import Page
from .settings import CatalogSettings, LayoutMode, VariationLevel
from .project import Project

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
