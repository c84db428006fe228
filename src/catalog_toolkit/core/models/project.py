"""
Module: project

Purpose:
    Saved catalog state: the settings used, the generated pages and the
    full list of source images.

Key Classes:
    - Project: Immutable project snapshot

Used By:
    - core.utils.serialization: save_project / load_project
    - builder.controller: Build output
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .items import ImageItem
from .pages import Page
from .settings import CatalogSettings


@dataclass(frozen=True)
class Project:
    """
    Catalog project (immutable).

    Attributes:
        settings: Settings the pages were generated with
        pages: Generated (and possibly swapped) pages
        items: All source images, in input order
    """

    settings: CatalogSettings
    pages: Tuple[Page, ...]
    items: Tuple[ImageItem, ...]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def placed_count(self) -> int:
        """Total number of tiles across all pages."""
        return sum(p.placement_count for p in self.pages)
