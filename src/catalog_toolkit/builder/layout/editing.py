"""
Module: builder.layout.editing

Purpose:
    Post-generation edits of a layout. Tile geometry is fixed once a
    layout is generated; edits only move images between tiles.

Key Functions:
    - swap_items(): Exchange the images of two tiles on one page

Used By:
    - builder.controller: --swap edits of a saved project
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from catalog_toolkit.core.models import Page

logger = logging.getLogger(__name__)


def swap_items(
    pages: Sequence[Page],
    page_index: int,
    source_index: int,
    target_index: int,
) -> List[Page]:
    """
    Exchange the images bound to two tiles of the same page.

    The input pages are not modified; a new list is returned in which only
    the affected page is replaced. Swapping a tile with itself returns an
    equal layout.

    Args:
        pages: Current layout
        page_index: Page holding both tiles
        source_index: First tile (placement index)
        target_index: Second tile (placement index)

    Returns:
        New list of pages

    Raises:
        IndexError: If any index is out of range (negative indices included)

    Example:
        >>> swapped = swap_items(pages, 0, 0, 3)
        >>> swapped[0].placements[0].item == pages[0].placements[3].item
        True
    """
    if not 0 <= page_index < len(pages):
        raise IndexError(f"page index {page_index} out of range (0..{len(pages) - 1})")

    page = pages[page_index]
    for index in (source_index, target_index):
        if not 0 <= index < page.placement_count:
            raise IndexError(
                f"tile index {index} out of range on page {page_index} "
                f"(0..{page.placement_count - 1})"
            )

    placements = list(page.placements)
    source = placements[source_index]
    target = placements[target_index]
    placements[source_index] = source.with_item(target.item)
    placements[target_index] = target.with_item(source.item)

    updated = list(pages)
    updated[page_index] = page.with_placements(tuple(placements))

    logger.debug(
        f"Swapped {source.item.name!r} and {target.item.name!r} on page {page_index + 1}"
    )
    return updated
