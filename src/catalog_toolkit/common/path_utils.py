"""Path and filename utilities.

Provides shared functions for recognising supported image files and
naming the files written by the export stages.
"""

from __future__ import annotations

import re
from datetime import date
from pathlib import Path
from typing import Optional

SUPPORTED_IMAGE_PATTERN = re.compile(r"\.(jpe?g|png|tiff?)$", re.IGNORECASE)
PROJECT_SUFFIX = ".bkg"


def is_supported_image(filename: str | Path) -> bool:
    """Check whether a filename has a supported image extension.

    Examples:
        >>> is_supported_image("holiday.JPG")
        True
        >>> is_supported_image(Path("/scans/page.tif"))
        True
        >>> is_supported_image("notes.txt")
        False
    """
    if isinstance(filename, Path):
        filename = filename.name
    return SUPPORTED_IMAGE_PATTERN.search(filename) is not None


def page_image_filename(page_number: int, dpi: int) -> str:
    """Filename for a rasterized page (1-based page number).

    Examples:
        >>> page_image_filename(1, 300)
        'catalog-page-1-300ppi.png'
    """
    return f"catalog-page-{page_number}-{dpi}ppi.png"


def project_filename(on: Optional[date] = None) -> str:
    """Default project filename stamped with the given (or today's) date.

    Examples:
        >>> project_filename(date(2024, 3, 9))
        'catalog-project-2024-03-09.bkg'
    """
    stamp = (on or date.today()).isoformat()
    return f"catalog-project-{stamp}{PROJECT_SUFFIX}"
