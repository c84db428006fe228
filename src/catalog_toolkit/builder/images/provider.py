"""
Module: builder.images.provider

Purpose:
    Discover source images and load their pixels for export.
    The layout engine works on ImageItems only; pixels are needed once
    pages are rendered.

Key Functions:
    - discover_images(): Supported image files in a folder, as ImageItems

Key Classes:
    - ImageProvider: Abstract base class for image access
    - FileImageProvider: Loads items from disk with Pillow
    - ImageNotFoundError: Exception for missing or unreadable images

Dependencies:
    - PIL: Image loading

Used By:
    - builder.controller: Discovery
    - builder.output: Raster and PDF export
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from PIL import Image, UnidentifiedImageError

from catalog_toolkit.common.path_utils import is_supported_image
from catalog_toolkit.core.models import ImageItem

logger = logging.getLogger(__name__)


class ImageNotFoundError(Exception):
    """Image or image folder not found."""
    pass


def discover_images(folder: Path) -> List[ImageItem]:
    """
    List supported images (JPEG, PNG, TIFF) in ``folder``.

    Only the folder itself is scanned, not sub-folders. Items are sorted
    by file name so repeated runs see the same order.

    Args:
        folder: Directory to scan

    Returns:
        ImageItems in name order (possibly empty)

    Raises:
        ImageNotFoundError: If folder does not exist or is not a directory
    """
    if not folder.is_dir():
        raise ImageNotFoundError(f"Image folder not found: {folder}")

    paths = sorted(
        (p for p in folder.iterdir() if p.is_file() and is_supported_image(p)),
        key=lambda p: p.name,
    )
    if not paths:
        logger.warning(f"No supported images (jpg, png, tif) in {folder}")
    else:
        logger.info(f"Found {len(paths)} images in {folder}")

    return [ImageItem.from_path(p) for p in paths]


class ImageProvider(ABC):
    """
    Abstract interface for accessing image pixels.

    Implementations decide where pixels come from (disk, memory, ...).
    """

    @abstractmethod
    def get_image(self, item: ImageItem) -> Image.Image:
        """
        Get the pixels for an item.

        Args:
            item: Image to load

        Returns:
            PIL Image (callers must not modify it in place)

        Raises:
            ImageNotFoundError: If the image cannot be provided
        """


class FileImageProvider(ImageProvider):
    """
    Provider that reads images from disk.

    Items without a path are looked up by name in ``base_dir``. Nothing
    is retained between calls; every call reads the file again.

    Example:
        >>> provider = FileImageProvider(base_dir=Path("photos"))
        >>> provider.get_image(ImageItem("beach.jpg")).size
        (4000, 3000)
    """

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = base_dir

    def _resolve(self, item: ImageItem) -> Path:
        if item.path is not None:
            return item.path
        if self._base_dir is not None:
            return self._base_dir / item.name
        raise ImageNotFoundError(f"No location known for image {item.name!r}")

    def get_image(self, item: ImageItem) -> Image.Image:
        """Load pixels for an item."""
        path = self._resolve(item)
        if not path.exists():
            raise ImageNotFoundError(f"Image not found: {path}")

        try:
            with Image.open(path) as img:
                img.load()
                return img.copy()
        except (UnidentifiedImageError, OSError) as e:
            raise ImageNotFoundError(f"Cannot read image {path}: {e}") from e
