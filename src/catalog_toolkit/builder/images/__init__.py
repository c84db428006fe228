"""
Module: builder.images

Purpose:
    Image discovery, loading and tile fitting.
"""

from .provider import (
    ImageProvider,
    FileImageProvider,
    ImageNotFoundError,
    discover_images,
)
from .cropper import cover_crop

__all__ = [
    "ImageProvider",
    "FileImageProvider",
    "ImageNotFoundError",
    "discover_images",
    "cover_crop",
]
