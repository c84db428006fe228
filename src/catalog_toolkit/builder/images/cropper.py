"""
Module: builder.images.cropper

Purpose:
    Fit a source image into a tile: scale until the tile is covered,
    then crop the overflow evenly from both sides.

Key Functions:
    - cover_crop(): Cover-fit an image to an exact pixel size

Dependencies:
    - PIL: Image manipulation

Used By:
    - builder.output.raster: PNG export
    - builder.output.renderer: PDF export
"""

from __future__ import annotations

from PIL import Image, ImageOps


def cover_crop(image: Image.Image, width: int, height: int) -> Image.Image:
    """
    Scale and centre-crop ``image`` to exactly ``width`` x ``height``.

    The aspect ratio is preserved; whatever does not fit the tile is cut
    away equally on both sides. EXIF orientation is applied first so
    camera photos are not placed sideways.

    Args:
        image: Source image
        width: Tile width in pixels
        height: Tile height in pixels

    Returns:
        New RGB image of the requested size

    Raises:
        ValueError: If width or height is not positive

    Example:
        >>> tile = cover_crop(Image.new("RGB", (400, 100)), 50, 50)
        >>> tile.size
        (50, 50)
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Tile size must be positive: {width}x{height}")

    oriented = ImageOps.exif_transpose(image)
    if oriented.mode != "RGB":
        oriented = oriented.convert("RGB")

    return ImageOps.fit(
        oriented,
        (width, height),
        method=Image.Resampling.LANCZOS,
        centering=(0.5, 0.5),
    )
