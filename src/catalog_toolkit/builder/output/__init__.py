"""
Module: builder.output

Purpose:
    Export generated pages as PNG images or a PDF document.
"""

from .raster import render_page_image, export_pages_png
from .renderer import render_to_pdf

__all__ = [
    "render_page_image",
    "export_pages_png",
    "render_to_pdf",
]
