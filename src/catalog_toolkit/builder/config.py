"""
Module: builder.config

Purpose:
    Configuration dataclass for the catalog build pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - BuildConfig: Main configuration for building a catalog

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - builder.controller: Main build controller
    - cli: Command line interface
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from catalog_toolkit.common.thresholds import EXPORT_THRESHOLDS
from catalog_toolkit.core.models import CatalogSettings


@dataclass(frozen=True)
class BuildConfig:
    """
    Configuration for building a catalog (immutable).

    Attributes:
        input_dir: Folder with the source images
        settings: Layout settings
        output_dir: Output folder (defaults to ``input_dir / "catalog"``)
        export_png: Write one PNG per page
        export_pdf: Write a single PDF with all pages
        save_project: Write the project file (settings, pages, items)
        dpi: Resolution for PNG/PDF output
        project_path: Saved project to re-export instead of laying out
            ``input_dir`` again
        swaps: Tile swaps applied to the loaded project, as 0-based
            ``(page, tile, tile)`` triples

    Example:
        >>> config = BuildConfig(input_dir=Path("photos"), export_pdf=True)
        >>> config.resolved_output_dir
        PosixPath('photos/catalog')
    """

    # Required
    input_dir: Path

    # Layout
    settings: CatalogSettings = field(default_factory=CatalogSettings)

    # Output
    output_dir: Optional[Path] = None
    export_png: bool = False
    export_pdf: bool = False
    save_project: bool = True
    dpi: int = EXPORT_THRESHOLDS.default_dpi

    # Editing
    project_path: Optional[Path] = None
    swaps: Tuple[Tuple[int, int, int], ...] = ()

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive: {self.dpi}")
        if self.swaps and self.project_path is None:
            raise ValueError("swaps need a project to edit")

    @property
    def resolved_output_dir(self) -> Path:
        """Folder all outputs are written to."""
        if self.output_dir is not None:
            return self.output_dir
        return self.input_dir / "catalog"
