"""
Module: builder.controller

Purpose:
    Orchestrate the complete catalog building pipeline.
    Discover → Layout → Save project → Export
    or, for an existing project: Load → Swap tiles → Save project → Export

Key Functions:
    - build_catalog(): Main entry point for building a catalog

Key Classes:
    - BuildResult: Complete build result
    - BuildError: Exception for build failures

Dependencies:
    - builder.images: Image discovery and loading
    - builder.layout: Page generation
    - builder.output: PNG and PDF export
    - builder.layout.editing: Tile swaps on saved projects
    - core.utils.serialization: Project files

Used By:
    - cli: Command line interface
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from catalog_toolkit.common.path_utils import project_filename
from catalog_toolkit.core.models import Page, Project
from catalog_toolkit.core.schemas import ValidationError
from catalog_toolkit.core.utils.serialization import load_project, save_project

from .config import BuildConfig
from .images import FileImageProvider, ImageNotFoundError, discover_images
from .layout import generate_layout, swap_items
from .output import export_pages_png, render_to_pdf

logger = logging.getLogger(__name__)


class BuildError(Exception):
    """Error during build pipeline."""
    pass


@dataclass(frozen=True)
class BuildResult:
    """
    Complete build result (immutable).

    Attributes:
        project: Settings, pages and items of the build
        project_path: Saved project file (if written)
        png_paths: One PNG per page (if exported)
        pdf_path: PDF document (if exported)
        metadata: Build metadata dictionary
        warnings: Any warnings during build

    Example:
        >>> result = build_catalog(config)
        >>> print(f"Placed {result.project.placed_count} images on {result.page_count} pages")
    """

    project: Project
    project_path: Optional[Path] = None
    png_paths: Tuple[Path, ...] = ()
    pdf_path: Optional[Path] = None
    metadata: dict = field(default_factory=dict)
    warnings: Tuple[str, ...] = ()

    @property
    def pages(self) -> Tuple[Page, ...]:
        return self.project.pages

    @property
    def page_count(self) -> int:
        return self.project.page_count


def build_catalog(
    config: BuildConfig,
    rng: Optional[random.Random] = None,
) -> BuildResult:
    """
    Build a catalog from a folder of images, or re-export a saved project.

    With ``config.project_path`` set, the saved pages are loaded instead of
    laying out ``config.input_dir`` again, ``config.swaps`` are applied in
    order, and the edited project is saved and exported. Image paths in the
    project resolve against ``config.input_dir``.

    Args:
        config: Build configuration
        rng: Random source for cluster layouts; defaults to one seeded
            from ``config.settings.seed``

    Returns:
        BuildResult with the generated project and written files

    Raises:
        BuildError: If images or the project cannot be read, a swap is out
            of range, or any output fails
    """
    started = time.perf_counter()
    warnings: list[str] = []

    # 1-2. Discover and lay out, or load a saved project
    if config.project_path is not None:
        project = _load_and_edit(config)
        source = "project"
    else:
        project = _discover_and_lay_out(config, rng)
        source = "folder"

    settings = project.settings
    pages = project.pages
    items = project.items

    placed = project.placed_count
    if placed != len(items):
        message = f"Placed {placed} of {len(items)} images"
        logger.warning(message)
        warnings.append(message)

    output_dir = config.resolved_output_dir

    # 3. Save project
    project_path = None
    if config.save_project:
        try:
            project_path = save_project(project, output_dir / project_filename())
        except OSError as e:
            raise BuildError(f"Cannot write project file: {e}") from e

    # 4. Export
    provider = FileImageProvider(base_dir=config.input_dir)
    png_paths: Tuple[Path, ...] = ()
    pdf_path = None
    try:
        if config.export_png:
            png_paths = tuple(export_pages_png(pages, provider, output_dir, dpi=config.dpi))
        if config.export_pdf:
            pdf_path = render_to_pdf(pages, provider, output_dir / "catalog.pdf", dpi=config.dpi)
    except (ImageNotFoundError, ValueError) as e:
        raise BuildError(f"Export failed: {e}") from e
    except OSError as e:
        raise BuildError(f"Cannot write export: {e}") from e

    elapsed = time.perf_counter() - started
    metadata = {
        "source": source,
        "mode": settings.mode.value,
        "item_count": len(items),
        "page_count": project.page_count,
        "seed": settings.seed,
        "elapsed_seconds": round(elapsed, 3),
    }

    logger.info(
        f"Built catalog: {len(items)} images, {project.page_count} pages in {elapsed:.2f}s"
    )

    return BuildResult(
        project=project,
        project_path=project_path,
        png_paths=png_paths,
        pdf_path=pdf_path,
        metadata=metadata,
        warnings=tuple(warnings),
    )


def _discover_and_lay_out(config: BuildConfig, rng: Optional[random.Random]) -> Project:
    try:
        items = discover_images(config.input_dir)
    except ImageNotFoundError as e:
        raise BuildError(str(e)) from e

    if not items:
        raise BuildError(f"No images to lay out in {config.input_dir}")

    pages = generate_layout(items, config.settings, rng)
    return Project(settings=config.settings, pages=tuple(pages), items=tuple(items))


def _load_and_edit(config: BuildConfig) -> Project:
    """Load the saved project and apply the configured tile swaps."""
    try:
        loaded = load_project(config.project_path)
    except (FileNotFoundError, ValidationError) as e:
        raise BuildError(f"Cannot load project: {e}") from e

    pages = list(loaded.pages)
    for page_index, source_index, target_index in config.swaps:
        try:
            pages = swap_items(pages, page_index, source_index, target_index)
        except IndexError as e:
            raise BuildError(f"Cannot swap tiles: {e}") from e

    logger.info(
        f"Loaded {config.project_path.name}: {len(pages)} pages, {len(config.swaps)} swaps"
    )
    return Project(settings=loaded.settings, pages=tuple(pages), items=loaded.items)
