"""
Module: cli

Purpose:
    Command line interface for building a catalog from a folder of images.

Key Functions:
    - main(): Parse arguments, build, report
    - parse_swap(): PAGE:A:B tile swap argument

Dependencies:
    - argparse (std)
    - builder: Build pipeline
    - core.utils.serialization: Settings files

Used By:
    - catalog-build console script
    - python -m catalog_toolkit
    - run_catalog.py launcher
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence, Tuple

from catalog_toolkit import __version__
from catalog_toolkit.builder import BuildConfig, BuildError, build_catalog
from catalog_toolkit.common.thresholds import EXPORT_THRESHOLDS
from catalog_toolkit.core.models import CatalogSettings, LayoutMode, VariationLevel
from catalog_toolkit.core.schemas import ValidationError, validate_settings
from catalog_toolkit.core.utils import load_settings_json, serialize_settings

logger = logging.getLogger("catalog_toolkit")

# Flag destination -> CatalogSettings field
_SETTINGS_FLAGS = (
    "page_width",
    "page_height",
    "margin_top",
    "margin_bottom",
    "margin_inner",
    "margin_outer",
    "grid_columns",
    "grid_rows",
    "grid_gap",
    "cluster_columns",
    "cluster_rows",
    "cluster_gap",
    "seed",
)


def parse_swap(text: str) -> Tuple[int, int, int]:
    """
    Parse a 1-based ``PAGE:A:B`` swap into 0-based indices.

    Raises:
        argparse.ArgumentTypeError: If the format is wrong or a number is below 1
    """
    parts = text.split(":")
    try:
        numbers = [int(p) for p in parts]
    except ValueError:
        numbers = []
    if len(numbers) != 3 or min(numbers) < 1:
        raise argparse.ArgumentTypeError(
            f"swap must be PAGE:TILE:TILE with numbers from 1, got {text!r}"
        )
    page, source, target = numbers
    return page - 1, source - 1, target - 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalog-build",
        description="Lay out a folder of images as catalog pages",
    )
    parser.add_argument("input", type=Path, nargs="?", default=None,
                        help="Folder with the source images (with --project: where "
                        "relative image names resolve; default: the project's folder)")
    parser.add_argument("--output", "-o", type=Path, default=None,
                        help="Output folder (default: INPUT/catalog)")
    parser.add_argument("--settings", type=Path, default=None,
                        help="Settings JSON or project file to start from")
    parser.add_argument("--project", type=Path, default=None,
                        help="Re-export a saved project instead of laying out again; "
                        "layout flags are ignored")
    parser.add_argument("--swap", type=parse_swap, action="append", default=[],
                        metavar="PAGE:A:B",
                        help="Swap the images of tiles A and B on PAGE (1-based, repeatable; "
                        "needs --project)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    page = parser.add_argument_group("page (mm)")
    page.add_argument("--page-width", type=float)
    page.add_argument("--page-height", type=float)
    page.add_argument("--margin-top", type=float)
    page.add_argument("--margin-bottom", type=float)
    page.add_argument("--margin-inner", type=float)
    page.add_argument("--margin-outer", type=float)

    layout = parser.add_argument_group("layout")
    layout.add_argument("--mode", choices=[m.value for m in LayoutMode])
    layout.add_argument("--grid-columns", type=int)
    layout.add_argument("--grid-rows", type=int)
    layout.add_argument("--grid-gap", type=float)
    layout.add_argument("--cluster-columns", type=int)
    layout.add_argument("--cluster-rows", type=int)
    layout.add_argument("--cluster-gap", type=float)
    layout.add_argument("--target", type=int, dest="target_per_page",
                        help="Images per cluster page (0 = automatic)")
    layout.add_argument("--variation", choices=[v.value for v in VariationLevel])
    layout.add_argument("--hero", dest="hero_mode", action="store_true", default=None,
                        help="Enlarge the first image of each cluster page")
    layout.add_argument("--no-hero", dest="hero_mode", action="store_false")
    layout.add_argument("--seed", type=int, help="Random seed for reproducible layouts")

    output = parser.add_argument_group("output")
    output.add_argument("--png", action="store_true", help="Export one PNG per page")
    output.add_argument("--pdf", action="store_true", help="Export a PDF")
    output.add_argument("--no-project", action="store_true", help="Do not write the project file")
    output.add_argument("--dpi", type=int, default=EXPORT_THRESHOLDS.default_dpi,
                        help=f"Export resolution (default: {EXPORT_THRESHOLDS.default_dpi})")

    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def settings_from_args(args: argparse.Namespace) -> CatalogSettings:
    """
    Resolve settings: file (if given) then flag overrides.

    Raises:
        ValidationError: If the merged settings are invalid
        FileNotFoundError: If the settings file is missing
    """
    settings = load_settings_json(args.settings) if args.settings else CatalogSettings()

    overrides = {}
    for name in _SETTINGS_FLAGS:
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    if args.mode is not None:
        overrides["mode"] = LayoutMode(args.mode)
    if args.variation is not None:
        overrides["variation"] = VariationLevel(args.variation)
    if args.hero_mode is not None:
        overrides["hero_mode"] = args.hero_mode
    if args.target_per_page is not None:
        overrides["target_per_page"] = args.target_per_page or None

    settings = replace(settings, **overrides)
    validate_settings(serialize_settings(settings))
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.input is None and args.project is None:
        parser.error("an image folder or --project is required")
    if args.swap and args.project is None:
        parser.error("--swap needs --project")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    try:
        settings = settings_from_args(args)
    except ValidationError as e:
        logger.error(f"Error: {e}")
        for problem in e.errors[1:]:
            logger.error(f"  {problem}")
        return 2
    except FileNotFoundError as e:
        logger.error(f"Error: {e}")
        return 2

    input_dir = args.input if args.input is not None else args.project.parent

    try:
        config = BuildConfig(
            input_dir=input_dir,
            settings=settings,
            output_dir=args.output,
            export_png=args.png,
            export_pdf=args.pdf,
            save_project=not args.no_project,
            dpi=args.dpi,
            project_path=args.project,
            swaps=tuple(args.swap),
        )
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 2

    try:
        result = build_catalog(config)
    except BuildError as e:
        logger.error(f"Build failed: {e}")
        return 1

    print(f"Pages: {result.page_count}")
    print(f"Images placed: {result.project.placed_count}")
    if result.project_path:
        print(f"Project: {result.project_path}")
    for path in result.png_paths:
        print(f"PNG: {path}")
    if result.pdf_path:
        print(f"PDF: {result.pdf_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
