"""
Serialization Utilities

Provides to/from JSON utilities for settings, pages and whole projects.

Round-trips are exact: every settings field is written (enums by value,
``target_per_page`` as ``null`` when automatic) and numbers are passed
through unchanged, so a saved project reloads to equal objects.

Settings exported by earlier releases use camelCase keys and
German variation labels; those are translated on import.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from ..models.items import ImageItem
from ..models.pages import Page
from ..models.project import Project
from ..models.rects import PlacedRect
from ..models.settings import CatalogSettings, LayoutMode, VariationLevel
from ..schemas.validator import (
    COUNT_FIELDS,
    PROJECT_SCHEMA_VERSION,
    ValidationError,
    validate_project,
    validate_settings,
)

logger = logging.getLogger(__name__)


# Keys used in settings exported by earlier releases
LEGACY_SETTINGS_KEYS = {
    "pageW": "page_width",
    "pageH": "page_height",
    "mTop": "margin_top",
    "mBot": "margin_bottom",
    "mIn": "margin_inner",
    "mOut": "margin_outer",
    "gridCols": "grid_columns",
    "gridRows": "grid_rows",
    "gridGap": "grid_gap",
    "cCols": "cluster_columns",
    "cRows": "cluster_rows",
    "cGap": "cluster_gap",
    "target": "target_per_page",
    "varLevel": "variation",
    "heroMode": "hero_mode",
}

LEGACY_VARIATION_VALUES = {
    "niedrig": "low",
    "mittel": "medium",
    "hoch": "high",
}


# ─────────────────────────────────────────────────────────────────────────────
# Settings Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_settings(settings: CatalogSettings) -> dict[str, Any]:
    """
    Serialize CatalogSettings to a dictionary.

    Args:
        settings: Settings to serialize

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "page_width": settings.page_width,
        "page_height": settings.page_height,
        "margin_top": settings.margin_top,
        "margin_bottom": settings.margin_bottom,
        "margin_inner": settings.margin_inner,
        "margin_outer": settings.margin_outer,
        "mode": settings.mode.value,
        "grid_columns": settings.grid_columns,
        "grid_rows": settings.grid_rows,
        "grid_gap": settings.grid_gap,
        "cluster_columns": settings.cluster_columns,
        "cluster_rows": settings.cluster_rows,
        "cluster_gap": settings.cluster_gap,
        "target_per_page": settings.target_per_page,
        "variation": settings.variation.value,
        "hero_mode": settings.hero_mode,
        "seed": settings.seed,
    }


def _normalise_legacy_settings(data: Mapping[str, Any]) -> dict[str, Any]:
    """Translate camelCase keys and German variation labels."""
    normalised: dict[str, Any] = {}
    legacy = False
    for key, value in data.items():
        if key in LEGACY_SETTINGS_KEYS:
            legacy = True
            key = LEGACY_SETTINGS_KEYS[key]
        normalised[key] = value

    variation = normalised.get("variation")
    if variation in LEGACY_VARIATION_VALUES:
        legacy = True
        normalised["variation"] = LEGACY_VARIATION_VALUES[variation]

    if legacy:
        logger.debug("Translated legacy settings keys")
    return normalised


def deserialize_settings(data: Mapping[str, Any], *, validate: bool = True) -> CatalogSettings:
    """
    Deserialize CatalogSettings from a dictionary.

    Missing fields take their defaults. Unknown keys are ignored.

    Args:
        data: Dictionary from JSON (snake_case or legacy camelCase keys)
        validate: Whether to validate before constructing

    Returns:
        CatalogSettings instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if not isinstance(data, Mapping):
        raise ValidationError("Settings must be a JSON object", path="settings")

    fields = _normalise_legacy_settings(data)
    if validate:
        validate_settings(fields)

    for key in COUNT_FIELDS:
        if isinstance(fields.get(key), float):
            fields[key] = int(fields[key])
    if isinstance(fields.get("target_per_page"), float):
        fields["target_per_page"] = int(fields["target_per_page"])

    defaults = CatalogSettings()
    return CatalogSettings(
        page_width=fields.get("page_width", defaults.page_width),
        page_height=fields.get("page_height", defaults.page_height),
        margin_top=fields.get("margin_top", defaults.margin_top),
        margin_bottom=fields.get("margin_bottom", defaults.margin_bottom),
        margin_inner=fields.get("margin_inner", defaults.margin_inner),
        margin_outer=fields.get("margin_outer", defaults.margin_outer),
        mode=LayoutMode(fields.get("mode", defaults.mode.value)),
        grid_columns=fields.get("grid_columns", defaults.grid_columns),
        grid_rows=fields.get("grid_rows", defaults.grid_rows),
        grid_gap=fields.get("grid_gap", defaults.grid_gap),
        cluster_columns=fields.get("cluster_columns", defaults.cluster_columns),
        cluster_rows=fields.get("cluster_rows", defaults.cluster_rows),
        cluster_gap=fields.get("cluster_gap", defaults.cluster_gap),
        target_per_page=fields.get("target_per_page", defaults.target_per_page),
        variation=VariationLevel(fields.get("variation", defaults.variation.value)),
        hero_mode=fields.get("hero_mode", defaults.hero_mode),
        seed=fields.get("seed", defaults.seed),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Page Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_page(page: Page) -> dict[str, Any]:
    """
    Serialize a Page to a dictionary.

    Placements reference their image by name; the image list itself is
    stored once at project level.
    """
    return {
        "width": page.width,
        "height": page.height,
        "placements": [
            {
                "x": p.x,
                "y": p.y,
                "width": p.width,
                "height": p.height,
                "item": p.item.name,
            }
            for p in page.placements
        ],
    }


def deserialize_page(data: Mapping[str, Any], items_by_name: Mapping[str, ImageItem]) -> Page:
    """
    Deserialize a Page, re-binding placement names to known items.

    Names with no matching item become detached ImageItems so the page
    geometry is never lost.
    """
    placements = []
    for tile in data["placements"]:
        name = tile["item"]
        item = items_by_name.get(name)
        if item is None:
            logger.warning(f"Placement refers to unknown image {name!r}, keeping it detached")
            item = ImageItem(name=name)
        placements.append(PlacedRect(
            x=tile["x"],
            y=tile["y"],
            width=tile["width"],
            height=tile["height"],
            item=item,
        ))
    return Page(width=data["width"], height=data["height"], placements=tuple(placements))


# ─────────────────────────────────────────────────────────────────────────────
# Project Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_project(project: Project) -> dict[str, Any]:
    """Serialize a Project to a dictionary."""
    return {
        "schema_version": PROJECT_SCHEMA_VERSION,
        "settings": serialize_settings(project.settings),
        "pages": [serialize_page(page) for page in project.pages],
        "items": [item.to_dict() for item in project.items],
    }


def deserialize_project(data: Mapping[str, Any], *, validate: bool = True) -> Project:
    """
    Deserialize a Project from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against the project schema first

    Returns:
        Project instance

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_project(dict(data))

    items = tuple(ImageItem.from_dict(entry) for entry in data["items"])
    items_by_name = {item.name: item for item in items}
    pages = tuple(deserialize_page(page, items_by_name) for page in data["pages"])

    return Project(
        settings=deserialize_settings(data["settings"], validate=False),
        pages=pages,
        items=items,
    )


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def save_project(project: Project, path: Path) -> Path:
    """
    Save a project to a JSON file.

    Args:
        project: Project to save
        path: Output path (conventionally ``*.bkg``)

    Returns:
        The path written
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    data = serialize_project(project)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(f"Saved project with {project.page_count} pages to {path}")
    return path


def load_project(path: Path, *, validate: bool = True) -> Project:
    """
    Load a project from a JSON file.

    Args:
        path: Path to project file
        validate: Whether to validate the document

    Returns:
        Project instance

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or not a valid project
    """
    if not path.exists():
        raise FileNotFoundError(f"Project file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Project file is not valid JSON: {e}",
            path=str(path),
            errors=[str(e)],
        ) from e

    return deserialize_project(data, validate=validate)


def load_settings_json(path: Path) -> CatalogSettings:
    """
    Load settings from a JSON file.

    Accepts either a bare settings object or a full project document, in
    which case its ``settings`` section is used.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or settings are invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Settings file is not valid JSON: {e}",
            path=str(path),
            errors=[str(e)],
        ) from e

    if isinstance(data, dict) and isinstance(data.get("settings"), dict):
        data = data["settings"]
    return deserialize_settings(data)
