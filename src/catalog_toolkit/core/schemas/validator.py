"""
Schema Validation Utilities

Validates settings and project JSON data before deserialization.

The layout engine itself never rejects settings - it coerces or passes
pathological values through. Validation happens here, at the boundary
where data enters the toolkit (project import, settings files, CLI).
Project structure is checked with jsonschema against the
``*.schema.json`` files in this package.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Iterable

import jsonschema


# Schema version constants
PROJECT_SCHEMA_VERSION = 1

LAYOUT_MODE_VALUES = ("grid", "cluster")
VARIATION_VALUES = ("low", "medium", "high")

# Numeric settings that are lengths (mm) and may be fractional
LENGTH_FIELDS = (
    "page_width",
    "page_height",
    "margin_top",
    "margin_bottom",
    "margin_inner",
    "margin_outer",
    "grid_gap",
    "cluster_gap",
)

# Lengths that must be strictly positive
PAGE_SIZE_FIELDS = ("page_width", "page_height")

# Numeric settings that count cells or tiles
COUNT_FIELDS = (
    "grid_columns",
    "grid_rows",
    "cluster_columns",
    "cluster_rows",
)


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_count(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value) and value.is_integer()


def _require(data: dict[str, Any], keys: Iterable[str], path: str) -> None:
    missing = [k for k in keys if k not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {k}" for k in missing],
        )


def validate_settings(data: dict[str, Any]) -> None:
    """
    Validate serialized settings (snake_case keys).

    Every field is optional; absent fields fall back to defaults on
    deserialization. Present fields must have the right type and be
    non-negative; the page size must be positive.

    Args:
        data: Settings dictionary

    Raises:
        ValidationError: If any field is invalid (all problems are listed
            in ``errors``; ``path`` names the first offending field)
    """
    if not isinstance(data, dict):
        raise ValidationError("Settings must be a JSON object", path="settings")

    errors: list[tuple[str, str]] = []

    for key in LENGTH_FIELDS:
        if key not in data:
            continue
        value = data[key]
        if not _is_number(value):
            errors.append((key, f"{key} must be a number: {value!r}"))
        elif key in PAGE_SIZE_FIELDS and value <= 0:
            errors.append((key, f"{key} must be positive: {value}"))
        elif value < 0:
            errors.append((key, f"{key} must be non-negative: {value}"))

    for key in COUNT_FIELDS:
        if key not in data:
            continue
        value = data[key]
        if not _is_count(value):
            errors.append((key, f"{key} must be a whole number: {value!r}"))
        elif value < 0:
            errors.append((key, f"{key} must be non-negative: {value}"))

    if "target_per_page" in data and data["target_per_page"] is not None:
        value = data["target_per_page"]
        if not _is_count(value):
            errors.append(("target_per_page", f"target_per_page must be a whole number or null: {value!r}"))
        elif value < 0:
            errors.append(("target_per_page", f"target_per_page must be non-negative: {value}"))

    if "mode" in data and data["mode"] not in LAYOUT_MODE_VALUES:
        errors.append(("mode", f"Unknown layout mode: {data['mode']!r}"))

    if "variation" in data and data["variation"] not in VARIATION_VALUES:
        errors.append(("variation", f"Unknown variation level: {data['variation']!r}"))

    if "hero_mode" in data and not isinstance(data["hero_mode"], bool):
        errors.append(("hero_mode", f"hero_mode must be true or false: {data['hero_mode']!r}"))

    if "seed" in data and data["seed"] is not None:
        if not isinstance(data["seed"], int) or isinstance(data["seed"], bool):
            errors.append(("seed", f"seed must be an integer or null: {data['seed']!r}"))

    if errors:
        raise ValidationError(
            f"Invalid settings: {errors[0][1]}",
            path=f"settings.{errors[0][0]}",
            errors=[message for _, message in errors],
        )


def validate_project(data: dict[str, Any]) -> None:
    """
    Validate a project document.

    Quick checks (top-level sections, schema version, settings values)
    run first so the common mistakes get specific messages. The structure
    of every item, page and placement is then checked against
    ``project.schema.json``. Placement items must name an image (string);
    they are re-bound to the item list on load.

    Args:
        data: Project dictionary

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Project must be a JSON object")

    _require(data, ("schema_version", "settings", "pages", "items"), path="")

    version = data["schema_version"]
    if version != PROJECT_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported project schema version: {version} (expected {PROJECT_SCHEMA_VERSION})",
            path="schema_version",
        )

    validate_settings(data["settings"])

    schema = _load_schema("project")
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=_format_path(e.absolute_path),
            errors=[e.message],
        ) from e


def _format_path(parts: Iterable[Any]) -> str:
    """Render a jsonschema error path as e.g. ``pages[0].placements[2].x``."""
    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path
