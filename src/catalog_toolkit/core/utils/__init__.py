"""
Utils Package

Serialization and project file utilities.
"""

from .serialization import (
    serialize_settings,
    deserialize_settings,
    serialize_page,
    deserialize_page,
    serialize_project,
    deserialize_project,
    save_project,
    load_project,
    load_settings_json,
)

__all__ = [
    "serialize_settings",
    "deserialize_settings",
    "serialize_page",
    "deserialize_page",
    "serialize_project",
    "deserialize_project",
    "save_project",
    "load_project",
    "load_settings_json",
]
