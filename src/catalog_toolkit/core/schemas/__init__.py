"""
Schemas Package

Boundary validation for settings and project documents.
"""

from .validator import (
    PROJECT_SCHEMA_VERSION,
    ValidationError,
    validate_settings,
    validate_project,
)

__all__ = [
    "PROJECT_SCHEMA_VERSION",
    "ValidationError",
    "validate_settings",
    "validate_project",
]
