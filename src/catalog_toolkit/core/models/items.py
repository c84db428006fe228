"""
Module: items

Purpose:
    Provides the ImageItem dataclass - the opaque token the layout engine
    places on pages. Only its identity matters to the engine; pixel data
    is loaded later by builder.images.

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - core.models.rects.PlacedRect
    - builder.images.provider: Discovery and loading
    - core.utils.serialization: Project files
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True, slots=True)
class ImageItem:
    """
    One source image to be placed in the catalog.

    Attributes:
        name: File name, used as the identity when projects are re-imported
        path: Location of the file on disk (None for detached items)

    Example:
        >>> item = ImageItem.from_path(Path("/photos/beach.jpg"))
        >>> item.name
        'beach.jpg'
    """

    name: str
    path: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate item on construction."""
        if not self.name:
            raise ValueError("ImageItem name must not be empty")

    @classmethod
    def from_path(cls, path: Path) -> ImageItem:
        """Create an item named after the file."""
        return cls(name=path.name, path=path)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON storage."""
        d: dict = {"name": self.name}
        if self.path is not None:
            d["path"] = self.path.as_posix()
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ImageItem:
        """Deserialize from dictionary."""
        path = data.get("path")
        return cls(name=data["name"], path=Path(path) if path else None)
