"""
Tests for builder.images.provider

Test Coverage:
- discover_images(): Filtering, ordering, missing folder
- FileImageProvider: Loading, no retention, lookup by name, unreadable files
"""

import logging
from pathlib import Path

import pytest
from PIL import Image

from catalog_toolkit.builder.images import (
    FileImageProvider,
    ImageNotFoundError,
    discover_images,
)
from catalog_toolkit.core.models import ImageItem


class TestDiscoverImages:
    """Tests for discover_images."""

    def test_discover_when_folder_has_images_then_sorted_by_name(self, image_folder):
        items = discover_images(image_folder)

        assert [i.name for i in items] == [
            "photo-0.png", "photo-1.jpg", "photo-2.png", "photo-3.jpg", "photo-4.png",
        ]
        assert all(i.path.parent == image_folder for i in items)

    def test_discover_when_subfolder_present_then_not_scanned(self, image_folder):
        nested = image_folder / "nested"
        nested.mkdir()
        (nested / "deep.png").write_bytes(b"")

        names = [i.name for i in discover_images(image_folder)]

        assert "deep.png" not in names

    def test_discover_when_folder_missing_then_raises(self, tmp_path: Path):
        with pytest.raises(ImageNotFoundError):
            discover_images(tmp_path / "missing")

    def test_discover_when_no_images_then_empty_and_warns(self, tmp_path: Path, caplog):
        (tmp_path / "readme.txt").write_text("hello")

        with caplog.at_level(logging.WARNING):
            items = discover_images(tmp_path)

        assert items == []
        assert "No supported images" in caplog.text


class TestFileImageProvider:
    """Tests for FileImageProvider."""

    def test_get_image_when_path_set_then_loads_pixels(self, sample_image):
        provider = FileImageProvider()

        image = provider.get_image(ImageItem.from_path(sample_image))

        assert image.size == (200, 100)

    def test_get_image_when_called_twice_then_not_retained(self, sample_image):
        provider = FileImageProvider()
        item = ImageItem.from_path(sample_image)

        assert provider.get_image(item) is not provider.get_image(item)

    def test_get_image_when_detached_then_resolved_in_base_dir(self, sample_image):
        provider = FileImageProvider(base_dir=sample_image.parent)

        image = provider.get_image(ImageItem("sample.png"))

        assert image.size == (200, 100)

    def test_get_image_when_detached_without_base_dir_then_raises(self):
        with pytest.raises(ImageNotFoundError):
            FileImageProvider().get_image(ImageItem("sample.png"))

    def test_get_image_when_file_missing_then_raises(self, tmp_path: Path):
        provider = FileImageProvider(base_dir=tmp_path)

        with pytest.raises(ImageNotFoundError):
            provider.get_image(ImageItem("gone.jpg"))

    def test_get_image_when_not_an_image_then_raises(self, tmp_path: Path):
        broken = tmp_path / "broken.png"
        broken.write_text("definitely not a png")

        with pytest.raises(ImageNotFoundError):
            FileImageProvider().get_image(ImageItem.from_path(broken))

    def test_get_image_when_file_replaced_then_new_pixels(self, sample_image):
        provider = FileImageProvider()
        item = ImageItem.from_path(sample_image)
        provider.get_image(item)

        Image.new("RGB", (30, 60), "blue").save(sample_image)

        assert provider.get_image(item).size == (30, 60)
