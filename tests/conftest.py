import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import catalog_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from catalog_toolkit.core.models import CatalogSettings, ImageItem


def make_items(count: int) -> list[ImageItem]:
    """Detached items named img-000.jpg, img-001.jpg, ..."""
    return [ImageItem(name=f"img-{i:03d}.jpg") for i in range(count)]


# Common test fixtures
@pytest.fixture
def items_factory():
    """Return the make_items helper."""
    return make_items


@pytest.fixture
def square_settings() -> CatalogSettings:
    """100 x 100 mm page without margins."""
    return CatalogSettings(
        page_width=100,
        page_height=100,
        margin_top=0,
        margin_bottom=0,
        margin_inner=0,
        margin_outer=0,
    )


@pytest.fixture
def sample_image(tmp_path: Path):
    """Create a simple test image."""
    img = Image.new("RGB", (200, 100), color="white")
    img_path = tmp_path / "sample.png"
    img.save(img_path)
    return img_path


@pytest.fixture
def image_folder(tmp_path: Path) -> Path:
    """Folder with five small images in mixed formats plus a non-image."""
    folder = tmp_path / "photos"
    folder.mkdir()
    colors = ["red", "green", "blue", "yellow", "purple"]
    for i, color in enumerate(colors):
        size = (120, 80) if i % 2 == 0 else (80, 120)
        suffix = "png" if i % 2 == 0 else "jpg"
        Image.new("RGB", size, color=color).save(folder / f"photo-{i}.{suffix}")
    (folder / "notes.txt").write_text("not an image")
    return folder
