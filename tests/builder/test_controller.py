"""
Tests for builder.controller and builder.config

Test Coverage:
- build_catalog(): Full pipeline, outputs, error handling, project re-export
- BuildConfig: Validation and defaults
"""

from pathlib import Path

import pytest

from catalog_toolkit.builder import BuildConfig, BuildError, build_catalog
from catalog_toolkit.core.models import CatalogSettings, LayoutMode
from catalog_toolkit.core.utils import load_project


@pytest.fixture
def grid_settings() -> CatalogSettings:
    return CatalogSettings(mode=LayoutMode.GRID, grid_columns=2, grid_rows=2)


class TestBuildConfig:
    """Tests for BuildConfig."""

    def test_config_when_dpi_not_positive_then_raises(self, tmp_path: Path):
        with pytest.raises(ValueError):
            BuildConfig(input_dir=tmp_path, dpi=0)

    def test_config_when_no_output_dir_then_catalog_subfolder(self, tmp_path: Path):
        assert BuildConfig(input_dir=tmp_path).resolved_output_dir == tmp_path / "catalog"

    def test_config_when_output_dir_given_then_used(self, tmp_path: Path):
        config = BuildConfig(input_dir=tmp_path, output_dir=tmp_path / "out")
        assert config.resolved_output_dir == tmp_path / "out"

    def test_config_when_swaps_without_project_then_raises(self, tmp_path: Path):
        with pytest.raises(ValueError, match="project"):
            BuildConfig(input_dir=tmp_path, swaps=((0, 0, 1),))


class TestBuildCatalog:
    """Tests for build_catalog."""

    def test_build_when_grid_mode_then_pages_and_project(self, image_folder, grid_settings, tmp_path: Path):
        config = BuildConfig(input_dir=image_folder, settings=grid_settings, output_dir=tmp_path / "out")

        result = build_catalog(config)

        assert result.page_count == 2
        assert result.project.placed_count == 5
        assert result.project_path is not None
        assert result.project_path.suffix == ".bkg"
        assert load_project(result.project_path) == result.project
        assert result.png_paths == ()
        assert result.pdf_path is None

    def test_build_when_exports_requested_then_files_written(self, image_folder, grid_settings, tmp_path: Path):
        config = BuildConfig(
            input_dir=image_folder,
            settings=grid_settings,
            output_dir=tmp_path / "out",
            export_png=True,
            export_pdf=True,
            save_project=False,
            dpi=20,
        )

        result = build_catalog(config)

        assert len(result.png_paths) == 2
        assert all(p.exists() for p in result.png_paths)
        assert result.pdf_path is not None and result.pdf_path.exists()
        assert result.project_path is None

    def test_build_when_cluster_seeded_then_reproducible(self, image_folder):
        settings = CatalogSettings(seed=11, target_per_page=2)
        config = BuildConfig(input_dir=image_folder, settings=settings, save_project=False)

        first = build_catalog(config)
        second = build_catalog(config)

        assert first.pages == second.pages
        assert first.metadata["seed"] == 11

    def test_build_when_done_then_metadata_filled(self, image_folder, grid_settings):
        config = BuildConfig(input_dir=image_folder, settings=grid_settings, save_project=False)

        result = build_catalog(config)

        assert result.metadata["mode"] == "grid"
        assert result.metadata["item_count"] == 5
        assert result.metadata["page_count"] == 2
        assert result.warnings == ()

    def test_build_when_folder_missing_then_build_error(self, tmp_path: Path):
        with pytest.raises(BuildError, match="not found"):
            build_catalog(BuildConfig(input_dir=tmp_path / "missing"))

    def test_build_when_folder_has_no_images_then_build_error(self, tmp_path: Path):
        with pytest.raises(BuildError, match="No images"):
            build_catalog(BuildConfig(input_dir=tmp_path))

    def test_build_when_image_unreadable_then_build_error(self, image_folder, grid_settings):
        (image_folder / "zz-broken.png").write_text("garbage")
        config = BuildConfig(
            input_dir=image_folder,
            settings=grid_settings,
            export_png=True,
            save_project=False,
            dpi=20,
        )

        with pytest.raises(BuildError, match="Export failed"):
            build_catalog(config)

    def test_build_when_page_too_small_for_dpi_then_build_error(self, image_folder):
        settings = CatalogSettings(mode=LayoutMode.GRID, page_width=0.5, page_height=0.5)
        config = BuildConfig(
            input_dir=image_folder,
            settings=settings,
            export_png=True,
            save_project=False,
            dpi=20,
        )

        with pytest.raises(BuildError, match="Export failed"):
            build_catalog(config)

    def test_build_when_page_size_zero_then_build_error(self, image_folder):
        settings = CatalogSettings(mode=LayoutMode.GRID, page_width=0)
        config = BuildConfig(input_dir=image_folder, settings=settings, export_png=True, save_project=False)

        with pytest.raises(BuildError, match="empty"):
            build_catalog(config)


class TestBuildFromProject:
    """Tests for build_catalog with a saved project."""

    @pytest.fixture
    def saved(self, image_folder, grid_settings, tmp_path: Path):
        config = BuildConfig(input_dir=image_folder, settings=grid_settings, output_dir=tmp_path / "first")
        return build_catalog(config)

    def test_build_when_project_given_then_pages_reused(self, image_folder, saved, tmp_path: Path):
        config = BuildConfig(
            input_dir=image_folder,
            output_dir=tmp_path / "again",
            project_path=saved.project_path,
        )

        result = build_catalog(config)

        assert result.pages == saved.pages
        assert result.metadata["source"] == "project"
        assert result.metadata["mode"] == "grid"

    def test_build_when_swaps_given_then_applied_and_saved(self, image_folder, saved, tmp_path: Path):
        before = saved.pages[1].placements
        config = BuildConfig(
            input_dir=image_folder,
            output_dir=tmp_path / "again",
            project_path=saved.project_path,
            swaps=((1, 0, 0), (0, 0, 3)),
        )

        result = build_catalog(config)

        first = result.pages[0].placements
        assert first[0].item == saved.pages[0].placements[3].item
        assert first[3].item == saved.pages[0].placements[0].item
        assert result.pages[1].placements == before
        assert load_project(result.project_path) == result.project

    def test_build_when_project_reexported_then_png_written(self, image_folder, saved, tmp_path: Path):
        config = BuildConfig(
            input_dir=image_folder,
            output_dir=tmp_path / "again",
            project_path=saved.project_path,
            export_png=True,
            save_project=False,
            dpi=20,
        )

        result = build_catalog(config)

        assert len(result.png_paths) == 2

    def test_build_when_swap_out_of_range_then_build_error(self, image_folder, saved):
        config = BuildConfig(
            input_dir=image_folder,
            project_path=saved.project_path,
            swaps=((1, 0, 5),),
            save_project=False,
        )

        with pytest.raises(BuildError, match="Cannot swap"):
            build_catalog(config)

    def test_build_when_project_missing_then_build_error(self, image_folder, tmp_path: Path):
        config = BuildConfig(input_dir=image_folder, project_path=tmp_path / "none.bkg")

        with pytest.raises(BuildError, match="Cannot load project"):
            build_catalog(config)

    def test_build_when_project_corrupt_then_build_error(self, image_folder, tmp_path: Path):
        broken = tmp_path / "broken.bkg"
        broken.write_text("{not json")
        config = BuildConfig(input_dir=image_folder, project_path=broken)

        with pytest.raises(BuildError, match="Cannot load project"):
            build_catalog(config)
