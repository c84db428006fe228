"""
Tests for builder.layout.paginator

Test Coverage:
- generate_grid_layout(): Capacity pagination, tile geometry, order
- generate_cluster_layout(): Quotas, coverage, hero pages, determinism
- generate_layout(): Mode dispatch
"""

import logging
import random
from dataclasses import replace

import pytest

from catalog_toolkit.builder.layout.paginator import (
    generate_layout,
    generate_grid_layout,
    generate_cluster_layout,
)
from catalog_toolkit.core.models import LayoutMode


def flatten(pages):
    return [item for page in pages for item in page.items]


class TestGridLayout:
    """Tests for generate_grid_layout."""

    @pytest.fixture
    def grid_settings(self, square_settings):
        return replace(square_settings, mode=LayoutMode.GRID, grid_columns=3, grid_rows=2, grid_gap=0)

    def test_grid_when_10_items_on_3x2_then_pages_of_6_and_4(self, grid_settings, items_factory):
        pages = generate_grid_layout(items_factory(10), grid_settings)

        assert [p.placement_count for p in pages] == [6, 4]

    def test_grid_when_placed_then_uniform_tiles_row_major(self, grid_settings, items_factory):
        pages = generate_grid_layout(items_factory(10), grid_settings)

        for page in pages:
            for i, tile in enumerate(page.placements):
                assert tile.width == pytest.approx(100 / 3)
                assert tile.height == pytest.approx(50)
                assert tile.x == pytest.approx((i % 3) * 100 / 3)
                assert tile.y == pytest.approx((i // 3) * 50)

    def test_grid_when_placed_then_input_order_preserved(self, grid_settings, items_factory):
        items = items_factory(10)

        pages = generate_grid_layout(items, grid_settings)

        assert flatten(pages) == items

    def test_grid_when_page_size_set_then_copied_to_pages(self, grid_settings, items_factory):
        pages = generate_grid_layout(items_factory(3), grid_settings)

        assert (pages[0].width, pages[0].height) == (100, 100)

    def test_grid_when_no_items_then_no_pages(self, grid_settings):
        assert generate_grid_layout([], grid_settings) == []

    def test_grid_when_counts_zero_then_one_by_one(self, grid_settings, items_factory):
        settings = replace(grid_settings, grid_columns=0, grid_rows=0)

        pages = generate_grid_layout(items_factory(3), settings)

        assert len(pages) == 3
        assert pages[0].placements[0].width == pytest.approx(100)

    def test_grid_when_gap_set_then_neighbours_separated(self, grid_settings, items_factory):
        settings = replace(grid_settings, grid_gap=5)

        page = generate_grid_layout(items_factory(2), settings)[0]

        first, second = page.placements
        assert second.x - first.right == pytest.approx(5)


class TestClusterLayout:
    """Tests for generate_cluster_layout."""

    @pytest.fixture
    def cluster_settings(self, square_settings):
        return replace(square_settings, cluster_gap=0, seed=1)

    def test_cluster_when_20_items_target_12_then_pages_of_14_and_6(self, cluster_settings, items_factory):
        pages = generate_cluster_layout(items_factory(20), cluster_settings)

        assert [p.placement_count for p in pages] == [14, 6]

    def test_cluster_when_auto_target_then_pages_of_11_and_9(self, cluster_settings, items_factory):
        settings = replace(cluster_settings, target_per_page=None)

        pages = generate_cluster_layout(items_factory(20), settings)

        assert [p.placement_count for p in pages] == [11, 9]

    @pytest.mark.parametrize("count", [1, 7, 33, 100])
    def test_cluster_when_placed_then_every_item_once_in_order(self, cluster_settings, items_factory, count):
        items = items_factory(count)

        pages = generate_cluster_layout(items, cluster_settings)

        assert flatten(pages) == items

    def test_cluster_when_no_gap_then_tiles_fill_content_area(self, cluster_settings, items_factory):
        pages = generate_cluster_layout(items_factory(30), cluster_settings)

        for page in pages:
            area = sum(t.width * t.height for t in page.placements)
            assert area == pytest.approx(100 * 100)

    def test_cluster_when_placed_then_tiles_inside_content_area(self, square_settings, items_factory):
        settings = replace(square_settings, margin_inner=10, margin_top=5, cluster_gap=2, seed=4)

        pages = generate_cluster_layout(items_factory(25), settings)

        for tile in (t for page in pages for t in page.placements):
            assert tile.x >= 10 - 1e-9
            assert tile.y >= 5 - 1e-9
            assert tile.right <= 100 + 1e-9
            assert tile.bottom <= 100 + 1e-9

    def test_cluster_when_single_item_then_fills_content(self, cluster_settings, items_factory):
        pages = generate_cluster_layout(items_factory(1), cluster_settings)

        tile = pages[0].placements[0]
        assert (tile.x, tile.y) == (0, 0)
        assert tile.width == pytest.approx(100)
        assert tile.height == pytest.approx(100)

    def test_cluster_when_same_seed_then_identical(self, cluster_settings, items_factory):
        items = items_factory(40)

        assert generate_cluster_layout(items, cluster_settings) == generate_cluster_layout(items, cluster_settings)

    def test_cluster_when_rng_given_then_seed_ignored(self, cluster_settings, items_factory):
        items = items_factory(40)

        first = generate_cluster_layout(items, cluster_settings, rng=random.Random(8))
        second = generate_cluster_layout(items, replace(cluster_settings, seed=123), rng=random.Random(8))

        assert first == second

    def test_cluster_when_no_items_then_no_pages(self, cluster_settings):
        assert generate_cluster_layout([], cluster_settings) == []


class TestHeroLayout:
    """Tests for cluster pages in hero mode."""

    @pytest.fixture
    def hero_settings(self, square_settings):
        return replace(square_settings, cluster_gap=0, hero_mode=True, target_per_page=None, seed=2)

    def test_hero_when_placed_then_first_item_gets_hero_tile(self, hero_settings, items_factory):
        items = items_factory(11)

        page = generate_cluster_layout(items, hero_settings)[0]

        hero = page.placements[0]
        assert hero.item == items[0]
        assert (hero.x, hero.y) == (0, 0)
        assert hero.width == pytest.approx(200 / 3)
        assert hero.height == pytest.approx(12 * 100 / 18)
        assert page.placement_count == 11

    def test_hero_when_single_item_page_then_plain_split(self, hero_settings, items_factory):
        pages = generate_cluster_layout(items_factory(1), hero_settings)

        assert pages[0].placements[0].width == pytest.approx(100)

    def test_hero_when_many_items_then_all_placed_in_order(self, hero_settings, items_factory):
        items = items_factory(50)

        pages = generate_cluster_layout(items, hero_settings)

        assert flatten(pages) == items

    def test_hero_when_share_exceeds_region_then_fewer_tiles_and_warning(self, hero_settings, items_factory, caplog):
        # 2x3 grid: hero is 1x2, the right strip (3 cells) is asked for 4 tiles
        settings = replace(hero_settings, cluster_columns=2, cluster_rows=3, target_per_page=6)
        items = items_factory(6)

        with caplog.at_level(logging.WARNING, logger="catalog_toolkit.builder.layout.paginator"):
            pages = generate_cluster_layout(items, settings)

        assert [p.placement_count for p in pages] == [5, 1]
        assert flatten(pages) == items
        assert "Page 1: placed 5 tiles for quota 6" in caplog.text


class TestGenerateLayout:
    """Tests for mode dispatch."""

    def test_generate_when_grid_mode_then_grid_pages(self, square_settings, items_factory):
        settings = replace(square_settings, mode=LayoutMode.GRID, grid_columns=2, grid_rows=2)

        pages = generate_layout(items_factory(5), settings)

        assert [p.placement_count for p in pages] == [4, 1]

    def test_generate_when_cluster_mode_then_uses_rng(self, square_settings, items_factory):
        items = items_factory(15)

        first = generate_layout(items, square_settings, random.Random(5))
        second = generate_cluster_layout(items, square_settings, random.Random(5))

        assert first == second
