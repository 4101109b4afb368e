"""
Tests for the stateful RegionFinder.
"""

import pytest
import numpy as np

from region_finder.config.finder_config import RegionFinderConfig
from region_finder.regions.finder import RegionFinder
from region_finder.regions.models import RegionCollection

from tests.fixtures.region_fixtures import BLUE, RED, create_split_red_blue, create_two_squares


class TestRegionFinder:
    """Tests for RegionFinder."""

    def test_find_regions_requires_image(self):
        """Test that searching without an image raises RuntimeError."""
        finder = RegionFinder()

        with pytest.raises(RuntimeError, match="No image set"):
            finder.find_regions(RED)

    def test_recolor_requires_image(self):
        """Test that recoloring without an image raises RuntimeError."""
        with pytest.raises(RuntimeError, match="No image set"):
            RegionFinder().recolor_image()

    def test_initial_state(self):
        """Test nothing is found before the first search."""
        finder = RegionFinder(create_split_red_blue())

        assert isinstance(finder.regions, RegionCollection)
        assert len(finder.regions) == 0
        assert finder.largest_region() is None
        assert finder.recolored_image is None

    def test_find_and_largest(self):
        """Test search results are stored and the largest is selectable."""
        finder = RegionFinder(create_split_red_blue())
        regions = finder.find_regions(RED)

        assert finder.regions is regions
        assert finder.largest_region().size == 50

    def test_new_target_replaces_regions(self):
        """Test that a second search does not keep old regions."""
        finder = RegionFinder(create_split_red_blue())
        finder.find_regions(RED)
        finder.find_regions(BLUE)

        assert len(finder.regions) == 1
        assert all(x >= 5 for x, _ in finder.regions[0].points)

    def test_set_image_clears_results(self):
        """Test that a new image drops previous regions and recoloring."""
        finder = RegionFinder(create_split_red_blue())
        finder.find_regions(RED)
        finder.recolor_image(np.random.default_rng(0))

        finder.set_image(create_two_squares())

        assert len(finder.regions) == 0
        assert finder.recolored_image is None
        assert finder.regions.image_shape == (40, 60)

    def test_recolor_image(self):
        """Test recoloring stores and returns the new image."""
        image = create_split_red_blue()
        finder = RegionFinder(image)
        finder.find_regions(RED)
        recolored = finder.recolor_image(np.random.default_rng(0))

        assert finder.recolored_image is recolored
        assert np.array_equal(recolored.data[:, 5:], image[:, 5:])
        assert len({recolored.get_pixel(x, y) for x, y in finder.largest_region()}) == 1

    def test_color_at(self):
        """Test picking the target color from a pixel."""
        finder = RegionFinder(create_split_red_blue())

        assert finder.color_at(0, 0) == RED
        assert finder.color_at(9, 9) == BLUE

    def test_config(self):
        """Test that the config reaches the grower."""
        finder = RegionFinder(create_two_squares(), config=RegionFinderConfig(min_region=100))
        finder.find_regions(RED)

        assert finder.config.min_region == 100
        assert len(finder.regions) == 1
        assert finder.largest_region().size == 144
