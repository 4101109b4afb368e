"""
Tests for largest region selection.
"""

from region_finder.regions.grower import RegionGrower
from region_finder.regions.models import Region, RegionCollection
from region_finder.regions.selector import largest_region

from tests.fixtures.region_fixtures import RED, create_separated_blocks, create_split_red_blue, create_two_squares


class TestLargestRegion:
    """Tests for largest_region."""

    def test_empty_returns_none(self):
        """Test that no regions means no largest region."""
        assert largest_region(RegionCollection.empty()) is None
        assert largest_region([]) is None

    def test_picks_biggest(self):
        """Test that the region with most pixels wins."""
        small = Region(points=[(0, 0)])
        big = Region(points=[(5, 5), (5, 6), (6, 6)])
        medium = Region(points=[(9, 9), (9, 8)])

        assert largest_region([small, big, medium]) is big

    def test_tie_goes_to_first(self):
        """Test that equal sizes resolve to the earliest region."""
        first = Region(points=[(0, 0), (0, 1)])
        second = Region(points=[(5, 5), (5, 6)])

        assert largest_region([first, second]) is first

    def test_does_not_mutate(self):
        """Test that the collection is unchanged."""
        regions = [Region(points=[(0, 0)]), Region(points=[(1, 1), (2, 2)])]
        snapshot = [list(r.points) for r in regions]
        largest_region(regions)

        assert [r.points for r in regions] == snapshot

    def test_red_half_scenario(self):
        """Test largest region of the red/blue split image is the red half."""
        regions = RegionGrower().find_regions(create_split_red_blue((10, 10)), RED)
        largest = largest_region(regions)

        assert largest is regions[0]
        assert largest.size == 50

    def test_small_blocks_scenario(self):
        """Test that discarded blocks leave no largest region."""
        regions = RegionGrower().find_regions(create_separated_blocks(block_size=5, count=3), RED)

        assert largest_region(regions) is None

    def test_largest_is_at_least_every_other(self):
        """Test that the selected region is not smaller than any other."""
        regions = RegionGrower(min_region=1).find_regions(create_two_squares(), RED)
        largest = largest_region(regions)

        assert all(largest.size >= r.size for r in regions)
        assert largest.points[0] == (30, 2)
