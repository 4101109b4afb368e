"""
Tests for the PixelGrid image wrapper.
"""

import pytest
import numpy as np

from region_finder.regions.models import Color
from region_finder.regions.pixel_grid import PixelGrid


class TestPixelGrid:
    """Tests for PixelGrid construction and pixel access."""

    def test_dimensions(self):
        """Test width/height come from array columns/rows."""
        grid = PixelGrid(np.zeros((20, 30, 3), dtype=np.uint8))

        assert grid.width == 30
        assert grid.height == 20
        assert grid.shape == (20, 30)

    def test_get_pixel_reads_bgr(self):
        """Test that get_pixel converts BGR storage to an RGB Color."""
        data = np.zeros((5, 5, 3), dtype=np.uint8)
        data[2, 3] = (0, 0, 255)  # red in BGR
        grid = PixelGrid(data)

        assert grid.get_pixel(3, 2) == Color(255, 0, 0)
        assert grid.get_pixel(2, 3) == Color(0, 0, 0)

    def test_set_pixel(self):
        """Test that set_pixel writes BGR at (row=y, col=x)."""
        grid = PixelGrid(np.zeros((5, 5, 3), dtype=np.uint8))
        grid.set_pixel(4, 1, Color(10, 20, 30))

        assert tuple(grid.data[1, 4]) == (30, 20, 10)

    def test_out_of_bounds_raises(self):
        """Test that coordinates outside the grid raise IndexError."""
        grid = PixelGrid(np.zeros((5, 5, 3), dtype=np.uint8))

        with pytest.raises(IndexError):
            grid.get_pixel(5, 0)
        with pytest.raises(IndexError):
            grid.set_pixel(0, -1, Color(0, 0, 0))

    def test_none_raises(self):
        """Test that a missing image fails fast."""
        with pytest.raises(ValueError, match="must not be None"):
            PixelGrid(None)

    def test_zero_size_raises(self):
        """Test that an empty image fails fast."""
        with pytest.raises(ValueError, match="width and height >= 1"):
            PixelGrid(np.zeros((0, 10, 3), dtype=np.uint8))

    def test_wrong_dtype_raises(self):
        """Test that non-uint8 arrays are rejected."""
        with pytest.raises(ValueError, match="uint8"):
            PixelGrid(np.zeros((5, 5, 3), dtype=np.float32))

    def test_unsupported_shape_raises(self):
        """Test that arrays with 2 channels are rejected."""
        with pytest.raises(ValueError, match="Unsupported image shape"):
            PixelGrid(np.zeros((5, 5, 2), dtype=np.uint8))

    def test_grayscale_converted(self):
        """Test that grayscale images become 3-channel."""
        grid = PixelGrid(np.full((4, 4), 90, dtype=np.uint8))

        assert grid.data.shape == (4, 4, 3)
        assert grid.get_pixel(0, 0) == Color(90, 90, 90)

    def test_bgra_alpha_dropped(self):
        """Test that alpha is ignored."""
        data = np.zeros((4, 4, 4), dtype=np.uint8)
        data[:, :] = (1, 2, 3, 0)
        grid = PixelGrid(data)

        assert grid.data.shape == (4, 4, 3)
        assert grid.get_pixel(0, 0) == Color(3, 2, 1)

    def test_copy_is_independent(self):
        """Test that copies do not share pixel data."""
        grid = PixelGrid(np.zeros((3, 3, 3), dtype=np.uint8))
        copy = grid.copy()
        copy.set_pixel(0, 0, Color(255, 255, 255))

        assert grid.get_pixel(0, 0) == Color(0, 0, 0)
        assert copy != grid

    def test_wrap_returns_same_grid(self):
        """Test that wrapping a PixelGrid does not copy it."""
        grid = PixelGrid(np.zeros((3, 3, 3), dtype=np.uint8))

        assert PixelGrid.wrap(grid) is grid

    def test_filled(self):
        """Test single-color construction."""
        grid = PixelGrid.filled(3, 2, Color(7, 8, 9))

        assert grid.shape == (2, 3)
        assert grid.get_pixel(2, 1) == Color(7, 8, 9)
