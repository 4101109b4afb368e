"""
Pixel grid wrapper around BGR image arrays.
"""

from typing import Tuple, Union

import cv2
import numpy as np

from .models import Color


class PixelGrid:
    """
    A width x height grid of 8-bit BGR pixels.

    Wraps the (height, width, 3) uint8 arrays produced by cv2.imread and
    gives coordinate-based access in (x, y) order.

    Example:
        >>> grid = PixelGrid(cv2.imread("frame.png"))
        >>> grid.get_pixel(10, 20)
        Color(red=..., green=..., blue=...)
    """

    def __init__(self, data: np.ndarray):
        """
        Args:
            data: BGR image, grayscale image or BGRA image

        Raises:
            ValueError: If data is None, empty, or not an image-shaped array
        """
        self._data = self._normalize(data)

    @staticmethod
    def _normalize(data: np.ndarray) -> np.ndarray:
        if data is None:
            raise ValueError("Image must not be None")

        data = np.asarray(data)
        if data.size == 0:
            raise ValueError(f"Image must have width and height >= 1, got shape {data.shape}")

        if data.dtype != np.uint8:
            raise ValueError(f"Image must be uint8, got {data.dtype}")

        if data.ndim == 2:
            return cv2.cvtColor(data, cv2.COLOR_GRAY2BGR)
        if data.ndim == 3 and data.shape[2] == 4:
            return cv2.cvtColor(data, cv2.COLOR_BGRA2BGR)
        if data.ndim == 3 and data.shape[2] == 3:
            return data

        raise ValueError(f"Unsupported image shape {data.shape}, expected (h, w), (h, w, 3) or (h, w, 4)")

    @classmethod
    def wrap(cls, image: Union["PixelGrid", np.ndarray]) -> "PixelGrid":
        """Return image unchanged if it is already a PixelGrid, otherwise wrap it."""
        if isinstance(image, PixelGrid):
            return image
        return cls(image)

    @classmethod
    def filled(cls, width: int, height: int, color: Color) -> "PixelGrid":
        """Create a grid of a single color."""
        data = np.zeros((height, width, 3), dtype=np.uint8)
        data[:, :] = color.to_bgr()
        return cls(data)

    @property
    def data(self) -> np.ndarray:
        """Underlying (height, width, 3) BGR array."""
        return self._data

    @property
    def width(self) -> int:
        return int(self._data.shape[1])

    @property
    def height(self) -> int:
        return int(self._data.shape[0])

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width) of the grid."""
        return (self.height, self.width)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x: int, y: int) -> Color:
        """
        Get the color at (x, y).

        Raises:
            IndexError: If (x, y) is outside the grid
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} grid")
        return Color.from_bgr(self._data[y, x])

    def set_pixel(self, x: int, y: int, color: Color):
        """
        Set the color at (x, y).

        Raises:
            IndexError: If (x, y) is outside the grid
        """
        if not self.in_bounds(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} grid")
        self._data[y, x] = color.to_bgr()

    def copy(self) -> "PixelGrid":
        """Deep copy of the grid."""
        return PixelGrid(self._data.copy())

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self._data.shape == other._data.shape and np.array_equal(self._data, other._data)

    def __repr__(self) -> str:
        return f"PixelGrid(width={self.width}, height={self.height})"
