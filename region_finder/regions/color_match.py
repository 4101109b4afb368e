"""
Color similarity tests against a target color.
"""

from typing import Optional

import numpy as np

from ..config.finder_config import DEFAULT_MAX_COLOR_DIFF
from .models import Color
from .pixel_grid import PixelGrid


def _check_tolerance(max_color_diff: int):
    if not (0 <= max_color_diff <= 255):
        raise ValueError(f"max_color_diff must be between 0 and 255, got {max_color_diff}")


def colors_match(
    c1: Optional[Color],
    c2: Optional[Color],
    max_color_diff: int = DEFAULT_MAX_COLOR_DIFF,
) -> bool:
    """
    Test whether two colors are similar enough.

    Each of the red, green and blue differences must be at most
    max_color_diff (inclusive). Missing colors never match.

    Example:
        >>> colors_match(Color(100, 100, 100), Color(120, 80, 100))
        True
    """
    _check_tolerance(max_color_diff)
    if c1 is None or c2 is None:
        return False

    diff_red = abs(c1.red - c2.red)
    diff_green = abs(c1.green - c2.green)
    diff_blue = abs(c1.blue - c2.blue)
    return diff_red <= max_color_diff and diff_green <= max_color_diff and diff_blue <= max_color_diff


def match_mask(
    image: PixelGrid,
    target: Color,
    max_color_diff: int = DEFAULT_MAX_COLOR_DIFF,
) -> np.ndarray:
    """
    Evaluate colors_match against target for every pixel at once.

    Args:
        image: Grid to test
        target: Color to compare against
        max_color_diff: Per-channel tolerance

    Returns:
        (height, width) bool array, True where the pixel matches
    """
    _check_tolerance(max_color_diff)
    if target is None:
        raise ValueError("Target color must not be None")

    # int16 so the subtraction cannot wrap around
    diff = np.abs(image.data.astype(np.int16) - np.array(target.to_bgr(), dtype=np.int16))
    return np.all(diff <= max_color_diff, axis=2)
