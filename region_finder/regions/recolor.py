"""
Debug visualization: paint each region a random color.
"""

from typing import Iterable, Optional, Union

import numpy as np

from .models import Color, Region
from .pixel_grid import PixelGrid


def random_color(rng: np.random.Generator) -> Color:
    """Draw a color uniformly from the 24-bit RGB space."""
    red, green, blue = (int(c) for c in rng.integers(0, 256, size=3))
    return Color(red, green, blue)


def recolor_regions(
    image: Union[PixelGrid, np.ndarray],
    regions: Iterable[Region],
    rng: Optional[np.random.Generator] = None,
) -> PixelGrid:
    """
    Copy an image and fill every region with its own random color.

    Pixels outside all regions keep their original value. The input
    image is never modified.

    Args:
        image: Source grid or BGR array
        regions: Regions to paint, e.g. a RegionCollection
        rng: Random generator; pass a seeded one for reproducible colors

    Returns:
        New PixelGrid with the same dimensions as the source
    """
    if rng is None:
        rng = np.random.default_rng()

    recolored = PixelGrid.wrap(image).copy()
    data = recolored.data

    for region in regions:
        color = random_color(rng)
        if not region.points:
            continue
        pts = np.array(region.points, dtype=np.intp)
        data[pts[:, 1], pts[:, 0]] = color.to_bgr()

    return recolored
