"""
Region growing (flood fill) over a pixel grid.

Finds connected groups of pixels whose color matches a target color,
using breadth-first expansion with 8-connectivity.
"""

import logging
from collections import deque
from typing import List, Optional, Union

import numpy as np

from ..config.finder_config import RegionFinderConfig
from .color_match import match_mask
from .models import Color, Region, RegionCollection
from .pixel_grid import PixelGrid

logger = logging.getLogger(__name__)


class RegionGrower:
    """
    Grows regions of a target color in an image.

    Pixels are scanned in raster order. Each unvisited pixel that matches
    the target seeds a breadth-first flood fill over its 8-connected
    matching neighbours. Regions smaller than min_region are dropped.

    One instance keeps a visited buffer between calls and must not be
    used by two threads at once.

    Example:
        >>> grower = RegionGrower(max_color_diff=20, min_region=50)
        >>> regions = grower.find_regions(image, Color(255, 0, 0))
        >>> print(f"Found {len(regions)} regions")
    """

    def __init__(
        self,
        max_color_diff: Optional[int] = None,
        min_region: Optional[int] = None,
        config: Optional[RegionFinderConfig] = None,
    ):
        """
        Initialize the region grower.

        Args:
            max_color_diff: Override per-channel color tolerance from config.
            min_region: Override minimum region size from config.
            config: Region finder configuration. If None, uses defaults.
        """
        config = config or RegionFinderConfig.default()

        # Explicit arguments win over the config and are validated the same way
        self.config = RegionFinderConfig(
            max_color_diff=config.max_color_diff if max_color_diff is None else max_color_diff,
            min_region=config.min_region if min_region is None else min_region,
        )

        self._visited = bytearray()
        self._shape = (0, 0)

    @property
    def max_color_diff(self) -> int:
        return self.config.max_color_diff

    @property
    def min_region(self) -> int:
        return self.config.min_region

    @property
    def visited(self) -> np.ndarray:
        """(height, width) bool view of the visited buffer from the last pass."""
        return np.frombuffer(bytes(self._visited), dtype=np.bool_).reshape(self._shape)

    def find_regions(
        self,
        image: Union[PixelGrid, np.ndarray],
        target: Color,
    ) -> RegionCollection:
        """
        Find all regions of pixels matching the target color.

        Args:
            image: Grid or BGR array to search
            target: Color the regions must match

        Returns:
            RegionCollection in discovery order

        Raises:
            ValueError: If image or target is missing, or the image is empty
        """
        if target is None:
            raise ValueError("Target color must not be None")
        grid = PixelGrid.wrap(image)

        width, height = grid.width, grid.height
        matches = match_mask(grid, target, self.max_color_diff).ravel().tolist()

        # Fresh scratch state for every pass
        self._shape = (height, width)
        self._visited = bytearray(width * height)
        visited = self._visited

        regions: List[Region] = []
        discarded = 0

        for y in range(height):
            for x in range(width):
                index = y * width + x
                if visited[index]:
                    continue
                if not matches[index]:
                    visited[index] = 1
                    continue

                region = self._grow(x, y, width, height, matches)
                if region.size >= self.min_region:
                    regions.append(region)
                else:
                    discarded += 1

        logger.debug(
            f"Target {target.to_hex()}: kept {len(regions)} regions, "
            f"discarded {discarded} below {self.min_region} pixels"
        )

        return RegionCollection(
            regions=regions,
            target=target,
            image_shape=(height, width),
        )

    def _grow(
        self,
        seed_x: int,
        seed_y: int,
        width: int,
        height: int,
        matches: List[bool],
    ) -> Region:
        """
        Flood fill from a seed pixel.

        Neighbours are queued in row-major order over the clamped 3x3
        window. A pixel may be queued more than once; it joins the
        region only when popped while still unvisited.
        """
        visited = self._visited
        points = []
        to_visit = deque([(seed_x, seed_y)])

        while to_visit:
            x, y = to_visit.popleft()
            index = y * width + x
            if visited[index]:
                continue

            visited[index] = 1
            points.append((x, y))

            for ny in range(max(y - 1, 0), min(y + 2, height)):
                row = ny * width
                for nx in range(max(x - 1, 0), min(x + 2, width)):
                    if matches[row + nx] and not visited[row + nx]:
                        to_visit.append((nx, ny))

        return Region(points=points)
