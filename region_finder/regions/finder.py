"""
Stateful region finder for interactive use.

Keeps the current image, the regions from the last search and the
last recolored image, the way a camera-driven app polls them frame
by frame.
"""

import logging
from typing import Optional, Union

import numpy as np

from ..config.finder_config import RegionFinderConfig
from .grower import RegionGrower
from .models import Color, Region, RegionCollection
from .pixel_grid import PixelGrid
from .recolor import recolor_regions
from .selector import largest_region

logger = logging.getLogger(__name__)


class RegionFinder:
    """
    Finds and holds regions in an image.

    Example:
        >>> finder = RegionFinder(frame)
        >>> finder.find_regions(finder.color_at(120, 80))
        >>> brush = finder.largest_region()
        >>> preview = finder.recolor_image()
    """

    def __init__(
        self,
        image: Optional[Union[PixelGrid, np.ndarray]] = None,
        config: Optional[RegionFinderConfig] = None,
    ):
        self.grower = RegionGrower(config=config)
        self._image: Optional[PixelGrid] = None
        self._regions = RegionCollection.empty()
        self._recolored: Optional[PixelGrid] = None

        if image is not None:
            self.set_image(image)

    @property
    def config(self) -> RegionFinderConfig:
        return self.grower.config

    @property
    def image(self) -> Optional[PixelGrid]:
        return self._image

    def set_image(self, image: Union[PixelGrid, np.ndarray]):
        """Replace the image to search. Previous results are dropped."""
        self._image = PixelGrid.wrap(image)
        self._regions = RegionCollection.empty(image_shape=self._image.shape)
        self._recolored = None

    @property
    def regions(self) -> RegionCollection:
        """Regions from the most recent find_regions call."""
        return self._regions

    @property
    def recolored_image(self) -> Optional[PixelGrid]:
        """Image from the most recent recolor_image call, if any."""
        return self._recolored

    def _require_image(self) -> PixelGrid:
        if self._image is None:
            raise RuntimeError("No image set; call set_image() first")
        return self._image

    def color_at(self, x: int, y: int) -> Color:
        """Color of the current image at (x, y), e.g. under a mouse click."""
        return self._require_image().get_pixel(x, y)

    def find_regions(self, target: Color) -> RegionCollection:
        """
        Search the current image for regions matching target.

        Raises:
            RuntimeError: If no image has been set
            ValueError: If target is None
        """
        image = self._require_image()
        self._regions = self.grower.find_regions(image, target)
        logger.debug(f"Stored {len(self._regions)} regions for {target.to_hex()}")
        return self._regions

    def largest_region(self) -> Optional[Region]:
        """Largest region from the last search, or None if nothing was found."""
        return largest_region(self._regions)

    def recolor_image(self, rng: Optional[np.random.Generator] = None) -> PixelGrid:
        """
        Recolor the current image with one random color per region.

        Raises:
            RuntimeError: If no image has been set
        """
        image = self._require_image()
        self._recolored = recolor_regions(image, self._regions, rng)
        return self._recolored
