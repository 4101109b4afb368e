"""
Region Finding Module

Grows connected regions of a target color in an image, picks the
largest one, and renders regions in random colors for inspection.
"""

from .models import (
    Color,
    Region,
    RegionCollection,
)
from .pixel_grid import PixelGrid
from .color_match import colors_match, match_mask
from .grower import RegionGrower
from .selector import largest_region
from .recolor import recolor_regions
from .finder import RegionFinder

__all__ = [
    "Color",
    "Region",
    "RegionCollection",
    "PixelGrid",
    "colors_match",
    "match_mask",
    "RegionGrower",
    "largest_region",
    "recolor_regions",
    "RegionFinder",
]
