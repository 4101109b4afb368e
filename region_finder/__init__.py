"""
Region Finder Package

Flood-fill segmentation of images by target color: finds connected
regions, selects the largest, and recolors regions for inspection.
"""

from .config import RegionFinderConfig
from .regions import (
    Color,
    Region,
    RegionCollection,
    PixelGrid,
    colors_match,
    match_mask,
    RegionGrower,
    largest_region,
    recolor_regions,
    RegionFinder,
)

__all__ = [
    "RegionFinderConfig",
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
