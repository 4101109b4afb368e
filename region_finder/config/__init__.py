"""
Configuration for the region finder.
"""

from .finder_config import RegionFinderConfig, DEFAULT_MAX_COLOR_DIFF, DEFAULT_MIN_REGION

__all__ = [
    "RegionFinderConfig",
    "DEFAULT_MAX_COLOR_DIFF",
    "DEFAULT_MIN_REGION",
]
