"""
Selection of the largest region from a region-growing pass.
"""

from typing import Iterable, Optional

from .models import Region


def largest_region(regions: Iterable[Region]) -> Optional[Region]:
    """
    Return the region with the most pixels.

    Ties go to the region found first. Returns None if there are no regions.

    Example:
        >>> brush = largest_region(grower.find_regions(image, target))
        >>> if brush is None:
        ...     return
    """
    largest = None
    for region in regions:
        if largest is None or region.size > largest.size:
            largest = region
    return largest
