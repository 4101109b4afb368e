"""
Metrics calculations for found regions.
"""

from typing import Any, Dict, Iterable, Tuple

from .models import Region


def calculate_coverage(
    regions: Iterable[Region],
    image_shape: Tuple[int, int],
) -> float:
    """
    Calculate what fraction of the image is covered by regions.

    Regions from one pass never overlap, so their sizes can be summed.

    Args:
        regions: Regions from one region-growing pass
        image_shape: (height, width) of the searched image

    Returns:
        Coverage ratio between 0.0 and 1.0
    """
    height, width = image_shape[:2]
    total_pixels = height * width

    if total_pixels == 0:
        return 0.0

    total_area = sum(r.size for r in regions)

    return min(total_area / total_pixels, 1.0)


def region_stats(region: Region) -> Dict[str, Any]:
    """
    Summarize a region.

    fill_ratio is the share of the bounding box the region occupies;
    1.0 for a solid rectangle.
    """
    stats = region.to_dict(include_points=False)
    if region.size == 0:
        stats["fill_ratio"] = 0.0
        return stats

    x_min, y_min, x_max, y_max = region.bounding_box
    box_area = (x_max - x_min + 1) * (y_max - y_min + 1)
    stats["fill_ratio"] = round(region.size / box_area, 4)
    return stats
