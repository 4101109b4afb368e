"""
Data structures for region finding results.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Dict, Any, Iterator, Optional
import numpy as np


Point = Tuple[int, int]


@dataclass(frozen=True)
class Color:
    """
    An RGB color with 8-bit channels.

    Images are stored in OpenCV's BGR order; use from_bgr / to_bgr
    when moving between a Color and raw pixel data.
    """
    red: int
    green: int
    blue: int

    def __post_init__(self):
        """Validate channel values."""
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if not (0 <= value <= 255):
                raise ValueError(f"{name} must be 0-255, got {value}")
            # Plain ints keep to_dict() JSON-serializable
            object.__setattr__(self, name, int(value))

    @classmethod
    def from_bgr(cls, bgr) -> "Color":
        """Create from a (B, G, R) triple, e.g. a pixel of a cv2 image."""
        return cls(red=int(bgr[2]), green=int(bgr[1]), blue=int(bgr[0]))

    def to_bgr(self) -> Tuple[int, int, int]:
        """Convert to a (B, G, R) tuple for cv2 / numpy images."""
        return (self.blue, self.green, self.red)

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @classmethod
    def from_string(cls, value: str) -> "Color":
        """
        Parse a color from "R,G,B" or "#RRGGBB".

        Raises:
            ValueError: If the string is not a valid color
        """
        value = value.strip()
        if value.startswith("#"):
            if len(value) != 7:
                raise ValueError(f"Hex color must look like #RRGGBB, got {value!r}")
            return cls(int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16))

        parts = [p.strip() for p in value.split(",")]
        if len(parts) != 3:
            raise ValueError(f"Color must have 3 components (R,G,B), got {value!r}")
        return cls(int(parts[0]), int(parts[1]), int(parts[2]))

    def to_hex(self) -> str:
        return "#" + "".join(f"{c:02x}" for c in self.to_rgb())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {"r": self.red, "g": self.green, "b": self.blue}


@dataclass
class Region:
    """
    A connected group of pixels that all match one target color.

    Attributes:
        points: (x, y) coordinates in the order they were added
    """
    points: List[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __contains__(self, point) -> bool:
        return tuple(point) in set(self.points)

    @property
    def size(self) -> int:
        """Number of pixels in the region."""
        return len(self.points)

    @property
    def bounding_box(self) -> Tuple[int, int, int, int]:
        """
        Inclusive bounding box as (x_min, y_min, x_max, y_max).

        Raises:
            ValueError: If the region has no points
        """
        if not self.points:
            raise ValueError("Empty region has no bounding box")
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    @property
    def centroid(self) -> Tuple[float, float]:
        """Mean (x, y) of the region's points."""
        if not self.points:
            raise ValueError("Empty region has no centroid")
        pts = np.array(self.points, dtype=np.float64)
        cx, cy = pts.mean(axis=0)
        return (float(cx), float(cy))

    def to_mask(self, shape: Tuple[int, int]) -> np.ndarray:
        """
        Render the region as a binary mask.

        Args:
            shape: (height, width) of the mask

        Returns:
            uint8 mask where region pixels are 255, others are 0
        """
        mask = np.zeros(shape[:2], dtype=np.uint8)
        if self.points:
            pts = np.array(self.points, dtype=np.intp)
            mask[pts[:, 1], pts[:, 0]] = 255
        return mask

    def to_dict(self, include_points: bool = False) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        result: Dict[str, Any] = {"size": self.size}
        if self.points:
            x_min, y_min, x_max, y_max = self.bounding_box
            cx, cy = self.centroid
            result["bounding_box"] = {
                "x_min": x_min, "y_min": y_min, "x_max": x_max, "y_max": y_max,
            }
            result["centroid"] = {"x": round(cx, 2), "y": round(cy, 2)}
        if include_points:
            result["points"] = [{"x": int(x), "y": int(y)} for x, y in self.points]
        return result


@dataclass
class RegionCollection:
    """
    Regions found in one region-growing pass.

    Attributes:
        regions: Regions in discovery order (raster order of each seed pixel)
        target: Color the regions were grown against
        image_shape: (height, width) of the searched image
    """
    regions: List[Region] = field(default_factory=list)
    target: Optional[Color] = None
    image_shape: Tuple[int, int] = field(default=(0, 0))

    def __len__(self) -> int:
        return len(self.regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(self.regions)

    def __getitem__(self, index: int) -> Region:
        return self.regions[index]

    def __bool__(self) -> bool:
        return bool(self.regions)

    @property
    def total_area(self) -> int:
        """Total number of pixels covered by all regions."""
        return sum(r.size for r in self.regions)

    @property
    def coverage_ratio(self) -> float:
        """Fraction of the image covered by regions (0.0-1.0)."""
        from .metrics import calculate_coverage

        return calculate_coverage(self.regions, self.image_shape)

    def to_dict(self, include_points: bool = False) -> Dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "target": self.target.to_dict() if self.target is not None else None,
            "image_shape": {
                "height": int(self.image_shape[0]),
                "width": int(self.image_shape[1]),
            },
            "region_count": len(self.regions),
            "total_area": self.total_area,
            "coverage_ratio": round(float(self.coverage_ratio), 4),
            "regions": [r.to_dict(include_points) for r in self.regions],
        }

    @classmethod
    def empty(
        cls,
        target: Optional[Color] = None,
        image_shape: Tuple[int, int] = (0, 0),
    ) -> "RegionCollection":
        """Create an empty collection (no regions found)."""
        return cls(regions=[], target=target, image_shape=image_shape)
