"""
Configuration for region finding.

Holds the color tolerance and minimum region size used by the region grower.
"""

import numbers
from dataclasses import dataclass
from typing import Dict, Any


DEFAULT_MAX_COLOR_DIFF = 20
DEFAULT_MIN_REGION = 50


@dataclass
class RegionFinderConfig:
    """
    Configuration for region growing.

    Attributes:
        max_color_diff: Maximum per-channel difference for a pixel to match the target (0-255)
        min_region: Minimum number of pixels for a region to be kept
    """
    max_color_diff: int = DEFAULT_MAX_COLOR_DIFF
    min_region: int = DEFAULT_MIN_REGION

    def __post_init__(self):
        """Validate configuration values."""
        self._validate()

    def _validate(self):
        """Validate all configuration values."""
        for name in ("max_color_diff", "min_region"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            setattr(self, name, int(value))

        if not (0 <= self.max_color_diff <= 255):
            raise ValueError(
                f"max_color_diff must be between 0 and 255, got {self.max_color_diff}"
            )

        if self.min_region < 0:
            raise ValueError(
                f"min_region must be >= 0, got {self.min_region}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "max_color_diff": self.max_color_diff,
            "min_region": self.min_region,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RegionFinderConfig":
        """
        Create from dictionary (e.g., from YAML config).

        Raises:
            ValueError: If data is not a mapping or holds invalid values
        """
        if not isinstance(data, dict):
            raise ValueError(f"Region finder config must be a mapping, got {type(data).__name__}")

        return cls(
            max_color_diff=data.get("max_color_diff", DEFAULT_MAX_COLOR_DIFF),
            min_region=data.get("min_region", DEFAULT_MIN_REGION),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "RegionFinderConfig":
        """
        Load configuration from YAML file.

        Raises:
            ValueError: If the file is not valid YAML or not a valid config
        """
        import yaml

        with open(yaml_path, "r") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

        if data is None:
            data = {}
        if isinstance(data, dict) and "region_finder" in data:
            data = data["region_finder"]

        return cls.from_dict(data)

    @classmethod
    def default(cls) -> "RegionFinderConfig":
        """Create default configuration."""
        return cls()
