"""Configuration loading for navigation tunables.

YAML files are read into a ConfigLoader, which offers dotted-key access.
NavigationConfig collects the distances used by the taxi graph, the path
finder and route assembly.

Typical usage example:
    from airnav.core.config import ConfigLoader, NavigationConfig

    loader = ConfigLoader.load("config/navigation.yaml")
    nav_config = NavigationConfig.from_loader(loader)
"""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Read-only view over a YAML configuration document.

    Examples:
        >>> config = ConfigLoader.load("config/navigation.yaml")
        >>> merge = config.get("navigation.taxi.merge_distance_m", default=30.0)
    """

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable or not a mapping.
        """
        path = Path(path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value using dot notation, e.g. "navigation.taxi.merge_distance_m"."""
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Raises:
            ConfigError: If section not found or not a mapping.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one (other wins)."""
        self._data = self._merge_dicts(self._data, other._data)

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value

        return result

    def to_dict(self) -> dict[str, Any]:
        return self._data.copy()


@dataclass(frozen=True)
class NavigationConfig:
    """Distances and angles used to build and search taxi routes.

    The defaults are the values every built-in facility was surveyed with.

    Attributes:
        merge_distance_m: Endpoints closer than this share a graph node.
        connection_distance_m: Radius used to snap an off-graph point to a node.
        start_search_multiplier: Retry factor on connection_distance_m for the start.
        end_search_multiplier: Search factor on connection_distance_m for the target.
        interpolation_threshold_m: Gap from the start that triggers a lead-in point.
        hold_short_distance_m: Offset of the hold-short point before a threshold.
        final_point_tolerance_m: A target closer than this to the last route
            point is not appended again.
        glideslope_angle_deg: Glideslope used for generated approaches.
    """

    merge_distance_m: float = 30.0
    connection_distance_m: float = 50.0
    start_search_multiplier: float = 3.0
    end_search_multiplier: float = 2.0
    interpolation_threshold_m: float = 50.0
    hold_short_distance_m: float = 50.0
    final_point_tolerance_m: float = 20.0
    glideslope_angle_deg: float = 3.0

    @classmethod
    def from_loader(cls, loader: ConfigLoader) -> "NavigationConfig":
        """Build a NavigationConfig from the "navigation" section of a loader.

        Missing keys keep their defaults.

        Raises:
            ConfigError: If a value is not a positive number.
        """
        defaults = cls()
        keys = {
            "merge_distance_m": "navigation.taxi.merge_distance_m",
            "connection_distance_m": "navigation.taxi.connection_distance_m",
            "start_search_multiplier": "navigation.taxi.start_search_multiplier",
            "end_search_multiplier": "navigation.taxi.end_search_multiplier",
            "interpolation_threshold_m": "navigation.taxi.interpolation_threshold_m",
            "hold_short_distance_m": "navigation.route.hold_short_distance_m",
            "final_point_tolerance_m": "navigation.route.final_point_tolerance_m",
            "glideslope_angle_deg": "navigation.approach.glideslope_angle_deg",
        }

        values: dict[str, float] = {}
        for attr, key in keys.items():
            raw = loader.get(key, getattr(defaults, attr))
            try:
                value = float(raw)
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid value for {key}: {raw!r}") from e
            if value <= 0:
                raise ConfigError(f"{key} must be positive, got {value}")
            values[attr] = value

        config = cls(**values)
        logger.debug("Navigation config: %s", asdict(config))
        return config
