"""Tests for configuration loading and navigation tunables."""

from pathlib import Path

import pytest

from airnav.core.config import ConfigError, ConfigLoader, NavigationConfig

REPO_CONFIG = Path(__file__).resolve().parents[2] / "config" / "navigation.yaml"


def write_yaml(directory: Path, text: str, name: str = "navigation.yaml") -> Path:
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path


class TestConfigLoader:
    """Test YAML loading and dotted-key access."""

    def test_load_and_get(self, tmp_path: Path) -> None:
        """Test nested values are reachable with dot notation."""
        path = write_yaml(tmp_path, "navigation:\n  taxi:\n    merge_distance_m: 25.0\n")
        loader = ConfigLoader.load(path)

        assert loader.get("navigation.taxi.merge_distance_m") == 25.0
        assert loader.get("navigation.taxi.missing", default=1.5) == 1.5
        assert loader.get("nothing.here") is None

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader.load(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises ConfigError."""
        path = write_yaml(tmp_path, "navigation: [unclosed\n")
        with pytest.raises(ConfigError, match="Failed to load"):
            ConfigLoader.load(path)

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        """Test a list at the root is rejected."""
        path = write_yaml(tmp_path, "- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            ConfigLoader.load(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file loads as an empty configuration."""
        loader = ConfigLoader.load(write_yaml(tmp_path, ""))
        assert loader.to_dict() == {}

    def test_get_section(self, tmp_path: Path) -> None:
        """Test section access and its errors."""
        path = write_yaml(tmp_path, "navigation:\n  route:\n    hold_short_distance_m: 60\n")
        loader = ConfigLoader.load(path)

        assert loader.get_section("navigation.route") == {"hold_short_distance_m": 60}
        with pytest.raises(ConfigError, match="not found"):
            loader.get_section("navigation.approach")
        with pytest.raises(ConfigError, match="not a section"):
            loader.get_section("navigation.route.hold_short_distance_m")

    def test_merge_overrides_nested_keys(self) -> None:
        """Test merge keeps base keys and lets the other side win."""
        base = ConfigLoader({"navigation": {"taxi": {"merge_distance_m": 30, "connection_distance_m": 50}}})
        override = ConfigLoader({"navigation": {"taxi": {"merge_distance_m": 20}}})

        base.merge(override)

        assert base.get("navigation.taxi.merge_distance_m") == 20
        assert base.get("navigation.taxi.connection_distance_m") == 50


class TestNavigationConfig:
    """Test building NavigationConfig from a loader."""

    def test_defaults(self) -> None:
        """Test default tunables."""
        config = NavigationConfig()
        assert config.merge_distance_m == 30.0
        assert config.connection_distance_m == 50.0
        assert config.start_search_multiplier == 3.0
        assert config.end_search_multiplier == 2.0
        assert config.interpolation_threshold_m == 50.0
        assert config.hold_short_distance_m == 50.0
        assert config.final_point_tolerance_m == 20.0
        assert config.glideslope_angle_deg == 3.0

    def test_repository_config_matches_defaults(self) -> None:
        """Test the shipped navigation.yaml reproduces the defaults."""
        loader = ConfigLoader.load(REPO_CONFIG)
        assert NavigationConfig.from_loader(loader) == NavigationConfig()

    def test_partial_override(self, tmp_path: Path) -> None:
        """Test missing keys keep their defaults."""
        path = write_yaml(
            tmp_path,
            "navigation:\n"
            "  taxi:\n"
            "    merge_distance_m: 15\n"
            "  approach:\n"
            "    glideslope_angle_deg: 3.5\n",
        )
        config = NavigationConfig.from_loader(ConfigLoader.load(path))

        assert config.merge_distance_m == 15.0
        assert config.glideslope_angle_deg == 3.5
        assert config.hold_short_distance_m == 50.0

    def test_rejects_non_numeric(self) -> None:
        """Test a non-numeric value raises ConfigError."""
        loader = ConfigLoader({"navigation": {"taxi": {"connection_distance_m": "far"}}})
        with pytest.raises(ConfigError, match="Invalid value"):
            NavigationConfig.from_loader(loader)

    def test_rejects_non_positive(self) -> None:
        """Test zero or negative distances raise ConfigError."""
        loader = ConfigLoader({"navigation": {"route": {"final_point_tolerance_m": 0}}})
        with pytest.raises(ConfigError, match="must be positive"):
            NavigationConfig.from_loader(loader)
