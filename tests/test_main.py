"""Tests for the command line entry point."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from airnav.airports import catalog
from airnav.core.logging_system import shutdown_logging
from airnav.main import main, parse_args


@pytest.fixture(autouse=True)
def log_dir(tmp_path: Path):
    """Send the combined log to a temporary directory."""
    with patch("airnav.core.logging_system.get_platform_log_dir", return_value=tmp_path):
        yield tmp_path
    shutdown_logging()
    logging.getLogger().handlers.clear()


class TestParseArgs:
    """Test argument parsing."""

    def test_taxi_arguments(self) -> None:
        """Test negative coordinates and the runway target."""
        args = parse_args(["taxi", "LSIA", "--from", "-1150", "-3100", "14", "--runway", "03"])

        assert args.command == "taxi"
        assert args.start == [-1150.0, -3100.0, 14.0]
        assert args.runway == "03"
        assert args.parking is None
        assert args.log_level == "WARNING"

    def test_taxi_requires_a_target(self) -> None:
        """Test taxi needs --runway or --parking."""
        with pytest.raises(SystemExit):
            parse_args(["taxi", "LSIA", "--from", "0", "0", "0"])

    def test_taxi_targets_are_exclusive(self) -> None:
        """Test --runway and --parking cannot be combined."""
        with pytest.raises(SystemExit):
            parse_args(
                ["taxi", "LSIA", "--from", "0", "0", "0", "--runway", "03", "--parking", "Hangar"]
            )

    def test_command_required(self) -> None:
        """Test a sub-command must be given."""
        with pytest.raises(SystemExit):
            parse_args([])


class TestMain:
    """Test commands end to end."""

    def test_airports(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test listing the catalog."""
        assert main(["airports"]) == 0

        out = capsys.readouterr().out
        assert "LSIA" in out
        assert "Los Santos International: 4 runways, 10 parking positions" in out
        assert "KNKX" in out

    def test_approach(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test printing an approach."""
        assert main(["approach", "lsia", "03"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("ILS 03 - Runway 03, heading 93 degrees")
        for fix in ("IAF", "IF", "FAF", "MAP", "THR"):
            assert f"  {fix}" in out

    def test_approach_unknown_airport(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an unknown airport code fails."""
        assert main(["approach", "XXXX", "03"]) == 1
        assert "Unknown airport: XXXX" in capsys.readouterr().out

    def test_approach_unknown_runway(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an unknown runway fails."""
        assert main(["approach", "LSIA", "09"]) == 1
        assert "No approach for runway 09 at LSIA" in capsys.readouterr().out

    def test_taxi_to_runway(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a taxi route to a runway."""
        code = main(["taxi", "LSIA", "--from", "-1150", "-3100", "14", "--runway", "03"])

        assert code == 0
        out = capsys.readouterr().out
        assert "Taxi to runway 03:" in out
        assert "(-1336.0, -2434.0, 13.9)" in out

    def test_taxi_to_parking(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a taxi route to a parking position."""
        code = main(
            ["taxi", "LSIA", "--from", "-1336", "-2434", "14", "--parking", "terminal gate a1"]
        )

        assert code == 0
        assert "Taxi to Terminal Gate A1:" in capsys.readouterr().out

    def test_taxi_unknown_parking(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test an unknown parking position fails."""
        code = main(["taxi", "KSSA", "--from", "0", "0", "0", "--parking", "Gate 99"])

        assert code == 1
        assert "Unknown parking position Gate 99 at KSSA" in capsys.readouterr().out

    def test_nearest(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test nearest airport and runway sentences."""
        assert main(["nearest", "1700", "3250", "41"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "At Sandy Shores Airfield"
        assert out[1].startswith("Runway 12 at Sandy Shores Airfield")

    def test_navigation_config(self, tmp_path: Path) -> None:
        """Test --config feeds the glideslope into generated approaches."""
        config_path = tmp_path / "navigation.yaml"
        config_path.write_text("navigation:\n  approach:\n    glideslope_angle_deg: 3.5\n")

        with patch(
            "airnav.main.build_default_airports", wraps=catalog.build_default_airports
        ) as builder:
            assert main(["--config", str(config_path), "airports"]) == 0

        builder.assert_called_once_with(3.5)

    def test_missing_config_fails(self, tmp_path: Path) -> None:
        """Test a missing configuration file returns exit code 1."""
        assert main(["--config", str(tmp_path / "absent.yaml"), "airports"]) == 1

    def test_log_file_written(self, log_dir: Path) -> None:
        """Test the command is recorded in the combined log."""
        main(["airports"])
        shutdown_logging()

        assert "Running command: airports" in (log_dir / "airnav.log").read_text(encoding="utf-8")

    def test_default_log_config_applied(self) -> None:
        """Test config/logging.yaml is loaded when no --log-config is given."""
        from airnav.airports import taxiway
        from airnav.main import DEFAULT_LOG_CONFIG

        assert DEFAULT_LOG_CONFIG.exists()
        assert main(["airports"]) == 0
        assert taxiway.logger.level == logging.INFO

    def test_explicit_log_config_wins(self, tmp_path: Path) -> None:
        """Test --log-config replaces the default file."""
        config_path = tmp_path / "logging.yaml"
        config_path.write_text("combined_log:\n  enabled: false\n", encoding="utf-8")

        with patch("airnav.main.initialize_logging") as init:
            main(["--log-config", str(config_path), "airports"])

        init.assert_called_once_with(str(config_path), use_platform_dir=True)
