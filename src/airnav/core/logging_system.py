"""Logging setup for AirNav tools.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. Entry points call initialize_logging() once,
which reads an optional YAML file and installs a console handler plus a
combined log file.

Platform-specific log locations:
    - macOS: ~/Library/Logs/AirNav/airnav.log
    - Linux: ~/.airnav/logs/airnav.log
    - Windows: %AppData%/AirNav/Logs/airnav.log

Each start rotates the combined log, keeping the last 5 runs.

Typical usage example:
    from airnav.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    log = get_logger("airnav.cli")
    log.info("Loaded %d airports", count)
"""

import logging
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_configured_loggers: set[str] = set()
_initialized = False

DEFAULT_LOG_FILENAME = "airnav.log"


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get the platform-appropriate log directory.

    Returns:
        ~/Library/Logs/AirNav on macOS, %AppData%/AirNav/Logs on Windows,
        ~/.airnav/logs elsewhere.
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "AirNav"
    if system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "AirNav" / "Logs"
    return Path.home() / ".airnav" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = DEFAULT_LOG_FILENAME, keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    airnav.log becomes airnav.log.1, older numbered logs shift up by one and
    anything beyond keep_count is deleted.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Initialize logging from a YAML configuration.

    Args:
        config_path: Path to a logging YAML file. None uses the defaults.
        use_platform_dir: Use the platform log directory instead of the
            ``log_dir`` entry of the configuration.

    Raises:
        LoggingError: If the configuration file is missing or unreadable.
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        _logging_config = _get_default_config()
        _logging_config.update(loaded)
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    log_dir = Path(_logging_config.get("log_dir", "logs"))
    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", True):
        log_dir.mkdir(parents=True, exist_ok=True)
        rotate_logs(
            log_dir,
            combined.get("filename", DEFAULT_LOG_FILENAME),
            combined.get("backup_count", 5),
        )

    _configure_root_logger()
    _loggers_cache.clear()
    _configure_named_loggers()
    _initialized = True


def _get_default_config() -> dict[str, Any]:
    return {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": DEFAULT_LOG_FILENAME,
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "INFO",
        },
        "loggers": {},
    }


def _configure_root_logger() -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, _logging_config.get("level", "INFO")))
    root_logger.handlers.clear()

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_config.get("level", "INFO")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    combined_config = _logging_config.get("combined_log", {})
    if combined_config.get("enabled", True):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_file = log_dir / combined_config.get("filename", DEFAULT_LOG_FILENAME)

        # Rotation already happened on startup, so start a fresh file.
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


def _apply_logger_config(logger: logging.Logger, logger_config: dict[str, Any]) -> None:
    logger.disabled = not logger_config.get("enabled", True)
    if "level" in logger_config:
        logger.setLevel(getattr(logging, logger_config["level"]))


def _configure_named_loggers() -> None:
    """Apply the ``loggers`` section to every logger it names.

    Loggers configured by a previous initialization are reset first, so
    re-initializing with a different file does not leave stale levels.
    """
    for name in _configured_loggers:
        logger = logging.getLogger(name)
        logger.setLevel(logging.NOTSET)
        logger.disabled = False
    _configured_loggers.clear()

    for name, logger_config in (_logging_config.get("loggers") or {}).items():
        _apply_logger_config(logging.getLogger(name), logger_config or {})
        _configured_loggers.add(name)


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger.

    Per-logger levels from the ``loggers`` section of the YAML configuration,
    e.g. ``loggers: {airnav.airports.pathfinding: {level: DEBUG}}``, are
    applied by initialize_logging, so module loggers obtained with
    ``logging.getLogger(__name__)`` honour them too.

    Args:
        name: Logger name.

    Returns:
        Cached logger instance.
    """
    if not _initialized:
        initialize_logging(use_platform_dir=True)

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    logger_config = (_logging_config.get("loggers") or {}).get(name)
    if logger_config is not None:
        _apply_logger_config(logger, logger_config)

    _loggers_cache[name] = logger
    return logger


def set_console_level(level: str) -> None:
    """Change the level of the console handler installed by initialize_logging."""
    numeric = getattr(logging, level.upper())
    root_logger = logging.getLogger()
    if numeric < root_logger.level:
        root_logger.setLevel(numeric)
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(numeric)


def shutdown_logging() -> None:
    """Flush and close all handlers."""
    global _initialized

    logging.shutdown()
    _loggers_cache.clear()
    _initialized = False
