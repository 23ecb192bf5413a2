"""Logging configuration for Commentor.

@public

Component loggers come from Prefect's ``get_logger`` and therefore live under
Prefect's ``prefect`` logger tree (``prefect.commentor.runner`` and so on).
Configuration is a ``logging.config.dictConfig`` mapping, read from a YAML file
when one is given and built in otherwise. The built-in configuration writes to
stderr, so ``commentor check`` keeps stdout for findings, and only lets warnings
through unless a level is requested.

Usage:
    >>> from commentor.logging import get_commentor_logger
    >>> logger = get_commentor_logger(__name__)
    >>> logger.warning("Skipping %s", path)

Environment variables:
    COMMENTOR_LOGGING_CONFIG: Path to a YAML dictConfig file
    COMMENTOR_LOG_LEVEL: Level for commentor loggers (default WARNING)
"""

import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from prefect.logging import get_logger

PACKAGE_LOGGER = "commentor"
DEFAULT_LEVEL = "WARNING"


def package_logger_name() -> str:
    """Name Prefect gives the commentor package logger."""
    return get_logger(PACKAGE_LOGGER).name


class LoggingConfig:
    """Loads and applies the logging configuration.

    @public

    Configuration precedence:
        1. Explicit config_path parameter
        2. COMMENTOR_LOGGING_CONFIG environment variable
        3. Built-in configuration

    Example:
        >>> LoggingConfig().apply()
        >>> LoggingConfig(Path("logging.yml")).apply()
    """

    def __init__(self, config_path: Optional[Path] = None, level: Optional[str] = None):
        """Initialize logging configuration.

        Args:
            config_path: Optional path to a YAML dictConfig file.
            level: Level for commentor loggers in the built-in configuration.
                Falls back to COMMENTOR_LOG_LEVEL, then WARNING.
        """
        env_path = os.environ.get("COMMENTOR_LOGGING_CONFIG")
        self.config_path = config_path or (Path(env_path) if env_path else None)
        self.level = (level or os.environ.get("COMMENTOR_LOG_LEVEL") or DEFAULT_LEVEL).upper()
        self._config: Optional[Dict[str, Any]] = None

    def load_config(self) -> Dict[str, Any]:
        """Return the dictConfig mapping, loading it on first use.

        A config path that does not exist falls back to the built-in
        configuration.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self._get_default_config()
        assert self._config is not None
        return self._config

    def _get_default_config(self) -> Dict[str, Any]:
        """Console handler on stderr for the commentor logger tree.

        Format: "HH:MM:SS.mmm | LEVEL | logger.name - message"
        """
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                package_logger_name(): {
                    "level": self.level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }

    def apply(self) -> None:
        """Apply the configuration to Python's logging system."""
        logging.config.dictConfig(self.load_config())


# Global configuration instance
_logging_config: Optional[LoggingConfig] = None


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None) -> None:
    """Configure commentor logging.

    @public

    Args:
        config_path: Optional path to a YAML dictConfig file.
        level: Optional level override (DEBUG, INFO, WARNING, ...). It is set
            on the package logger after the configuration is applied, so it
            wins over the file as well.

    Example:
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path, level)
    _logging_config.apply()

    if level:
        get_logger(PACKAGE_LOGGER).setLevel(level.upper())


def get_commentor_logger(name: str):
    """Get a logger for a commentor module, configuring logging on first use.

    @public

    Args:
        name: Logger name, typically __name__.
    """
    if _logging_config is None:
        setup_logging()

    return get_logger(name)
