"""Logging infrastructure for Commentor.

@public

Prefect-integrated logging with YAML configuration support.

Key components:
    get_commentor_logger: Factory function for creating component loggers
    setup_logging: Initialize logging configuration from YAML
    LoggingConfig: Configuration class for logging settings

Example:
    >>> from commentor.logging import get_commentor_logger
    >>>
    >>> logger = get_commentor_logger(__name__)
    >>> logger.info("Processing started")

Note:
    Never import Python's logging module directly. Always use
    get_commentor_logger() for consistent configuration.
"""

from .logging_config import LoggingConfig, get_commentor_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_commentor_logger",
]
