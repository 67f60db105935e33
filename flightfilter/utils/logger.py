"""
Logger configuration for flightfilter.

Provides centralized logging setup with a consistent format.

Features:
- DEBUG when ENVIRONMENT=local, LOG_LEVEL otherwise
- Handler to stdout
- Format: [TIMESTAMP] [LEVEL] [MODULE] MESSAGE
- Per-module logger factory
"""

import logging
import sys
from flightfilter.config import config


def setup_logger() -> None:
    """
    Configure global logging.

    Level selection:
    - ENVIRONMENT=local → DEBUG (shows skipped discovery candidates)
    - Other environments → LOG_LEVEL (default INFO)

    Log format:
        [2026-10-19 14:30:00] [INFO] [flightfilter.services.filters.registry] Discovered 3 filter(s)

    Usage:
        >>> from flightfilter.utils.logger import setup_logger
        >>> setup_logger()
        >>> logger = logging.getLogger(__name__)
        >>> logger.info("Pipeline started")
    """
    if config.ENVIRONMENT == "local":
        level = logging.DEBUG
    else:
        level = logging.getLevelName(config.LOG_LEVEL)
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format='[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured: level={logging.getLevelName(level)}, environment={config.ENVIRONMENT}")


def get_logger(name: str) -> logging.Logger:
    """
    Per-module logger factory.

    Args:
        name: Module name (typically __name__).

    Returns:
        Logger sharing the global configuration set by setup_logger().
    """
    return logging.getLogger(name)
