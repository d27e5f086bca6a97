"""
=====================================
Core infrastructure for SQL criteria.
=====================================

Centralized configuration and logging helpers used by the sql and utils
packages.

Modules:
    config: Configuration management from environment variables
    logger: Logging configuration and utilities

Example:
    >>> from core.config import config
    >>> from core.logger import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info(f"Placeholder prefix is {config.placeholder_prefix}")
"""

__version__ = "0.3.0"
__all__ = ['get_logger', 'setup_logging', 'get_module_logger', 'config', 'Config']

from core.config import Config, config
from core.logger import get_logger, get_module_logger, setup_logging
