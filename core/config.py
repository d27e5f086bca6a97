"""
===========================================
Configuration management for SQL criteria.
===========================================

Loads configuration from environment variables (.env file) and provides
a centralized Config singleton for library-wide access.

Settings:
    CRITERIA_PLACEHOLDER_PREFIX: Prefix for named bind parameters (default ':')
    CRITERIA_LOG_LEVEL: Logging level used by setup_logging (default 'INFO')
    CRITERIA_LOG_FILE: Optional log file name
    CRITERIA_LOG_DIR: Directory for the log file (default 'logs')

Example:
    >>> from core.config import config
    >>>
    >>> config.placeholder_prefix
    ':'
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER_PREFIX = ':'


@dataclass(frozen=True)
class CriteriaConfig:
    """Clause generation settings.

    Attributes:
        placeholder_prefix: Prefix prepended to bind parameter names
    """

    placeholder_prefix: str = DEFAULT_PLACEHOLDER_PREFIX


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings.

    Attributes:
        level: Logging level name (DEBUG/INFO/WARNING/ERROR/CRITICAL)
        log_file: Optional log file name
        log_dir: Directory holding the log file
    """

    level: str = 'INFO'
    log_file: Optional[str] = None
    log_dir: str = 'logs'


def _read_placeholder_prefix() -> str:
    prefix = os.getenv('CRITERIA_PLACEHOLDER_PREFIX', DEFAULT_PLACEHOLDER_PREFIX)
    if not prefix or not prefix.strip():
        logger.warning(
            "CRITERIA_PLACEHOLDER_PREFIX is blank, using %r",
            DEFAULT_PLACEHOLDER_PREFIX
        )
        return DEFAULT_PLACEHOLDER_PREFIX
    return prefix.strip()


class Config:
    """Centralized configuration manager.

    Attributes:
        criteria: CriteriaConfig with clause generation settings
        logging: LoggingConfig with logging settings

    Example:
        >>> config = Config()
        >>> config.placeholder_prefix
        ':'
    """

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.criteria = CriteriaConfig(
            placeholder_prefix=_read_placeholder_prefix()
        )
        self.logging = LoggingConfig(
            level=os.getenv('CRITERIA_LOG_LEVEL', 'INFO').upper(),
            log_file=os.getenv('CRITERIA_LOG_FILE') or None,
            log_dir=os.getenv('CRITERIA_LOG_DIR', 'logs')
        )

    @property
    def placeholder_prefix(self) -> str:
        """Get the bind parameter prefix."""
        return self.criteria.placeholder_prefix

    @property
    def log_level(self) -> str:
        """Get the configured logging level."""
        return self.logging.level

    @property
    def log_file(self) -> Optional[str]:
        """Get the configured log file name."""
        return self.logging.log_file

    @property
    def log_dir(self) -> str:
        """Get the configured log directory."""
        return self.logging.log_dir


# Global configuration instance
config = Config()
