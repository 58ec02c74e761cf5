"""
Configuration module for the Users API Lambdas.

Values are read from environment variables on every lookup, so a change to the
Lambda environment is picked up by the next invocation. For local development
the FastAPI server loads a `.env` file before any lookup happens.
"""

import os
import logging
from typing import Optional
from functools import lru_cache

logger = logging.getLogger(__name__)

DEFAULT_REGION = "ap-southeast-2"
DEFAULT_LOG_LEVEL = "INFO"


class ConfigError(Exception):
    """Raised when configuration cannot be loaded."""
    pass


class Config:
    """
    Configuration manager backed by environment variables.

    Usage:
        config = Config()
        table_name = config.get_table_name()
        region = config.get_region()
    """

    def get(self, key: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
        """
        Get configuration value from environment variables.

        Empty strings count as unset.

        Args:
            key: Configuration key (e.g., "TABLE_NAME")
            default: Default value if not found
            required: Raise ConfigError if not found and no default

        Returns:
            Configuration value as string

        Raises:
            ConfigError: If required=True and value not found
        """
        value = os.getenv(key) or None

        if value is None:
            value = default

        if value is None and required:
            raise ConfigError(f"Required configuration key '{key}' not found")

        return value

    def get_table_name(self) -> str:
        """Name of the DynamoDB table holding users. No default."""
        return self.get("TABLE_NAME", required=True)

    def get_region(self) -> str:
        """AWS region for the DynamoDB client."""
        return self.get("AWS_REGION", default=DEFAULT_REGION)

    def get_log_level(self) -> int:
        """Logging level, falling back to INFO for unknown names."""
        name = self.get("LOG_LEVEL", default=DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            logger.warning(f"Unknown LOG_LEVEL '{name}', using {DEFAULT_LOG_LEVEL}")
            return logging.INFO
        return level


# Global singleton instance
@lru_cache(maxsize=1)
def get_config() -> Config:
    """
    Get the global Config instance (cached).

    Returns:
        Config singleton instance
    """
    return Config()
