"""Configuration management for the chunk uploader CLI."""

import json
import os
from pathlib import Path
from typing import Optional

from common.constants import DEFAULT_CHUNK_SIZE_BYTES, DEFAULT_HTTP_METHOD, DEFAULT_TIMEOUT_SECONDS
from common.logging_config import get_logger
from cli.parser import ValidationError

logger = get_logger(__name__)


def default_config_path() -> Path:
    return Path.home() / '.chunkup' / 'config.json'


class Config:
    """Read-only CLI defaults from an optional JSON file and the environment."""

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Nothing is written to disk; a missing or unreadable file means the
        built-in defaults apply.

        Args:
            config_path: Path to config JSON file (typically ~/.chunkup/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    @staticmethod
    def defaults() -> dict:
        """Built-in defaults, overridable through CHUNKUP_* environment variables."""
        return {
            "chunk_size": os.environ.get("CHUNKUP_CHUNK_SIZE", DEFAULT_CHUNK_SIZE_BYTES),
            "method": os.environ.get("CHUNKUP_METHOD", DEFAULT_HTTP_METHOD),
            "timeout": os.environ.get("CHUNKUP_TIMEOUT", DEFAULT_TIMEOUT_SECONDS),
            "url": os.environ.get("CHUNKUP_URL"),
        }

    def _load(self) -> dict:
        """
        Load configuration from file when it exists.

        Returns:
            Configuration dictionary
        """
        config = self.defaults()

        if not self.config_path.exists():
            return config

        try:
            with open(self.config_path, 'r') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Could not read config {self.config_path}: {e}; using defaults")
            return config

        if not isinstance(data, dict):
            logger.warning(f"Config {self.config_path} is not a JSON object; using defaults")
            return config

        config.update(data)
        return config

    def get_chunk_size(self) -> int:
        """
        Get default chunk size.

        Returns:
            Chunk size in bytes

        Raises:
            ValidationError: If the configured value is not a whole number
        """
        value = self.data.get('chunk_size', DEFAULT_CHUNK_SIZE_BYTES)
        if not isinstance(value, (bool, float)):
            try:
                return int(value)
            except (TypeError, ValueError):
                pass
        raise ValidationError(
            f"Invalid chunk_size setting '{value}' (config file or CHUNKUP_CHUNK_SIZE), "
            f"expected a whole number of bytes"
        )

    def get_method(self) -> str:
        """
        Get default HTTP method.

        Returns:
            Method name (e.g., "PUT")
        """
        return str(self.data.get('method', DEFAULT_HTTP_METHOD))

    def get_timeout(self) -> Optional[float]:
        """
        Get request timeout in seconds.

        Returns:
            Timeout value in seconds, or None to wait indefinitely

        Raises:
            ValidationError: If the configured value is not a number
        """
        timeout = self.data.get('timeout', DEFAULT_TIMEOUT_SECONDS)
        if timeout is None:
            return None
        if not isinstance(timeout, bool):
            try:
                return float(timeout)
            except (TypeError, ValueError):
                pass
        raise ValidationError(
            f"Invalid timeout setting '{timeout}' (config file or CHUNKUP_TIMEOUT), expected seconds"
        )

    def get_default_url(self) -> Optional[str]:
        """
        Get destination URL used when none is given on the command line.

        Returns:
            URL string or None if not set
        """
        return self.data.get('url')
