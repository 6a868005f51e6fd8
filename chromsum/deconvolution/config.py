"""
Configuration module for chromsum.

This module contains the SummarizerConfig class, which manages configuration
settings for building resolved peaks.
"""

import logging
from typing import Dict, Any, Optional
from .constants import DEFAULT_CONFIG, FRAGMENT_SEARCH_METHODS

logger = logging.getLogger(__name__)


class SummarizerConfig:
    """
    Configuration class for peak summarization.

    This class manages the settings used when building resolved peaks,
    including the MS levels of the trace and fragment scans, the extraction
    tolerance and the fragment scan search strategy.
    """

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize a new SummarizerConfig instance.

        Args:
            config_dict: Optional dictionary containing configuration settings
        """
        # Initialize with default configuration
        self.config = DEFAULT_CONFIG.copy()

        # Update with provided configuration
        if config_dict:
            self.update(config_dict)

    def update(self, config_dict: Dict[str, Any]) -> None:
        """
        Update configuration with new settings.

        Unknown keys are reported and ignored.

        Args:
            config_dict: Dictionary containing new configuration settings

        Raises:
            ValueError: If a known setting has an unusable value
        """
        for key, value in config_dict.items():
            if key in self.config:
                self.config[key] = self._validate(key, value)
            else:
                logger.warning(f"Unknown configuration key: {key}")

    @staticmethod
    def _validate(key: str, value: Any) -> Any:
        """Check a setting and return it converted to its stored type."""
        if key == "fragment_search" and value not in FRAGMENT_SEARCH_METHODS:
            raise ValueError(f"Unsupported fragment search method: {value}")
        if key == "mz_tolerance":
            value = float(value)
            if value < 0:
                raise ValueError(f"m/z tolerance must not be negative, got {value}")
        if key in ("num_threads", "ms_level", "fragment_ms_level"):
            value = int(value)
            if value < 1:
                raise ValueError(f"{key} must be positive, got {value}")
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key
            default: Default value if key is not found

        Returns:
            Configuration value
        """
        return self.config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key
            value: Configuration value
        """
        self.config[key] = self._validate(key, value)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary.

        Returns:
            Dictionary containing all configuration settings
        """
        return self.config.copy()

    def __getitem__(self, key: str) -> Any:
        return self.config[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return key in self.config
