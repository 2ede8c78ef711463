"""
Process-wide configuration context for requests-curl.

This module provides a singleton CurlGlobalContext holding the active
Configuration. The configuration is meant to be set once at startup and read
on every request afterwards; reconfiguring while requests are in flight is
not supported.
"""

import threading
from logging import Logger
from typing import Any

from ..utils.exceptions import ConfigurationError
from ..utils.logging_utils import get_logger
from .configuration import Configuration

logger: Logger = get_logger(__name__)


class CurlGlobalContext:
    """Singleton global context holding the cURL logging configuration."""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance.configuration = None
        return cls._instance

    def initialize(self, configuration: Configuration) -> Configuration:
        """Install a configuration as the process-wide one.

        Args:
            configuration: The Configuration instance to use from now on

        Returns:
            The installed configuration
        """
        self.configuration = configuration
        logger.info(
            "cURL logging configured: environment=%s, enabled=%s",
            configuration.environment,
            configuration.curl_logging_enabled,
        )
        return configuration

    def get_configuration(self) -> Configuration:
        """Get the active configuration, creating the default one on first use."""
        if self.configuration is None:
            with self._lock:
                if self.configuration is None:
                    self.configuration = Configuration()
        return self.configuration

    def reset(self) -> None:
        """Drop the active configuration; the next access creates a default one."""
        self.configuration = None


def configure(**settings: Any) -> Configuration:
    """Update the process-wide configuration.

    Example:
        >>> import logging
        >>> configure(curl_logging_enabled=True, logger=logging.getLogger("http"))

    Args:
        **settings: Configuration attributes (curl_logging_enabled, logger, environment)

    Returns:
        The active configuration

    Raises:
        ConfigurationError: If a setting name is unknown or a value is invalid
    """
    configuration = CurlGlobalContext().get_configuration()
    for name, value in settings.items():
        if name not in ("curl_logging_enabled", "logger", "environment"):
            raise ConfigurationError(f"Unknown setting '{name}'")
        setattr(configuration, name, value)
    return configuration


def get_configuration() -> Configuration:
    return CurlGlobalContext().get_configuration()


def reset_configuration() -> None:
    CurlGlobalContext().reset()
