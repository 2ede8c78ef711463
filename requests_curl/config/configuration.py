"""
Configuration object for requests-curl.

Holds the logging-enabled flag, the logger sink and the deployment environment
tag from which the flag is derived.
"""

from typing import Any

from ..utils.exceptions import ConfigurationError
from ..utils.logging_utils import get_default_curl_logger

DEFAULT_ENVIRONMENT = "production"
# Environments in which cURL logging is enabled by default
LOGGING_ENVIRONMENTS = frozenset({"development", "test"})


class Configuration:
    """Settings for cURL logging.

    Setting ``environment`` re-derives ``curl_logging_enabled``: "development"
    and "test" enable logging, any other tag (or None) disables it. The flag
    can still be overridden afterwards.
    """

    def __init__(
        self,
        environment: Any = DEFAULT_ENVIRONMENT,
        logger: Any = None,
        curl_logging_enabled: bool | None = None,
    ) -> None:
        self.curl_logging_enabled = False
        self._environment = None
        self.environment = environment
        if curl_logging_enabled is not None:
            self.curl_logging_enabled = curl_logging_enabled
        self.logger = logger if logger is not None else get_default_curl_logger()

    @property
    def environment(self) -> str | None:
        return self._environment

    @environment.setter
    def environment(self, value: Any) -> None:
        self._environment = self.normalize_environment(value)
        self.curl_logging_enabled = self.default_logging_enabled(self._environment)

    @property
    def logger(self) -> Any:
        return self._logger

    @logger.setter
    def logger(self, value: Any) -> None:
        if not callable(getattr(value, "info", None)):
            raise ConfigurationError(
                f"Logger must provide an info() method, got {type(value).__name__}"
            )
        self._logger = value

    @staticmethod
    def normalize_environment(value: Any) -> str | None:
        """Normalize an environment tag (str or enum member) to lower-case text."""
        if value is None:
            return None
        value = getattr(value, "value", value)
        return str(value).strip().lower()

    @staticmethod
    def default_logging_enabled(environment: str | None) -> bool:
        return environment in LOGGING_ENVIRONMENTS

    def __repr__(self) -> str:
        return (
            f"Configuration(environment={self.environment!r}, "
            f"curl_logging_enabled={self.curl_logging_enabled!r}, "
            f"logger={self.logger!r})"
        )
