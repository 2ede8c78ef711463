"""
Unit tests for Configuration - logging flag, logger sink and environment tag.
"""

import enum
import logging
from unittest.mock import Mock

import pytest

from requests_curl.config import DEFAULT_ENVIRONMENT, Configuration
from requests_curl.utils.exceptions import ConfigurationError, RequestsCurlError
from requests_curl.utils.logging_utils import CURL_LOGGER_NAME


class TestConfigurationDefaults:
    """Tests for default values."""

    def test_defaults(self):
        """Test that the neutral default environment disables logging."""
        configuration = Configuration()

        assert DEFAULT_ENVIRONMENT == "production"
        assert configuration.environment == "production"
        assert configuration.curl_logging_enabled is False

    def test_default_logger(self):
        """Test that the default sink is the library's curl logger."""
        configuration = Configuration()

        assert isinstance(configuration.logger, logging.Logger)
        assert configuration.logger.name == CURL_LOGGER_NAME

    @pytest.mark.parametrize("environment", ["development", "test"])
    def test_logging_environments_enable_logging(self, environment):
        configuration = Configuration(environment=environment)

        assert configuration.environment == environment
        assert configuration.curl_logging_enabled is True

    def test_other_environment_disables_logging(self):
        configuration = Configuration(environment="staging")

        assert configuration.environment == "staging"
        assert configuration.curl_logging_enabled is False

    def test_explicit_flag_overrides_environment(self):
        """Test that curl_logging_enabled wins over the environment default."""
        assert Configuration(environment="production", curl_logging_enabled=True).curl_logging_enabled is True
        assert Configuration(environment="development", curl_logging_enabled=False).curl_logging_enabled is False


class TestEnvironmentSetter:
    """Tests for re-deriving the logging flag from the environment."""

    def test_environment_setter_updates_curl_logging_enabled(self):
        configuration = Configuration()

        for environment, enabled in [
            ("development", True),
            ("test", True),
            ("production", False),
            ("staging", False),
        ]:
            configuration.environment = environment

            assert configuration.environment == environment
            assert configuration.curl_logging_enabled is enabled

    def test_environment_setter_overrides_manual_flag(self):
        """Test that setting the environment replaces a manually set flag."""
        configuration = Configuration()
        configuration.curl_logging_enabled = False

        configuration.environment = "development"
        assert configuration.curl_logging_enabled is True

        configuration.curl_logging_enabled = False
        configuration.environment = "production"
        assert configuration.curl_logging_enabled is False

    def test_environment_is_normalized(self):
        """Test that tags are stripped and lower-cased."""
        configuration = Configuration()

        configuration.environment = " Development "

        assert configuration.environment == "development"
        assert configuration.curl_logging_enabled is True

    def test_enum_environment(self):
        """Test that enum members are read by value."""

        class Stage(enum.Enum):
            TEST = "test"

        configuration = Configuration(environment=Stage.TEST)

        assert configuration.environment == "test"
        assert configuration.curl_logging_enabled is True

    def test_none_environment(self):
        configuration = Configuration()

        configuration.environment = None

        assert configuration.environment is None
        assert configuration.curl_logging_enabled is False

    def test_environment_setter_does_not_affect_logger(self):
        configuration = Configuration()
        original_logger = configuration.logger

        configuration.environment = "development"

        assert configuration.logger is original_logger


class TestLoggerSetter:
    """Tests for logger validation."""

    def test_custom_logger(self, captured_logger):
        configuration = Configuration(logger=captured_logger)

        assert configuration.logger is captured_logger

    def test_any_object_with_info(self):
        """Test that any object with a callable info() is accepted."""
        sink = Mock()
        configuration = Configuration()

        configuration.logger = sink

        assert configuration.logger is sink

    def test_logger_without_info_rejected(self):
        configuration = Configuration()

        with pytest.raises(ConfigurationError):
            configuration.logger = object()

    def test_error_hierarchy(self):
        """Test that ConfigurationError derives from the library base error."""
        assert issubclass(ConfigurationError, RequestsCurlError)
        assert issubclass(RequestsCurlError, Exception)
