"""
Configuration loading utilities for requests-curl.

Settings come from a JSON file or from environment variables, are validated
with CurlSettingsModel and installed as the process-wide configuration.
"""

import json
import os
from logging import Logger
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from ..utils.exceptions import ConfigurationError
from ..utils.logging_utils import get_logger, init_logging
from .configuration import DEFAULT_ENVIRONMENT, Configuration
from .global_context import CurlGlobalContext
from .pydantic_models import CurlSettingsModel

logger: Logger = get_logger(__name__)

# Environment variable name -> settings field
ENVIRONMENT_VARIABLES = {
    "REQUESTS_CURL_ENV": "environment",
    "REQUESTS_CURL_LOGGING": "curl_logging_enabled",
    "REQUESTS_CURL_LOG_FOLDER": "log_folder",
    "REQUESTS_CURL_DEBUG": "debug",
}


def load_configuration(file_path: str) -> Configuration:
    """Load settings from a JSON file and install them.

    The file should follow the structure:

    {
        "environment": "development",
        "curl_logging_enabled": true,
        "log_folder": "logs",
        "debug": false
    }

    Args:
        file_path: Path to the JSON settings file

    Returns:
        The installed Configuration

    Raises:
        FileNotFoundError: If the settings file doesn't exist
        ConfigurationError: If the file contains invalid JSON or fails validation
    """
    config_path = Path(file_path)
    if not config_path.exists():
        logger.error("Configuration file not found: %s", file_path)
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    logger.debug("Loading configuration from: %s", file_path)
    try:
        with open(config_path, "r") as file:
            settings_json = json.load(file)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in configuration file: %s", e)
        raise ConfigurationError(f"Invalid JSON in {file_path}: {e}") from e

    return apply_settings(settings_json)


def load_configuration_from_env(environ: Mapping[str, str] | None = None) -> Configuration:
    """Load settings from REQUESTS_CURL_* environment variables and install them.

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        The installed Configuration
    """
    if environ is None:
        environ = os.environ

    settings = {
        field: environ[variable]
        for variable, field in ENVIRONMENT_VARIABLES.items()
        if variable in environ
    }
    return apply_settings(settings)


def apply_settings(settings: Mapping[str, Any]) -> Configuration:
    """Validate raw settings and install the resulting configuration.

    Raises:
        ConfigurationError: If the settings fail validation
    """
    try:
        model = CurlSettingsModel.model_validate(dict(settings))
    except ValidationError as e:
        logger.error("Configuration validation failed: %s", e)
        raise ConfigurationError(f"Invalid requests-curl settings: {e}") from e

    if model.log_folder or model.debug:
        init_logging(debug=model.debug, log_folder=model.log_folder)

    environment = (
        model.environment if "environment" in model.model_fields_set else DEFAULT_ENVIRONMENT
    )
    configuration = Configuration(
        environment=environment,
        curl_logging_enabled=model.curl_logging_enabled,
    )
    return CurlGlobalContext().initialize(configuration)
