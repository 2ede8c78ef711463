"""
Configuration management package for requests-curl.

This package handles:
- The Configuration object (logging flag, logger sink, environment tag)
- The process-wide CurlGlobalContext and its accessors
- Settings loading from JSON files and environment variables
"""

from .configuration import DEFAULT_ENVIRONMENT, LOGGING_ENVIRONMENTS, Configuration
from .global_context import (
    CurlGlobalContext,
    configure,
    get_configuration,
    reset_configuration,
)
from .loader import apply_settings, load_configuration, load_configuration_from_env
from .pydantic_models import CurlSettingsModel

__all__ = [
    'DEFAULT_ENVIRONMENT',
    'LOGGING_ENVIRONMENTS',
    'Configuration',
    'CurlGlobalContext',
    'CurlSettingsModel',
    'apply_settings',
    'configure',
    'get_configuration',
    'load_configuration',
    'load_configuration_from_env',
    'reset_configuration',
]
