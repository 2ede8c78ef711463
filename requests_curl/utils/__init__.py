"""
Utility functions package for requests-curl.

This package handles:
- Logging configuration and setup
- Exception classes shared across the library
"""

from .exceptions import ConfigurationError, RequestsCurlError
from .logging_utils import (
    get_curl_logger,
    get_default_curl_logger,
    get_logger,
    init_logging,
)

__all__ = [
    'ConfigurationError',
    'RequestsCurlError',
    'get_curl_logger',
    'get_default_curl_logger',
    'get_logger',
    'init_logging',
]
