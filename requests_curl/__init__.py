"""
requests-curl: log requests made with the requests library as cURL commands.

Typical use:

    import requests_curl

    requests_curl.configure(curl_logging_enabled=True)
    session = requests_curl.CurlLoggingSession(base_uri="https://api.example.com")
    session.get("/users", params={"page": 2})
"""

from .config import (
    Configuration,
    configure,
    get_configuration,
    load_configuration,
    load_configuration_from_env,
    reset_configuration,
)
from .formatter import to_curl
from .interceptor import HTTP_METHODS, CurlLoggingMixin, CurlLoggingSession, log_curl
from .models import Credentials, ProxySettings, RequestOptions
from .utils.exceptions import ConfigurationError, RequestsCurlError

__all__ = [
    'HTTP_METHODS',
    'ConfigurationError',
    'Configuration',
    'Credentials',
    'CurlLoggingMixin',
    'CurlLoggingSession',
    'ProxySettings',
    'RequestOptions',
    'RequestsCurlError',
    'configure',
    'get_configuration',
    'load_configuration',
    'load_configuration_from_env',
    'log_curl',
    'reset_configuration',
    'to_curl',
]
