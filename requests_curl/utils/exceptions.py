"""
Custom exception classes for requests-curl.

The formatter itself never raises for well-formed input; these exceptions
cover the configuration layer around it.
"""


class RequestsCurlError(Exception):
    """Base exception for requests-curl."""

    pass


class ConfigurationError(RequestsCurlError):
    """Raised when configuration is invalid.

    This includes logger sinks without an ``info`` method, unknown setting
    names, and settings files or environment values that fail validation.
    """

    pass
