"""
Interception of outgoing requests made through requests.Session.

CurlLoggingMixin wraps Session.request, the single entry point behind
get/post/put/patch/delete, so every call is rendered with to_curl() and handed
to the configured logger before the real request is sent.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urljoin, urlsplit

import requests

from . import formatter
from .config.configuration import Configuration
from .config.global_context import get_configuration
from .models import ProxySettings, RequestOptions

HTTP_METHODS = ("get", "post", "put", "patch", "delete")

# Positional parameter order of requests.Session.request after (method, url)
REQUEST_ARGUMENTS = (
    "params",
    "data",
    "headers",
    "cookies",
    "files",
    "auth",
    "timeout",
    "allow_redirects",
    "proxies",
    "hooks",
    "stream",
    "verify",
    "cert",
    "json",
)


def log_curl(
    method: Any,
    uri: str,
    options: RequestOptions | Mapping[str, Any] | None = None,
    *,
    base_uri: str | None = None,
    proxy: ProxySettings | Mapping[str, Any] | str | None = None,
    configuration: Configuration | None = None,
) -> str | None:
    """
    Log the cURL command for a request if logging is enabled.

    Errors raised by the logger propagate to the caller.

    Args:
        method: HTTP method
        uri: Request URI
        options: Options bag for the request
        base_uri: Base URI for relative URIs
        proxy: Client-level proxy settings
        configuration: Configuration to use instead of the process-wide one

    Returns:
        The logged command, or None when logging is disabled
    """
    if configuration is None:
        configuration = get_configuration()
    if not configuration.curl_logging_enabled:
        return None

    curl_command = formatter.to_curl(method, uri, options, base_uri=base_uri, proxy=proxy)
    configuration.logger.info(f"\nrequests cURL command:\n{curl_command}\n")
    return curl_command


class CurlLoggingMixin:
    """Adds cURL logging to a requests.Session subclass.

    Mix in before requests.Session so the overridden request() runs first:

        class ApiSession(CurlLoggingMixin, requests.Session):
            base_uri = "https://api.example.com"
    """

    base_uri: str | None = None
    proxy: ProxySettings | None = None

    def http_proxy(
        self,
        address: str | None,
        port: int | str | None = None,
        user: str | None = None,
        password: str | None = None,
    ) -> None:
        """Set the proxy shown in logged commands for this client."""
        self.proxy = ProxySettings(address, port, user, password)

    def to_curl(
        self,
        method: Any,
        uri: str,
        options: RequestOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Render a request as a cURL command using this client's base URI and proxy."""
        return formatter.to_curl(
            method, uri, options, base_uri=self.base_uri, proxy=self._effective_proxy(uri)
        )

    def request(self, method: str, url: str, *args: Any, **kwargs: Any) -> requests.Response:
        kwargs.update(zip(REQUEST_ARGUMENTS, args))

        if self.base_uri and not str(url).startswith("http"):
            url = urljoin(self.base_uri, str(url))

        if str(method).lower() in HTTP_METHODS:
            log_curl(
                method,
                url,
                RequestOptions.from_requests_kwargs(url, kwargs),
                base_uri=self.base_uri,
                proxy=self._effective_proxy(url),
            )

        return super().request(method, url, **kwargs)

    def _effective_proxy(self, url: str) -> ProxySettings | None:
        if self.proxy is not None:
            return self.proxy
        # Session-level proxies, as requests merges them into every call
        session_proxies = getattr(self, "proxies", None) or {}
        if not session_proxies:
            return None
        try:
            scheme = urlsplit(str(url)).scheme or "http"
        except ValueError:
            return None
        if session_proxies.get(scheme):
            return ProxySettings.from_url(session_proxies[scheme])
        return None


class CurlLoggingSession(CurlLoggingMixin, requests.Session):
    """A requests.Session that logs every request as a cURL command."""

    def __init__(
        self,
        base_uri: str | None = None,
        proxy: ProxySettings | Mapping[str, Any] | str | None = None,
    ) -> None:
        super().__init__()
        self.base_uri = base_uri
        self.proxy = ProxySettings.coerce(proxy)
