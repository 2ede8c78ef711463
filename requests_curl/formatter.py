"""
Request-to-cURL serialization.

to_curl() turns an HTTP method, a target URI and an options bag into a curl
invocation whose lines are joined with a shell line continuation. Values are
interpolated inside single quotes as plain text without shell escaping.
"""

import json
import os
from collections.abc import Mapping
from logging import Logger
from typing import Any
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

from .models import (
    FORM_URLENCODED,
    MULTIPART_FORM_DATA,
    Credentials,
    ProxySettings,
    RequestOptions,
    content_type_of,
    field_items,
    header_items,
)
from .utils.logging_utils import get_logger

logger: Logger = get_logger(__name__)

DEFAULT_BASE_URI = "http://localhost"
LINE_CONTINUATION = " \\\n"


def to_curl(
    method: Any,
    uri: str,
    options: RequestOptions | Mapping[str, Any] | None = None,
    *,
    base_uri: str | None = None,
    proxy: ProxySettings | Mapping[str, Any] | str | None = None,
) -> str:
    """
    Convert a request description to a cURL command.

    Args:
        method: HTTP method (e.g. "get", "POST" or an enum member)
        uri: Request URI, absolute or relative to base_uri
        options: Options bag (query, headers, body, basic_auth, digest_auth, proxy)
        base_uri: Base URI for relative URIs, defaults to http://localhost
        proxy: Client-level proxy used when the options carry none

    Returns:
        The cURL command, one option per line

    Raises:
        TypeError: If a non-text body cannot be serialized to JSON
    """
    options = RequestOptions.from_value(options)

    uri = prepare_uri(uri, options.query, base_uri)

    curl_command = [initialize_curl_command(method, uri)]

    add_proxy_settings(curl_command, options.proxy or ProxySettings.coerce(proxy))
    add_headers(curl_command, options.headers)
    add_authentication(curl_command, options.basic_auth, options.digest_auth)
    add_body_data(curl_command, options.body, options.headers)

    return LINE_CONTINUATION.join(curl_command)


def prepare_uri(uri: str, query: Any = None, base_uri: str | None = None) -> str:
    """
    Resolve a relative URI against the base URI and append query parameters.

    Existing query pairs are kept in order and the supplied pairs are appended
    after them. A URI that cannot be parsed is returned without the merge.

    Args:
        uri: Request URI
        query: Mapping, sequence of (key, value) pairs or encoded query string
        base_uri: Base URI for relative URIs

    Returns:
        The full URI
    """
    uri = str(uri)

    if not uri.startswith("http"):
        try:
            uri = urljoin(base_uri or DEFAULT_BASE_URI, uri)
        except ValueError as e:
            logger.debug("Could not join %r onto base URI: %s", uri, e)

    if not query:
        return uri

    try:
        parts = urlsplit(uri)
    except ValueError as e:
        logger.debug("Skipping query merge for unparsable URI %r: %s", uri, e)
        return uri

    pairs = parse_qsl(parts.query, keep_blank_values=True) + _query_pairs(query)
    return urlunsplit(parts._replace(query=urlencode(pairs, doseq=True)))


def initialize_curl_command(method: Any, uri: str) -> str:
    """Build the head line: curl -X <METHOD> '<uri>'."""
    method = getattr(method, "value", method)
    return f"curl -X {str(method).upper()} '{uri}'"


def add_proxy_settings(curl_command: list[str], proxy: ProxySettings | None) -> None:
    """Append --proxy when any proxy field is set."""
    if proxy is None or not proxy.is_set():
        return

    credentials = ""
    if proxy.has_credentials():
        credentials = f"{proxy.user}:{proxy.password}@"
    curl_command.append(
        f"--proxy 'http://{credentials}{_text(proxy.address)}:{_text(proxy.port)}'"
    )


def add_headers(curl_command: list[str], headers: Any) -> None:
    """Append one -H line per header, in the order supplied."""
    for key, value in header_items(headers):
        curl_command.append(f"-H '{key}: {_text(value)}'")


def add_authentication(
    curl_command: list[str],
    basic_auth: Credentials | None,
    digest_auth: Credentials | None,
) -> None:
    """Append -u for basic auth, or --digest -u for digest auth. Basic wins."""
    if basic_auth is not None:
        curl_command.append(f"-u '{_credentials(basic_auth)}'")
    elif digest_auth is not None:
        curl_command.append(f"--digest -u '{_credentials(digest_auth)}'")


def add_body_data(curl_command: list[str], body: Any, headers: Any) -> None:
    """
    Append the request body.

    Form fields (a mapping or a list of pairs) become a single urlencoded -d
    line for application/x-www-form-urlencoded, one -F line per field for
    multipart/form-data, and compact JSON otherwise. Text is emitted verbatim.
    """
    if body is None:
        return

    content_type = content_type_of(headers)
    form_fields = field_items(body)

    if content_type == FORM_URLENCODED and form_fields is not None:
        form_data = urlencode(form_fields, doseq=True)
        curl_command.append(f"-d '{form_data}'")
    elif content_type == MULTIPART_FORM_DATA and form_fields is not None:
        for key, value in form_fields:
            if is_file_like(value):
                # File upload
                curl_command.append(f"-F '{key}=@{os.fspath(value.name)}'")
            else:
                curl_command.append(f"-F '{key}={_text(value)}'")
    else:
        curl_command.append(f"-d '{_body_text(body)}'")


def is_file_like(value: Any) -> bool:
    """Return True for readable objects that expose a filesystem path as .name."""
    return hasattr(value, "read") and isinstance(
        getattr(value, "name", None), (str, os.PathLike)
    )


def _query_pairs(query: Any) -> list:
    if isinstance(query, str):
        return parse_qsl(query, keep_blank_values=True)
    if isinstance(query, Mapping):
        return list(query.items())
    return list(query)


def _credentials(credentials: Credentials) -> str:
    return f"{_text(credentials.username)}:{_text(credentials.password)}"


def _body_text(body: Any) -> str:
    if isinstance(body, str):
        return body
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", errors="replace")
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def _text(value: Any) -> str:
    return "" if value is None else str(value)
