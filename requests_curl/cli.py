"""
Command-line interface for requests-curl.

Renders a cURL command from request arguments without sending anything:

    requests-curl post /users --base-uri https://api.example.com \\
        -H 'Content-Type: application/json' -d '{"name": "x"}'
"""

import argparse
import sys

from .formatter import to_curl
from .interceptor import HTTP_METHODS
from .models import FORM_URLENCODED, MULTIPART_FORM_DATA, ProxySettings, RequestOptions, content_type_of
from .utils.logging_utils import init_logging
from .version import get_version_string


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        argparse.Namespace: Parsed command-line arguments
    """
    version_string = get_version_string()
    parser = argparse.ArgumentParser(
        prog="requests-curl",
        description=f"Render an HTTP request as a cURL command - {version_string}",
        epilog=f"Version: {version_string}",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {version_string}",
        help="Show version information and exit",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("method", type=str.lower, choices=HTTP_METHODS, help="HTTP method")
    parser.add_argument("uri", help="Request URI, absolute or relative to --base-uri")
    parser.add_argument("--base-uri", default=None, help="Base URI for relative URIs")
    parser.add_argument(
        "-H",
        "--header",
        dest="headers",
        action="append",
        default=[],
        metavar="'KEY: VALUE'",
        help="Request header (repeatable)",
    )
    parser.add_argument(
        "-q",
        "--query",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Query parameter appended to the URI (repeatable)",
    )
    body = parser.add_mutually_exclusive_group()
    body.add_argument("-d", "--data", default=None, help="Raw request body")
    body.add_argument(
        "-F",
        "--form",
        action="append",
        default=None,
        metavar="KEY=VALUE",
        help="Form field (repeatable); sent as multipart/form-data",
    )
    parser.add_argument(
        "--form-urlencoded",
        action="store_true",
        help="Send --form fields as application/x-www-form-urlencoded",
    )
    parser.add_argument("-u", "--user", default=None, metavar="USER:PASSWORD", help="Credentials")
    parser.add_argument("--digest", action="store_true", help="Use digest instead of basic auth")
    parser.add_argument("--proxy", default=None, metavar="HOST:PORT", help="HTTP proxy")
    parser.add_argument(
        "--proxy-user", default=None, metavar="USER:PASSWORD", help="Proxy credentials"
    )

    args = parser.parse_args(argv)

    for header in args.headers:
        if ":" not in header:
            parser.error(f"invalid header '{header}', expected 'KEY: VALUE'")
    for pair in args.query + (args.form or []):
        if "=" not in pair:
            parser.error(f"invalid field '{pair}', expected KEY=VALUE")
    if args.form_urlencoded and not args.form:
        parser.error("--form-urlencoded requires --form")
    if args.digest and not args.user:
        parser.error("--digest requires --user")
    if args.proxy_user and not args.proxy:
        parser.error("--proxy-user requires --proxy")
    if args.proxy:
        try:
            proxy_port = ProxySettings.from_url(args.proxy).port
        except ValueError as e:
            parser.error(f"invalid proxy '{args.proxy}': {e}")
        if proxy_port is not None and not isinstance(proxy_port, int):
            parser.error(f"invalid proxy port '{proxy_port}'")

    return args


def build_options(args: argparse.Namespace) -> RequestOptions:
    """Build the options bag described by parsed arguments."""
    headers = []
    for header in args.headers:
        key, _, value = header.partition(":")
        headers.append((key.strip(), value.strip()))

    query = [tuple(pair.split("=", 1)) for pair in args.query]

    body = args.data
    if args.form:
        body = dict(pair.split("=", 1) for pair in args.form)
        if content_type_of(headers) is None:
            content_type = FORM_URLENCODED if args.form_urlencoded else MULTIPART_FORM_DATA
            headers.append(("Content-Type", content_type))

    credentials = None
    if args.user:
        username, _, password = args.user.partition(":")
        credentials = (username, password)

    proxy = None
    if args.proxy:
        proxy = ProxySettings.from_url(args.proxy)
        if args.proxy_user:
            proxy.user, _, proxy.password = args.proxy_user.partition(":")

    return RequestOptions(
        query=query or None,
        headers=headers or None,
        body=body,
        basic_auth=None if args.digest else credentials,
        digest_auth=credentials if args.digest else None,
        proxy=proxy,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    if args.debug:
        init_logging(debug=True)

    print(to_curl(args.method, args.uri, build_options(args), base_uri=args.base_uri))
    return 0


if __name__ == "__main__":
    sys.exit(main())
