"""
Example command-line front end.

Sends one request through WebApiClient and prints the status and the start of the body.

Usage:
    webapiclient http://google.com / --expect-status 200 --expect-status 301 --expect-content-type text/html
    webapiclient https://httpbin.org /post -X POST -H "Content-Type: application/json" -d '{"a": 1}'

Environment Variables:
    WEBAPICLIENT_CONNECT_TIMEOUT_SECONDS   Connect timeout (default: 5.0)
    WEBAPICLIENT_READ_TIMEOUT_SECONDS      Read timeout (default: 15.0)
    WEBAPICLIENT_REQUEST_TIMEOUT_SECONDS   Deadline for each request (default: none)
    WEBAPICLIENT_USER_AGENT                User-Agent sent with every request
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

from loguru import logger

from webapiclient.composition import create_client_dependencies
from webapiclient.config.settings import Settings
from webapiclient.constants import HTTP_METHOD
from webapiclient.domain.errors import WebApiClientError
from webapiclient.domain.models import RequestSpec, ResponseResult
from webapiclient.meta.version import get_version

EXIT_SUCCESS = 0
EXIT_CLIENT_ERROR = 1

DEFAULT_MAX_BYTES = 256


def _parse_header(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"header must look like NAME:VALUE, got {raw!r}")
    return name.strip(), value.strip()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="webapiclient",
        description="Send one HTTP request and validate the response.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument("base_url", help="Base URL the path is resolved against")
    parser.add_argument("path", nargs="?", default="/", help="Request path (default: /)")
    parser.add_argument("--method", "-X", default=HTTP_METHOD.GET, help="HTTP method (default: GET)")
    parser.add_argument(
        "--header", "-H",
        dest="headers",
        action="append",
        type=_parse_header,
        default=[],
        help="Request header as NAME:VALUE (repeatable)",
    )
    parser.add_argument("--data", "-d", default=None, help="Request body (ignored for GET)")
    parser.add_argument(
        "--expect-status",
        dest="expected_status_codes",
        action="append",
        type=int,
        default=[],
        help="Accepted status code (repeatable; default: any)",
    )
    parser.add_argument(
        "--expect-content-type",
        dest="expected_content_types",
        action="append",
        default=[],
        help="Accepted content-type prefix (repeatable; default: any)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Request deadline in seconds")
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=DEFAULT_MAX_BYTES,
        help=f"Bytes of the body to print (default: {DEFAULT_MAX_BYTES})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )
    return parser


def build_request_spec(args: argparse.Namespace) -> RequestSpec:
    headers: dict[str, list[str]] = {}
    for name, value in args.headers:
        headers.setdefault(name, []).append(value)

    return RequestSpec(
        method=args.method,
        path=args.path,
        headers=headers,
        body=args.data.encode() if args.data is not None else None,
        expected_status_codes=args.expected_status_codes,
        expected_content_types=args.expected_content_types,
    )


def render(result: ResponseResult, max_bytes: int) -> str:
    shown = result.body[:max_bytes]
    return (
        f"Response Status: {result.status_code}\n"
        f"First {len(shown)} bytes of response body:\n"
        f"{shown.decode('utf-8', errors='replace')}"
    )


async def run(args: argparse.Namespace, settings: Settings | None = None) -> ResponseResult:
    settings = settings or Settings()
    settings = settings.model_copy(update={"base_url": args.base_url})
    timeout = args.timeout if args.timeout is not None else settings.request_timeout_seconds

    async with create_client_dependencies(settings) as deps:
        return await deps.client.do(build_request_spec(args), timeout=timeout)


def main(argv: Sequence[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    try:
        result = asyncio.run(run(args))
    except WebApiClientError as exc:
        print(f"Failed to make request: {exc}", file=sys.stderr)
        return EXIT_CLIENT_ERROR

    print(render(result, args.max_bytes))
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
