"""Response validation and body materialization.

Callers own closing the response; read_response never closes it itself beyond
what httpx does once the stream is exhausted.
"""
from __future__ import annotations

from typing import AbstractSet, Sequence

import httpx

from webapiclient.constants import CONTENT_TYPE_HEADER
from webapiclient.domain.errors import (
    BodyReadError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
)
from webapiclient.domain.headers import canonicalize_header_pairs
from webapiclient.domain.models import ResponseResult


def content_type_matches(content_type: str, prefixes: Sequence[str]) -> bool:
    actual = content_type.lower()
    return any(actual.startswith(prefix.lower()) for prefix in prefixes)


def validate_status(response: httpx.Response, expected: AbstractSet[int]) -> None:
    if expected and response.status_code not in expected:
        raise UnexpectedStatusError(response.status_code, expected)


def validate_content_type(response: httpx.Response, expected: Sequence[str]) -> None:
    if not expected:
        return
    values = response.headers.get_list(CONTENT_TYPE_HEADER)
    content_type = values[0] if values else ""
    if not content_type_matches(content_type, expected):
        raise UnexpectedContentTypeError(content_type, expected)


def snapshot_headers(response: httpx.Response) -> dict[str, list[str]]:
    return canonicalize_header_pairs(
        (name.decode("latin-1"), value.decode("latin-1")) for name, value in response.headers.raw
    )


async def read_response(response: httpx.Response) -> ResponseResult:
    try:
        body = await response.aread()
    except (httpx.HTTPError, httpx.StreamError, OSError) as exc:
        raise BodyReadError(f"failed to read response body: {exc}") from exc

    return ResponseResult(
        status_code=response.status_code,
        headers=snapshot_headers(response),
        body=bytes(body),
    )
