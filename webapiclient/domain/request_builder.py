"""Request builder: RequestSpec + base URL -> httpx.Request."""
from __future__ import annotations

import httpx

from webapiclient.constants import HTTP_METHOD
from webapiclient.domain.errors import AddressError, ConstructionError
from webapiclient.domain.headers import canonicalize_headers, header_items
from webapiclient.domain.models import RequestSpec


def resolve_url(base_url: str, path: str) -> httpx.URL:
    """Resolve path against base_url as a relative reference (RFC 3986), not by joining strings."""
    try:
        resolved = httpx.URL(base_url).join(path)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise AddressError(f"invalid request url: {exc}", url=f"{base_url} + {path}") from exc

    if not resolved.is_absolute_url or not resolved.host:
        raise AddressError(f"request url is not absolute: {resolved}", url=str(resolved))
    return resolved


def build_http_request(
    base_url: str,
    spec: RequestSpec,
    *,
    timeout: float | None = None,
) -> httpx.Request:
    """Build the outgoing request. GET never carries a body, even when spec.body is set.

    timeout, when given, is bound to the request as httpx's per-request timeout extension.
    """
    url = resolve_url(base_url, spec.path)

    method = spec.method.upper()
    content = spec.body if method != HTTP_METHOD.GET and spec.body is not None else None
    extensions = {"timeout": httpx.Timeout(timeout).as_dict()} if timeout is not None else None

    try:
        headers = header_items(canonicalize_headers(spec.headers))
        return httpx.Request(
            method,
            url,
            headers=headers,
            content=content,
            extensions=extensions,
        )
    except (TypeError, ValueError) as exc:
        raise ConstructionError(f"failed to construct {method} request for {url}: {exc}") from exc
