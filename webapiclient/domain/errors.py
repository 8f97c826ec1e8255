"""Errors raised by WebApiClient.do.

Every failure is terminal for the call that produced it; nothing here is retried.
The underlying exception, when there is one, is chained as __cause__.
"""
from __future__ import annotations

from typing import Iterable


class WebApiClientError(Exception):
    """Base for all client failures."""


class AddressError(WebApiClientError):
    """Base URL or resolved request URL is malformed."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class ConstructionError(WebApiClientError):
    """The outgoing httpx.Request could not be constructed."""


class EditError(WebApiClientError):
    """The edit hook rejected the request; nothing was sent."""


class TransportError(WebApiClientError):
    """The transport function failed (network, protocol, cancellation by deadline)."""


class TransportTimeoutError(TransportError):
    """The transport did not answer before the deadline."""

    def __init__(self, message: str, *, timeout: float | None = None) -> None:
        super().__init__(message)
        self.timeout = timeout


class UnexpectedStatusError(WebApiClientError):
    def __init__(self, status_code: int, expected: Iterable[int] = ()) -> None:
        super().__init__(f"unexpected status code: {status_code}")
        self.status_code = status_code
        self.expected = frozenset(expected)


class UnexpectedContentTypeError(WebApiClientError):
    def __init__(self, content_type: str, expected: Iterable[str] = ()) -> None:
        super().__init__(f"unexpected content type: {content_type}")
        self.content_type = content_type
        self.expected = tuple(expected)


class BodyReadError(WebApiClientError):
    """Reading the response body into memory failed."""
