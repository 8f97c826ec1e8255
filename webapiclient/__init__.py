"""Minimal HTTP request/response wrapper over an injected transport function."""

from webapiclient.application.client import WebApiClient, new_client
from webapiclient.domain.errors import (
    AddressError,
    BodyReadError,
    ConstructionError,
    EditError,
    TransportError,
    TransportTimeoutError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
    WebApiClientError,
)
from webapiclient.domain.headers import canonical_header_key, canonicalize_headers
from webapiclient.domain.models import RequestSpec, ResponseResult
from webapiclient.meta.version import VERSION as __version__
from webapiclient.ports.client import Client, EditRequestFunc, TransportFunc

__all__ = [
    "AddressError",
    "BodyReadError",
    "Client",
    "ConstructionError",
    "EditError",
    "EditRequestFunc",
    "RequestSpec",
    "ResponseResult",
    "TransportError",
    "TransportFunc",
    "TransportTimeoutError",
    "UnexpectedContentTypeError",
    "UnexpectedStatusError",
    "WebApiClient",
    "WebApiClientError",
    "__version__",
    "canonical_header_key",
    "canonicalize_headers",
    "new_client",
]
