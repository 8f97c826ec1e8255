"""Client port: contract for executing a RequestSpec.

Callers depend on this port; WebApiClient implements it. The transport and edit hook
are plain function values rather than interfaces.
"""
from __future__ import annotations

from typing import Awaitable, Callable, Protocol, runtime_checkable

import httpx

from webapiclient.domain.models import RequestSpec, ResponseResult

# Performs the network exchange. Must return a response whose body is still unread
# (e.g. httpx.AsyncClient.send(..., stream=True)); the client reads and closes it.
TransportFunc = Callable[[httpx.Request], Awaitable[httpx.Response]]

# Mutates the built request in place before it is sent; raise to abort the call.
# May be a coroutine function; its result is awaited before sending.
EditRequestFunc = Callable[[httpx.Request], Awaitable[None] | None]


@runtime_checkable
class Client(Protocol):
    """Port: build, send and validate one request."""

    async def do(
        self,
        request: RequestSpec,
        edit: EditRequestFunc | None = None,
        *,
        timeout: float | None = None,
    ) -> ResponseResult:
        """Raise a WebApiClientError subclass on any failure."""
        ...
