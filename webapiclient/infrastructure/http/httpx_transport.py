"""Transport implementation using httpx (injected wherever a TransportFunc is needed)."""
from __future__ import annotations

import httpx


class HttpxTransport:
    """TransportFunc over httpx.AsyncClient.

    Sends with stream=True so the body is left unread: WebApiClient validates first and
    then reads or closes it. Errors are not translated here; the client wraps them.

    AsyncClient.send does not apply the client's default headers or timeouts to a request
    built outside the client, so both are filled in here unless the request sets them.
    """

    def __init__(self, client: httpx.AsyncClient, *, follow_redirects: bool = True) -> None:
        self._client = client
        self._follow_redirects = follow_redirects

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        for raw_name, raw_value in self._client.headers.raw:
            name = raw_name.decode("latin-1")
            if name not in request.headers:
                request.headers[name] = raw_value.decode("latin-1")
        request.extensions.setdefault("timeout", self._client.timeout.as_dict())

        return await self._client.send(
            request,
            stream=True,
            follow_redirects=self._follow_redirects,
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def close(self) -> None:
        await self._client.aclose()
