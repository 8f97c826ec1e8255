"""Client composition root: build and lifecycle-manage concrete dependencies.

Only this module imports the concrete transport; everything it hands out is typed
by the Client port.
"""
from __future__ import annotations

from typing import Any

from loguru import logger

from webapiclient.application.client import new_client
from webapiclient.config.settings import Settings
from webapiclient.core import SERVICE_NAME
from webapiclient.infrastructure.http.factory import create_http_transport
from webapiclient.infrastructure.http.httpx_transport import HttpxTransport
from webapiclient.ports.client import Client


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class ClientDependencies:
    """Holds the wired client and its transport lifecycle."""

    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._transport: HttpxTransport | None = None
        self._client: Client | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def client(self) -> Client:
        if self._client is None:
            raise RuntimeError("client is not initialized")
        return self._client

    @property
    def connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        if self._client is not None:
            return
        self._transport = create_http_transport(self._settings)
        self._client = new_client(self._transport, self._settings.base_url)
        _log("client_ready", base_url=self._settings.base_url)

    async def close(self) -> None:
        if self._transport is not None:
            try:
                await self._transport.close()
            except Exception as exc:
                logger.warning("http transport close failed: {}", exc)
            self._transport = None

        self._client = None
        _log("client_closed")

    async def __aenter__(self) -> "ClientDependencies":
        await self.connect()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


def create_client_dependencies(settings: Settings | None = None) -> ClientDependencies:
    return ClientDependencies(settings=settings or Settings())
