from __future__ import annotations

import asyncio
import inspect
from typing import Any

import httpx
from loguru import logger

from webapiclient.core import SERVICE_NAME
from webapiclient.domain.errors import EditError, TransportError, TransportTimeoutError
from webapiclient.domain.models import RequestSpec, ResponseResult
from webapiclient.domain.request_builder import build_http_request
from webapiclient.domain.response_validator import (
    read_response,
    validate_content_type,
    validate_status,
)
from webapiclient.ports.client import Client, EditRequestFunc, TransportFunc


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


class WebApiClient:
    """
    Executes RequestSpecs through an injected transport function.

    Per call: build -> edit hook -> transport -> status check -> content-type check -> body read.
    The transport response is closed exactly once before do() returns, on success and on
    every failure after the transport answered. The instance holds only the base URL and
    the transport, so concurrent do() calls share no mutable state.
    """

    def __init__(self, transport: TransportFunc, base_url: str) -> None:
        self._transport = transport
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        return self._base_url

    async def do(
        self,
        request: RequestSpec,
        edit: EditRequestFunc | None = None,
        *,
        timeout: float | None = None,
    ) -> ResponseResult:
        http_request = build_http_request(self._base_url, request, timeout=timeout)
        _log("request_built", method=http_request.method, url=str(http_request.url))

        if edit is not None:
            try:
                edited = edit(http_request)
                if inspect.isawaitable(edited):
                    await edited
            except Exception as exc:
                raise EditError(f"edit request failed: {exc}") from exc

        http_response = await self._send(http_request, timeout)
        try:
            _log(
                "response_received",
                method=http_request.method,
                url=str(http_request.url),
                status_code=http_response.status_code,
            )
            try:
                validate_status(http_response, request.expected_status_codes)
                validate_content_type(http_response, request.expected_content_types)
            except Exception as exc:
                _log("response_rejected", url=str(http_request.url), error=str(exc))
                raise

            result = await read_response(http_response)
            _log("response_read", url=str(http_request.url), body_length=len(result.body))
            return result
        finally:
            try:
                await http_response.aclose()
            except Exception as exc:
                logger.warning("response close failed for {}: {}", http_request.url, exc)

    async def _send(self, http_request: httpx.Request, timeout: float | None) -> httpx.Response:
        _log("request_sent", method=http_request.method, url=str(http_request.url))
        try:
            if timeout is None:
                return await self._transport(http_request)
            return await asyncio.wait_for(self._transport(http_request), timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            raise TransportTimeoutError(
                f"timeout while sending {http_request.method} {http_request.url}",
                timeout=timeout,
            ) from exc
        except Exception as exc:
            raise TransportError(
                f"transport failed for {http_request.method} {http_request.url}: {exc}"
            ) from exc


def new_client(transport: TransportFunc, base_url: str) -> Client:
    """Create a client. base_url is not validated here; a malformed one fails at call time."""
    return WebApiClient(transport, base_url)
