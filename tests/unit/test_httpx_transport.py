"""Unit tests for the httpx transport adapter, driven through httpx.MockTransport."""
from __future__ import annotations

import asyncio

import httpx
import pytest

from tests.fakes import CountingStream
from webapiclient.application.client import new_client
from webapiclient.domain.errors import TransportError, UnexpectedStatusError
from webapiclient.domain.models import RequestSpec
from webapiclient.infrastructure.http.factory import create_http_transport
from webapiclient.infrastructure.http.httpx_transport import HttpxTransport


def _mock_client(handler, **kwargs) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_end_to_end_through_httpx_client():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200, headers={"Content-Type": "application/json"}, content=b'{"id":1}')

    transport = HttpxTransport(_mock_client(handler, headers={"User-Agent": "ua-test"}, timeout=3.0))
    client = new_client(transport, "http://example.com")

    result = await client.do(
        RequestSpec(
            method="GET",
            path="/users/1",
            expected_status_codes=[200],
            expected_content_types=["application/json"],
        )
    )
    await transport.close()

    assert result.status_code == 200
    assert result.body == b'{"id":1}'
    assert str(captured[0].url) == "http://example.com/users/1"
    assert captured[0].headers["User-Agent"] == "ua-test"
    assert captured[0].extensions["timeout"] == httpx.Timeout(3.0).as_dict()
    assert transport.is_closed is True


@pytest.mark.asyncio
async def test_request_headers_and_deadline_win_over_client_defaults():
    captured: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(200)

    transport = HttpxTransport(_mock_client(handler, headers={"User-Agent": "ua-default"}, timeout=3.0))
    client = new_client(transport, "http://example.com")

    await client.do(
        RequestSpec(method="GET", path="/", headers={"user-agent": ["ua-request"]}),
        timeout=1.5,
    )
    await transport.close()

    assert captured[0].headers.get_list("User-Agent") == ["ua-request"]
    assert captured[0].extensions["timeout"] == httpx.Timeout(1.5).as_dict()


@pytest.mark.parametrize("follow_redirects,expected_status", [(True, 200), (False, 302)])
def test_follow_redirects_setting(follow_redirects, expected_status):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/start":
            return httpx.Response(302, headers={"Location": "/final"})
        return httpx.Response(200, content=b"final")

    async def scenario() -> int:
        transport = HttpxTransport(_mock_client(handler), follow_redirects=follow_redirects)
        try:
            result = await new_client(transport, "http://example.com").do(
                RequestSpec(method="GET", path="/start")
            )
        finally:
            await transport.close()
        return result.status_code

    assert asyncio.run(scenario()) == expected_status


@pytest.mark.asyncio
async def test_network_error_surfaces_as_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport = HttpxTransport(_mock_client(handler))
    client = new_client(transport, "http://example.com")

    with pytest.raises(TransportError, match="connection refused"):
        await client.do(RequestSpec(method="GET", path="/"))
    await transport.close()


@pytest.mark.asyncio
async def test_status_rejection_closes_unread_httpx_stream_once():
    stream = CountingStream([b"service unavailable"])
    transport = HttpxTransport(_mock_client(lambda request: httpx.Response(503, stream=stream)))
    client = new_client(transport, "http://example.com")

    with pytest.raises(UnexpectedStatusError):
        await client.do(RequestSpec(method="GET", path="/", expected_status_codes=[200]))
    await transport.close()

    assert stream.iterations == 0
    assert stream.close_calls == 1


def test_factory_applies_settings(settings):
    settings = settings.model_copy(update={"follow_redirects": False})
    transport = create_http_transport(settings)
    try:
        assert transport._client.headers["User-Agent"] == "webapiclient-tests/1.0"
        assert transport._client.timeout == httpx.Timeout(
            connect=1.0, read=2.0, write=2.0, pool=1.0
        )
        assert transport._follow_redirects is False
    finally:
        asyncio.run(transport.close())


def test_factory_without_user_agent_keeps_httpx_default(settings):
    transport = create_http_transport(settings.model_copy(update={"user_agent": ""}))
    try:
        assert transport._client.headers["User-Agent"].startswith("python-httpx/")
    finally:
        asyncio.run(transport.close())
