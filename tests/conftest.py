from __future__ import annotations

import pytest

from tests.fakes import StubTransport, make_response
from webapiclient.config.settings import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        base_url="http://example.com",
        connect_timeout_seconds=1.0,
        read_timeout_seconds=2.0,
        user_agent="webapiclient-tests/1.0",
    )


@pytest.fixture()
def json_transport() -> StubTransport:
    """Transport answering 200 application/json {"id":1}."""
    return StubTransport(
        make_response(200, headers={"Content-Type": "application/json"}, body=b'{"id":1}')
    )
