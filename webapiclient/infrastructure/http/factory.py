"""HTTP transport factory: builds HttpxTransport from settings (no provider logic in composition)."""
from __future__ import annotations

import httpx

from webapiclient.config.settings import Settings
from webapiclient.constants import USER_AGENT_HEADER
from webapiclient.infrastructure.http.httpx_transport import HttpxTransport


def create_http_transport(settings: Settings) -> HttpxTransport:
    """Build a transport from settings. A per-call deadline on the request overrides these timeouts."""
    timeout = httpx.Timeout(
        connect=settings.connect_timeout_seconds,
        read=settings.read_timeout_seconds,
        write=settings.read_timeout_seconds,
        pool=settings.connect_timeout_seconds,
    )
    headers = {USER_AGENT_HEADER: settings.user_agent} if settings.user_agent else None
    async_client = httpx.AsyncClient(timeout=timeout, headers=headers)
    return HttpxTransport(async_client, follow_redirects=settings.follow_redirects)
