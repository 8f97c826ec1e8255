"""Client-level constants shared across modules."""
from __future__ import annotations


class HTTP_METHOD:
    GET = "GET"


CONTENT_TYPE_HEADER = "Content-Type"
USER_AGENT_HEADER = "User-Agent"
