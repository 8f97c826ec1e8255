"""Shared identifiers for log events."""
from __future__ import annotations

SERVICE_NAME = "webapiclient"
