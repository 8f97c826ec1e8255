"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from webapiclient.domain.headers import canonical_header_key


@dataclass(frozen=True)
class RequestSpec:
    """Declarative description of one request and the responses it accepts.

    path is resolved against the client's base URL. An empty expected_status_codes or
    expected_content_types accepts anything; content types are matched as
    case-insensitive prefixes so "application/json" accepts "application/json; charset=utf-8".
    """

    method: str
    path: str
    headers: Mapping[str, Sequence[str]] = field(default_factory=dict)
    body: bytes | None = None
    expected_status_codes: Iterable[int] = frozenset()
    expected_content_types: Iterable[str] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.method, str) or not self.method:
            raise TypeError("request.method must be a non-empty str")
        if not isinstance(self.path, str):
            raise TypeError("request.path must be a str")
        if self.body is not None and not isinstance(self.body, (bytes, bytearray)):
            raise TypeError("request.body must be bytes or None")

        headers = {
            name: (values,) if isinstance(values, str) else tuple(values)
            for name, values in self.headers.items()
        }
        object.__setattr__(self, "headers", headers)
        if self.body is not None:
            object.__setattr__(self, "body", bytes(self.body))
        object.__setattr__(self, "expected_status_codes", frozenset(self.expected_status_codes))
        object.__setattr__(self, "expected_content_types", tuple(self.expected_content_types))


@dataclass(frozen=True)
class ResponseResult:
    """Fully read response: status, header snapshot under canonical names, body bytes."""

    status_code: int
    headers: dict[str, list[str]]
    body: bytes

    def header(self, name: str, default: str = "") -> str:
        values = self.headers.get(canonical_header_key(name))
        return values[0] if values else default
