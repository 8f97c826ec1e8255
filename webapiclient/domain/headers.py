"""Header name canonicalization.

Pure functions, no httpx imports: mixed-case spellings of one header name
collapse into a single canonical entry ("content-type" -> "Content-Type").
"""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

_TOKEN_PUNCTUATION = frozenset("!#$%&'*+-.^_`|~")


def _is_token_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char in _TOKEN_PUNCTUATION)


def canonical_header_key(name: str) -> str:
    """Upper-case the first letter and every letter after a hyphen, lower-case the rest.

    Names holding characters that are not valid in an HTTP token (spaces, non-ASCII)
    are returned unchanged.
    """
    if not name or not all(_is_token_char(char) for char in name):
        return name

    chars: list[str] = []
    upper = True
    for char in name:
        chars.append(char.upper() if upper else char.lower())
        upper = char == "-"
    return "".join(chars)


def canonicalize_headers(headers: Mapping[str, Sequence[str]]) -> dict[str, list[str]]:
    """Merge a name -> values mapping under canonical names, keeping input order of values."""
    merged: dict[str, list[str]] = {}
    for name, values in headers.items():
        merged.setdefault(canonical_header_key(name), []).extend(values)
    return merged


def canonicalize_header_pairs(pairs: Iterable[tuple[str, str]]) -> dict[str, list[str]]:
    """Same as canonicalize_headers for a flat list of (name, value) pairs."""
    merged: dict[str, list[str]] = {}
    for name, value in pairs:
        merged.setdefault(canonical_header_key(name), []).append(value)
    return merged


def header_items(headers: Mapping[str, Sequence[str]]) -> list[tuple[str, str]]:
    """Flatten a canonicalized mapping into ordered (name, value) pairs."""
    return [(name, value) for name, values in headers.items() for value in values]
