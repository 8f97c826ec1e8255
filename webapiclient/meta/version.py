"""Package version."""
from __future__ import annotations

VERSION = "0.1.0"


def get_version() -> str:
    """Return the version string with a 'v' prefix."""
    return "v" + VERSION.strip()
