"""Percent-encoding of everything but unreserved URL characters."""

from __future__ import annotations

import string

_UNRESERVED = frozenset((string.ascii_letters + string.digits + "-_.~").encode("ascii"))


def percent_encode(data: str | bytes) -> str:
    """Percent-encode every byte that is not an unreserved URL character."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    return "".join(chr(byte) if byte in _UNRESERVED else f"%{byte:02X}" for byte in raw)