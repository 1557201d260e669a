"""Fixed-length binary values given either raw or hex encoded."""

from __future__ import annotations

import binascii
from dataclasses import dataclass

from .errors import InvalidBinaryLength, InvalidHexEncoding


@dataclass(frozen=True)
class Binary:
    """Raw binary data."""

    data: bytes | str


@dataclass(frozen=True)
class Hex:
    """Binary data given as a hex string."""

    data: bytes | str


def as_binary(value: Binary | Hex, length: int) -> bytes:
    """Return the bytes of ``value``, which must be exactly ``length`` long."""
    if isinstance(value, Binary):
        data = value.data
        raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    elif isinstance(value, Hex):
        try:
            raw = binascii.unhexlify(value.data)
        except (binascii.Error, ValueError) as error:
            raise InvalidHexEncoding(reason=str(error)) from error
    else:
        raise TypeError(f"expected Binary or Hex, got {type(value).__name__}")

    if len(raw) != length:
        raise InvalidBinaryLength(found_length=len(raw), expected_length=length)
    return raw