"""Base32 encoding as used for Stellar keys (no padding, lenient decoding)."""

from __future__ import annotations

import base64

from .errors import InvalidBase32Character


def _value_5bit(char: str) -> int | None:
    if "a" <= char <= "z":
        return ord(char) - ord("a")
    if "A" <= char <= "Z":
        return ord(char) - ord("A")
    if "2" <= char <= "7":
        return ord(char) - ord("2") + 26
    if char == "0":
        return 14
    if char == "1":
        return 8
    return None


def encode(data: bytes) -> str:
    """Encode binary data as unpadded upper-case base32."""
    return base64.b32encode(bytes(data)).decode("ascii").rstrip("=")


def decode(text: str | bytes) -> bytes:
    """Decode base32 text; stops at the first '='.

    Lower-case letters are accepted, '0' reads as 'O' and '1' as 'I'.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("latin-1")

    result = bytearray()
    buffer = 0
    bits = 0
    for position, char in enumerate(text):
        if char == "=":
            break
        value = _value_5bit(char)
        if value is None:
            raise InvalidBase32Character(at_position=position)
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            result.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1

    if bits and buffer:
        result.append((buffer << (8 - bits)) & 0xFF)

    return bytes(result)