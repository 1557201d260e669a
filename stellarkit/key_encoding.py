"""Stellar's checksummed base32 encoding of keys."""

from __future__ import annotations

from . import base32
from .errors import (
    InvalidStellarKeyChecksum,
    InvalidStellarKeyEncoding,
    InvalidStellarKeyEncodingLength,
    InvalidStellarKeyEncodingVersion,
)

ED25519_PUBLIC_KEY_BYTE_LENGTH = 32
ED25519_PUBLIC_KEY_VERSION_BYTE = 6 << 3  # G

ED25519_SECRET_SEED_BYTE_LENGTH = 32
ED25519_SECRET_SEED_VERSION_BYTE = 18 << 3  # S

MED25519_PUBLIC_KEY_BYTE_LENGTH = 40
MED25519_PUBLIC_KEY_VERSION_BYTE = 12 << 3  # M


def crc16(data: bytes) -> int:
    """Return the CRC-16/XMODEM checksum of ``data``."""
    crc = 0
    for byte in bytes(data):
        code = (crc >> 8) & 0xFF
        code ^= byte
        code ^= code >> 4
        crc = (crc << 8) & 0xFFFF
        crc ^= code
        code = (code << 5) & 0xFFFF
        crc ^= code
        code = (code << 7) & 0xFFFF
        crc ^= code
    return crc


def encode_stellar_key(key: bytes, version_byte: int) -> str:
    """Encode a raw key with its version byte and checksum."""
    payload = bytes([version_byte]) + bytes(key)
    checksum = crc16(payload)
    return base32.encode(payload + checksum.to_bytes(2, "little"))


def decode_stellar_key(encoded_key: str | bytes, version_byte: int, byte_length: int) -> bytes:
    """Decode an encoded key and return the raw key of ``byte_length`` bytes."""
    if isinstance(encoded_key, (bytes, bytearray, memoryview)):
        encoded_key = bytes(encoded_key).decode("latin-1")

    decoded = base32.decode(encoded_key)
    if encoded_key != base32.encode(decoded):
        raise InvalidStellarKeyEncoding()

    if len(decoded) != 3 + byte_length:
        raise InvalidStellarKeyEncodingLength()

    found = (decoded[-1] << 8) | decoded[-2]
    expected = crc16(decoded[:-2])
    if found != expected:
        raise InvalidStellarKeyChecksum(expected=expected, found=found)

    if decoded[0] != version_byte:
        raise InvalidStellarKeyEncodingVersion(
            expected_version=chr(version_byte), found_version=chr(decoded[0])
        )

    return bytes(decoded[1:-2])