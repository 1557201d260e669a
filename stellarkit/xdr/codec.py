"""XDR codecs for primitive types and base64 helpers."""

from __future__ import annotations

import base64
import binascii
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from ..errors import InvalidBase64Encoding, InvalidBinaryLength
from .streams import (
    InvalidBase64,
    InvalidBoolean,
    InvalidOptional,
    ReadStream,
    TypeEndsTooEarly,
    WriteStream,
)

T = TypeVar("T")


def base64_encode(data: bytes) -> str:
    """Return the standard, padded base64 encoding of ``data``."""
    return base64.b64encode(bytes(data)).decode("ascii")


def base64_decode(data: str | bytes) -> bytes:
    """Decode standard base64; raise InvalidBase64Encoding when malformed."""
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as error:
        raise InvalidBase64Encoding(reason=str(error)) from error


class XdrCodec(ABC, Generic[T]):
    """Encodes values of one XDR type to bytes and decodes them back."""

    @abstractmethod
    def encode_into(self, value: T, stream: WriteStream) -> None:
        """Append the XDR encoding of ``value`` to ``stream``."""

    @abstractmethod
    def decode_from(self, stream: ReadStream) -> T:
        """Read one value from ``stream``."""

    def to_xdr(self, value: T) -> bytes:
        stream = WriteStream()
        self.encode_into(value, stream)
        return stream.getvalue()

    def from_xdr(self, data: bytes) -> T:
        """Decode ``data``, which must hold exactly one value."""
        stream = ReadStream(data)
        value = self.decode_from(stream)
        remaining = stream.bytes_left()
        if remaining != 0:
            raise TypeEndsTooEarly(remaining_no_of_bytes=remaining)
        return value

    def to_base64_xdr(self, value: T) -> str:
        return base64_encode(self.to_xdr(value))

    def from_base64_xdr(self, data: str | bytes) -> T:
        try:
            raw = base64_decode(data)
        except InvalidBase64Encoding as error:
            raise InvalidBase64() from error
        return self.from_xdr(raw)


class Uint32(XdrCodec[int]):
    """Unsigned 32-bit integer."""

    def encode_into(self, value: int, stream: WriteStream) -> None:
        stream.write_next_u32(value)

    def decode_from(self, stream: ReadStream) -> int:
        return stream.read_next_u32()


class Int32(XdrCodec[int]):
    """Signed 32-bit integer."""

    def encode_into(self, value: int, stream: WriteStream) -> None:
        stream.write_next_i32(value)

    def decode_from(self, stream: ReadStream) -> int:
        return stream.read_next_i32()


class Uint64(XdrCodec[int]):
    """Unsigned 64-bit integer."""

    def encode_into(self, value: int, stream: WriteStream) -> None:
        stream.write_next_u64(value)

    def decode_from(self, stream: ReadStream) -> int:
        return stream.read_next_u64()


class Int64(XdrCodec[int]):
    """Signed 64-bit integer."""

    def encode_into(self, value: int, stream: WriteStream) -> None:
        stream.write_next_i64(value)

    def decode_from(self, stream: ReadStream) -> int:
        return stream.read_next_i64()


class Bool(XdrCodec[bool]):
    """Boolean encoded as a 32-bit 0 or 1."""

    def encode_into(self, value: bool, stream: WriteStream) -> None:
        stream.write_next_i32(1 if value else 0)

    def decode_from(self, stream: ReadStream) -> bool:
        parsed = stream.read_next_i32()
        if parsed == 0:
            return False
        if parsed == 1:
            return True
        raise InvalidBoolean(found_integer=parsed, at_position=stream.position)


class FixedOpaque(XdrCodec[bytes]):
    """Binary data of a fixed length, padded to a multiple of 4."""

    def __init__(self, length: int) -> None:
        self.length = length

    def encode_into(self, value: bytes, stream: WriteStream) -> None:
        data = bytes(value)
        if len(data) != self.length:
            raise InvalidBinaryLength(found_length=len(data), expected_length=self.length)
        stream.write_next_binary_data(data)

    def decode_from(self, stream: ReadStream) -> bytes:
        return stream.read_next_binary_data(self.length)


class FixedArray(XdrCodec[list]):
    """An array of a fixed number of elements of one type."""

    def __init__(self, element: XdrCodec[Any], length: int) -> None:
        self.element = element
        self.length = length

    def encode_into(self, value: Sequence[Any], stream: WriteStream) -> None:
        if len(value) != self.length:
            raise InvalidBinaryLength(found_length=len(value), expected_length=self.length)
        for item in value:
            self.element.encode_into(item, stream)

    def decode_from(self, stream: ReadStream) -> list:
        return [self.element.decode_from(stream) for _ in range(self.length)]


class Optional(XdrCodec[Any]):
    """A value that may be absent; ``None`` stands for absence."""

    def __init__(self, inner: XdrCodec[Any]) -> None:
        self.inner = inner

    def encode_into(self, value: Any, stream: WriteStream) -> None:
        if value is None:
            stream.write_next_u32(0)
        else:
            stream.write_next_u32(1)
            self.inner.encode_into(value, stream)

    def decode_from(self, stream: ReadStream) -> Any:
        code = stream.read_next_u32()
        if code == 0:
            return None
        if code == 1:
            return self.inner.decode_from(stream)
        raise InvalidOptional(at_position=stream.position, has_code=code)