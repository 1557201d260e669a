"""Streams for encoding and decoding XDR data."""

from __future__ import annotations

from typing import Any


def _extend_to_multiple_of_4(value: int) -> int:
    return (value + 3) & ~3


class DecodeError(Exception):
    """Base class of errors raised while decoding XDR data.

    Errors compare equal when they have the same type and the same fields.
    """

    def __init__(self) -> None:
        super().__init__(self._describe())

    def _fields(self) -> dict[str, Any]:
        return {key: value for key, value in vars(self).items() if not key.startswith("_")}

    def _describe(self) -> str:
        fields = self._fields()
        name = type(self).__name__
        if not fields:
            return name
        inner = ", ".join(f"{key}={value!r}" for key, value in fields.items())
        return f"{name}({inner})"

    def __repr__(self) -> str:
        return self._describe()

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), tuple(sorted(self._fields().items()))))


class SuddenEnd(DecodeError):
    """The data ends before the value it encodes is complete."""

    def __init__(self, actual_length: int, expected_length: int) -> None:
        self.actual_length = actual_length
        self.expected_length = expected_length
        super().__init__()


class TypeEndsTooEarly(DecodeError):
    """The decoded value ends before the data does."""

    def __init__(self, remaining_no_of_bytes: int) -> None:
        self.remaining_no_of_bytes = remaining_no_of_bytes
        super().__init__()


class InvalidBoolean(DecodeError):
    """A boolean is encoded as something other than 0 or 1."""

    def __init__(self, found_integer: int, at_position: int) -> None:
        self.found_integer = found_integer
        self.at_position = at_position
        super().__init__()


class VarOpaqueExceedsMaxLength(DecodeError):
    """A variable-length opaque is longer than its maximum."""

    def __init__(self, at_position: int, max_length: int, actual_length: int) -> None:
        self.at_position = at_position
        self.max_length = max_length
        self.actual_length = actual_length
        super().__init__()


class StringExceedsMaxLength(DecodeError):
    """A string is longer than its maximum."""

    def __init__(self, at_position: int, max_length: int, actual_length: int) -> None:
        self.at_position = at_position
        self.max_length = max_length
        self.actual_length = actual_length
        super().__init__()


class VarArrayExceedsMaxLength(DecodeError):
    """A variable-length array is longer than its maximum."""

    def __init__(self, at_position: int, max_length: int, actual_length: int) -> None:
        self.at_position = at_position
        self.max_length = max_length
        self.actual_length = actual_length
        super().__init__()


class InvalidOptional(DecodeError):
    """An optional is encoded with a flag other than 0 or 1."""

    def __init__(self, at_position: int, has_code: int) -> None:
        self.at_position = at_position
        self.has_code = has_code
        super().__init__()


class InvalidEnumDiscriminator(DecodeError):
    """An enum discriminator has none of the allowed values."""

    def __init__(self, at_position: int) -> None:
        self.at_position = at_position
        super().__init__()


class InvalidBase64(DecodeError):
    """The base64 encoding of the XDR data is invalid."""


class ReadStream:
    """Reads big-endian XDR values from a byte string."""

    def __init__(self, source: bytes) -> None:
        self._source = bytes(source)
        self._position = 0

    @property
    def position(self) -> int:
        """The offset of the next byte to read."""
        return self._position

    def _ensure_size(self, count: int) -> None:
        if self._position + count > len(self._source):
            raise SuddenEnd(
                actual_length=len(self._source),
                expected_length=self._position + count,
            )

    def _read(self, count: int) -> bytes:
        self._ensure_size(count)
        chunk = self._source[self._position : self._position + count]
        self._position += count
        return chunk

    def read_next_u32(self) -> int:
        return int.from_bytes(self._read(4), "big")

    def read_next_i32(self) -> int:
        return int.from_bytes(self._read(4), "big", signed=True)

    def read_next_u64(self) -> int:
        return int.from_bytes(self._read(8), "big")

    def read_next_i64(self) -> int:
        return int.from_bytes(self._read(8), "big", signed=True)

    def read_next_binary_data(self, no_of_bytes: int) -> bytes:
        """Read ``no_of_bytes`` bytes and skip the padding up to a multiple of 4."""
        padded = _extend_to_multiple_of_4(no_of_bytes)
        self._ensure_size(padded)
        result = self._source[self._position : self._position + no_of_bytes]
        self._position += padded
        return result

    def bytes_left(self) -> int:
        """Return the number of bytes not yet read."""
        return len(self._source) - self._position


class WriteStream:
    """Collects big-endian XDR values into a byte string."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def write_next_u32(self, value: int) -> None:
        self._buffer += value.to_bytes(4, "big")

    def write_next_i32(self, value: int) -> None:
        self._buffer += value.to_bytes(4, "big", signed=True)

    def write_next_u64(self, value: int) -> None:
        self._buffer += value.to_bytes(8, "big")

    def write_next_i64(self, value: int) -> None:
        self._buffer += value.to_bytes(8, "big", signed=True)

    def write_next_binary_data(self, value: bytes) -> None:
        """Append ``value`` followed by zero padding up to a multiple of 4."""
        data = bytes(value)
        self._buffer += data
        self._buffer += bytes(_extend_to_multiple_of_4(len(data)) - len(data))

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._buffer)