"""XDR variable-length opaques, strings and arrays with a maximum length."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..errors import ExceedsMaximumLength
from .codec import XdrCodec
from .streams import (
    ReadStream,
    StringExceedsMaxLength,
    TypeEndsTooEarly,
    VarArrayExceedsMaxLength,
    VarOpaqueExceedsMaxLength,
    WriteStream,
)

T = TypeVar("T")
R = TypeVar("R")

UNLIMITED_LENGTH = 2**31 - 1


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def _check_length(length: int, max_length: int) -> None:
    if length > max_length:
        raise ExceedsMaximumLength(requested_length=length, allowed_length=max_length)


def _decode_exactly(data: bytes, decode: Callable[[ReadStream], R]) -> R:
    stream = ReadStream(data)
    value = decode(stream)
    remaining = stream.bytes_left()
    if remaining != 0:
        raise TypeEndsTooEarly(remaining_no_of_bytes=remaining)
    return value


@dataclass(frozen=True)
class LimitedVarOpaque:
    """Binary data of at most ``max_length`` bytes."""

    data: bytes
    max_length: int = UNLIMITED_LENGTH

    def __post_init__(self) -> None:
        raw = _as_bytes(self.data)
        _check_length(len(raw), self.max_length)
        object.__setattr__(self, "data", raw)

    def __len__(self) -> int:
        return len(self.data)

    def encode_into(self, stream: WriteStream) -> None:
        stream.write_next_u32(len(self.data))
        stream.write_next_binary_data(self.data)

    @classmethod
    def decode_from(cls, stream: ReadStream, max_length: int = UNLIMITED_LENGTH) -> LimitedVarOpaque:
        length = stream.read_next_u32()
        if length > max_length:
            raise VarOpaqueExceedsMaxLength(
                at_position=stream.position, max_length=max_length, actual_length=length
            )
        return cls(stream.read_next_binary_data(length), max_length)

    def to_xdr(self) -> bytes:
        stream = WriteStream()
        self.encode_into(stream)
        return stream.getvalue()

    @classmethod
    def from_xdr(cls, data: bytes, max_length: int = UNLIMITED_LENGTH) -> LimitedVarOpaque:
        return _decode_exactly(data, lambda stream: cls.decode_from(stream, max_length))


@dataclass(frozen=True)
class LimitedString:
    """An ASCII string of at most ``max_length`` characters, kept as bytes."""

    data: bytes
    max_length: int = UNLIMITED_LENGTH

    def __post_init__(self) -> None:
        raw = _as_bytes(self.data)
        _check_length(len(raw), self.max_length)
        object.__setattr__(self, "data", raw)

    def __len__(self) -> int:
        return len(self.data)

    def encode_into(self, stream: WriteStream) -> None:
        stream.write_next_u32(len(self.data))
        stream.write_next_binary_data(self.data)

    @classmethod
    def decode_from(cls, stream: ReadStream, max_length: int = UNLIMITED_LENGTH) -> LimitedString:
        length = stream.read_next_u32()
        if length > max_length:
            raise StringExceedsMaxLength(
                at_position=stream.position, max_length=max_length, actual_length=length
            )
        return cls(stream.read_next_binary_data(length), max_length)

    def to_xdr(self) -> bytes:
        stream = WriteStream()
        self.encode_into(stream)
        return stream.getvalue()

    @classmethod
    def from_xdr(cls, data: bytes, max_length: int = UNLIMITED_LENGTH) -> LimitedString:
        return _decode_exactly(data, lambda stream: cls.decode_from(stream, max_length))


class LimitedVarArray(Generic[T]):
    """An array of at most ``max_length`` elements encoded by ``element_codec``."""

    def __init__(
        self,
        element_codec: XdrCodec[T],
        items: Iterable[T] = (),
        max_length: int = UNLIMITED_LENGTH,
    ) -> None:
        values = list(items)
        _check_length(len(values), max_length)
        self.element_codec = element_codec
        self.max_length = max_length
        self._items = values

    @property
    def items(self) -> list[T]:
        """A copy of the elements."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LimitedVarArray):
            return NotImplemented
        return self.max_length == other.max_length and self._items == other._items

    def __repr__(self) -> str:
        return f"LimitedVarArray({self._items!r}, max_length={self.max_length})"

    def push(self, item: T) -> None:
        """Append ``item``; the array takes at most ``max_length - 1`` items this way."""
        if len(self._items) >= self.max_length - 1:
            raise ExceedsMaximumLength(
                requested_length=len(self._items) + 1, allowed_length=self.max_length
            )
        self._items.append(item)

    def encode_into(self, stream: WriteStream) -> None:
        stream.write_next_u32(len(self._items))
        for item in self._items:
            self.element_codec.encode_into(item, stream)

    @classmethod
    def decode_from(
        cls,
        stream: ReadStream,
        element_codec: XdrCodec[Any],
        max_length: int = UNLIMITED_LENGTH,
    ) -> LimitedVarArray[Any]:
        length = stream.read_next_u32()
        if length > max_length:
            raise VarArrayExceedsMaxLength(
                at_position=stream.position, max_length=max_length, actual_length=length
            )
        items = [element_codec.decode_from(stream) for _ in range(length)]
        return cls(element_codec, items, max_length)

    def to_xdr(self) -> bytes:
        stream = WriteStream()
        self.encode_into(stream)
        return stream.getvalue()

    @classmethod
    def from_xdr(
        cls,
        data: bytes,
        element_codec: XdrCodec[Any],
        max_length: int = UNLIMITED_LENGTH,
    ) -> LimitedVarArray[Any]:
        return _decode_exactly(
            data, lambda stream: cls.decode_from(stream, element_codec, max_length)
        )