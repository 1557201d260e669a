import pytest

from stellarkit.errors import ExceedsMaximumLength
from stellarkit.xdr.codec import Uint32
from stellarkit.xdr.compound import LimitedString, LimitedVarArray, LimitedVarOpaque
from stellarkit.xdr.streams import (
    ReadStream,
    StringExceedsMaxLength,
    SuddenEnd,
    TypeEndsTooEarly,
    VarArrayExceedsMaxLength,
    VarOpaqueExceedsMaxLength,
)


def test_opaque_wire_format_is_length_then_padded_data():
    assert LimitedVarOpaque(b"abc", 10).to_xdr() == b"\x00\x00\x00\x03abc\x00"


def test_opaque_round_trip():
    value = LimitedVarOpaque(b"\x01\x02\x03\x04\x05", 64)
    decoded = LimitedVarOpaque.from_xdr(value.to_xdr(), 64)
    assert decoded == value
    assert len(decoded) == 5


def test_opaque_too_long_on_construction():
    with pytest.raises(ExceedsMaximumLength) as info:
        LimitedVarOpaque(b"12345", 4)
    assert info.value == ExceedsMaximumLength(requested_length=5, allowed_length=4)


def test_opaque_too_long_on_decoding():
    data = LimitedVarOpaque(b"12345").to_xdr()
    with pytest.raises(VarOpaqueExceedsMaxLength) as info:
        LimitedVarOpaque.from_xdr(data, 4)
    assert info.value == VarOpaqueExceedsMaxLength(at_position=4, max_length=4, actual_length=5)


def test_opaque_trailing_bytes():
    data = LimitedVarOpaque(b"ab").to_xdr() + b"\x00\x00\x00\x00"
    with pytest.raises(TypeEndsTooEarly) as info:
        LimitedVarOpaque.from_xdr(data)
    assert info.value.remaining_no_of_bytes == 4


def test_opaque_sudden_end():
    with pytest.raises(SuddenEnd):
        LimitedVarOpaque.from_xdr(b"\x00\x00\x00\x05ab")


def test_string_wire_format_of_text_memo():
    encoded = LimitedString("Hello World!", 28).to_xdr()
    assert encoded == b"\x00\x00\x00\x0cHello World!"


def test_string_round_trip_through_stream():
    value = LimitedString(b"home.example.com", 32)
    stream = ReadStream(value.to_xdr())
    decoded = LimitedString.decode_from(stream, 32)
    assert decoded == value
    assert stream.bytes_left() == 0


def test_string_too_long_on_decoding():
    data = LimitedString(b"abcdefg").to_xdr()
    with pytest.raises(StringExceedsMaxLength) as info:
        LimitedString.from_xdr(data, 3)
    assert info.value.actual_length == 7
    assert info.value.max_length == 3


def test_string_too_long_on_construction():
    with pytest.raises(ExceedsMaximumLength):
        LimitedString("x" * 65, 64)


def test_array_wire_format():
    array = LimitedVarArray(Uint32(), [1, 2], 10)
    assert array.to_xdr() == b"\x00\x00\x00\x02\x00\x00\x00\x01\x00\x00\x00\x02"


def test_array_round_trip_and_iteration():
    array = LimitedVarArray(Uint32(), [7, 8, 9], 5)
    decoded = LimitedVarArray.from_xdr(array.to_xdr(), Uint32(), 5)
    assert decoded == array
    assert list(decoded) == [7, 8, 9]
    assert len(decoded) == 3


def test_array_of_strings_round_trip():
    class _StringCodec(Uint32):
        def encode_into(self, value, stream):
            value.encode_into(stream)

        def decode_from(self, stream):
            return LimitedString.decode_from(stream, 8)

    codec = _StringCodec()
    array = LimitedVarArray(codec, [LimitedString(b"ab", 8), LimitedString(b"cdefg", 8)], 4)
    decoded = LimitedVarArray.from_xdr(array.to_xdr(), codec, 4)
    assert decoded.items == array.items


def test_array_push_appends():
    array = LimitedVarArray(Uint32(), [], 100)
    array.push(5)
    array.push(6)
    assert array.items == [5, 6]


def test_array_push_stops_one_short_of_maximum():
    array = LimitedVarArray(Uint32(), [1, 2], 3)
    with pytest.raises(ExceedsMaximumLength) as info:
        array.push(3)
    assert info.value == ExceedsMaximumLength(requested_length=3, allowed_length=3)
    assert len(array) == 2


def test_array_too_long_on_construction():
    with pytest.raises(ExceedsMaximumLength):
        LimitedVarArray(Uint32(), [1, 2, 3], 2)


def test_array_too_long_on_decoding():
    data = LimitedVarArray(Uint32(), [1, 2, 3]).to_xdr()
    with pytest.raises(VarArrayExceedsMaxLength) as info:
        LimitedVarArray.from_xdr(data, Uint32(), 2)
    assert info.value.actual_length == 3
    assert info.value.at_position == 4


def test_items_is_a_copy():
    array = LimitedVarArray(Uint32(), [1], 10)
    array.items.append(2)
    assert list(array) == [1]