import pytest

from stellarkit.binary import Binary, Hex, as_binary
from stellarkit.errors import InvalidBinaryLength, InvalidHexEncoding


def test_binary_of_right_length():
    data = bytes(range(32))
    assert as_binary(Binary(data), 32) == data


def test_binary_from_str():
    assert as_binary(Binary("abcd"), 4) == b"abcd"


def test_binary_wrong_length():
    with pytest.raises(InvalidBinaryLength) as info:
        as_binary(Binary(b"\x01\x02\x03"), 4)
    assert info.value.found_length == 3
    assert info.value.expected_length == 4


def test_hex_decodes():
    data = bytes(range(36))
    assert as_binary(Hex(data.hex()), 36) == data
    assert as_binary(Hex(data.hex().encode("ascii")), 36) == data


def test_hex_uppercase():
    data = bytes(range(200, 232))
    assert as_binary(Hex(data.hex().upper()), 32) == data


def test_hex_wrong_length():
    with pytest.raises(InvalidBinaryLength) as info:
        as_binary(Hex("00ff"), 4)
    assert info.value.found_length == 2
    assert info.value.expected_length == 4


@pytest.mark.parametrize("text", ["zz", "abc", "00 ff"])
def test_invalid_hex(text):
    with pytest.raises(InvalidHexEncoding):
        as_binary(Hex(text), 1)


def test_unsupported_value():
    with pytest.raises(TypeError):
        as_binary(b"\x00", 1)