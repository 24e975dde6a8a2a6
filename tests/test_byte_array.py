import pytest

from cairoserde.byte_array import (
    BYTES31_MAX,
    ByteArray,
    ByteArraySerde,
    Bytes31,
    Bytes31Serde,
)
from cairoserde.errors import Bytes31OutOfRangeError, DeserializeError

FULL_WORD = int("0x004142434445464748494a4b4c4d4e4f505152535455565758595a3132333435", 16)
ABCD = int("0x0000000000000000000000000000000000000000000000000000000041424344", 16)
MAX_PENDING = int("0x00004142434445464748494a4b4c4d4e4f505152535455565758595a31323334", 16)


def test_from_string_empty_string_default():
    assert ByteArray.from_string("") == ByteArray()


def test_from_string_only_pending_word():
    assert ByteArray.from_string("ABCD") == ByteArray([], ABCD, 4)


def test_from_string_max_pending_word_len():
    b = ByteArray.from_string("ABCDEFGHIJKLMNOPQRSTUVWXYZ1234")
    assert b == ByteArray([], MAX_PENDING, 30)


def test_from_string_data_only():
    b = ByteArray.from_string("ABCDEFGHIJKLMNOPQRSTUVWXYZ12345")
    assert b == ByteArray([Bytes31.new(FULL_WORD)], 0, 0)


def test_from_string_data_only_multiple():
    b = ByteArray.from_string("ABCDEFGHIJKLMNOPQRSTUVWXYZ12345ABCDEFGHIJKLMNOPQRSTUVWXYZ12345")
    assert b == ByteArray([Bytes31.new(FULL_WORD), Bytes31.new(FULL_WORD)], 0, 0)


def test_from_string_data_and_pending_word():
    b = ByteArray.from_string(
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ12345ABCDEFGHIJKLMNOPQRSTUVWXYZ12345ABCD"
    )
    assert b == ByteArray([Bytes31.new(FULL_WORD), Bytes31.new(FULL_WORD)], ABCD, 4)


def test_to_string_empty_string_default():
    assert ByteArray().to_string() == ""


def test_to_string_only_pending_word():
    assert ByteArray([], ABCD, 4).to_string() == "ABCD"


def test_to_string_max_pending_word_len():
    assert ByteArray([], MAX_PENDING, 30).to_string() == "ABCDEFGHIJKLMNOPQRSTUVWXYZ1234"


def test_to_string_data_only():
    b = ByteArray([Bytes31.new(FULL_WORD)], 0, 0)
    assert b.to_string() == "ABCDEFGHIJKLMNOPQRSTUVWXYZ12345"


def test_to_string_data_only_multiple():
    b = ByteArray([Bytes31.new(FULL_WORD), Bytes31.new(FULL_WORD)], 0, 0)
    assert b.to_string() == "ABCDEFGHIJKLMNOPQRSTUVWXYZ12345ABCDEFGHIJKLMNOPQRSTUVWXYZ12345"


def test_to_string_data_and_pending_word():
    b = ByteArray([Bytes31.new(FULL_WORD), Bytes31.new(FULL_WORD)], ABCD, 4)
    assert (
        b.to_string()
        == "ABCDEFGHIJKLMNOPQRSTUVWXYZ12345ABCDEFGHIJKLMNOPQRSTUVWXYZ12345ABCD"
    )


def test_to_string_invalid_utf8():
    b = ByteArray(
        [],
        int("0x00000000000000000000000000000000000000000000000000000000ffffffff", 16),
        4,
    )
    with pytest.raises(UnicodeDecodeError):
        b.to_string()


def test_from_utf8():
    b = ByteArray.from_string("🦀🌟")
    expected = int("0x000000000000000000000000000000000000000000000000f09fa680f09f8c9f", 16)
    assert b == ByteArray([], expected, 8)


@pytest.mark.parametrize("text", ["", "A", "ABCDEFGHIJKLMNOPQRSTUVWXYZ12345" * 3 + "xyz"])
def test_string_round_trip(text):
    assert ByteArray.from_string(text).to_string() == text


def test_bytes31_limits():
    assert Bytes31.new(BYTES31_MAX).felt == BYTES31_MAX
    with pytest.raises(Bytes31OutOfRangeError):
        Bytes31.new(BYTES31_MAX + 1)


def test_bytes31_serde_round_trip():
    serde = Bytes31Serde()
    value = Bytes31.new(FULL_WORD)
    assert serde.serialize(value) == [FULL_WORD]
    assert serde.deserialize([FULL_WORD], 0) == value


def test_bytes31_serde_rejects_large_felt():
    with pytest.raises(Bytes31OutOfRangeError):
        Bytes31Serde().deserialize([BYTES31_MAX + 1], 0)


def test_bytes31_serde_short_buffer():
    with pytest.raises(DeserializeError):
        Bytes31Serde().deserialize([], 0)


def test_byte_array_serialize_pending_only():
    felts = ByteArraySerde().serialize(ByteArray.from_string("ABCD"))
    assert felts == [0, ABCD, 4]


def test_byte_array_serde_round_trip():
    serde = ByteArraySerde()
    value = ByteArray.from_string(
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ12345ABCDEFGHIJKLMNOPQRSTUVWXYZ12345ABCD"
    )
    felts = serde.serialize(value)
    assert felts == [2, FULL_WORD, FULL_WORD, ABCD, 4]
    assert serde.serialized_size(value) == len(felts)
    assert serde.deserialize([7, *felts], 1) == value