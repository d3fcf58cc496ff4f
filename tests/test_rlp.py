import pytest
from hypothesis import given
from hypothesis import strategies as st

from uintcodec.rlp import (
    RlpError,
    decode_bits,
    decode_uint,
    encode_bits,
    encode_uint,
    encoded_length,
)

SIZES = [0, 1, 7, 8, 9, 63, 64, 65, 127, 128, 129, 256, 384, 448, 449, 512, 1024]


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "80"),
        (15, "0f"),
        (1024, "820400"),
        (0x1234_5678, "8412345678"),
    ],
)
def test_uint_rlp(value, expected):
    assert encode_uint(value) == bytes.fromhex(expected)


def test_uint_rlp_zero_width():
    assert decode_uint(bytes.fromhex("80"), 0) == 0


def test_long_string_header():
    value = (1 << (8 * 56)) - 1
    encoded = encode_uint(value)
    assert encoded[:2] == bytes.fromhex("b838")
    assert len(encoded) == 58
    assert encoded_length(value) == 58
    assert decode_uint(encoded, 8 * 56) == value


@pytest.mark.parametrize("bits", SIZES)
@given(data=st.data())
def test_uint_roundtrip(bits, data):
    value = data.draw(st.integers(min_value=0, max_value=(1 << bits) - 1))
    serialized = encode_uint(value)
    assert len(serialized) == encoded_length(value)
    assert decode_uint(serialized, bits) == value


def test_bits_rlp():
    value = int("ef2d6d194084c2de36e0dabfce45d046b37d1106", 16)
    assert encode_bits(value, 160) == bytes.fromhex(
        "94ef2d6d194084c2de36e0dabfce45d046b37d1106"
    )


def test_bits_keeps_leading_zeros():
    assert encode_bits(1, 16) == bytes.fromhex("820001")
    assert decode_bits(bytes.fromhex("820001"), 16) == 1


@pytest.mark.parametrize("bits", SIZES)
@given(data=st.data())
def test_bits_roundtrip(bits, data):
    value = data.draw(st.integers(min_value=0, max_value=(1 << bits) - 1))
    assert decode_bits(encode_bits(value, bits), bits) == value


def test_decode_uint_overflow():
    with pytest.raises(RlpError):
        decode_uint(bytes.fromhex("820400"), 8)


def test_decode_uint_list_rejected():
    with pytest.raises(RlpError, match="list"):
        decode_uint(bytes.fromhex("c0"), 64)


def test_decode_uint_truncated():
    with pytest.raises(RlpError, match="short"):
        decode_uint(bytes.fromhex("8412"), 64)


def test_decode_uint_trailing_data():
    with pytest.raises(RlpError, match="trailing"):
        decode_uint(bytes.fromhex("0f00"), 64)


def test_decode_uint_empty():
    with pytest.raises(RlpError):
        decode_uint(b"", 64)


def test_decode_non_canonical_single_byte():
    with pytest.raises(RlpError, match="non-canonical"):
        decode_uint(bytes.fromhex("810f"), 64)


def test_decode_bits_too_short():
    with pytest.raises(RlpError, match="too short"):
        decode_bits(bytes.fromhex("820001"), 24)


def test_decode_bits_too_big():
    with pytest.raises(RlpError, match="too big"):
        decode_bits(bytes.fromhex("820001"), 8)


def test_decode_bits_value_overflow():
    with pytest.raises(RlpError, match="too big"):
        decode_bits(bytes.fromhex("820200"), 9)


def test_encode_negative_rejected():
    with pytest.raises(ValueError):
        encode_uint(-1)