import pytest
from hypothesis import given
from hypothesis import strategies as st

from uintcodec.limbs import (
    ConversionError,
    ValueNegativeError,
    ValueTooLargeError,
    from_be_bytes,
    from_int,
    from_le_bytes,
    from_limbs,
    mask,
    nbytes,
    nlimbs,
    overflowing_from_limbs,
    to_be_bytes,
    to_le_bytes,
    to_limbs,
)

SIZES = [0, 1, 2, 8, 16, 32, 63, 64, 65, 127, 128, 129, 160, 256, 384, 512, 4096]


def sized_values(sizes=SIZES):
    return st.sampled_from(sizes).flatmap(
        lambda bits: st.tuples(st.just(bits), st.integers(min_value=0, max_value=(1 << bits) - 1))
    )


def test_sizes():
    assert nlimbs(0) == 0
    assert nlimbs(64) == 1
    assert nlimbs(65) == 2
    assert nbytes(160) == 20
    assert nbytes(0) == 0


def test_mask():
    assert mask(0) == 0
    assert mask(64) == (1 << 64) - 1
    assert mask(256) == (1 << 64) - 1
    assert mask(65) == 1


def test_negative_bits_rejected():
    with pytest.raises(ValueError):
        nlimbs(-1)


@given(sized_values())
def test_roundtrip_biguint(pair):
    bits, value = pair
    limbs = to_limbs(value, bits)
    assert len(limbs) == nlimbs(bits)
    assert from_limbs(limbs, bits) == value


@given(sized_values())
def test_roundtrip_bigint(pair):
    bits, value = pair
    assert from_int(value, bits) == value


def test_negative_value_rejected():
    with pytest.raises(ValueNegativeError) as info:
        from_int(-1, 256)
    assert info.value.wrapped == 1
    assert info.value.bits == 256
    assert isinstance(info.value, ConversionError)


def test_too_large_value_rejected_with_wrapped():
    with pytest.raises(ValueTooLargeError) as info:
        from_int(1000, 8)
    assert info.value.wrapped == 1000 % 256


def test_zero_bits_only_holds_zero():
    assert from_int(0, 0) == 0
    with pytest.raises(ValueTooLargeError):
        from_int(1, 0)


def test_overflowing_from_limbs_wraps():
    value, overflow = overflowing_from_limbs([5, 1], 64)
    assert value == 5
    assert overflow is True
    assert overflowing_from_limbs([5, 0], 64) == (5, False)


def test_from_limbs_overflow_raises():
    with pytest.raises(ValueTooLargeError):
        from_limbs([0, 1], 64)


def test_limb_out_of_range_rejected():
    with pytest.raises(ValueError):
        from_limbs([1 << 64], 128)


@given(sized_values([128, 256, 512]))
def test_roundtrip_uint_limbs(pair):
    bits, value = pair
    assert from_limbs(to_limbs(value, bits), bits) == value


@given(sized_values([128, 160, 256, 512]))
def test_roundtrip_hash_bytes(pair):
    bits, value = pair
    data = to_be_bytes(value, bits)
    assert len(data) == bits // 8
    assert from_be_bytes(data, bits) == value


@given(sized_values())
def test_roundtrip_le_bytes(pair):
    bits, value = pair
    data = to_le_bytes(value, bits)
    assert len(data) == nbytes(bits)
    assert from_le_bytes(data, bits) == value
    assert data[::-1] == to_be_bytes(value, bits)


def test_be_bytes_layout():
    assert to_be_bytes(0x1234, 32) == b"\x00\x00\x12\x34"
    assert to_le_bytes(0x1234, 32) == b"\x34\x12\x00\x00"


def test_from_bytes_accepts_leading_zeros_and_rejects_overflow():
    assert from_be_bytes(b"\x00\x00\x00\x07", 8) == 7
    with pytest.raises(ValueTooLargeError):
        from_be_bytes(b"\x01\x00", 8)
    with pytest.raises(ValueTooLargeError):
        from_le_bytes(b"\x00\x01", 8)