"""RLP encoding of unsigned integers and fixed-width bit strings."""

from uintcodec.limbs import ValueTooLargeError, from_be_bytes, nbytes, to_be_bytes

_SHORT_STRING = 0x80
_LONG_STRING = 0xB7
_LIST = 0xC0
_SHORT_LIMIT = 55


class RlpError(ValueError):
    """RLP data is malformed or does not fit the requested type."""


def _minimal_be(value: int) -> bytes:
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def _encode_string(payload: bytes) -> bytes:
    if len(payload) == 1 and payload[0] < _SHORT_STRING:
        return payload
    if len(payload) <= _SHORT_LIMIT:
        return bytes([_SHORT_STRING + len(payload)]) + payload
    length_bytes = _minimal_be(len(payload))
    return bytes([_LONG_STRING + len(length_bytes)]) + length_bytes + payload


def _decode_string(data: bytes) -> bytes:
    """Decode exactly one RLP string item spanning all of ``data``."""
    data = bytes(data)
    if not data:
        raise RlpError("input too short")
    prefix = data[0]
    if prefix < _SHORT_STRING:
        start, length = 0, 1
    elif prefix <= _LONG_STRING:
        start, length = 1, prefix - _SHORT_STRING
    elif prefix < _LIST:
        size_len = prefix - _LONG_STRING
        start = 1 + size_len
        if len(data) < start:
            raise RlpError("input too short")
        size_bytes = data[1:start]
        if size_bytes[0] == 0:
            raise RlpError("non-canonical size")
        length = int.from_bytes(size_bytes, "big")
        if length <= _SHORT_LIMIT:
            raise RlpError("non-canonical size")
    else:
        raise RlpError("unexpected list")
    end = start + length
    if len(data) < end:
        raise RlpError("input too short")
    if end != len(data):
        raise RlpError("trailing data after RLP item")
    payload = data[start:end]
    if prefix == _SHORT_STRING + 1 and payload[0] < _SHORT_STRING:
        raise RlpError("non-canonical single byte")
    return payload


def encoded_length(value: int) -> int:
    """Number of bytes ``encode_uint(value)`` produces."""
    if value < 0:
        raise ValueError("RLP integers must be non-negative")
    bits = value.bit_length()
    if bits <= 7:
        return 1
    size = (bits + 7) // 8
    if bits <= _SHORT_LIMIT * 8:
        return 1 + size
    return 1 + len(_minimal_be(size)) + size


def encode_uint(value: int) -> bytes:
    """RLP encoding of an unsigned integer, without leading zero bytes."""
    if value < 0:
        raise ValueError("RLP integers must be non-negative")
    return _encode_string(_minimal_be(value))


def decode_uint(data: bytes, bits: int) -> int:
    """Decode one RLP integer that must fit ``bits`` bits."""
    payload = _decode_string(data)
    try:
        return from_be_bytes(payload, bits)
    except ValueTooLargeError as exc:
        raise RlpError("RLP integer value too large for Uint.") from exc


def encode_bits(value: int, bits: int) -> bytes:
    """RLP encoding of a bit string: all ``nbytes(bits)`` big-endian bytes."""
    return _encode_string(to_be_bytes(value, bits))


def decode_bits(data: bytes, bits: int) -> int:
    """Decode one RLP bit string of exactly ``nbytes(bits)`` bytes."""
    payload = _decode_string(data)
    expected = nbytes(bits)
    if len(payload) < expected:
        raise RlpError("RLP is too short")
    if len(payload) > expected:
        raise RlpError("RLP is too big")
    try:
        return from_be_bytes(payload, bits)
    except ValueTooLargeError as exc:
        raise RlpError("RLP is too big") from exc