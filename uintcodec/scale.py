"""SCALE encoding of fixed-width unsigned integers, plain and compact."""

from uintcodec.limbs import ValueTooLargeError, from_le_bytes, to_le_bytes

COMPACT_BITS_LIMIT = 536

_OUT_OF_RANGE = "out of range Uint decoding"
_TOO_LARGE = "value is larger than fits the Uint"

_SINGLE_BYTE_MAX = (1 << 6) - 1
_TWO_BYTE_MAX = (1 << 14) - 1
_FOUR_BYTE_MAX = (1 << 30) - 1


class ScaleError(ValueError):
    """SCALE data is malformed or does not fit the requested width."""


class _Reader:
    """Sequential reader over a byte string."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def read(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise ScaleError("not enough data to fill buffer")
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def read_byte(self) -> int:
        return self.read(1)[0]

    def read_uint(self, size: int) -> int:
        return int.from_bytes(self.read(size), "little")

    def finish(self) -> None:
        if self._pos != len(self._data):
            raise ScaleError("trailing data after SCALE value")


def _check_compact_supported(bits: int) -> None:
    if bits >= COMPACT_BITS_LIMIT:
        raise ValueError(
            "compact encoding is supported only for 0-(2**536-1) values"
        )


def _compact_bytes(value: int) -> bytes:
    """Compact encoding of a non-negative integer below ``2**536``."""
    bits = value.bit_length()
    if bits <= 6:
        return bytes([value << 2])
    if bits <= 14:
        return ((value << 2) | 0b01).to_bytes(2, "little")
    if bits <= 30:
        return ((value << 2) | 0b10).to_bytes(4, "little")
    size = (bits + 7) // 8
    return bytes([0b11 + ((size - 4) << 2)]) + value.to_bytes(size, "little")


def _read_compact_length(reader: _Reader) -> int:
    """Read a canonical compact 32-bit length prefix."""
    prefix = reader.read_byte()
    mode = prefix % 4
    if mode == 0:
        return prefix >> 2
    if mode == 1:
        value = int.from_bytes(bytes([prefix]) + reader.read(1), "little") >> 2
        if value <= _SINGLE_BYTE_MAX:
            raise ScaleError(_OUT_OF_RANGE)
        return value
    if mode == 2:
        value = int.from_bytes(bytes([prefix]) + reader.read(3), "little") >> 2
        if value <= _TWO_BYTE_MAX:
            raise ScaleError(_OUT_OF_RANGE)
        return value
    if prefix >> 2 != 0:
        raise ScaleError(_OUT_OF_RANGE)
    value = reader.read_uint(4)
    if value <= _FOUR_BYTE_MAX:
        raise ScaleError(_OUT_OF_RANGE)
    return value


def _fit(value: int, bits: int, message: str) -> int:
    if value >> bits:
        raise ScaleError(message)
    return value


def encode(value: int, bits: int) -> bytes:
    """Compact length prefix followed by the ``nbytes(bits)`` little-endian bytes."""
    payload = to_le_bytes(value, bits)
    return _compact_bytes(len(payload)) + payload


def decode(data: bytes, bits: int) -> int:
    """Decode a length-prefixed little-endian byte string into ``bits`` bits."""
    reader = _Reader(data)
    length = _read_compact_length(reader)
    payload = reader.read(length)
    reader.finish()
    try:
        return from_le_bytes(payload, bits)
    except ValueTooLargeError as exc:
        raise ScaleError(_TOO_LARGE) from exc


def compact_size_hint(value: int) -> int:
    """Number of bytes the compact encoding of ``value`` takes."""
    if value < 0:
        raise ValueError("compact integers must be non-negative")
    bits = value.bit_length()
    if bits <= 6:
        return 1
    if bits <= 14:
        return 2
    if bits <= 30:
        return 4
    return (bits + 7) // 8 + 1


def encode_compact(value: int, bits: int) -> bytes:
    """Compact SCALE encoding of ``value`` as an integer of ``bits`` bits."""
    _check_compact_supported(bits)
    to_le_bytes(value, bits)
    return _compact_bytes(value)


def _decode_big(reader: _Reader, size: int, bits: int) -> int:
    if size == 4:
        value = reader.read_uint(4)
        if value <= _FOUR_BYTE_MAX:
            raise ScaleError(_OUT_OF_RANGE)
        return _fit(value, bits, _OUT_OF_RANGE)
    if size == 8:
        value = reader.read_uint(8)
        if value <= (1 << 56) - 1:
            raise ScaleError(_OUT_OF_RANGE)
        return _fit(value, bits, _OUT_OF_RANGE)
    if size == 16:
        value = reader.read_uint(16)
        if value <= (1 << 120) - 1:
            raise ScaleError(_OUT_OF_RANGE)
        return _fit(value, bits, _OUT_OF_RANGE)
    try:
        value = from_le_bytes(reader.read(size), bits)
    except ValueTooLargeError as exc:
        raise ScaleError(_TOO_LARGE) from exc
    threshold = ((1 << (size * 8)) - 1) >> ((COMPACT_BITS_LIMIT // 8 + 2 - size) * 8)
    if value <= threshold:
        raise ScaleError(_OUT_OF_RANGE)
    return value


def decode_compact(data: bytes, bits: int) -> int:
    """Decode a compact SCALE integer that must fit ``bits`` bits."""
    _check_compact_supported(bits)
    reader = _Reader(data)
    prefix = reader.read_byte()
    mode = prefix % 4
    if mode == 0:
        value = _fit(prefix >> 2, bits, _OUT_OF_RANGE)
    elif mode == 1:
        raw = int.from_bytes(bytes([prefix]) + reader.read(1), "little") >> 2
        if not _SINGLE_BYTE_MAX <= raw <= _TWO_BYTE_MAX:
            raise ScaleError(_OUT_OF_RANGE)
        value = _fit(raw, bits, _OUT_OF_RANGE)
    elif mode == 2:
        raw = int.from_bytes(bytes([prefix]) + reader.read(3), "little") >> 2
        if not _TWO_BYTE_MAX <= raw <= _FOUR_BYTE_MAX:
            raise ScaleError(_OUT_OF_RANGE)
        value = _fit(raw, bits, _OUT_OF_RANGE)
    else:
        value = _decode_big(reader, (prefix >> 2) + 4, bits)
    reader.finish()
    return value