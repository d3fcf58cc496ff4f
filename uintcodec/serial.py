"""Text and binary serialization of fixed-width unsigned integers."""

from uintcodec.limbs import ValueTooLargeError, from_be_bytes, nbytes, to_be_bytes

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class SerializationError(ValueError):
    """Serialized data does not describe a value of the requested width."""


def to_hex(value: int, bits: int) -> str:
    """``0x``-prefixed lower-case hex of all ``nbytes(bits)`` big-endian bytes."""
    return "0x" + to_be_bytes(value, bits).hex()


def _trim_hex_prefix(text: str) -> str:
    if text[:2] in ("0x", "0X"):
        return text[2:]
    return text


def from_hex(text: str, bits: int) -> int:
    """Parse a hex string of any length and case, with optional ``0x`` prefix."""
    digits = _trim_hex_prefix(text)
    if not all(char in _HEX_DIGITS for char in digits):
        raise SerializationError(
            f"invalid value {text!r}, expected a {nbytes(bits)} byte hex string"
        )
    value = int(digits, 16) if digits else 0
    if value >> bits:
        raise SerializationError(
            f"invalid value {text!r}, expected a {nbytes(bits)} byte hex string"
        )
    return value


def to_bytes(value: int, bits: int) -> bytes:
    """All ``nbytes(bits)`` big-endian bytes of ``value``."""
    return to_be_bytes(value, bits)


def from_bytes(data: bytes, bits: int) -> int:
    """Read exactly ``nbytes(bits)`` big-endian bytes."""
    data = bytes(data)
    expected = nbytes(bits)
    if len(data) != expected:
        raise SerializationError(
            f"invalid length {len(data)}, expected {bits} bits of binary data "
            "in big endian order"
        )
    try:
        return from_be_bytes(data, bits)
    except ValueTooLargeError as exc:
        raise SerializationError(f"Value to large for Uint<{bits}>") from exc