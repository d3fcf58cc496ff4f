"""Conversions between integers, 64-bit limbs and fixed-width byte strings."""

from collections.abc import Iterable

LIMB_BITS = 64
LIMB_MAX = (1 << LIMB_BITS) - 1


class ConversionError(ValueError):
    """A value does not fit an unsigned integer of the given width."""

    def __init__(self, message: str, bits: int, wrapped: int) -> None:
        super().__init__(message)
        self.bits = bits
        self.wrapped = wrapped


class ValueTooLargeError(ConversionError):
    """The value needs more bits than the target width has."""

    def __init__(self, bits: int, wrapped: int) -> None:
        super().__init__(f"value too large for Uint<{bits}>", bits, wrapped)


class ValueNegativeError(ConversionError):
    """The value is negative and cannot be unsigned."""

    def __init__(self, bits: int, wrapped: int) -> None:
        super().__init__(f"negative value for Uint<{bits}>", bits, wrapped)


def _check_bits(bits: int) -> None:
    if not isinstance(bits, int) or bits < 0:
        raise ValueError(f"bit width must be a non-negative integer, got {bits!r}")


def _modulus_mask(bits: int) -> int:
    return (1 << bits) - 1


def nlimbs(bits: int) -> int:
    """Number of 64-bit limbs needed for ``bits`` bits."""
    _check_bits(bits)
    return (bits + LIMB_BITS - 1) // LIMB_BITS


def nbytes(bits: int) -> int:
    """Number of bytes needed for ``bits`` bits."""
    _check_bits(bits)
    return (bits + 7) // 8


def mask(bits: int) -> int:
    """Mask of the bits in use in the most significant limb."""
    _check_bits(bits)
    if bits == 0:
        return 0
    rest = bits % LIMB_BITS
    return LIMB_MAX if rest == 0 else (1 << rest) - 1


def from_int(value: int, bits: int) -> int:
    """Check that ``value`` fits ``bits`` unsigned bits and return it."""
    _check_bits(bits)
    if value < 0:
        raise ValueNegativeError(bits, (-value) & _modulus_mask(bits))
    if value >> bits:
        raise ValueTooLargeError(bits, value & _modulus_mask(bits))
    return value


def to_limbs(value: int, bits: int) -> list[int]:
    """Split ``value`` into little-endian 64-bit limbs."""
    value = from_int(value, bits)
    return [(value >> (LIMB_BITS * i)) & LIMB_MAX for i in range(nlimbs(bits))]


def overflowing_from_limbs(limbs: Iterable[int], bits: int) -> tuple[int, bool]:
    """Join little-endian limbs, wrapping to ``bits``; report whether it overflowed."""
    _check_bits(bits)
    total = 0
    for position, limb in enumerate(limbs):
        if not 0 <= limb <= LIMB_MAX:
            raise ValueError(f"limb out of 64-bit range: {limb!r}")
        total |= limb << (LIMB_BITS * position)
    return total & _modulus_mask(bits), bool(total >> bits)


def from_limbs(limbs: Iterable[int], bits: int) -> int:
    """Join little-endian limbs into an integer of ``bits`` bits."""
    value, overflow = overflowing_from_limbs(limbs, bits)
    if overflow:
        raise ValueTooLargeError(bits, value)
    return value


def to_be_bytes(value: int, bits: int) -> bytes:
    """Big-endian bytes of ``value``, ``nbytes(bits)`` long."""
    return from_int(value, bits).to_bytes(nbytes(bits), "big")


def to_le_bytes(value: int, bits: int) -> bytes:
    """Little-endian bytes of ``value``, ``nbytes(bits)`` long."""
    return from_int(value, bits).to_bytes(nbytes(bits), "little")


def from_be_bytes(data: bytes, bits: int) -> int:
    """Read a big-endian byte string of any length into ``bits`` bits."""
    _check_bits(bits)
    value = int.from_bytes(bytes(data), "big")
    if value >> bits:
        raise ValueTooLargeError(bits, value & _modulus_mask(bits))
    return value


def from_le_bytes(data: bytes, bits: int) -> int:
    """Read a little-endian byte string of any length into ``bits`` bits."""
    _check_bits(bits)
    value = int.from_bytes(bytes(data), "little")
    if value >> bits:
        raise ValueTooLargeError(bits, value & _modulus_mask(bits))
    return value