"""Random and byte-driven generation of unsigned integers of a given width."""

import random
from collections.abc import Iterator
from itertools import islice

from uintcodec.limbs import LIMB_BITS, from_limbs, mask, nbytes, nlimbs


def random_uint(bits: int, rng: random.Random | None = None) -> int:
    """Uniformly random integer in ``[0, 2**bits)``."""
    count = nlimbs(bits)
    if count == 0:
        return 0
    source = random if rng is None else rng
    return source.getrandbits(bits)


def _read_u64(stream: Iterator[int]) -> int:
    chunk = bytes(islice(stream, 8)).ljust(8, b"\x00")
    return int.from_bytes(chunk, "little")


def _int_in_range(stream: Iterator[int], upper: int) -> int:
    result = 0
    offset = 0
    while offset < LIMB_BITS and upper >> offset:
        byte = next(stream, None)
        if byte is None:
            break
        result = (result << 8) | byte
        offset += 8
    return result % (upper + 1)


def uint_from_bytes_stream(data: bytes, bits: int) -> int:
    """Build an integer of ``bits`` bits from raw bytes, padding with zeros when short."""
    count = nlimbs(bits)
    if count == 0:
        return 0
    stream = iter(bytes(data))
    limbs = [_read_u64(stream) for _ in range(count - 1)]
    limbs.append(_int_in_range(stream, mask(bits)))
    return from_limbs(limbs, bits)


def size_hint(bits: int) -> tuple[int, int]:
    """Lower and upper number of bytes consumed by ``uint_from_bytes_stream``."""
    size = nbytes(bits)
    return size, size