"""Small helpers shared by the codec modules."""

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def rem_up(a: int, b: int) -> int:
    """Return ``a % b``, but ``b`` instead of ``0``."""
    rem = a % b
    return rem if rem > 0 else b


def trim_end(seq: Sequence[T], value: T) -> Sequence[T]:
    """Return ``seq`` without the trailing run of items equal to ``value``."""
    end = len(seq)
    while end > 0 and seq[end - 1] == value:
        end -= 1
    return seq[:end]