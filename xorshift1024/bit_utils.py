from __future__ import annotations

"""Leading-zero counting for 64-bit words."""

from .bit_engine import MASK64
from .errors import PreconditionError

DEBRUIJN64 = 0x03F79D71B4CB0A89

# Index is the top six bits of (fill_right(x) * DEBRUIJN64).
CLZ64_INDEX = (
    63, 16, 62,  7, 15, 36, 61,  3,
     6, 14, 22, 26, 35, 47, 60,  2,
     9,  5, 28, 11, 13, 21, 42, 19,
    25, 31, 34, 40, 46, 52, 59,  1,
    17,  8, 37,  4, 23, 27, 48, 10,
    29, 12, 43, 20, 32, 41, 53, 18,
    38, 24, 49, 30, 44, 33, 54, 39,
    50, 45, 55, 51, 56, 57, 58,  0,
)


def _check_word(value: int) -> None:
    if value <= 0 or value > MASK64:
        raise PreconditionError(f"Leading zeros are only defined for nonzero 64-bit words, got {value!r}")


def count_leading_zeros64(value: int) -> int:
    """Return the number of leading zero bits of a nonzero uint64."""
    _check_word(value)
    return 64 - value.bit_length()


def count_leading_zeros64_debruijn(value: int) -> int:
    """Portable variant of :func:`count_leading_zeros64` using a de Bruijn table.

    Smearing the highest set bit rightwards turns ``value`` into ``2**k - 1``;
    multiplying that by the de Bruijn constant puts a unique pattern in the
    top six bits, which indexes straight into ``CLZ64_INDEX``.
    """
    _check_word(value)
    bitset = value
    bitset |= bitset >> 1
    bitset |= bitset >> 2
    bitset |= bitset >> 4
    bitset |= bitset >> 8
    bitset |= bitset >> 16
    bitset |= bitset >> 32
    return CLZ64_INDEX[((bitset * DEBRUIJN64) & MASK64) >> 58]
