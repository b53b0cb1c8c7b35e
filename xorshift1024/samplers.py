from __future__ import annotations

"""Range reduction from raw uint64 draws to typed integers and reals.

Every routine takes the raw source as a zero-argument callable, so the same
code serves :class:`~xorshift1024.seeded_random.SeededRandom` and the
scripted stub in :mod:`xorshift1024.testing`.

Bounded integers use rejection sampling: the raw word is shifted right until
it just covers ``range + 1`` values and redrawn while it exceeds ``range``.
At least half of the shifted outcomes are accepted, so the expected number of
draws is at most two and no value is favoured the way ``raw % (range + 1)``
would favour small ones.
"""

from typing import Any, Callable

import numpy as np

from .bit_engine import MASK64
from .bit_utils import count_leading_zeros64
from .errors import PreconditionError
from .float_types import FLOAT64, FloatType
from .int_types import INT64, UINT64, IntType


RawFn = Callable[[], int]


def full_range(next_raw: RawFn, int_type: IntType = UINT64) -> int:
    """Return a value spanning the whole domain of ``int_type``."""
    if int_type.bits <= 64:
        return int_type.wrap(next_raw())
    value = 0
    words = (int_type.bits + 63) // 64
    for _ in range(words):
        value = (value << 64) | next_raw()
    return int_type.wrap(value)


def below_or_equal(next_raw: RawFn, limit: int) -> int:
    """Return a uniform integer in ``[0, limit]`` for ``0 < limit < 2**64``."""
    if limit <= 0 or limit > MASK64:
        raise PreconditionError(f"Range must be in [1, 2**64 - 1], got {limit}")
    leading_zeros = count_leading_zeros64(limit)
    while True:
        candidate = next_raw() >> leading_zeros
        if candidate <= limit:
            return candidate


def up_to(next_raw: RawFn, max_value: int, int_type: IntType = UINT64) -> int:
    """Return a uniform integer in ``[0, max_value]``."""
    max_value = int_type.check(max_value, "max_value")
    if max_value <= 0:
        raise PreconditionError(f"max_value must be positive, got {max_value}")
    if max_value > MASK64:
        raise PreconditionError(f"max_value {max_value} does not fit in 64 bits")
    return below_or_equal(next_raw, max_value)


def in_range(next_raw: RawFn, min_value: int, max_value: int, int_type: IntType = INT64) -> int:
    """Return a uniform integer in ``[min_value, max_value]``."""
    min_value = int_type.check(min_value, "min_value")
    max_value = int_type.check(max_value, "max_value")
    if min_value >= max_value:
        raise PreconditionError(f"min_value ({min_value}) must be less than max_value ({max_value})")
    span = max_value - min_value
    if span > MASK64:
        raise PreconditionError(f"Range [{min_value}, {max_value}] is wider than 2**64 values")
    return min_value + below_or_equal(next_raw, span)


def unit_real(next_raw: RawFn, float_type: FloatType = FLOAT64) -> Any:
    """Return a value in ``[0, 1)`` carrying ``float_type.kept_bits`` random bits."""
    bits = next_raw() >> float_type.discarded_bits
    return float_type.from_int(bits) * float_type.unit


def real_up_to(next_raw: RawFn, max_value: Any, float_type: FloatType = FLOAT64) -> Any:
    """Scale a unit draw by ``max_value``."""
    bound = float_type.coerce(max_value, "max_value")
    return unit_real(next_raw, float_type) * bound


def real_in_range(next_raw: RawFn, min_value: Any, max_value: Any, float_type: FloatType = FLOAT64) -> Any:
    """Scale a unit draw by ``max_value - min_value`` and shift it to ``min_value``.

    When the span itself overflows the format each bound is scaled separately
    and the sum is clamped back into ``[min_value, max_value]``.
    """
    low = float_type.coerce(min_value, "min_value")
    high = float_type.coerce(max_value, "max_value")
    if not low < high:
        raise PreconditionError(f"min_value ({min_value}) must be less than max_value ({max_value})")
    with np.errstate(over="ignore"):
        span = high - low
    unit = unit_real(next_raw, float_type)
    if np.isfinite(span):
        return unit * span + low
    value = low + unit * high - unit * low
    return min(max(value, low), high)
