from __future__ import annotations

"""Floating-point precisions the real samplers can produce."""

from dataclasses import dataclass
from typing import Any, Dict

import numpy as np

from .errors import PreconditionError


@dataclass(frozen=True)
class FloatType:
    """A numpy floating dtype plus the bit budget used when filling it."""

    name: str
    dtype: Any

    @property
    def mantissa_bits(self) -> int:
        """Explicit significand bits (digits - 1)."""
        return int(np.finfo(self.dtype).nmant)

    @property
    def epsilon(self) -> Any:
        return np.finfo(self.dtype).eps

    @property
    def kept_bits(self) -> int:
        # A raw draw only has 64 bits to give.
        return min(self.mantissa_bits, 64)

    @property
    def discarded_bits(self) -> int:
        return 64 - self.kept_bits

    @property
    def unit(self) -> Any:
        """Scale that maps a ``kept_bits``-wide integer into [0, 1)."""
        return self.dtype(np.ldexp(self.dtype(1), -self.kept_bits))

    def from_int(self, value: int) -> Any:
        """Convert a non-negative integer below 2**64 exactly into this dtype."""
        if value < (1 << 32):
            return self.dtype(value)
        high = self.dtype(value >> 32) * self.dtype(1 << 32)
        return high + self.dtype(value & 0xFFFFFFFF)

    def coerce(self, value: Any, label: str = "value") -> Any:
        """Convert a bound to this dtype, rejecting NaN and infinities."""
        try:
            converted = self.dtype(value)
        except (TypeError, ValueError, OverflowError) as exc:
            raise PreconditionError(f"{label} must be a real number, got {value!r}") from exc
        if not np.isfinite(converted):
            raise PreconditionError(f"{label} must be finite, got {value!r}")
        return converted


FLOAT32 = FloatType("float32", np.float32)
FLOAT64 = FloatType("float64", np.float64)
LONGDOUBLE = FloatType("longdouble", np.longdouble)

FLOAT_TYPES: Dict[str, FloatType] = {t.name: t for t in (FLOAT32, FLOAT64, LONGDOUBLE)}


def float_type(name: str) -> FloatType:
    """Look up a :class:`FloatType` by name (``"float32"``, ``"float64"``, ``"longdouble"``)."""
    try:
        return FLOAT_TYPES[name.lower()]
    except KeyError:
        raise PreconditionError(f"Unknown float type {name!r}; expected one of {sorted(FLOAT_TYPES)}") from None
