from __future__ import annotations

"""Fixed-width integer descriptors used to parameterize the integer samplers."""

import operator
from dataclasses import dataclass
from typing import Dict

from .errors import PreconditionError


@dataclass(frozen=True)
class IntType:
    """A two's-complement (signed) or plain binary (unsigned) integer width."""

    name: str
    bits: int
    signed: bool

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else self.mask

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def wrap(self, value: int) -> int:
        """Truncate ``value`` to this width, reinterpreting the sign bit if signed."""
        value &= self.mask
        if self.signed and value >> (self.bits - 1):
            value -= 1 << self.bits
        return value

    def check(self, value: int, label: str = "value") -> int:
        """Return ``value`` as a Python int or raise if it cannot be stored in this type."""
        if isinstance(value, bool):
            raise PreconditionError(f"{label} must be an integer, got {value!r}")
        try:
            value = operator.index(value)
        except TypeError as exc:
            raise PreconditionError(f"{label} must be an integer, got {value!r}") from exc
        if not self.contains(value):
            raise PreconditionError(
                f"{label} {value} is outside the range of {self.name} "
                f"[{self.min_value}, {self.max_value}]"
            )
        return value


INT8 = IntType("int8", 8, True)
UINT8 = IntType("uint8", 8, False)
INT16 = IntType("int16", 16, True)
UINT16 = IntType("uint16", 16, False)
INT32 = IntType("int32", 32, True)
UINT32 = IntType("uint32", 32, False)
INT64 = IntType("int64", 64, True)
UINT64 = IntType("uint64", 64, False)
INT128 = IntType("int128", 128, True)
UINT128 = IntType("uint128", 128, False)

INT_TYPES: Dict[str, IntType] = {
    t.name: t
    for t in (INT8, UINT8, INT16, UINT16, INT32, UINT32, INT64, UINT64, INT128, UINT128)
}


def int_type(name: str) -> IntType:
    """Look up an :class:`IntType` by name (``"int8"``, ``"uint64"``, ...)."""
    try:
        return INT_TYPES[name.lower()]
    except KeyError:
        raise PreconditionError(f"Unknown integer type {name!r}; expected one of {sorted(INT_TYPES)}") from None
