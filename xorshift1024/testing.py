from __future__ import annotations

"""Deterministic stand-in for :class:`~xorshift1024.seeded_random.SeededRandom`."""

from typing import Any, Iterable, List

from . import samplers
from .bit_engine import MASK64
from .errors import ScriptExhaustedError
from .float_types import FLOAT64, FloatType
from .int_types import INT64, UINT64, IntType


class ScriptedRandom:
    """Replays a fixed list of raw uint64 values through the real samplers.

    Useful for pinning down exactly which raw draws a caller consumes, e.g.
    to exercise the rejection branch of bounded sampling.
    """

    def __init__(self, raw_values: Iterable[int]) -> None:
        values: List[int] = []
        for value in raw_values:
            if value < 0 or value > MASK64:
                raise ValueError(f"Scripted value {value!r} is not a uint64")
            values.append(value)
        self._values = values
        self._index = 0

    @property
    def consumed(self) -> int:
        return self._index

    @property
    def remaining(self) -> int:
        return len(self._values) - self._index

    def next_raw(self) -> int:
        if self._index >= len(self._values):
            raise ScriptExhaustedError(f"Script of {len(self._values)} values exhausted")
        value = self._values[self._index]
        self._index += 1
        return value

    def random_full_range(self, int_type: IntType = UINT64) -> int:
        return samplers.full_range(self.next_raw, int_type)

    def random_up_to(self, max_value: int, int_type: IntType = UINT64) -> int:
        return samplers.up_to(self.next_raw, max_value, int_type)

    def random_in_range(self, min_value: int, max_value: int, int_type: IntType = INT64) -> int:
        return samplers.in_range(self.next_raw, min_value, max_value, int_type)

    def random_real(self, float_type: FloatType = FLOAT64) -> Any:
        return samplers.unit_real(self.next_raw, float_type)

    def random_real_up_to(self, max_value: Any, float_type: FloatType = FLOAT64) -> Any:
        return samplers.real_up_to(self.next_raw, max_value, float_type)

    def random_real_in_range(self, min_value: Any, max_value: Any, float_type: FloatType = FLOAT64) -> Any:
        return samplers.real_in_range(self.next_raw, min_value, max_value, float_type)

    def random(self) -> float:
        return float(self.random_real(FLOAT64))
