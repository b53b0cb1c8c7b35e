from __future__ import annotations

"""Capability interface that consumers of random values depend on."""

from typing import Any, Protocol, runtime_checkable

from .float_types import FloatType
from .int_types import IntType


@runtime_checkable
class RandomSource(Protocol):
    """What callers need from a generator.

    :class:`~xorshift1024.seeded_random.SeededRandom` is the production
    implementation and :class:`~xorshift1024.testing.ScriptedRandom` the
    deterministic stand-in for tests.
    """

    def next_raw(self) -> int:
        ...

    def random_full_range(self, int_type: IntType = ...) -> int:
        ...

    def random_up_to(self, max_value: int, int_type: IntType = ...) -> int:
        ...

    def random_in_range(self, min_value: int, max_value: int, int_type: IntType = ...) -> int:
        ...

    def random_real(self, float_type: FloatType = ...) -> Any:
        ...

    def random_real_up_to(self, max_value: Any, float_type: FloatType = ...) -> Any:
        ...

    def random_real_in_range(self, min_value: Any, max_value: Any, float_type: FloatType = ...) -> Any:
        ...

    def random(self) -> float:
        ...
