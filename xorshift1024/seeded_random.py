"""Deterministic pseudo-random generator built on xorshift1024*."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Tuple

from . import samplers
from .bit_engine import Xorshift1024Star
from .entropy import EntropySource, acquire_seed_words
from .errors import PreconditionError
from .float_types import FLOAT64, FloatType
from .int_types import INT64, UINT64, IntType

logger = logging.getLogger(__name__)


class SeededRandom:
    """Seedable xorshift1024* generator with typed, bias-free sampling.

    Without ``seed`` the state is drawn from ``entropy`` (or the shared system
    source). With ``seed`` the 16 words are copied verbatim, so saving
    :meth:`get_state` and passing it back later replays the remaining stream.

    Instances are single-owner: they cannot be copied or pickled, and they do
    no locking of their own.
    """

    __slots__ = ("_engine",)

    def __init__(self, seed: Optional[Iterable[int]] = None, entropy: Optional[EntropySource] = None) -> None:
        if seed is None:
            words = acquire_seed_words(entropy)
            logger.debug("Seeded generator %#x from entropy", id(self))
        else:
            words = seed
        self._engine = Xorshift1024Star(words)

    # Seed lifecycle ---------------------------------------------------------

    def set_seed(self, seed: Iterable[int]) -> None:
        """Replace the state with ``seed`` and rewind the cursor."""
        self._engine.seed(seed)
        logger.debug("Reseeded generator %#x", id(self))

    def get_state(self) -> Tuple[int, ...]:
        """Return the current 16-word state; feed it to :meth:`set_seed` to resume from here.

        The words are rotated to start at the cursor, so the tuple is a
        complete seed on its own and the cursor never needs saving.
        """
        return self._engine.snapshot()

    @property
    def position(self) -> int:
        return self._engine.position

    # Raw and integer draws --------------------------------------------------

    def next_raw(self) -> int:
        return self._engine.next_raw()

    def random_full_range(self, int_type: IntType = UINT64) -> int:
        return samplers.full_range(self._engine.next_raw, int_type)

    def random_up_to(self, max_value: int, int_type: IntType = UINT64) -> int:
        """Return an integer in [0, max_value]."""
        return samplers.up_to(self._engine.next_raw, max_value, int_type)

    def random_in_range(self, min_value: int, max_value: int, int_type: IntType = INT64) -> int:
        """Return an integer in [min_value, max_value]."""
        return samplers.in_range(self._engine.next_raw, min_value, max_value, int_type)

    # Real draws -------------------------------------------------------------

    def random_real(self, float_type: FloatType = FLOAT64) -> Any:
        return samplers.unit_real(self._engine.next_raw, float_type)

    def random_real_up_to(self, max_value: Any, float_type: FloatType = FLOAT64) -> Any:
        return samplers.real_up_to(self._engine.next_raw, max_value, float_type)

    def random_real_in_range(self, min_value: Any, max_value: Any, float_type: FloatType = FLOAT64) -> Any:
        return samplers.real_in_range(self._engine.next_raw, min_value, max_value, float_type)

    # Math.random-like helpers -----------------------------------------------

    def random(self) -> float:
        """Return a float in [0, 1)."""
        return float(self.random_real(FLOAT64))

    def randint(self, n: int) -> int:
        """Return a random integer in [0, n)."""
        if n <= 0:
            raise PreconditionError("Upper bound must be positive")
        if n == 1:
            return 0
        return self.random_up_to(n - 1)

    # Ownership --------------------------------------------------------------

    def __copy__(self) -> SeededRandom:
        raise TypeError("SeededRandom instances cannot be copied; reseed a new instance from get_state()")

    def __deepcopy__(self, memo: Any) -> SeededRandom:
        raise TypeError("SeededRandom instances cannot be copied; reseed a new instance from get_state()")

    def __reduce_ex__(self, protocol: Any) -> Any:
        raise TypeError("SeededRandom instances cannot be pickled; persist get_state() instead")

    def __repr__(self) -> str:
        return f"SeededRandom(position={self._engine.position})"
