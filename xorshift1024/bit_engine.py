from __future__ import annotations

"""The xorshift1024* recurrence that every sampler draws from."""

import operator
from typing import Iterable, List, Tuple

from .errors import PreconditionError


STATE_WORDS = 16
MASK64 = 0xFFFFFFFFFFFFFFFF
MULTIPLIER = 1181783497276652981


def validate_seed(words: Iterable[int]) -> Tuple[int, ...]:
    """Return ``words`` as a tuple after checking it is a usable 16-word seed."""
    if isinstance(words, (str, bytes)):
        raise PreconditionError("Seed must be a sequence of 16 integers, not a string")
    try:
        seed = tuple(words)
    except TypeError as exc:
        raise PreconditionError(f"Seed must be a sequence of {STATE_WORDS} integers") from exc
    if len(seed) != STATE_WORDS:
        raise PreconditionError(f"Seed must contain exactly {STATE_WORDS} words, got {len(seed)}")
    checked = []
    for i, word in enumerate(seed):
        if isinstance(word, bool):
            raise PreconditionError(f"Seed word {i} is not an integer: {word!r}")
        try:
            word = operator.index(word)
        except TypeError as exc:
            raise PreconditionError(f"Seed word {i} is not an integer: {word!r}") from exc
        if word < 0 or word > MASK64:
            raise PreconditionError(f"Seed word {i} is outside the unsigned 64-bit range: {word:#x}")
        checked.append(word)
    # All-zero state is a fixed point of the recurrence.
    if not any(checked):
        raise PreconditionError("Seed must not be all zero")
    return tuple(checked)


class Xorshift1024Star:
    """Sixteen 64-bit words of state plus a rotating cursor."""

    __slots__ = ("_state", "_position")

    def __init__(self, seed: Iterable[int]) -> None:
        self._state: List[int] = list(validate_seed(seed))
        self._position = 0

    @property
    def state(self) -> Tuple[int, ...]:
        return tuple(self._state)

    @property
    def position(self) -> int:
        return self._position

    def snapshot(self) -> Tuple[int, ...]:
        """Return the state rotated so the cursor word comes first.

        The recurrence only looks at neighbouring words, so seeding a fresh
        engine (cursor 0) with this tuple continues the exact same stream.
        """
        p = self._position
        return tuple(self._state[p:] + self._state[:p])

    def seed(self, words: Iterable[int]) -> None:
        """Replace the whole state and rewind the cursor."""
        self._state = list(validate_seed(words))
        self._position = 0

    def next_raw(self) -> int:
        """Advance the state by one step and return a uint64."""
        state = self._state
        s0 = state[self._position]
        self._position = (self._position + 1) % STATE_WORDS
        s1 = state[self._position]
        s1 ^= (s1 << 31) & MASK64
        s1 ^= s1 >> 11
        s0 ^= s0 >> 30
        mixed = s0 ^ s1
        state[self._position] = mixed
        return (mixed * MULTIPLIER) & MASK64
