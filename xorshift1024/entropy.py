from __future__ import annotations

"""Entropy sources and the serialized seed pull used by default construction.

The package keeps a single process-wide :class:`SystemEntropySource`. It is
created lazily by the first default-constructed generator, dropped again at
interpreter exit, and is only ever read through :func:`acquire_seed_words`,
which holds ``_SOURCE_LOCK`` for the whole 16-word pull. Sampling code never
touches it.
"""

import atexit
import logging
import secrets
import threading
from typing import Callable, List, Optional, Protocol, Tuple, runtime_checkable

from .bit_engine import MASK64, STATE_WORDS
from .errors import EntropyUnavailableError

logger = logging.getLogger(__name__)


@runtime_checkable
class EntropySource(Protocol):
    """Anything that returns non-deterministic unsigned words on demand."""

    native_bits: int

    def __call__(self) -> int:
        ...


class SystemEntropySource:
    """Operating-system entropy delivered ``native_bits`` at a time."""

    def __init__(self, native_bits: int = 32) -> None:
        if native_bits < 1:
            raise ValueError("native_bits must be positive")
        self.native_bits = native_bits

    def __call__(self) -> int:
        return secrets.randbits(self.native_bits)

    def __repr__(self) -> str:
        return f"SystemEntropySource(native_bits={self.native_bits})"


class CallableEntropySource:
    """Adapt a plain zero-argument callable to :class:`EntropySource`."""

    def __init__(self, fn: Callable[[], int], native_bits: int = 32) -> None:
        if native_bits < 1:
            raise ValueError("native_bits must be positive")
        self._fn = fn
        self.native_bits = native_bits

    def __call__(self) -> int:
        return self._fn()


_SOURCE_LOCK = threading.Lock()
_shared_source: Optional[EntropySource] = None


def _shared_source_locked() -> EntropySource:
    global _shared_source
    if _shared_source is None:
        _shared_source = SystemEntropySource()
        logger.debug("Initialised shared entropy source %r", _shared_source)
    return _shared_source


def shared_entropy_source() -> EntropySource:
    """Return the process-wide source, creating it on first use."""
    with _SOURCE_LOCK:
        return _shared_source_locked()


def reset_shared_entropy_source() -> None:
    """Drop the process-wide source; the next default seed pull recreates it."""
    global _shared_source
    with _SOURCE_LOCK:
        if _shared_source is not None:
            logger.debug("Releasing shared entropy source %r", _shared_source)
        _shared_source = None


atexit.register(reset_shared_entropy_source)


def _pull(source: EntropySource, bits: int) -> int:
    """Read one value from ``source`` and keep its low ``bits`` bits."""
    try:
        value = source()
    except (OSError, NotImplementedError, StopIteration) as exc:
        raise EntropyUnavailableError(f"Entropy source {source!r} failed: {exc}") from exc
    if isinstance(value, bool) or not isinstance(value, int):
        raise EntropyUnavailableError(f"Entropy source {source!r} returned {value!r}, expected an unsigned integer")
    if value < 0 or value >> source.native_bits:
        raise EntropyUnavailableError(
            f"Entropy source {source!r} returned {value:#x}, outside its {source.native_bits}-bit range"
        )
    return value & ((1 << bits) - 1)


def assemble_word(source: EntropySource) -> int:
    """Build one 64-bit word from however many native outputs it takes.

    Sources at least 64 bits wide contribute one output, sources at least 32
    bits wide contribute two (low half first), and anything narrower
    contributes four 16-bit pieces.
    """
    native = source.native_bits
    if native >= 64:
        return _pull(source, 64) & MASK64
    if native >= 32:
        low = _pull(source, 32)
        high = _pull(source, 32)
        return low | (high << 32)
    if native < 16:
        raise EntropyUnavailableError(f"Entropy source {source!r} is only {native} bits wide; at least 16 are needed")
    word = 0
    for shift in (0, 16, 32, 48):
        word |= _pull(source, 16) << shift
    return word


def acquire_seed_words(source: Optional[EntropySource] = None, count: int = STATE_WORDS) -> Tuple[int, ...]:
    """Pull ``count`` 64-bit words while holding the process-wide seeding lock.

    ``source`` defaults to the shared :class:`SystemEntropySource`.
    """
    with _SOURCE_LOCK:
        active = source if source is not None else _shared_source_locked()
        words: List[int] = [assemble_word(active) for _ in range(count)]
    if not any(words):
        raise EntropyUnavailableError(f"Entropy source {active!r} produced an all-zero seed")
    return tuple(words)
