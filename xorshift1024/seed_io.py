from __future__ import annotations

"""Helpers for writing generator state to disk and reading it back."""

import json
from pathlib import Path
from typing import Any, Iterable, List, Tuple

from .bit_engine import validate_seed
from .errors import PreconditionError


def format_word(word: int) -> str:
    """Render a uint64 as a fixed-width lowercase hex literal."""
    return f"0x{word:016x}"


def format_seed(words: Iterable[int]) -> List[str]:
    """Validate a seed and render each word with :func:`format_word`."""
    return [format_word(word) for word in validate_seed(words)]


def parse_word(raw: Any) -> int:
    """Accept an int, a ``0x`` hex string or a decimal string."""
    if isinstance(raw, bool):
        raise PreconditionError(f"Seed word must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip().lower().replace("_", "")
        try:
            return int(text, 16) if text.startswith("0x") else int(text, 10)
        except ValueError:
            raise PreconditionError(f"Cannot parse seed word {raw!r}") from None
    raise PreconditionError(f"Seed word must be an int or string, got {type(raw).__name__}")


def parse_seed(values: Iterable[Any]) -> Tuple[int, ...]:
    """Parse and validate a 16-word seed."""
    return validate_seed(parse_word(v) for v in values)


def parse_seed_hex(text: str) -> Tuple[int, ...]:
    """Parse 16 words separated by commas or whitespace."""
    parts = [p for p in text.replace(",", " ").split() if p]
    return parse_seed(parts)


def save_seed(path: Path, words: Iterable[int]) -> None:
    """Write ``{"state": [...]}`` to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        json.dump({"state": format_seed(words)}, f, indent=2)


def load_seed(path: Path) -> Tuple[int, ...]:
    """Read a seed written by :func:`save_seed` (a bare JSON list also works)."""
    with path.open() as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("state")
    if not isinstance(data, list):
        raise PreconditionError(f"{path} does not contain a seed list")
    return parse_seed(data)
