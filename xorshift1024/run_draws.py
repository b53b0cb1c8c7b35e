#!/usr/bin/env python3
from __future__ import annotations

"""CLI entry point that dumps a replayable sequence of draws as JSON."""

import argparse
import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from xorshift1024.float_types import FLOAT_TYPES, float_type
from xorshift1024.int_types import INT_TYPES, int_type
from xorshift1024.seed_io import format_seed, load_seed, parse_seed_hex
from xorshift1024.seeded_random import SeededRandom

INT_KINDS = ("raw", "full", "up-to", "range")
REAL_KINDS = ("real", "real-up-to", "real-range")


@dataclass
class DrawConfig:
    kind: str
    count: int
    typeName: str
    minValue: Optional[str] = None
    maxValue: Optional[str] = None


def _int_to_json(value: int) -> str:
    # Decimal strings keep every width exact and signed values readable.
    return str(value)


def _real_to_json(value: Any) -> Any:
    if np.finfo(value.dtype).nmant > np.finfo(np.float64).nmant:
        return str(value)
    return float(value)


def draw(rng: SeededRandom, config: DrawConfig) -> List[Any]:
    """Produce ``config.count`` values of the requested kind."""
    values: List[Any] = []
    if config.kind in REAL_KINDS:
        target = float_type(config.typeName)
        for _ in range(config.count):
            if config.kind == "real":
                value = rng.random_real(target)
            elif config.kind == "real-up-to":
                value = rng.random_real_up_to(float(config.maxValue), target)
            else:
                value = rng.random_real_in_range(float(config.minValue), float(config.maxValue), target)
            values.append(_real_to_json(value))
        return values

    target = int_type(config.typeName)
    for _ in range(config.count):
        if config.kind == "raw":
            value = rng.next_raw()
        elif config.kind == "full":
            value = rng.random_full_range(target)
        elif config.kind == "up-to":
            value = rng.random_up_to(int(config.maxValue, 0), target)
        else:
            value = rng.random_in_range(int(config.minValue, 0), int(config.maxValue, 0), target)
        values.append(_int_to_json(value))
    return values


def build_generator(seed_file: Optional[str], seed_hex: Optional[str]) -> SeededRandom:
    """Seed from a file, an inline hex list, or fresh entropy."""
    if seed_file:
        return SeededRandom(load_seed(Path(seed_file)))
    if seed_hex:
        return SeededRandom(parse_seed_hex(seed_hex))
    return SeededRandom()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Emit a deterministic run of xorshift1024* draws.")
    parser.add_argument("--seed-file", help="JSON seed file written by seed_io.save_seed.")
    parser.add_argument("--seed-hex", help="16 comma-separated hex words.")
    parser.add_argument("--kind", choices=INT_KINDS + REAL_KINDS, default="raw")
    parser.add_argument("--type", dest="type_name", help="Integer or float type name.")
    parser.add_argument("--count", type=int, default=16)
    parser.add_argument("--min", dest="min_value", help="Lower bound for range kinds.")
    parser.add_argument("--max", dest="max_value", help="Upper bound for bounded kinds.")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    real = args.kind in REAL_KINDS
    type_name = args.type_name or ("float64" if real else "uint64")
    known = FLOAT_TYPES if real else INT_TYPES
    if type_name not in known:
        parser.error(f"--type must be one of {sorted(known)} for --kind {args.kind}")
    if args.kind in ("up-to", "range", "real-up-to", "real-range") and args.max_value is None:
        parser.error(f"--max is required for --kind {args.kind}")
    if args.kind in ("range", "real-range") and args.min_value is None:
        parser.error(f"--min is required for --kind {args.kind}")

    config = DrawConfig(
        kind=args.kind,
        count=args.count,
        typeName=type_name,
        minValue=args.min_value,
        maxValue=args.max_value,
    )

    rng = build_generator(args.seed_file, args.seed_hex)
    seed = format_seed(rng.get_state())
    values = draw(rng, config)

    output: Dict[str, Any] = {
        "seed": seed,
        "config": asdict(config),
        "draws": values,
        "finalState": format_seed(rng.get_state()),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
