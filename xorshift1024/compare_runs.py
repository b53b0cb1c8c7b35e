#!/usr/bin/env python3
from __future__ import annotations

"""Check that two run_draws.py dumps describe the same replay."""

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence


def load_json(path: Path) -> Dict[str, Any]:
    """Read a JSON file and return the parsed dictionary."""
    with path.open() as f:
        return json.load(f)


def approx_equal(a: float, b: float, tol: float = 0.0) -> bool:
    """Float comparison; exact by default since replays are bit-identical."""
    return abs(a - b) <= tol


def compare_draws(lhs: List[Any], rhs: List[Any], tol: float = 0.0) -> None:
    """Compare two draw lists element by element."""
    if len(lhs) != len(rhs):
        raise AssertionError(f"draw count mismatch: {len(lhs)} vs {len(rhs)}")
    for i, (lv, rv) in enumerate(zip(lhs, rhs)):
        if isinstance(lv, float) and isinstance(rv, float):
            if not approx_equal(lv, rv, tol):
                raise AssertionError(f"draws[{i}] mismatch: {lv} vs {rv}")
        elif lv != rv:
            raise AssertionError(f"draws[{i}] mismatch: {lv} vs {rv}")


def compare_dumps(lhs: Dict[str, Any], rhs: Dict[str, Any], tol: float = 0.0) -> None:
    """Raise ``AssertionError`` at the first field where two dumps disagree."""
    for field in ("seed", "config"):
        if lhs.get(field) != rhs.get(field):
            raise AssertionError(f"{field} mismatch: {lhs.get(field)} vs {rhs.get(field)}")
    compare_draws(lhs.get("draws", []), rhs.get("draws", []), tol)
    if lhs.get("finalState") != rhs.get("finalState"):
        raise AssertionError("finalState mismatch")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Compare two run_draws JSON outputs.")
    parser.add_argument("--lhs", required=True, help="Path to the first JSON output.")
    parser.add_argument("--rhs", required=True, help="Path to the second JSON output.")
    parser.add_argument("--tol", type=float, default=0.0, help="Absolute tolerance for real draws.")
    args = parser.parse_args(argv)

    lhs_data = load_json(Path(args.lhs))
    rhs_data = load_json(Path(args.rhs))
    compare_dumps(lhs_data, rhs_data, args.tol)

    print(f"Runs match: {len(lhs_data.get('draws', []))} draws and final state identical.")


if __name__ == "__main__":
    main()
