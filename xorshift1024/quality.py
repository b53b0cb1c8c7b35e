from __future__ import annotations

"""Statistical smoke checks run by evaluate_generator.py."""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .bit_engine import MASK64
from .float_types import float_type
from .int_types import int_type
from .protocols import RandomSource


@dataclass
class QualityConfig:
    drawCount: int = 100000
    binCount: int = 5
    bitDraws: int = 20
    intType: str = "uint8"
    floatType: str = "float64"
    realMin: float = 1.0
    realMax: float = 6.0
    realThreshold: float = 2.0


def bin_counts(rng: RandomSource, bins: int, draws: int, type_name: str = "uint64") -> List[int]:
    """Histogram of ``random_up_to(bins - 1)`` over ``draws`` samples."""
    if bins < 2:
        raise ValueError("Need at least two bins")
    target = int_type(type_name)
    counts = [0] * bins
    for _ in range(draws):
        counts[rng.random_up_to(bins - 1, target)] += 1
    return counts


def chi_square(counts: List[int]) -> float:
    """Pearson statistic of ``counts`` against a flat expectation."""
    total = sum(counts)
    if not counts or total == 0:
        return 0.0
    expected = total / len(counts)
    return sum((c - expected) ** 2 / expected for c in counts)


def bit_coverage(rng: RandomSource, draws: int) -> Tuple[int, int]:
    """OR and AND of ``draws`` full-range uint64 values."""
    ored = 0
    anded = MASK64
    for _ in range(draws):
        value = rng.random_full_range(int_type("uint64"))
        ored |= value
        anded &= value
    return ored, anded


def large_range_bins(rng: RandomSource, draws: int) -> List[int]:
    """Split ``[0, 3 * 2**62]`` into thirds and count hits.

    Catches a modulo reduction, which would overfill the lowest third.
    """
    quarter = 1 << 62
    limits = (quarter, quarter * 2)
    counts = [0, 0, 0]
    for _ in range(draws):
        value = rng.random_up_to(quarter * 3)
        if value < limits[0]:
            counts[0] += 1
        elif value < limits[1]:
            counts[1] += 1
        else:
            counts[2] += 1
    return counts


def low_fraction(
    rng: RandomSource,
    draws: int,
    threshold: float,
    min_value: float,
    max_value: float,
    type_name: str = "float64",
) -> float:
    """Share of ``random_real_in_range(min_value, max_value)`` draws below ``threshold``."""
    if draws <= 0:
        return 0.0
    target = float_type(type_name)
    below = 0
    for _ in range(draws):
        if rng.random_real_in_range(min_value, max_value, target) < threshold:
            below += 1
    return below / draws


def run_battery(rng: RandomSource, config: QualityConfig) -> Dict[str, Any]:
    """Run every check and return a JSON-friendly record."""
    counts = bin_counts(rng, config.binCount, config.drawCount, config.intType)
    ored, anded = bit_coverage(rng, config.bitDraws)
    thirds = large_range_bins(rng, config.drawCount // 3)
    expected_low = (config.realThreshold - config.realMin) / (config.realMax - config.realMin)
    return {
        "binCounts": counts,
        "chiSquare": chi_square(counts),
        "bitsSet": f"0x{ored:016x}",
        "bitsCleared": f"0x{anded:016x}",
        "fullBitCoverage": ored == MASK64 and anded == 0,
        "largeRangeBins": thirds,
        "largeRangeChiSquare": chi_square(thirds),
        "realLowFraction": low_fraction(
            rng,
            config.drawCount,
            config.realThreshold,
            config.realMin,
            config.realMax,
            config.floatType,
        ),
        "realExpectedLowFraction": expected_low,
    }
