#!/usr/bin/env python3
from __future__ import annotations

"""Plotting utility that visualises the quality summary for each seed."""

import argparse
import json
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


def load_summary(path: Path) -> Dict[str, Any]:
    """Parse the JSON summary emitted by evaluate_generator.py."""
    with path.open() as f:
        data = json.load(f)
    if not isinstance(data, dict) or not isinstance(data.get("results"), list):
        raise ValueError("Summary file must contain a 'results' list")
    return data


def plot_summary(summary: Dict[str, Any], output_path: Path) -> None:
    """Draw the four panels and save them to ``output_path``."""
    results = summary["results"]
    if not results:
        raise ValueError("Summary is empty")
    config = summary.get("config", {})
    seeds = list(range(len(results)))

    fig, axes = plt.subplots(2, 2, figsize=(14, 10))

    ax0 = axes[0, 0]
    bin_count = len(results[0]["binCounts"])
    width = 0.8 / len(results)
    for idx, entry in enumerate(results):
        xs = [b + idx * width for b in range(bin_count)]
        ax0.bar(xs, entry["binCounts"], width=width, color="#2563eb", alpha=0.35 + 0.6 * idx / max(1, len(results) - 1))
    expected = sum(results[0]["binCounts"]) / bin_count
    ax0.axhline(expected, color="#a855f7", linewidth=1.0, linestyle="--", label="Expected")
    ax0.set_xlabel("Outcome")
    ax0.set_ylabel("Count")
    ax0.set_title("Bounded Integer Histogram per Seed")
    ax0.legend()

    ax1 = axes[0, 1]
    ax1.scatter(seeds, [entry["chiSquare"] for entry in results], label="Small range", marker="o", facecolors="none", edgecolors="#2563eb")
    ax1.scatter(seeds, [entry["largeRangeChiSquare"] for entry in results], label="Large range thirds", marker="x", color="#a855f7")
    ax1.axhline(bin_count - 1, color="#94a3b8", linewidth=0.8, label="Degrees of freedom")
    ax1.set_xlabel("Seed index")
    ax1.set_ylabel("Chi-square")
    ax1.set_title("Goodness of Fit")
    ax1.legend()

    ax2 = axes[1, 0]
    thirds = [entry["largeRangeBins"] for entry in results]
    for i, color in enumerate(("#2563eb", "#a855f7", "#94a3b8")):
        ax2.plot(seeds, [t[i] for t in thirds], marker="o", color=color, label=f"Third {i + 1}")
    ax2.set_xlabel("Seed index")
    ax2.set_ylabel("Count")
    ax2.set_title("Modulo-Bias Check (range of 3/4 * 2^64)")
    ax2.legend()

    ax3 = axes[1, 1]
    ax3.scatter(seeds, [entry["realLowFraction"] for entry in results], marker="o", facecolors="none", edgecolors="#2563eb", label="Observed")
    ax3.axhline(results[0]["realExpectedLowFraction"], color="#a855f7", linestyle="--", label="Expected")
    ax3.set_xlabel("Seed index")
    ax3.set_ylabel("Fraction below threshold")
    ax3.set_title(
        f"Real Draws in [{config.get('realMin', '?')}, {config.get('realMax', '?')}] "
        f"below {config.get('realThreshold', '?')}"
    )
    ax3.legend()

    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=200)
    plt.close(fig)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Plot the quality battery summary.")
    parser.add_argument("--summary", required=True, help="JSON output from evaluate_generator.py")
    parser.add_argument("--output", required=True, help="Path to save the figure (PNG/SVG).")
    args = parser.parse_args(argv)

    summary = load_summary(Path(args.summary))
    output_path = Path(args.output)
    plot_summary(summary, output_path)
    print(f"Saved distribution plot to {output_path}")


if __name__ == "__main__":
    main()
