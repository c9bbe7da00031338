"""
Statistical Analysis for Benchmarks

Aggregation over per-pass duration samples.
"""
from __future__ import annotations

from typing import Sequence


def calculate_mean(values: Sequence[float]) -> float:
    """Calculate mean.

    Plain sum divided by count; no trimming or outlier removal.

    Args:
        values: Sequence of numeric values.

    Returns:
        Mean value.

    Raises:
        ValueError: If values is empty.
    """
    if not values:
        raise ValueError("Cannot calculate mean of empty list")

    return sum(values) / len(values)
