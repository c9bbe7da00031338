"""
gatebench Benchmark Module

Pass-timing harness and aggregation for task populations.
"""
from gatebench.benchmark.harness import (
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkHarness,
)
from gatebench.benchmark.stats import calculate_mean

__all__ = [
    # Harness
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkHarness",
    # Stats
    "calculate_mean",
]
