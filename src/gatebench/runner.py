"""
Benchmark run orchestration.

For each configured variant: build its population, time it, release it,
then move on to the next. Population construction always happens outside
the timed region.
"""
from __future__ import annotations

import logging
import time

from gatebench.benchmark.harness import BenchmarkHarness, BenchmarkResult
from gatebench.config import BenchConfig
from gatebench.population import build_population
from gatebench.tasks.registry import get_variant

logger = logging.getLogger(__name__)


def run_variant(label: str, config: BenchConfig) -> BenchmarkResult:
    """Build and benchmark the population for a single variant.

    Args:
        label: Registered variant label.
        config: Run configuration.

    Returns:
        BenchmarkResult for the variant.

    Raises:
        UnknownVariantError: If ``label`` is not registered.
    """
    factory = get_variant(label)

    logger.info("Building %s population (%d tasks)", label, config.population_size)
    population = build_population(factory, config.population_spec())

    harness = BenchmarkHarness(config.benchmark_config())
    logger.info("Timing %s: %d passes", label, config.passes)
    return harness.run(label, population)


def run_benchmarks(config: BenchConfig | None = None) -> list[BenchmarkResult]:
    """Benchmark every configured variant in order.

    Args:
        config: Run configuration. Uses defaults if None.

    Returns:
        One BenchmarkResult per variant, in ``config.variants`` order.
    """
    if config is None:
        config = BenchConfig()

    results: list[BenchmarkResult] = []
    start_time = time.monotonic()

    for label in config.variants:
        results.append(run_variant(label, config))

    logger.info(
        "Benchmarked %d variants in %.2f seconds",
        len(results),
        time.monotonic() - start_time,
    )
    return results
