"""
Benchmark Harness

Drives every task of a population through ``tick`` once per pass and
records the wall-clock duration of each full pass.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Sequence

from gatebench.benchmark.stats import calculate_mean
from gatebench.exceptions import ConfigError
from gatebench.tasks.protocols import Task

logger = logging.getLogger(__name__)

_NS_PER_MS = 1_000_000


@dataclass(slots=True)
class BenchmarkConfig:
    """Configuration for benchmark runs.

    Attributes:
        passes: Number of timed passes over the population.
        warmup_passes: Untimed passes run before the timed ones.
        input_value: Input handed to every ``tick`` call.
    """
    passes: int = 1000
    warmup_passes: int = 0
    input_value: int = 0

    def __post_init__(self) -> None:
        if self.passes < 1:
            raise ConfigError(
                f"passes must be >= 1, got {self.passes}",
                config_key="passes",
                expected=">= 1",
                got=self.passes,
            )
        if self.warmup_passes < 0:
            raise ConfigError(
                f"warmup_passes must be >= 0, got {self.warmup_passes}",
                config_key="warmup_passes",
                expected=">= 0",
                got=self.warmup_passes,
            )


@dataclass
class BenchmarkResult:
    """Result of benchmarking one task variant.

    Attributes:
        name: Variant label, e.g. "V1".
        durations_ms: Duration of each timed pass in milliseconds, in order.
        population_size: Number of tasks ticked per pass.
    """
    name: str
    durations_ms: list[float] = field(default_factory=list)
    population_size: int = 0

    @property
    def passes(self) -> int:
        return len(self.durations_ms)

    @property
    def total_ms(self) -> float:
        return sum(self.durations_ms)

    @property
    def mean_ms(self) -> float:
        """Mean pass duration in milliseconds."""
        return calculate_mean(self.durations_ms)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "population_size": self.population_size,
            "passes": self.passes,
            "mean_ms": self.mean_ms,
            "total_ms": self.total_ms,
            "durations_ms": list(self.durations_ms),
        }


class BenchmarkHarness:
    """Harness for timing full passes over a task population.

    On pass k, the task at position i receives ``tick(input_value, i)``:
    the position, not the pass number, is the prerequisite value, so every
    pass does identical work.

    Example:
        ```python
        harness = BenchmarkHarness(BenchmarkConfig(passes=1000))
        result = harness.run("V1", build_population(CheckedTask))
        print(f"{result.name}: {result.mean_ms:.3f} ms")
        ```
    """

    def __init__(self, config: BenchmarkConfig | None = None) -> None:
        self.config = config if config is not None else BenchmarkConfig()

    def run(self, name: str, population: Sequence[Task]) -> BenchmarkResult:
        """Warm up, then time ``config.passes`` passes over ``population``.

        Args:
            name: Label recorded on the result.
            population: Tasks to tick, in index order.

        Returns:
            BenchmarkResult holding one sample per timed pass.
        """
        self.warmup(population)
        durations_ms = self.time_passes(population)

        result = BenchmarkResult(
            name=name,
            durations_ms=durations_ms,
            population_size=len(population),
        )
        logger.info(
            "%s: %d passes over %d tasks, mean %.3f ms",
            name,
            result.passes,
            result.population_size,
            result.mean_ms,
        )
        return result

    def warmup(self, population: Sequence[Task]) -> None:
        """Run untimed passes."""
        input_value = self.config.input_value
        for _ in range(self.config.warmup_passes):
            for index, task in enumerate(population):
                task.tick(input_value, index)

    def time_passes(self, population: Sequence[Task]) -> list[float]:
        """Time each pass and return durations in milliseconds.

        Args:
            population: Tasks to tick, in index order.

        Returns:
            Exactly ``config.passes`` non-negative durations.
        """
        input_value = self.config.input_value
        durations_ms: list[float] = []

        for pass_index in range(self.config.passes):
            start = time.perf_counter_ns()
            for index, task in enumerate(population):
                task.tick(input_value, index)
            end = time.perf_counter_ns()

            durations_ms.append((end - start) / _NS_PER_MS)
            if pass_index % 100 == 99:
                logger.debug("Completed %d/%d passes", pass_index + 1, self.config.passes)

        return durations_ms
