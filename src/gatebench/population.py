"""
Population builder.

Builds the ordered, read-only sequence of tasks a benchmark pass iterates.
The generation rule is the same for every variant so timing differences come
from the task representation alone:

- index % gate_stride == 0: work returns its input, gated at gate_threshold
- otherwise: work doubles its input, no gate
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterator

from gatebench.exceptions import ConfigError
from gatebench.tasks.protocols import Task, TaskFactory

logger = logging.getLogger(__name__)

Population = tuple[Task, ...]


def identity(inp: int, _prerequisite: int) -> int:
    return inp


def double(inp: int, _prerequisite: int) -> int:
    return inp * 2


@dataclass(frozen=True, slots=True)
class PopulationSpec:
    """Shape of a generated population.

    Attributes:
        size: Number of tasks.
        gate_stride: Every task whose index is a multiple of this is gated.
        gate_threshold: Threshold configured on gated tasks.
    """
    size: int = 1_000_000
    gate_stride: int = 128
    gate_threshold: int = 32

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ConfigError(
                f"size must be >= 0, got {self.size}",
                config_key="size",
                expected=">= 0",
                got=self.size,
            )
        if self.gate_stride < 1:
            raise ConfigError(
                f"gate_stride must be >= 1, got {self.gate_stride}",
                config_key="gate_stride",
                expected=">= 1",
                got=self.gate_stride,
            )

    def is_gated(self, index: int) -> bool:
        """Whether the task at ``index`` carries a prerequisite gate."""
        return index % self.gate_stride == 0


def generate_tasks(factory: TaskFactory, spec: PopulationSpec) -> Iterator[Task]:
    """Yield tasks in index order according to ``spec``."""
    for index in range(spec.size):
        if spec.is_gated(index):
            yield factory(identity).with_prereq(spec.gate_threshold)
        else:
            yield factory(double)


def build_population(
    factory: TaskFactory,
    spec: PopulationSpec | None = None,
) -> Population:
    """Build a population for one task variant.

    Args:
        factory: Task class (or any callable taking a work function).
        spec: Population shape. Uses defaults if None.

    Returns:
        Tuple of tasks indexed 0..size-1.
    """
    if spec is None:
        spec = PopulationSpec()

    start = time.perf_counter()
    population = tuple(generate_tasks(factory, spec))
    elapsed = time.perf_counter() - start

    logger.debug(
        "Built %d %s tasks (stride=%d, threshold=%d) in %.2fs",
        len(population),
        getattr(factory, "__name__", repr(factory)),
        spec.gate_stride,
        spec.gate_threshold,
        elapsed,
    )
    return population
