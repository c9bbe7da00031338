"""
Abstract protocols for gated tasks.

Defines the single-method capability the benchmark runner drives, so every
task variant can be timed through the same loop.
"""
from __future__ import annotations

from typing import Callable, Optional, Protocol, runtime_checkable

# (input, prerequisite_value) -> result
Work = Callable[[int, int], int]


@runtime_checkable
class Task(Protocol):
    """Protocol for a unit of work behind an optional prerequisite gate.

    A task is built around a work callable, optionally configured once with
    a numeric threshold, then ticked many times. When a threshold ``T`` is
    configured, ``tick`` only runs the work while ``prerequisite < T`` and
    returns 0 otherwise.
    """

    @property
    def threshold(self) -> Optional[int]:
        """Configured prerequisite threshold, or None when ungated."""
        ...

    def with_prereq(self, threshold: int) -> "Task":
        """Configure the prerequisite threshold.

        Must be called at most once, before the first ``tick``.

        Args:
            threshold: Prerequisite values strictly below this run the work.

        Returns:
            The same task, so construction can be chained.

        Raises:
            TaskConfigurationError: If a threshold is already configured.
        """
        ...

    def tick(self, inp: int, prerequisite: int) -> int:
        """Run the work if the gate admits ``prerequisite``.

        Args:
            inp: Input passed through to the work.
            prerequisite: Value compared against the threshold.

        Returns:
            The work's result, or 0 when the gate suppresses it.
        """
        ...


TaskFactory = Callable[[Work], Task]
