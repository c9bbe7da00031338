"""
Task variants under measurement.

- CheckedTask (V1): work and gate are separate fields; ``tick`` reads the
  gate and branches on every call.
- CompiledTask (V2): configuring the gate replaces the stored dispatch with
  one that has the rule built in; ``tick`` calls it unconditionally.
- StatelessTask (V3): CheckedTask restricted to plain functions that carry
  no closure state or bound instance.

All three behave identically from the outside.
"""
from __future__ import annotations

import inspect
from typing import Optional

from gatebench.exceptions import StatelessTaskError, TaskConfigurationError
from gatebench.tasks.gates import (
    NO_GATE,
    Dispatch,
    Gate,
    Gated,
    Prerequisite,
)
from gatebench.tasks.protocols import Work


class CheckedTask:
    """Task that evaluates its gate at call time.

    Example:
        ```python
        task = CheckedTask(lambda i, _p: i + 5).with_prereq(32)
        task.tick(0, 10)  # 5
        task.tick(0, 40)  # 0
        ```
    """

    __slots__ = ("_work", "_gate")

    def __init__(self, work: Work) -> None:
        self._work = work
        self._gate: Prerequisite = NO_GATE

    @property
    def threshold(self) -> Optional[int]:
        gate = self._gate
        return gate.threshold if isinstance(gate, Gate) else None

    def with_prereq(self, threshold: int) -> "CheckedTask":
        gate = self._gate
        if isinstance(gate, Gate):
            raise TaskConfigurationError(type(self).__name__, gate.threshold, threshold)
        self._gate = Gate(threshold)
        return self

    def tick(self, inp: int, prerequisite: int) -> int:
        gate = self._gate
        if isinstance(gate, Gate) and prerequisite >= gate.threshold:
            return 0
        return self._work(inp, prerequisite)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(threshold={self.threshold})"


class CompiledTask:
    """Task whose gate is folded into the stored callable.

    Before configuration the task holds the work itself, so ``tick`` is a
    single call into it. ``with_prereq`` swaps it for
    ``Gated(work, threshold)``, which never changes after it is built.
    """

    __slots__ = ("_dispatch",)

    def __init__(self, work: Work) -> None:
        self._dispatch: Dispatch = work

    @property
    def threshold(self) -> Optional[int]:
        dispatch = self._dispatch
        return dispatch.threshold if isinstance(dispatch, Gated) else None

    def with_prereq(self, threshold: int) -> "CompiledTask":
        current = self._dispatch
        if isinstance(current, Gated):
            raise TaskConfigurationError(type(self).__name__, current.threshold, threshold)
        self._dispatch = Gated(current, threshold)
        return self

    def tick(self, inp: int, prerequisite: int) -> int:
        return self._dispatch(inp, prerequisite)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(threshold={self.threshold})"


def ensure_stateless(work: Work) -> None:
    """Reject work callables that carry state.

    Args:
        work: Candidate work callable.

    Raises:
        StatelessTaskError: If ``work`` is not a plain function, or closes
            over variables from an enclosing scope.
    """
    if not inspect.isfunction(work):
        raise StatelessTaskError(repr(work), "not a plain function")
    if work.__closure__:
        names = ", ".join(work.__code__.co_freevars)
        raise StatelessTaskError(repr(work), f"captures enclosing variables ({names})")


class StatelessTask(CheckedTask):
    """Checked task that only accepts stateless plain functions."""

    __slots__ = ()

    def __init__(self, work: Work) -> None:
        ensure_stateless(work)
        super().__init__(work)
