"""
Gate representations.

Two encodings of the same prerequisite rule:

- ``NoGate`` / ``Gate``: a plain sum type stored next to the work and
  examined on every call (checked-at-call-time tasks).
- the bare work or ``Gated``: the callable a compiled task invokes. An
  ungated task calls its work directly; configuring a gate wraps the work
  once in a ``Gated`` that has the rule built in
  (compiled-at-configure-time tasks).

The gate types are frozen; once built they never change.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from gatebench.tasks.protocols import Work


@dataclass(frozen=True, slots=True)
class NoGate:
    """Absent prerequisite: the work always runs."""


@dataclass(frozen=True, slots=True)
class Gate:
    """Prerequisite threshold: the work runs while ``prerequisite < threshold``."""

    threshold: int


Prerequisite = Union[NoGate, Gate]

NO_GATE = NoGate()


@dataclass(frozen=True, slots=True)
class Gated:
    """Dispatch that forwards to the work only below the threshold."""

    work: Work
    threshold: int

    def __call__(self, inp: int, prerequisite: int) -> int:
        if prerequisite < self.threshold:
            return self.work(inp, prerequisite)
        return 0


# An ungated task stores its work directly
Dispatch = Union[Work, Gated]
