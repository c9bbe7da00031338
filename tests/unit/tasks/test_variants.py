"""
Unit tests for tasks/variants.py module.

Tests cover:
- Ungated tasks always run their work
- Gated tasks run their work only while prerequisite < threshold
- Outward equivalence of CheckedTask, CompiledTask and StatelessTask
- Single configuration of the prerequisite threshold
- StatelessTask rejection of stateful work
"""
from __future__ import annotations

import functools
import itertools

import pytest

from gatebench.exceptions import StatelessTaskError, TaskConfigurationError
from gatebench.population import double, identity
from gatebench.tasks import (
    CheckedTask,
    CompiledTask,
    Gated,
    StatelessTask,
    Task,
    ensure_stateless,
)


def add(inp: int, prerequisite: int) -> int:
    return inp + prerequisite


def minus_prerequisite(inp: int, prerequisite: int) -> int:
    return inp - prerequisite


# ============================================================================
# Gate semantics
# ============================================================================


class TestUngatedTask:
    """Tasks without a configured threshold."""

    def test_conforms_to_protocol(self, task_cls) -> None:
        """Every variant satisfies the Task protocol."""
        assert isinstance(task_cls(double), Task)

    def test_threshold_is_none(self, task_cls) -> None:
        """No threshold reported before configuration."""
        assert task_cls(double).threshold is None

    @pytest.mark.parametrize("prerequisite", [-10, 0, 1, 31, 32, 999, 10**9])
    def test_runs_work_for_any_prerequisite(self, task_cls, prerequisite: int) -> None:
        """Doubling task returns 14 for input 7 regardless of prerequisite."""
        task = task_cls(double)
        assert task.tick(7, prerequisite) == 14

    def test_passes_prerequisite_to_work(self, task_cls) -> None:
        """Work receives both input and prerequisite value."""
        task = task_cls(add)
        assert task.tick(3, 4) == 7


class TestGatedTask:
    """Tasks with a configured threshold."""

    def test_with_prereq_returns_same_task(self, task_cls, plus_five_work) -> None:
        """with_prereq supports chaining off the constructor."""
        task = task_cls(plus_five_work)
        assert task.with_prereq(32) is task

    def test_threshold_reported(self, task_cls, plus_five_work) -> None:
        """Configured threshold is visible."""
        assert task_cls(plus_five_work).with_prereq(32).threshold == 32

    @pytest.mark.parametrize("prerequisite", [-1, 0, 10, 31])
    def test_below_threshold_runs_work(self, task_cls, plus_five_work, prerequisite: int) -> None:
        """Prerequisite strictly below threshold opens the gate."""
        task = task_cls(plus_five_work).with_prereq(32)
        assert task.tick(0, prerequisite) == 5

    @pytest.mark.parametrize("prerequisite", [32, 33, 40, 999_999])
    def test_at_or_above_threshold_returns_zero(self, task_cls, plus_five_work, prerequisite: int) -> None:
        """Prerequisite equal to or above threshold suppresses the work."""
        task = task_cls(plus_five_work).with_prereq(32)
        assert task.tick(0, prerequisite) == 0

    def test_suppressed_work_is_not_called(self, task_cls) -> None:
        """The work callable is not invoked when the gate is closed."""
        calls = []

        def recording(inp: int, prerequisite: int) -> int:
            calls.append((inp, prerequisite))
            return inp

        # StatelessTask rejects closures; route through CheckedTask semantics instead
        cls = CheckedTask if task_cls is StatelessTask else task_cls
        task = cls(recording).with_prereq(32)

        assert task.tick(1, 40) == 0
        assert calls == []
        assert task.tick(1, 10) == 1
        assert calls == [(1, 10)]

    def test_identity_task_at_index_zero(self, task_cls) -> None:
        """Identity task gated at 32 returns 0 both open and closed at input 0."""
        task = task_cls(identity).with_prereq(32)
        assert task.tick(0, 0) == 0
        assert task.tick(0, 40) == 0

    def test_zero_threshold_is_a_real_gate(self, task_cls, plus_five_work) -> None:
        """Threshold 0 suppresses all non-negative prerequisites."""
        task = task_cls(plus_five_work).with_prereq(0)
        assert task.threshold == 0
        assert task.tick(0, 0) == 0
        assert task.tick(0, -1) == 5

    def test_negative_threshold(self, task_cls, plus_five_work) -> None:
        """Negative thresholds compare numerically."""
        task = task_cls(plus_five_work).with_prereq(-3)
        assert task.tick(0, -4) == 5
        assert task.tick(0, -3) == 0


class TestConfigureOnce:
    """The threshold is set at most once."""

    def test_second_configuration_raises(self, task_cls, plus_five_work) -> None:
        """Reconfiguring raises TaskConfigurationError."""
        task = task_cls(plus_five_work).with_prereq(32)

        with pytest.raises(TaskConfigurationError, match="already has prerequisite threshold 32"):
            task.with_prereq(64)

    def test_failed_reconfiguration_keeps_original_gate(self, task_cls, plus_five_work) -> None:
        """The original threshold still applies after a rejected reconfiguration."""
        task = task_cls(plus_five_work).with_prereq(32)
        with pytest.raises(TaskConfigurationError):
            task.with_prereq(64)

        assert task.threshold == 32
        assert task.tick(0, 40) == 0

    def test_error_context(self, plus_five_work) -> None:
        """Error records task type and both thresholds."""
        task = CompiledTask(plus_five_work).with_prereq(1)
        with pytest.raises(TaskConfigurationError) as exc_info:
            task.with_prereq(2)

        err = exc_info.value
        assert err.task_type == "CompiledTask"
        assert err.existing == 1
        assert err.requested == 2


class TestIdempotence:
    """tick does not mutate task state."""

    def test_repeated_ticks_identical(self, task_cls, plus_five_work) -> None:
        """Identical arguments yield identical results across many calls."""
        gated = task_cls(plus_five_work).with_prereq(32)
        ungated = task_cls(double)

        assert {gated.tick(1, 5) for _ in range(100)} == {6}
        assert {gated.tick(1, 50) for _ in range(100)} == {0}
        assert {ungated.tick(4, 50) for _ in range(100)} == {8}
        assert gated.threshold == 32
        assert ungated.threshold is None


# ============================================================================
# Cross-variant equivalence
# ============================================================================


class TestVariantEquivalence:
    """V1, V2 and V3 agree for identical (work, threshold, input, prerequisite)."""

    WORKS = [identity, double, add, minus_prerequisite]
    THRESHOLDS = [None, -5, 0, 1, 32, 1000]
    INPUTS = [-3, 0, 1, 7]
    PREREQUISITES = [-6, -5, 0, 1, 31, 32, 33, 999]

    @staticmethod
    def _make(cls, work, threshold):
        task = cls(work)
        if threshold is not None:
            task.with_prereq(threshold)
        return task

    @pytest.mark.parametrize("work", WORKS, ids=lambda w: w.__name__)
    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_all_variants_agree(self, work, threshold) -> None:
        """Every variant returns the same value for every input pair."""
        v1 = self._make(CheckedTask, work, threshold)
        v2 = self._make(CompiledTask, work, threshold)
        v3 = self._make(StatelessTask, work, threshold)

        for inp, prerequisite in itertools.product(self.INPUTS, self.PREREQUISITES):
            expected = v1.tick(inp, prerequisite)
            assert v2.tick(inp, prerequisite) == expected
            assert v3.tick(inp, prerequisite) == expected

    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_matches_reference_rule(self, threshold) -> None:
        """V1 follows the gate rule directly."""
        task = self._make(CheckedTask, add, threshold)

        for inp, prerequisite in itertools.product(self.INPUTS, self.PREREQUISITES):
            if threshold is None or prerequisite < threshold:
                expected = inp + prerequisite
            else:
                expected = 0
            assert task.tick(inp, prerequisite) == expected


# ============================================================================
# CompiledTask dispatch
# ============================================================================


class TestCompiledDispatch:
    """CompiledTask swaps its dispatch object on configuration."""

    def test_ungated_stores_work_itself(self) -> None:
        """An ungated task calls its work with no wrapper in between."""
        task = CompiledTask(double)
        assert task._dispatch is double
        assert task.threshold is None

    def test_ungated_tick_is_direct_call(self) -> None:
        calls = []

        def record(inp: int, prerequisite: int) -> int:
            calls.append((inp, prerequisite))
            return inp

        task = CompiledTask(record)
        assert task._dispatch is record
        assert task.tick(4, 10**6) == 4
        assert calls == [(4, 10**6)]

    def test_configuration_builds_gated_dispatch(self) -> None:
        """with_prereq wraps the original work, not the old dispatch."""
        task = CompiledTask(double).with_prereq(8)
        assert task._dispatch == Gated(double, 8)


# ============================================================================
# StatelessTask
# ============================================================================


class TestStatelessTask:
    """StatelessTask only wraps plain functions."""

    def test_accepts_module_function(self) -> None:
        assert StatelessTask(double).tick(2, 0) == 4

    def test_accepts_lambda_without_captures(self) -> None:
        task = StatelessTask(lambda inp, _p: inp + 1)
        assert task.tick(1, 0) == 2

    def test_rejects_closure(self) -> None:
        """Functions that capture enclosing variables are rejected."""
        offset = 3

        def shifted(inp: int, _prerequisite: int) -> int:
            return inp + offset

        with pytest.raises(StatelessTaskError, match=r"captures enclosing variables \(offset\)"):
            StatelessTask(shifted)

    def test_rejects_partial(self) -> None:
        with pytest.raises(StatelessTaskError, match="not a plain function"):
            StatelessTask(functools.partial(add, 1))

    def test_rejects_bound_method(self) -> None:
        class Worker:
            def run(self, inp: int, prerequisite: int) -> int:
                return inp

        with pytest.raises(StatelessTaskError, match="not a plain function"):
            StatelessTask(Worker().run)

    def test_ensure_stateless_passes_plain_function(self) -> None:
        ensure_stateless(identity)

    def test_is_checked_task(self) -> None:
        """StatelessTask shares CheckedTask's call-time gate."""
        assert issubclass(StatelessTask, CheckedTask)
