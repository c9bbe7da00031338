"""
gatebench Exception Hierarchy

Custom exceptions raised by task configuration, the variant registry and
benchmark configuration loading.
"""
from __future__ import annotations

from typing import Any, Optional, Sequence


class GateBenchError(Exception):
    """Base exception for all gatebench errors.

    Attributes:
        message: Human-readable error description.
        context: Optional dict of additional context for debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        ctx_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}({self.message!r}{ctx_str})"


class TaskConfigurationError(GateBenchError):
    """Raised when a task's prerequisite threshold is configured twice.

    A task's gate is fixed by a single configuration step right after
    construction. A second call is a defect in the caller.

    Attributes:
        task_type: Name of the task class.
        existing: Threshold already configured.
        requested: Threshold passed to the rejected call.
    """

    def __init__(
        self,
        task_type: str,
        existing: int,
        requested: int,
        *,
        message: Optional[str] = None,
    ) -> None:
        self.task_type = task_type
        self.existing = existing
        self.requested = requested

        if message is None:
            message = (
                f"{task_type} already has prerequisite threshold {existing}; "
                f"cannot reconfigure to {requested}"
            )

        super().__init__(
            message,
            context={
                "task_type": task_type,
                "existing": existing,
                "requested": requested,
            },
        )


class StatelessTaskError(GateBenchError):
    """Raised when a stateless task is given work that carries state.

    Stateless tasks only hold plain functions: no closure cells and no
    bound instance.

    Attributes:
        work: repr of the rejected callable.
        reason: Why the callable was rejected.
    """

    def __init__(self, work: str, reason: str) -> None:
        self.work = work
        self.reason = reason
        super().__init__(
            f"Stateless task cannot wrap {work}: {reason}",
            context={"work": work, "reason": reason},
        )


class ConfigError(GateBenchError, ValueError):
    """Raised when benchmark configuration is invalid.

    Attributes:
        config_key: The configuration key with the error.
        expected: Expected value or type.
        got: Actual value received.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        expected: Optional[Any] = None,
        got: Optional[Any] = None,
    ) -> None:
        self.config_key = config_key
        self.expected = expected
        self.got = got

        super().__init__(
            message,
            context={
                "config_key": config_key,
                "expected": expected,
                "got": got,
            },
        )


class UnknownVariantError(GateBenchError):
    """Raised when a task variant label is not registered.

    Attributes:
        label: The requested label.
        known: Labels that are registered.
    """

    def __init__(self, label: str, known: Sequence[str]) -> None:
        self.label = label
        self.known = list(known)
        super().__init__(
            f"Unknown task variant '{label}'. Known variants: {self.known}",
            context={"label": label, "known": self.known},
        )
