"""
gatebench Task Module

Task variants that wrap a unit of work behind an optional prerequisite gate.
"""
from gatebench.tasks.gates import (
    NO_GATE,
    Gate,
    Gated,
    NoGate,
)
from gatebench.tasks.protocols import Task, TaskFactory, Work
from gatebench.tasks.registry import (
    DEFAULT_VARIANTS,
    VARIANTS,
    get_variant,
    list_variants,
)
from gatebench.tasks.variants import (
    CheckedTask,
    CompiledTask,
    StatelessTask,
    ensure_stateless,
)

__all__ = [
    # Protocols
    "Task",
    "TaskFactory",
    "Work",
    # Gates
    "NO_GATE",
    "NoGate",
    "Gate",
    "Gated",
    # Variants
    "CheckedTask",
    "CompiledTask",
    "StatelessTask",
    "ensure_stateless",
    # Registry
    "VARIANTS",
    "DEFAULT_VARIANTS",
    "get_variant",
    "list_variants",
]
