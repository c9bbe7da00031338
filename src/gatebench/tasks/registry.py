"""Label -> task variant lookup."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from gatebench.exceptions import UnknownVariantError
from gatebench.tasks.protocols import TaskFactory
from gatebench.tasks.variants import CheckedTask, CompiledTask, StatelessTask

VARIANTS: Mapping[str, TaskFactory] = MappingProxyType({
    "V1": CheckedTask,
    "V2": CompiledTask,
    "V3": StatelessTask,
})

DEFAULT_VARIANTS: tuple[str, ...] = ("V1", "V2")


def list_variants() -> list[str]:
    """Registered variant labels, in registration order."""
    return list(VARIANTS)


def get_variant(label: str) -> TaskFactory:
    """Look up a task variant by label.

    Args:
        label: Variant label, e.g. "V1".

    Returns:
        The task class registered under ``label``.

    Raises:
        UnknownVariantError: If ``label`` is not registered.
    """
    try:
        return VARIANTS[label]
    except KeyError:
        raise UnknownVariantError(label, list_variants()) from None
