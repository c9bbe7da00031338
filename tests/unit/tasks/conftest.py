"""Fixtures for task variant tests."""
from __future__ import annotations

import pytest

from gatebench.tasks import CheckedTask, CompiledTask, StatelessTask


@pytest.fixture(params=[CheckedTask, CompiledTask, StatelessTask], ids=["V1", "V2", "V3"])
def task_cls(request):
    """Each registered task variant."""
    return request.param
