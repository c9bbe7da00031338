"""
PyTest Configuration for gatebench Tests

Provides fixtures, markers, and test setup.
"""
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


def plus_five(inp: int, _prerequisite: int) -> int:
    """Work whose gate-open result differs from the suppressed result at input 0."""
    return inp + 5


@pytest.fixture
def plus_five_work():
    """Module-level work function usable by every task variant."""
    return plus_five


@pytest.fixture
def small_population_spec():
    """Population shape small enough for fast unit tests."""
    from gatebench.population import PopulationSpec
    return PopulationSpec(size=300, gate_stride=128, gate_threshold=32)
