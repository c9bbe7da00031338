"""
gatebench - Prerequisite Gate Dispatch Benchmark

Measures two ways of putting an optional prerequisite gate in front of a
unit of work:

- V1 (CheckedTask): gate stored as a field, checked on every tick
- V2 (CompiledTask): gate folded into the stored callable when configured

Main APIs:
- build_population(): Build the task population for one variant
- BenchmarkHarness: Time full passes over a population
- run_benchmarks(): Build, time and collect results for each variant
"""

__version__ = "0.1.0"

from gatebench.benchmark import (
    BenchmarkConfig,
    BenchmarkHarness,
    BenchmarkResult,
    calculate_mean,
)
from gatebench.config import BenchConfig, load_config
from gatebench.exceptions import (
    ConfigError,
    GateBenchError,
    StatelessTaskError,
    TaskConfigurationError,
    UnknownVariantError,
)
from gatebench.population import PopulationSpec, build_population
from gatebench.report import format_result, print_report, save_results
from gatebench.runner import run_benchmarks, run_variant
from gatebench.tasks import (
    CheckedTask,
    CompiledTask,
    StatelessTask,
    Task,
    get_variant,
    list_variants,
)

__all__ = [
    "__version__",
    # Tasks
    "Task",
    "CheckedTask",
    "CompiledTask",
    "StatelessTask",
    "get_variant",
    "list_variants",
    # Population
    "PopulationSpec",
    "build_population",
    # Benchmark
    "BenchmarkConfig",
    "BenchmarkHarness",
    "BenchmarkResult",
    "calculate_mean",
    "run_benchmarks",
    "run_variant",
    # Config
    "BenchConfig",
    "load_config",
    # Reporting
    "format_result",
    "print_report",
    "save_results",
    # Exceptions
    "GateBenchError",
    "TaskConfigurationError",
    "StatelessTaskError",
    "ConfigError",
    "UnknownVariantError",
]
