"""
Result reporting.

- format_result(): the one-line "<label>: <mean> ms" summary
- print_report(): one summary line per variant
- save_results(): JSON export with configuration and system information
"""
from __future__ import annotations

import json
import os
import platform
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Optional, TextIO

from gatebench.benchmark.harness import BenchmarkResult
from gatebench.config import BenchConfig


def format_result(result: BenchmarkResult) -> str:
    return f"{result.name}: {result.mean_ms:.3f} ms"


def print_report(results: Iterable[BenchmarkResult], stream: Optional[TextIO] = None) -> None:
    """Write one summary line per result.

    Args:
        results: Benchmark results in report order.
        stream: Output stream. Defaults to stdout.
    """
    out = stream if stream is not None else sys.stdout
    for result in results:
        print(format_result(result), file=out)


def get_system_info() -> dict[str, Any]:
    """Collect system information for reproducibility."""
    return {
        "platform": platform.platform(),
        "python_implementation": platform.python_implementation(),
        "python_version": platform.python_version(),
        "processor": platform.processor(),
        "machine": platform.machine(),
        "cpu_count": os.cpu_count(),
    }


def save_results(
    results: list[BenchmarkResult],
    config: BenchConfig,
    output_path: Path,
) -> None:
    """Save results to a JSON file.

    Args:
        results: Benchmark results.
        config: Configuration the results were produced with.
        output_path: Path to save JSON. Parent directories are created.
    """
    document = {
        "benchmark_run": {
            "timestamp": datetime.now().isoformat(),
            "config": config.to_dict(),
            "system_info": get_system_info(),
        },
        "results": [r.to_dict() for r in results],
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(document, f, indent=2)
