"""
gatebench command-line entry point.

Usage:
    # Standard measurement: 1,000,000 tasks, 1000 passes, V1 then V2
    python -m gatebench

    # Smaller run including the stateless variant
    python -m gatebench --size 100000 --passes 100 --variants V1 V2 V3

    # Settings from a YAML file, results also saved as JSON
    python -m gatebench --config bench.yaml --output results.json

Only the per-variant summary lines are written to stdout; logging goes to
stderr.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from gatebench.config import BenchConfig, load_config
from gatebench.exceptions import GateBenchError
from gatebench.report import print_report, save_results
from gatebench.runner import run_benchmarks
from gatebench.tasks.registry import list_variants

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gatebench",
        description="Compare call-time and configure-time prerequisite gating of tasks",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file with benchmark settings",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Tasks per population (default: 1000000)",
    )
    parser.add_argument(
        "--passes",
        type=int,
        default=None,
        help="Timed passes per variant (default: 1000)",
    )
    parser.add_argument(
        "--warmup",
        type=int,
        default=None,
        help="Untimed passes before timing (default: 0)",
    )
    parser.add_argument(
        "--variants",
        nargs="+",
        default=None,
        metavar="LABEL",
        help=f"Variants to run, in order (choices: {', '.join(list_variants())}; default: V1 V2)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file path for results",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Log progress (-v) or debug detail (-vv) to stderr",
    )
    return parser


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for a failed run).
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = BenchConfig()
        if args.config:
            config = load_config(args.config, base=config)
        config = config.merged(
            population_size=args.size,
            passes=args.passes,
            warmup_passes=args.warmup,
            variants=args.variants,
        )

        results = run_benchmarks(config)
    except (GateBenchError, FileNotFoundError) as e:
        logger.error(f"Benchmark failed: {e}")
        return 1

    print_report(results)

    if args.output:
        output_path = Path(args.output)
        save_results(results, config, output_path)
        logger.info("Results saved to: %s", output_path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
